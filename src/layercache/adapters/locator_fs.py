"""Filesystem blob locator adapters."""

from pathlib import Path


class ShardedBlobLocator:
    """Blobs stored under a two-character shard: ``root/ab/abcdef...``."""

    def __init__(self, shard_length: int = 2):
        self.shard_length = shard_length

    def blob_path(self, blobs_root: Path, hex_digest: str) -> Path:
        """Get path of the compressed archive for a blob."""
        return Path(blobs_root) / hex_digest[: self.shard_length] / hex_digest


class FlatBlobLocator:
    """Blobs stored directly in the root: ``root/abcdef...``."""

    def blob_path(self, blobs_root: Path, hex_digest: str) -> Path:
        """Get path of the compressed archive for a blob."""
        return Path(blobs_root) / hex_digest


class OciLayoutBlobLocator:
    """OCI image layout: ``root/<algorithm>/abcdef...``."""

    def __init__(self, algorithm: str = "sha256"):
        self.algorithm = algorithm

    def blob_path(self, blobs_root: Path, hex_digest: str) -> Path:
        """Get path of the compressed archive for a blob."""
        return Path(blobs_root) / self.algorithm / hex_digest


BLOB_LAYOUTS = {
    "sharded": ShardedBlobLocator,
    "flat": FlatBlobLocator,
    "oci": OciLayoutBlobLocator,
}


def locator_for_layout(layout: str) -> ShardedBlobLocator | FlatBlobLocator | OciLayoutBlobLocator:
    """Build the locator for a configured layout name."""
    try:
        factory = BLOB_LAYOUTS[layout]
    except KeyError:
        raise ValueError(
            f"Unknown blob layout: {layout} (expected one of {', '.join(sorted(BLOB_LAYOUTS))})"
        ) from None
    return factory()
