"""Filesystem cache adapter."""

from pathlib import Path

from ..core.identity import BUCKET_PREFIX_LENGTH


class FsCacheAdapter:
    """Filesystem implementation of CachePort.

    Blobs are bucketed under ``cache_root`` by a fixed-length prefix of their
    hex digest. Other tools read this layout, so the prefix length must stay
    at six unless every consumer changes with it.
    """

    def __init__(self, prefix_length: int = BUCKET_PREFIX_LENGTH):
        if prefix_length < 1:
            raise ValueError(f"prefix_length must be positive, got {prefix_length}")
        self.prefix_length = prefix_length

    def bucket_name(self, hex_digest: str) -> str:
        """Get bucket directory name for a blob."""
        return hex_digest[: self.prefix_length]

    def bucket_path(self, cache_root: Path, hex_digest: str) -> Path:
        """Get path where the blob should be extracted."""
        return Path(cache_root) / self.bucket_name(hex_digest)

    def has_bucket(self, cache_root: Path, hex_digest: str) -> bool:
        """Check if the blob's bucket already exists."""
        return self.bucket_path(cache_root, hex_digest).exists()
