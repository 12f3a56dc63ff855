"""Core domain errors."""


class LayerCacheError(Exception):
    """Base error for LayerCache."""

    pass


class MalformedDigest(LayerCacheError, ValueError):
    """Digest does not have the ``algorithm:hex`` shape."""

    def __init__(self, digest: str):
        self.digest = digest
        super().__init__(f"Malformed digest (expected 'algorithm:hex'): {digest!r}")


class ArchiveOpenError(LayerCacheError):
    """Layer archive could not be opened as a gzip-compressed tar."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open archive {path}: {reason}")


class ArchiveEntryError(LayerCacheError):
    """A single archive entry failed to unpack."""

    def __init__(self, path: str, entry: str | None, reason: str):
        self.path = path
        self.entry = entry
        self.reason = reason
        super().__init__(f"Failed to unpack {entry or '<unknown entry>'} from {path}: {reason}")


class DirectoryReadError(LayerCacheError):
    """Directory could not be listed during a cache lookup."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read directory {path}: {reason}")


class ManifestParseError(LayerCacheError):
    """Image manifest or catalog reference could not be parsed."""

    pass
