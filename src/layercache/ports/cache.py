"""Cache port interface."""

from pathlib import Path
from typing import Protocol


class CachePort(Protocol):
    """Port for extraction cache layout."""

    def bucket_name(self, hex_digest: str) -> str:
        """Get bucket directory name for a blob."""
        ...

    def bucket_path(self, cache_root: Path, hex_digest: str) -> Path:
        """Get path where the blob should be extracted."""
        ...

    def has_bucket(self, cache_root: Path, hex_digest: str) -> bool:
        """Check if the blob's bucket already exists."""
        ...
