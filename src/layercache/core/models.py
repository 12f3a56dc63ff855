"""Core domain models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class LayerReference:
    """A layer blob referenced by content digest.

    Only ``digest`` carries identity; ``original_ref`` and ``size`` are
    informational.
    """

    digest: str
    original_ref: str | None = None
    size: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LayerReference":
        """Create from a manifest ``fsLayers`` entry."""
        size = data.get("size")
        return cls(
            digest=data["blobSum"],
            original_ref=data.get("original_ref"),
            size=int(size) if size is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a manifest ``fsLayers`` entry."""
        out: dict[str, Any] = {"blobSum": self.digest}
        if self.original_ref is not None:
            out["original_ref"] = self.original_ref
        if self.size is not None:
            out["size"] = self.size
        return out


@dataclass(frozen=True)
class ArchiveEntry:
    """Entry seen while scanning an archive."""

    path: str


class BlobOutcome(str, Enum):
    """What happened to a single blob during extraction."""

    CACHED = "cached"
    EXTRACTED = "extracted"
    PARTIAL = "partial"
    SKIPPED = "skipped"
    UNREADABLE = "unreadable"


@dataclass
class BlobResult:
    """Per-blob extraction result."""

    digest: str
    bucket: Path
    outcome: BlobOutcome
    matched_entry: str | None = None
    files_written: int = 0
    error: str | None = None


@dataclass
class ExtractionReport:
    """Summary of one extract_layers run."""

    results: list[BlobResult] = field(default_factory=list)

    def count(self, outcome: BlobOutcome) -> int:
        """Number of blobs with the given outcome."""
        return sum(1 for r in self.results if r.outcome is outcome)

    @property
    def files_written(self) -> int:
        return sum(r.files_written for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "blobs": len(self.results),
            "cached": self.count(BlobOutcome.CACHED),
            "extracted": self.count(BlobOutcome.EXTRACTED),
            "partial": self.count(BlobOutcome.PARTIAL),
            "skipped": self.count(BlobOutcome.SKIPPED),
            "unreadable": self.count(BlobOutcome.UNREADABLE),
            "files_written": self.files_written,
            "results": [
                {
                    "digest": r.digest,
                    "bucket": str(r.bucket),
                    "outcome": r.outcome.value,
                    "matched_entry": r.matched_entry,
                    "files_written": r.files_written,
                    "error": r.error,
                }
                for r in self.results
            ],
        }


@dataclass(frozen=True)
class ImageReference:
    """Catalog image reference (registry/namespace/name:version)."""

    registry: str
    namespace: str
    name: str
    version: str


@dataclass(frozen=True)
class ManifestConfig:
    """Config descriptor of an image manifest."""

    media_type: str
    size: int
    digest: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ManifestConfig":
        """Create from the camelCase JSON form."""
        return cls(
            media_type=data["mediaType"],
            size=int(data["size"]),
            digest=data["digest"],
        )


@dataclass(frozen=True)
class History:
    """Manifest history entry."""

    v1_compatibility: str


@dataclass(frozen=True)
class ManifestSchema:
    """Operator index manifest (schema 1 with ``fsLayers``)."""

    fs_layers: tuple[LayerReference, ...]
    tag: str | None = None
    name: str | None = None
    architecture: str | None = None
    schema_version: int | None = None
    config: ManifestConfig | None = None
    history: tuple[History, ...] | None = None
