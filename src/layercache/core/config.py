"""Centralized configuration for LayerCache."""

import os
from dataclasses import dataclass

from .extractor import DEFAULT_INCLUDE_MARKERS

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class LayerCacheConfig:
    """All LayerCache configuration in one place.

    Environment variables (all optional):
        LC_LOG_LEVEL:             Logging level, TRACE included. Default "INFO".
        LC_BLOB_LAYOUT:           Blob store layout: "sharded" (default, root/ab/abcd...),
                                  "flat" (root/abcd...) or "oci" (root/sha256/abcd...).
        LC_SKIP_UNREADABLE_BLOBS: Log and skip blobs whose archive cannot be opened
                                  instead of aborting the batch. Default false.
        LC_INCLUDE_MARKERS:       Comma-separated path fragments that make a blob worth
                                  extracting. Default "configs/,release-manifests/".
    """

    log_level: str = "INFO"
    blob_layout: str = "sharded"
    skip_unreadable_blobs: bool = False
    include_markers: tuple[str, ...] = DEFAULT_INCLUDE_MARKERS

    @classmethod
    def from_env(cls, *, log_level: str = "INFO") -> "LayerCacheConfig":
        """Build config from environment variables + explicit overrides."""
        markers = os.environ.get("LC_INCLUDE_MARKERS")
        return cls(
            log_level=os.environ.get("LC_LOG_LEVEL", log_level),
            blob_layout=os.environ.get("LC_BLOB_LAYOUT", "sharded"),
            skip_unreadable_blobs=(
                os.environ.get("LC_SKIP_UNREADABLE_BLOBS", "false").strip().lower() in _TRUE_VALUES
            ),
            include_markers=(
                tuple(m.strip() for m in markers.split(",") if m.strip())
                if markers
                else DEFAULT_INCLUDE_MARKERS
            ),
        )
