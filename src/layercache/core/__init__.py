"""Core domain for LayerCache."""

from .config import LayerCacheConfig
from .errors import (
    ArchiveEntryError,
    ArchiveOpenError,
    DirectoryReadError,
    LayerCacheError,
    MalformedDigest,
    ManifestParseError,
)
from .extractor import DEFAULT_INCLUDE_MARKERS, SelectiveExtractor, iter_entries
from .identity import BUCKET_PREFIX_LENGTH, bucket_key, deduplicate, payload
from .lookup import TreeLookup
from .manifest import (
    get_cache_dir,
    get_image_manifest_url,
    get_manifest_json_file,
    parse_image_index,
    parse_json_manifest,
)
from .models import (
    ArchiveEntry,
    BlobOutcome,
    BlobResult,
    ExtractionReport,
    History,
    ImageReference,
    LayerReference,
    ManifestConfig,
    ManifestSchema,
)
from .service import LayerCacheService

__all__ = [
    "ArchiveEntry",
    "ArchiveEntryError",
    "ArchiveOpenError",
    "BUCKET_PREFIX_LENGTH",
    "BlobOutcome",
    "BlobResult",
    "DEFAULT_INCLUDE_MARKERS",
    "DirectoryReadError",
    "ExtractionReport",
    "History",
    "ImageReference",
    "LayerCacheConfig",
    "LayerCacheError",
    "LayerCacheService",
    "LayerReference",
    "MalformedDigest",
    "ManifestConfig",
    "ManifestParseError",
    "ManifestSchema",
    "SelectiveExtractor",
    "TreeLookup",
    "bucket_key",
    "deduplicate",
    "get_cache_dir",
    "get_image_manifest_url",
    "get_manifest_json_file",
    "iter_entries",
    "parse_image_index",
    "parse_json_manifest",
    "payload",
]
