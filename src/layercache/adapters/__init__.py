"""Adapters for LayerCache ports."""

from .cache_fs import FsCacheAdapter
from .locator_fs import (
    FlatBlobLocator,
    OciLayoutBlobLocator,
    ShardedBlobLocator,
    locator_for_layout,
)
from .logger_std import StdLoggerAdapter

__all__ = [
    "FlatBlobLocator",
    "FsCacheAdapter",
    "OciLayoutBlobLocator",
    "ShardedBlobLocator",
    "StdLoggerAdapter",
    "locator_for_layout",
]
