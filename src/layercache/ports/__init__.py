"""Port interfaces for LayerCache."""

from .cache import CachePort
from .locator import BlobLocatorPort
from .logger import LoggerPort

__all__ = [
    "BlobLocatorPort",
    "CachePort",
    "LoggerPort",
]
