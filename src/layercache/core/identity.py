"""Blob identity: digest parsing and deduplication."""

from collections.abc import Iterable

from .errors import MalformedDigest
from .models import LayerReference

BUCKET_PREFIX_LENGTH = 6


def payload(digest: str) -> str:
    """Return the hex payload of an ``algorithm:hex`` digest."""
    _, sep, hex_part = digest.partition(":")
    if not sep or not hex_part:
        raise MalformedDigest(digest)
    return hex_part


def bucket_key(digest: str, length: int = BUCKET_PREFIX_LENGTH) -> str:
    """Return the cache bucket name for a digest."""
    return payload(digest)[:length]


def deduplicate(layers: Iterable[LayerReference]) -> list[str]:
    """Return unique digests in first-seen order.

    Two references are the same blob when their hex payloads match, even if
    the algorithm prefix differs.
    """
    seen: set[str] = set()
    digests: list[str] = []
    for layer in layers:
        key = payload(layer.digest)
        if key in seen:
            continue
        seen.add(key)
        digests.append(layer.digest)
    return digests
