"""Shared fixtures for LayerCache tests."""

import io
import tarfile
from pathlib import Path
from typing import Any

import pytest

from layercache.adapters import FsCacheAdapter, ShardedBlobLocator
from layercache.core import LayerCacheService, LayerReference, SelectiveExtractor


class RecordingLogger:
    """LoggerPort fake that keeps every event."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def trace(self, message: str, **kwargs: Any) -> None:
        self.events.append(("trace", message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self.events.append(("debug", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.events.append(("info", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.events.append(("warning", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.events.append(("error", message, kwargs))

    def log_operation(
        self,
        op: str,
        counts: dict[str, int],
        durations: dict[str, float],
        **kwargs: Any,
    ) -> None:
        self.events.append(("operation", op, {"counts": counts, **kwargs}))

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg, _ in self.events if lvl == level]


def write_layer(blobs_root: Path, hex_digest: str, entries: dict[str, bytes | None]) -> Path:
    """Write a gzip tar blob at ``blobs_root/<hex[:2]>/<hex>``.

    Entry names ending in ``/`` become directories, everything else a regular
    file with the given bytes. Entries are stored in dict order.
    """
    path = blobs_root / hex_digest[:2] / hex_digest
    path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(path, mode="w:gz") as tf:
        for name, data in entries.items():
            if name.endswith("/"):
                info = tarfile.TarInfo(name=name.rstrip("/"))
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tf.addfile(info)
            else:
                payload = data or b""
                info = tarfile.TarInfo(name=name)
                info.size = len(payload)
                info.mode = 0o644
                tf.addfile(info, io.BytesIO(payload))
    return path


def layer(digest: str) -> LayerReference:
    return LayerReference(digest=digest)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def blobs_root(tmp_path: Path) -> Path:
    root = tmp_path / "blobs"
    root.mkdir()
    return root


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def extractor(logger: RecordingLogger) -> SelectiveExtractor:
    return SelectiveExtractor(ShardedBlobLocator(), FsCacheAdapter(), logger)


@pytest.fixture
def service(logger: RecordingLogger) -> LayerCacheService:
    return LayerCacheService(ShardedBlobLocator(), FsCacheAdapter(), logger)
