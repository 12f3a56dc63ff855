"""Core LayerCacheService orchestration."""

import asyncio
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..ports import BlobLocatorPort, CachePort, LoggerPort
from .extractor import DEFAULT_INCLUDE_MARKERS, SelectiveExtractor
from .identity import deduplicate
from .lookup import TreeLookup
from .models import BlobOutcome, ExtractionReport, LayerReference


class LayerCacheService:
    """Core service for layer extraction and cache lookups."""

    def __init__(
        self,
        locator: BlobLocatorPort,
        cache: CachePort,
        logger: LoggerPort,
        include_markers: Iterable[str] = DEFAULT_INCLUDE_MARKERS,
        skip_unreadable: bool = False,
    ):
        """Initialize service with ports.

        Args:
            include_markers: Path fragments that make a blob worth extracting.
            skip_unreadable: Treat archives that cannot be opened as a per-blob
                error instead of aborting the whole batch.
        """
        self.locator = locator
        self.cache = cache
        self.logger = logger
        self.extractor = SelectiveExtractor(
            locator,
            cache,
            logger,
            include_markers=include_markers,
            skip_unreadable=skip_unreadable,
        )
        self.lookup = TreeLookup(logger)

    async def extract_layers(
        self,
        blobs_root: Path,
        cache_root: Path,
        layers: Sequence[LayerReference],
    ) -> ExtractionReport:
        """Untar layers of interest into cache buckets under ``cache_root``.

        Blobs are processed one at a time in input order; each blob's
        filesystem and decompression work runs off the event loop.
        """
        start_time = time.perf_counter()
        self.logger.debug("Starting extract operation", layers=len(layers))

        report = ExtractionReport()
        for digest in deduplicate(layers):
            result = await asyncio.to_thread(
                self.extractor.process, Path(blobs_root), Path(cache_root), digest
            )
            report.results.append(result)

        self._log_report(report, time.perf_counter() - start_time)
        return report

    def extract_layers_sync(
        self,
        blobs_root: Path,
        cache_root: Path,
        layers: Sequence[LayerReference],
    ) -> ExtractionReport:
        """Blocking variant of extract_layers."""
        start_time = time.perf_counter()
        self.logger.debug("Starting extract operation", layers=len(layers))

        report = self.extractor.run(Path(blobs_root), Path(cache_root), layers)

        self._log_report(report, time.perf_counter() - start_time)
        return report

    async def find_named_subpath(self, root: Path, name_fragment: str) -> Path | None:
        """Find an extracted artifact two levels below ``root``."""
        return await asyncio.to_thread(self.lookup.find, Path(root), name_fragment)

    def find_named_subpath_sync(self, root: Path, name_fragment: str) -> Path | None:
        """Blocking variant of find_named_subpath."""
        return self.lookup.find(Path(root), name_fragment)

    def _log_report(self, report: ExtractionReport, duration: float) -> None:
        self.logger.log_operation(
            op="extract",
            counts={outcome.value: report.count(outcome) for outcome in BlobOutcome},
            durations={"total": duration},
            files_written=report.files_written,
        )
