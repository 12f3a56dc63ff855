"""Selective extraction of layer blobs into cache buckets."""

import tarfile
import zlib
from collections.abc import Iterable, Iterator
from contextlib import closing
from pathlib import Path

from ..ports import BlobLocatorPort, CachePort, LoggerPort
from .errors import ArchiveEntryError, ArchiveOpenError
from .identity import deduplicate, payload
from .models import ArchiveEntry, BlobOutcome, BlobResult, ExtractionReport, LayerReference

DEFAULT_INCLUDE_MARKERS = ("configs/", "release-manifests/")

# Errors a gzip tar stream can raise while being read.
_STREAM_ERRORS = (tarfile.TarError, OSError, EOFError, zlib.error)


def _open_stream(archive_path: Path) -> tarfile.TarFile:
    try:
        return tarfile.open(archive_path, mode="r|gz", errorlevel=1)
    except _STREAM_ERRORS as e:
        raise ArchiveOpenError(str(archive_path), str(e)) from e


def _entry_path(member: tarfile.TarInfo) -> str:
    # tarfile drops the trailing slash of directory headers
    if member.isdir():
        return member.name + "/"
    return member.name


def iter_entries(archive_path: Path) -> Iterator[ArchiveEntry]:
    """Yield archive entries in stream order.

    The archive is read lazily; stopping the iteration early closes the
    stream without decompressing the rest.
    """
    with _open_stream(archive_path) as tar:
        try:
            for member in tar:
                yield ArchiveEntry(path=_entry_path(member))
        except _STREAM_ERRORS as e:
            raise ArchiveOpenError(str(archive_path), str(e)) from e


class SelectiveExtractor:
    """Extract layer blobs that contain paths of interest."""

    def __init__(
        self,
        locator: BlobLocatorPort,
        cache: CachePort,
        logger: LoggerPort,
        include_markers: Iterable[str] = DEFAULT_INCLUDE_MARKERS,
        skip_unreadable: bool = False,
    ):
        """Initialize extractor.

        Args:
            locator: Resolves a blob's archive path from its hex digest
            cache: Bucket naming and cache-hit test
            logger: Log sink
            include_markers: Path fragments that make a blob worth extracting
            skip_unreadable: Log and skip blobs whose archive cannot be opened
                instead of aborting the batch
        """
        self.locator = locator
        self.cache = cache
        self.logger = logger
        self.include_markers = tuple(include_markers)
        self.skip_unreadable = skip_unreadable

    def matches(self, path: str) -> bool:
        """Check an entry path against the inclusion markers."""
        return any(marker in path for marker in self.include_markers)

    def scan(self, archive_path: Path) -> ArchiveEntry | None:
        """Return the first entry matching the inclusion markers, if any."""
        with closing(iter_entries(archive_path)) as entries:
            for entry in entries:
                if self.matches(entry.path):
                    return entry
        return None

    def unpack(self, archive_path: Path, bucket: Path) -> tuple[int, ArchiveEntryError | None]:
        """Unpack every entry of the archive into ``bucket``.

        Stops at the first entry that fails and returns it as an error
        together with the number of entries written so far.
        """
        written = 0
        with _open_stream(archive_path) as tar:
            bucket.mkdir(parents=True, exist_ok=True)
            member: tarfile.TarInfo | None = None
            try:
                for member in tar:
                    tar.extract(member, path=bucket, filter="tar")
                    written += 1
            except _STREAM_ERRORS as e:
                name = member.name if member is not None else None
                return written, ArchiveEntryError(str(archive_path), name, str(e))
        return written, None

    def process(self, blobs_root: Path, cache_root: Path, digest: str) -> BlobResult:
        """Materialize one blob into its cache bucket."""
        hex_digest = payload(digest)
        bucket_name = self.cache.bucket_name(hex_digest)
        bucket = self.cache.bucket_path(cache_root, hex_digest)
        self.logger.trace(f"cache file {bucket}")

        if self.cache.has_bucket(cache_root, hex_digest):
            self.logger.info(f"cache exists {bucket}")
            return BlobResult(digest=digest, bucket=bucket, outcome=BlobOutcome.CACHED)

        archive_path = self.locator.blob_path(blobs_root, hex_digest)
        self.logger.trace(f"blobs file {archive_path}")

        try:
            match = self.scan(archive_path)
            if match is None:
                self.logger.debug(f"no entries of interest in {bucket_name}", digest=digest)
                return BlobResult(digest=digest, bucket=bucket, outcome=BlobOutcome.SKIPPED)

            self.logger.info(f"untarring file {bucket_name}", entry=match.path)
            written, entry_error = self.unpack(archive_path, bucket)
        except ArchiveOpenError as e:
            if not self.skip_unreadable:
                raise
            self.logger.error(f"skipping unreadable blob : {e}", digest=digest)
            return BlobResult(
                digest=digest, bucket=bucket, outcome=BlobOutcome.UNREADABLE, error=str(e)
            )

        if entry_error is not None:
            self.logger.warning(f"skipping this error : {entry_error}")
            return BlobResult(
                digest=digest,
                bucket=bucket,
                outcome=BlobOutcome.PARTIAL,
                matched_entry=match.path,
                files_written=written,
                error=str(entry_error),
            )

        return BlobResult(
            digest=digest,
            bucket=bucket,
            outcome=BlobOutcome.EXTRACTED,
            matched_entry=match.path,
            files_written=written,
        )

    def run(
        self, blobs_root: Path, cache_root: Path, layers: Iterable[LayerReference]
    ) -> ExtractionReport:
        """Deduplicate layers and process each unique blob in order."""
        report = ExtractionReport()
        for digest in deduplicate(layers):
            report.results.append(self.process(Path(blobs_root), Path(cache_root), digest))
        return report
