"""Sequential orchestration: patterns in, result entries out."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from s3crc.crc.engine import DEFAULT_CHUNK_SIZE
from s3crc.crc.formatting import OutputMode, format_checksum
from s3crc.errors import PatternError, S3CrcError, SourceReadError
from s3crc.io.patterns import expand_pattern
from s3crc.io.sources import STDIN_LABEL, STDIN_PATTERN, checksum_path, checksum_stream, display_name
from s3crc.report import ResultEntry
from s3crc.util.typing import SupportsRead


class ChecksumRun:
    """Checksums every source named by a list of patterns, one at a time.

    Per-source failures are logged, remembered in ``errors`` and skipped; they
    never stop the remaining sources from being processed.
    """

    def __init__(
        self,
        mode: OutputMode,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        stdin: SupportsRead | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.mode = mode
        self.chunk_size = chunk_size
        self.stdin = stdin
        self.logger = logger or logging.getLogger("s3crc")
        self.errors: list[S3CrcError] = []

    def iter_results(self, patterns: Iterable[str]) -> Iterator[ResultEntry]:
        """Yield a ``ResultEntry`` per readable source in discovery order."""

        for pattern in patterns:
            if pattern == STDIN_PATTERN:
                entry = self._checksum_stdin()
                if entry is not None:
                    yield entry
                continue

            try:
                paths = expand_pattern(pattern, onerror=self._report)
            except PatternError as exc:
                self._report(exc)
                continue

            for path in paths:
                entry = self._checksum_file(path)
                if entry is not None:
                    yield entry

    def collect(self, patterns: Iterable[str]) -> list[ResultEntry]:
        return list(self.iter_results(patterns))

    def _checksum_stdin(self) -> ResultEntry | None:
        if self.stdin is None:
            self._report(SourceReadError(STDIN_LABEL, OSError("standard input is not available"), stream=True))
            return None
        try:
            value = checksum_stream(self.stdin, label=STDIN_LABEL, chunk_size=self.chunk_size)
        except SourceReadError as exc:
            self._report(exc)
            return None
        self.logger.debug("Checksummed %s", STDIN_LABEL)
        return ResultEntry(file=STDIN_LABEL, crc64=format_checksum(value, self.mode))

    def _checksum_file(self, path: Path) -> ResultEntry | None:
        try:
            value = checksum_path(path, chunk_size=self.chunk_size)
        except SourceReadError as exc:
            self._report(exc)
            return None
        self.logger.debug("Checksummed %s", path)
        return ResultEntry(file=display_name(path), crc64=format_checksum(value, self.mode))

    def _report(self, error: S3CrcError) -> None:
        self.errors.append(error)
        self.logger.error("%s", error)


__all__ = ["ChecksumRun"]
