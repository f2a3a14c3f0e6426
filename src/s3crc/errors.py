"""Error types raised by the s3crc checksum pipeline."""

from __future__ import annotations


class S3CrcError(Exception):
    """Base class for all s3crc failures."""


class SourceReadError(S3CrcError):
    """Raised when a byte source fails while it is being read."""

    def __init__(self, source: str, cause: BaseException, *, stream: bool = False) -> None:
        self.source = source
        self.cause = cause
        self.stream = stream
        if stream:
            message = f"error reading from {source}: {cause}"
        else:
            message = f"error on {source}: {cause}"
        super().__init__(message)


class PatternError(S3CrcError):
    """Raised for an invalid glob pattern or a match that cannot be resolved."""

    def __init__(self, pattern: str, reason: str, *, entry: str | None = None) -> None:
        self.pattern = pattern
        self.reason = reason
        self.entry = entry
        if entry is None:
            message = f"invalid pattern {pattern}: {reason}"
        else:
            message = f"glob error for pattern {pattern}: {entry}: {reason}"
        super().__init__(message)


class AggregationError(S3CrcError):
    """Raised when collected results cannot be serialized to JSON."""


__all__ = ["AggregationError", "PatternError", "S3CrcError", "SourceReadError"]
