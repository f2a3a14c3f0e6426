"""Byte sources (files and standard input) feeding the checksum engine."""

from __future__ import annotations

from pathlib import Path

from s3crc.crc.engine import DEFAULT_CHUNK_SIZE, compute_crc64_from_file, compute_crc64_from_reader
from s3crc.errors import SourceReadError
from s3crc.util.typing import SupportsRead

STDIN_PATTERN = "-"
STDIN_LABEL = "stdin"


def display_name(path: Path) -> str:
    """Return ``path`` as valid UTF-8 text, replacing undecodable bytes with U+FFFD."""
    return str(path).encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def checksum_path(path: Path, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Checksum a file, wrapping open/read failures in ``SourceReadError``."""

    try:
        return compute_crc64_from_file(path, chunk_size=chunk_size)
    except OSError as exc:
        raise SourceReadError(display_name(path), exc) from exc


def checksum_stream(
    stream: SupportsRead,
    *,
    label: str = STDIN_LABEL,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Checksum an already-open binary stream such as standard input."""

    try:
        return compute_crc64_from_reader(stream, chunk_size=chunk_size)
    except OSError as exc:
        raise SourceReadError(label, exc, stream=True) from exc


__all__ = ["STDIN_LABEL", "STDIN_PATTERN", "checksum_path", "checksum_stream", "display_name"]
