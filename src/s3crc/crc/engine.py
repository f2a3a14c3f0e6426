"""Streaming CRC64/NVMe checksum engine.

The register starts at all ones, is folded through the lookup table one byte
at a time in input order, and is complemented once at finalization. The value
is independent of how the input is split into chunks.
"""

from __future__ import annotations

from pathlib import Path

from s3crc.crc.table import crc64_table
from s3crc.util.typing import SupportsRead

INITIAL_REGISTER = 0xFFFFFFFFFFFFFFFF
DEFAULT_CHUNK_SIZE = 32 * 1024

_MASK64 = 0xFFFFFFFFFFFFFFFF


def update_register(register: int, table: tuple[int, ...], byte: int) -> int:
    """Fold a single byte into ``register``."""
    return table[(register & 0xFF) ^ byte] ^ (register >> 8)


def finalize_register(register: int) -> int:
    """Return the published checksum for a register (bitwise complement)."""
    return ~register & _MASK64


class Crc64:
    """Incremental CRC64/NVMe computation over one input."""

    def __init__(self) -> None:
        self._table = crc64_table()
        self._register = INITIAL_REGISTER
        self._finalized = False

    def update(self, chunk: bytes | bytearray | memoryview) -> None:
        """Consume ``chunk``; empty chunks are accepted and change nothing."""

        if self._finalized:
            raise RuntimeError("checksum already finalized")
        table = self._table
        crc = self._register
        for byte in bytes(chunk):
            crc = table[(crc & 0xFF) ^ byte] ^ (crc >> 8)
        self._register = crc

    def finalize(self) -> int:
        """Return the checksum value. The computation cannot be reused afterwards."""

        if self._finalized:
            raise RuntimeError("checksum already finalized")
        self._finalized = True
        return finalize_register(self._register)


def crc64(data: bytes | bytearray | memoryview) -> int:
    """Return the CRC64/NVMe checksum of ``data``."""
    engine = Crc64()
    engine.update(data)
    return engine.finalize()


def compute_crc64_from_reader(reader: SupportsRead, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Checksum everything ``reader`` yields until end of input.

    Read errors propagate to the caller untouched, so a partially consumed
    input never produces a value.
    """

    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    engine = Crc64()
    for chunk in iter(lambda: reader.read(chunk_size), b""):
        engine.update(chunk)
    return engine.finalize()


def compute_crc64_from_file(path: Path, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Return the CRC64/NVMe checksum for the file at ``path``."""
    with Path(path).open("rb") as handle:
        return compute_crc64_from_reader(handle, chunk_size=chunk_size)


__all__ = [
    "Crc64",
    "DEFAULT_CHUNK_SIZE",
    "INITIAL_REGISTER",
    "compute_crc64_from_file",
    "compute_crc64_from_reader",
    "crc64",
    "finalize_register",
    "update_register",
]
