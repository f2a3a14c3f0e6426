"""Lookup table for the reflected CRC64/NVMe polynomial."""

from __future__ import annotations

import threading

NVME_POLY = 0x9A6C9329AC4BC9B5

_TABLE: tuple[int, ...] | None = None
_TABLE_LOCK = threading.Lock()


def make_table(poly: int) -> tuple[int, ...]:
    """Return the 256-entry table for a reflected (LSB-first) 64-bit polynomial."""

    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ poly
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


def crc64_table() -> tuple[int, ...]:
    """Return the shared NVMe table, building it on first use."""

    global _TABLE
    if _TABLE is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                _TABLE = make_table(NVME_POLY)
    return _TABLE


__all__ = ["NVME_POLY", "crc64_table", "make_table"]
