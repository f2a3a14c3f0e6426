"""Shared typing helpers for s3crc modules."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsRead(Protocol):
    """Sequential byte sources such as open files or ``sys.stdin.buffer``."""

    def read(self, size: int = -1, /) -> bytes:
        """Return up to ``size`` bytes, or ``b""`` at end of input."""
        ...


__all__ = ["SupportsRead"]
