"""Textual renderings of a finalized CRC64 value."""

from __future__ import annotations

import base64
from enum import Enum


class OutputMode(str, Enum):
    """Mutually exclusive rendering modes for a checksum."""

    HEX_LOWER = "hex"
    HEX_UPPER = "uppercase"
    BASE64 = "base64"


def select_mode(*, hex_lower: bool, uppercase: bool) -> OutputMode:
    """Map command-line flags onto a rendering mode.

    A lowercase hex request always wins over an uppercase request; with
    neither present the value is rendered as base64.
    """

    if hex_lower:
        return OutputMode.HEX_LOWER
    if uppercase:
        return OutputMode.HEX_UPPER
    return OutputMode.BASE64


def format_checksum(value: int, mode: OutputMode) -> str:
    """Render ``value`` according to ``mode``."""

    if not 0 <= value <= 0xFFFFFFFFFFFFFFFF:
        raise ValueError(f"checksum value out of 64-bit range: {value!r}")

    if mode is OutputMode.HEX_LOWER:
        return f"{value:016x}"
    if mode is OutputMode.HEX_UPPER:
        return f"{value:016X}"
    # big-endian bytes, standard alphabet with padding
    return base64.b64encode(value.to_bytes(8, "big")).decode("ascii")


__all__ = ["OutputMode", "format_checksum", "select_mode"]
