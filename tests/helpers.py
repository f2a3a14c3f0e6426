from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

from typer.testing import CliRunner, Result

from s3crc import cli
from s3crc.crc.table import NVME_POLY

CHECK_INPUT = b"123456789"
CHECK_VALUE = 0xAE8B14860A799888
CHECK_HEX = "ae8b14860a799888"
CHECK_BASE64 = "rosUhgp5mIg="
EMPTY_BASE64 = "AAAAAAAAAAA="


def reference_crc64(data: bytes) -> int:
    """Bit-at-a-time CRC64/NVMe, independent of the lookup table."""

    crc = 0xFFFFFFFFFFFFFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ NVME_POLY if crc & 1 else crc >> 1
    return crc ^ 0xFFFFFFFFFFFFFFFF


def write_files(root: Path, files: Mapping[str, bytes]) -> list[Path]:
    """Create ``files`` under ``root`` and return their paths in insertion order."""

    paths = []
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        paths.append(path)
    return paths


class ChunkedReader:
    """Returns the payload in fixed pieces regardless of the requested size."""

    def __init__(self, pieces: Sequence[bytes]) -> None:
        self._pieces = list(pieces)

    def read(self, size: int = -1, /) -> bytes:
        if not self._pieces:
            return b""
        return self._pieces.pop(0)


class FailingReader:
    """Yields ``good`` once and then raises ``OSError``."""

    def __init__(self, good: bytes = b"partial") -> None:
        self._good = good
        self.calls = 0

    def read(self, size: int = -1, /) -> bytes:
        self.calls += 1
        if self.calls == 1:
            return self._good
        raise OSError(5, "Input/output error")


def run_cli(args: Sequence[str], *, input: bytes | None = None) -> Result:
    runner = CliRunner()
    return runner.invoke(cli.app, list(args), input=input)
