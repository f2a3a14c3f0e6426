from __future__ import annotations

import io
import logging
import os
import sys
from pathlib import Path

import pytest

from s3crc.crc.formatting import OutputMode
from s3crc.errors import PatternError, SourceReadError
from s3crc.report import ResultEntry, render_json
from s3crc.runner import ChecksumRun
from tests.helpers import CHECK_HEX, CHECK_INPUT, FailingReader, write_files

LOGGER = logging.getLogger("tests.runner")


def test_results_follow_pattern_then_match_order(tmp_path: Path) -> None:
    write_files(tmp_path, {"b.txt": b"", "a.txt": CHECK_INPUT, "z.bin": CHECK_INPUT})
    run = ChecksumRun(OutputMode.HEX_LOWER, logger=LOGGER)

    results = run.collect([str(tmp_path / "z.bin"), str(tmp_path / "*.txt")])

    assert results == [
        ResultEntry(file=str(tmp_path / "z.bin"), crc64=CHECK_HEX),
        ResultEntry(file=str(tmp_path / "a.txt"), crc64=CHECK_HEX),
        ResultEntry(file=str(tmp_path / "b.txt"), crc64="0000000000000000"),
    ]
    assert run.errors == []


def test_stdin_source_uses_label() -> None:
    run = ChecksumRun(OutputMode.HEX_UPPER, stdin=io.BytesIO(CHECK_INPUT), logger=LOGGER)

    assert run.collect(["-"]) == [ResultEntry(file="stdin", crc64=CHECK_HEX.upper())]


def test_failures_are_reported_and_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_files(tmp_path, {"good.txt": CHECK_INPUT})
    (tmp_path / "dir.txt").mkdir()
    run = ChecksumRun(OutputMode.HEX_LOWER, stdin=FailingReader(), chunk_size=3, logger=LOGGER)

    with caplog.at_level(logging.ERROR, logger="tests.runner"):
        results = run.collect(["[bad", "-", str(tmp_path / "*.txt")])

    assert results == [ResultEntry(file=str(tmp_path / "good.txt"), crc64=CHECK_HEX)]
    assert [type(error) for error in run.errors] == [PatternError, SourceReadError, SourceReadError]
    messages = [record.getMessage() for record in caplog.records]
    assert messages[0].startswith("invalid pattern [bad:")
    assert messages[1].startswith("error reading from stdin:")
    assert messages[2].startswith(f"error on {tmp_path / 'dir.txt'}:")


def test_missing_stdin_is_source_error() -> None:
    run = ChecksumRun(OutputMode.BASE64, stdin=None, logger=LOGGER)

    assert run.collect(["-"]) == []
    assert isinstance(run.errors[0], SourceReadError)
    assert str(run.errors[0]).startswith("error reading from stdin:")
    assert str(run.errors[0]).startswith("error reading from stdin:")


def test_results_are_lazy(tmp_path: Path) -> None:
    write_files(tmp_path, {"a.txt": b"a", "b.txt": b"b"})
    run = ChecksumRun(OutputMode.BASE64, logger=LOGGER)

    results = run.iter_results([str(tmp_path / "a.txt"), str(tmp_path / "b.txt")])
    first = next(results)

    assert first.file == str(tmp_path / "a.txt")
    (tmp_path / "b.txt").unlink()
    assert list(results) == []
    assert len(run.errors) == 1


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that accepts non-UTF-8 names")
def test_non_utf8_file_name_is_rendered_lossily(tmp_path: Path) -> None:
    (tmp_path / os.fsdecode(b"bad\xff.bin")).write_bytes(CHECK_INPUT)
    run = ChecksumRun(OutputMode.HEX_LOWER, logger=LOGGER)

    results = run.collect([str(tmp_path / "*.bin")])

    assert results == [ResultEntry(file=f"{tmp_path}/bad\ufffd.bin", crc64=CHECK_HEX)]
    render_json(results).encode("utf-8")
