"""Result entries and their line/JSON renderings."""

from __future__ import annotations

import json
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from s3crc.errors import AggregationError


class ResultEntry(BaseModel):
    """One successfully checksummed source."""

    model_config = ConfigDict(frozen=True)

    file: str
    crc64: str

    def to_dict(self) -> dict[str, object]:
        return self.model_dump()


def render_line(entry: ResultEntry) -> str:
    """Return ``"<checksum>  <source>"`` in the usual checksum-utility layout."""
    return f"{entry.crc64}  {entry.file}"


def render_json(entries: Iterable[ResultEntry], *, indent: int = 2) -> str:
    """Serialize entries as a pretty-printed JSON array, preserving order."""

    payload = [entry.to_dict() for entry in entries]
    try:
        return json.dumps(payload, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise AggregationError(f"json marshal error: {exc}") from exc


__all__ = ["ResultEntry", "render_json", "render_line"]
