"""Glob pattern validation and expansion for checksum inputs."""

from __future__ import annotations

import glob
import os
from collections.abc import Callable
from pathlib import Path

from s3crc.errors import PatternError

_SEPARATORS = frozenset({"/", os.sep})


def validate_pattern(pattern: str) -> None:
    """Raise ``PatternError`` if ``pattern`` is not a well-formed glob.

    Character classes must be closed and ``**`` must make up a whole path
    component. A ``]`` directly after ``[`` or ``[!`` is a literal member.
    """

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            start = i
            while i < n and pattern[i] == "*":
                i += 1
            stars = i - start
            if stars > 2:
                raise PatternError(pattern, "wildcards are either regular `*` or recursive `**`")
            if stars == 2:
                before_ok = start == 0 or pattern[start - 1] in _SEPARATORS
                after_ok = i == n or pattern[i] in _SEPARATORS
                if not (before_ok and after_ok):
                    raise PatternError(pattern, "recursive wildcards must form a single path component")
            continue
        if ch == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise PatternError(pattern, "unclosed character class")
            i = close + 1
            continue
        i += 1


def expand_pattern(
    pattern: str,
    *,
    onerror: Callable[[PatternError], None] | None = None,
) -> list[Path]:
    """Return the paths matching ``pattern`` in lexicographic order.

    Dangling symbolic links are reported through ``onerror`` and skipped; with
    no handler the first one is raised. A pattern that matches nothing raises.
    """

    validate_pattern(pattern)

    matches = sorted(glob.glob(pattern, recursive=True, include_hidden=True))
    if not matches:
        raise PatternError(pattern, "no files match")

    resolved: list[Path] = []
    for match in matches:
        path = Path(match)
        if path.is_symlink() and not path.exists():
            error = PatternError(pattern, "dangling symbolic link", entry=match)
            if onerror is None:
                raise error
            onerror(error)
            continue
        resolved.append(path)
    return resolved


__all__ = ["expand_pattern", "validate_pattern"]
