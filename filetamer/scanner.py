"""Directory scanning with glob include and exclude patterns."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from pathlib import Path

from .config import Filters


def _translate(pattern: str) -> str:
    parts: list[str] = []
    in_alternates = False
    pos = 0
    length = len(pattern)
    while pos < length:
        char = pattern[pos]
        if char == "*":
            if pattern.startswith("**", pos) and (pos == 0 or pattern[pos - 1] == "/"):
                after = pos + 2
                if after == length:
                    parts.append(".*")
                    pos = after
                    continue
                if pattern[after] == "/":
                    parts.append("(?:.*/)?")
                    pos = after + 1
                    continue
            parts.append(".*")
            pos += 1
        elif char == "?":
            parts.append(".")
            pos += 1
        elif char == "[":
            end, regex_class = _translate_class(pattern, pos)
            parts.append(regex_class)
            pos = end
        elif char == "{":
            if in_alternates:
                raise ValueError(f"invalid glob {pattern!r}: nested alternate groups")
            in_alternates = True
            parts.append("(?:")
            pos += 1
        elif char == "," and in_alternates:
            parts.append("|")
            pos += 1
        elif char == "}" and in_alternates:
            in_alternates = False
            parts.append(")")
            pos += 1
        elif char == "\\":
            if pos + 1 >= length:
                raise ValueError(f"invalid glob {pattern!r}: dangling escape")
            parts.append(re.escape(pattern[pos + 1]))
            pos += 2
        else:
            parts.append(re.escape(char))
            pos += 1
    if in_alternates:
        raise ValueError(f"invalid glob {pattern!r}: unclosed alternate group")
    return "".join(parts)


def _translate_class(pattern: str, start: int) -> tuple[int, str]:
    pos = start + 1
    negate = pos < len(pattern) and pattern[pos] in "!^"
    if negate:
        pos += 1
    members: list[str] = []
    if pos < len(pattern) and pattern[pos] == "]":
        members.append(re.escape("]"))
        pos += 1
    close = pattern.find("]", pos)
    if close == -1:
        raise ValueError(f"invalid glob {pattern!r}: unclosed character class")
    members.extend("-" if c == "-" else re.escape(c) for c in pattern[pos:close])
    prefix = "^" if negate else ""
    return close + 1, f"[{prefix}{''.join(members)}]"


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob into a regex meant for ``fullmatch`` on relative paths.

    ``*`` and ``?`` also match ``/``; ``**`` as a whole path component matches
    any number of directories.
    """
    return re.compile(_translate(pattern), re.DOTALL)


def _walk(root: Path) -> Iterator[Path]:
    try:
        with os.scandir(root) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in ordered:
        path = Path(entry.path)
        yield path
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if is_dir:
            yield from _walk(path)


def scan(source: str | Path, filters: Filters) -> list[Path]:
    """Return the files under ``source`` matching the include and exclude patterns.

    Age and size limits in ``filters`` are not applied.
    """
    source = Path(source)
    include = [compile_glob(p) for p in filters.include_patterns]
    exclude = [compile_glob(p) for p in filters.exclude_patterns]

    if source.is_file():
        candidates: list[tuple[Path, str]] = [(source, "")]
    else:
        candidates = [
            (path, path.relative_to(source).as_posix())
            for path in _walk(source)
            if path.is_file()
        ]

    return [
        path
        for path, rel in candidates
        if any(p.fullmatch(rel) for p in include) and not any(p.fullmatch(rel) for p in exclude)
    ]