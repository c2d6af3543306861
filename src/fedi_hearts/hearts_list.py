"""Parser for the curated hearts list.

Format, one entry per line::

    # comment
    Hearts/Gay.gif
    Hearts/Pride (not made by me).gif | Pride Flag

The alias after the pipe is optional. A pipe preceded by a backslash does not
split the line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_UNESCAPED_PIPE = re.compile(r"(?<!\\)\|")


@dataclass(frozen=True, slots=True)
class ListEntry:
    filename: str
    alias: str | None
    line_no: int


def parse_line(line: str, line_no: int = 0) -> ListEntry | None:
    # Only a "#" in the first column starts a comment.
    if line.startswith("#"):
        return None
    stripped = line.strip()
    if not stripped:
        return None

    fields = [part.strip() for part in _UNESCAPED_PIPE.split(stripped)]
    filename = fields[0]
    alias = fields[1] if len(fields) > 1 and fields[1] else None
    return ListEntry(filename=filename, alias=alias, line_no=line_no)


def parse_hearts_list(text: str) -> list[ListEntry]:
    entries: list[ListEntry] = []
    for line_no, raw in enumerate(text.split("\n"), start=1):
        entry = parse_line(raw, line_no)
        if entry is not None:
            entries.append(entry)
    return entries


def read_hearts_list(path: str | Path) -> list[ListEntry]:
    return parse_hearts_list(Path(path).read_text(encoding="utf-8"))


__all__ = ["ListEntry", "parse_hearts_list", "parse_line", "read_hearts_list"]
