from __future__ import annotations

import re
from pathlib import PurePath

from fedi_hearts.config import NAME_PREFIX, SHORT_PREFIX

# e.g. "Pride (not made by me)"
_PAREN_SUFFIX = re.compile(r"\s?\(.*\)$")


def _underscore_first(value: str) -> str:
    # First occurrence only: "a b c" -> "a_b c".
    return value.replace(" ", "_", 1).replace("-", "_", 1)


def name_from_alias(alias: str) -> str:
    return _underscore_first(alias.lower())


def name_from_filename(filename: str) -> str:
    stem = PurePath(filename).stem.lower()
    # Files that were already renamed once carry one of the prefixes.
    stem = stem.replace(NAME_PREFIX, "", 1)
    stem = stem.replace(SHORT_PREFIX, "", 1)
    stem = _PAREN_SUFFIX.sub("", stem, count=1)
    return _underscore_first(stem)


def derive_name(filename: str, alias: str | None = None) -> str:
    """Bare emoji name (without the category prefix) for a list entry."""

    if alias:
        name = name_from_alias(alias)
        if name:
            return name
    return name_from_filename(filename)


def canonical_name(name: str) -> str:
    return NAME_PREFIX + name


def output_filename(filename: str, name: str) -> str:
    return canonical_name(name) + PurePath(filename).suffix


__all__ = [
    "canonical_name",
    "derive_name",
    "name_from_alias",
    "name_from_filename",
    "output_filename",
]
