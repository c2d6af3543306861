"""Emoji records and the JSON documents built from them.

Three documents are produced per build:

- Misskey ``meta.json`` (shipped inside the zip)
- Akkoma/Pleroma file mapping (``name -> filename``)
- Akkoma/Pleroma pack manifest pointing at the zip with its sha256
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Iterable, Mapping

from fedi_hearts.config import (
    AKKOMA_FILES,
    CATEGORY,
    MISSKEY_META_VERSION,
    NAME_PREFIX,
    PACK_NAME,
    SHORT_PREFIX,
    PackConfig,
)


# Primary order of ASCII punctuation under the root Unicode collation, which is
# what JavaScript's localeCompare uses. Punctuation < digits < letters.
_PUNCTUATION_ORDER = " _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_PUNCTUATION_RANK = {c: i for i, c in enumerate(_PUNCTUATION_ORDER)}
_DIGIT_BASE = len(_PUNCTUATION_ORDER)
_LETTER_BASE = _DIGIT_BASE + 10
_OTHER_BASE = _LETTER_BASE + 26


def _primary_weight(c: str) -> int:
    if c in _PUNCTUATION_RANK:
        return _PUNCTUATION_RANK[c]
    if "0" <= c <= "9":
        return _DIGIT_BASE + ord(c) - ord("0")
    lower = c.lower()
    if "a" <= lower <= "z":
        return _LETTER_BASE + ord(lower) - ord("a")
    return _OTHER_BASE + ord(c)


def collation_key(value: str) -> tuple[tuple[int, ...], tuple[bool, ...]]:
    """Sort key ordering names like localeCompare: ``bi_flag.gif`` before ``bi.gif``.

    Letters compare case-insensitively first; lower case wins a tie.
    """

    return (
        tuple(_primary_weight(c) for c in value),
        tuple(c.isupper() for c in value),
    )


@dataclass(frozen=True, slots=True)
class EmojiRecord:
    name: str
    file_name: str
    aliases: tuple[str, ...] = ()
    category: str = CATEGORY
    downloaded: bool = True

    def to_misskey(self) -> dict[str, Any]:
        return {
            "downloaded": self.downloaded,
            "fileName": self.file_name,
            "emoji": {
                "name": self.name,
                "category": self.category,
                "aliases": list(self.aliases),
            },
        }


def build_aliases(name: str, extra_aliases: Mapping[str, Iterable[str]]) -> list[str]:
    extras = list(extra_aliases.get(name, ()))
    return (
        [SHORT_PREFIX + name]
        + [NAME_PREFIX + word for word in extras]
        + [SHORT_PREFIX + word for word in extras]
    )


def exported_at_now() -> str:
    # JavaScript-style ISO timestamp, as Misskey writes it: millis and "Z".
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_misskey_meta(
    records: Iterable[EmojiRecord],
    *,
    host: str,
    exported_at: str | None = None,
) -> dict[str, Any]:
    ordered = sorted(records, key=lambda r: collation_key(r.file_name))
    return {
        "metaVersion": MISSKEY_META_VERSION,
        "host": host,
        "exportedAt": exported_at if exported_at is not None else exported_at_now(),
        "emojis": [r.to_misskey() for r in ordered],
    }


def build_file_mapping(records: Iterable[EmojiRecord]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for r in records:
        # Later entries win on a name collision.
        mapping[r.name] = r.file_name
    return {name: mapping[name] for name in sorted(mapping, key=collation_key)}


def build_akkoma_manifest(config: PackConfig, *, src_sha256: str) -> dict[str, Any]:
    return {
        PACK_NAME: {
            "description": config.description,
            "files": AKKOMA_FILES,
            "homepage": config.homepage,
            "src": config.src_url,
            "src_sha256": src_sha256,
            "license": config.license,
        }
    }


__all__ = [
    "EmojiRecord",
    "build_akkoma_manifest",
    "build_aliases",
    "build_file_mapping",
    "build_misskey_meta",
    "collation_key",
    "exported_at_now",
]
