from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

PACK_NAME = "celeste_hearts"
CATEGORY = "celeste_hearts"
NAME_PREFIX = "celeste_hearts_"
SHORT_PREFIX = "ch_"

DEFAULT_HOST = "cataclysm.systems"
MISSKEY_META_VERSION = 2

DEFAULT_DESCRIPTION = "Pride hearts encased in hearts, inspired by the Celeste game."
DEFAULT_HOMEPAGE = "https://github.com/mecha-cat/celeste-hearts/"
DEFAULT_SRC_URL = (
    "https://github.com/mecha-cat/celeste-hearts/raw/main/"
    "Fediverse%20Packs/celeste_hearts_misskey_emojis.zip"
)
DEFAULT_LICENSE = "CC BY-NC-SA 4.0"

LIST_FILENAME = "fedi_hearts_list.txt"
OUTPUT_FOLDER_NAME = "Fediverse Packs"
STAGING_PREFIX = "celesteHeartsEmoji"

MASTODON_TAR = "celeste_hearts_mastodon_emojis.tar.gz"
MISSKEY_ZIP = "celeste_hearts_misskey_emojis.zip"
MISSKEY_META = "meta.json"
AKKOMA_FILES = "celeste_hearts_akkoma.json"
AKKOMA_MANIFEST = "celeste_hearts_akkoma_manifest.json"

# Bare emoji name -> extra alias words, rendered with both prefixes.
DEFAULT_EXTRA_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "mlm": ("gay",),
        "non_binary": ("nonbinary", "enby"),
    }
)


@dataclass(frozen=True, slots=True)
class PackConfig:
    source_dir: Path
    list_path: Path
    out_dir: Path
    host: str = DEFAULT_HOST
    description: str = DEFAULT_DESCRIPTION
    homepage: str = DEFAULT_HOMEPAGE
    src_url: str = DEFAULT_SRC_URL
    license: str = DEFAULT_LICENSE
    extra_aliases: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: DEFAULT_EXTRA_ALIASES
    )

    @classmethod
    def for_source_dir(
        cls,
        source_dir: str | Path,
        *,
        list_path: str | Path | None = None,
        out_dir: str | Path | None = None,
        **overrides,
    ) -> "PackConfig":
        """Default layout: list next to the images, packs in a sibling folder."""

        base = Path(source_dir).resolve()
        return cls(
            source_dir=base,
            list_path=Path(list_path) if list_path is not None else base / LIST_FILENAME,
            out_dir=Path(out_dir) if out_dir is not None else base.parent / OUTPUT_FOLDER_NAME,
            **overrides,
        )

    @property
    def tar_path(self) -> Path:
        return self.out_dir / MASTODON_TAR

    @property
    def zip_path(self) -> Path:
        return self.out_dir / MISSKEY_ZIP

    @property
    def akkoma_files_path(self) -> Path:
        return self.out_dir / AKKOMA_FILES

    @property
    def akkoma_manifest_path(self) -> Path:
        return self.out_dir / AKKOMA_MANIFEST


__all__ = [
    "AKKOMA_FILES",
    "AKKOMA_MANIFEST",
    "CATEGORY",
    "DEFAULT_EXTRA_ALIASES",
    "DEFAULT_HOST",
    "LIST_FILENAME",
    "MASTODON_TAR",
    "MISSKEY_META",
    "MISSKEY_META_VERSION",
    "MISSKEY_ZIP",
    "NAME_PREFIX",
    "OUTPUT_FOLDER_NAME",
    "PACK_NAME",
    "PackConfig",
    "SHORT_PREFIX",
    "STAGING_PREFIX",
]
