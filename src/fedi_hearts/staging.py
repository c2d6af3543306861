from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

from fedi_hearts.hearts_list import ListEntry
from fedi_hearts.naming import canonical_name, derive_name, output_filename
from fedi_hearts.records import EmojiRecord, build_aliases

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StagingResult:
    records: list[EmojiRecord] = field(default_factory=list)
    skipped: list[ListEntry] = field(default_factory=list)


def clear_output_folder(out_dir: Path) -> list[Path]:
    """Delete every regular file directly inside out_dir.

    The folder is created when missing. Subdirectories are left alone.
    """

    out_dir.mkdir(parents=True, exist_ok=True)

    removed: list[Path] = []
    for child in sorted(out_dir.iterdir()):
        if child.is_dir() and not child.is_symlink():
            logger.warning(f"Leaving directory {child} in output folder")
            continue
        child.unlink()
        removed.append(child)
    return removed


def stage_entry(
    entry: ListEntry,
    *,
    source_dir: Path,
    staging_dir: Path,
    extra_aliases: Mapping[str, Iterable[str]],
) -> EmojiRecord:
    name = derive_name(entry.filename, entry.alias)
    new_file_name = output_filename(entry.filename, name)

    src = source_dir / entry.filename
    if not src.is_file():
        raise FileNotFoundError(f"not a file: {src}")
    shutil.copyfile(src, staging_dir / new_file_name)

    return EmojiRecord(
        name=canonical_name(name),
        file_name=new_file_name,
        aliases=tuple(build_aliases(name, extra_aliases)),
    )


def stage_entries(
    entries: Iterable[ListEntry],
    *,
    source_dir: Path,
    staging_dir: Path,
    extra_aliases: Mapping[str, Iterable[str]],
) -> StagingResult:
    result = StagingResult()
    for entry in entries:
        logger.debug(f"Processing {entry.filename}")
        try:
            record = stage_entry(
                entry,
                source_dir=source_dir,
                staging_dir=staging_dir,
                extra_aliases=extra_aliases,
            )
        except OSError as exc:
            logger.error(
                f"Cannot access file {entry.filename}. Does it exist? "
                f"Do you have permissions for it? ({exc.__class__.__name__}: {exc})"
            )
            result.skipped.append(entry)
            continue
        result.records.append(record)
    return result


__all__ = ["StagingResult", "clear_output_folder", "stage_entries", "stage_entry"]
