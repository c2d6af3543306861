"""Build and verify the Mastodon, Misskey and Akkoma/Pleroma hearts packs.

Build order matters: the Mastodon tar is written before ``meta.json`` lands in
the staging folder, and the Akkoma manifest hashes the finished Misskey zip.
"""

from __future__ import annotations

import json
import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from fedi_hearts.artifacts.archives import (
    read_zip_member,
    tar_member_names,
    write_tar,
    write_zip,
    zip_member_names,
)
from fedi_hearts.artifacts.hash_utils import sha256_file
from fedi_hearts.artifacts.stable_json import read_json_object, write_json
from fedi_hearts.config import MISSKEY_META, PACK_NAME, STAGING_PREFIX, PackConfig
from fedi_hearts.hearts_list import ListEntry, read_hearts_list
from fedi_hearts.records import (
    EmojiRecord,
    build_akkoma_manifest,
    build_file_mapping,
    build_misskey_meta,
    collation_key,
)
from fedi_hearts.staging import clear_output_folder, stage_entries

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PackResult:
    tar_path: Path
    zip_path: Path
    akkoma_files_path: Path
    akkoma_manifest_path: Path
    zip_sha256: str
    records: list[EmojiRecord] = field(default_factory=list)
    skipped: list[ListEntry] = field(default_factory=list)


def build_packs(config: PackConfig, *, exported_at: str | None = None) -> PackResult:
    entries = read_hearts_list(config.list_path)

    logger.debug("Removing old zips")
    clear_output_folder(config.out_dir)

    with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX) as td:
        staging_dir = Path(td)
        logger.debug(f"Temporary directory is {staging_dir}")

        staged = stage_entries(
            entries,
            source_dir=config.source_dir,
            staging_dir=staging_dir,
            extra_aliases=config.extra_aliases,
        )

        logger.info("Zipping for Mastodon Admin Console")
        write_tar(root=staging_dir, out=config.tar_path)

        logger.info("Generating Misskey meta.json")
        meta = build_misskey_meta(staged.records, host=config.host, exported_at=exported_at)
        write_json(staging_dir / MISSKEY_META, meta)

        logger.info("Zipping for Misskey")
        write_zip(root=staging_dir, out=config.zip_path)

        logger.info("Generating Akkoma/Pleroma manifest and reference files")
        zip_sha256 = sha256_file(config.zip_path)
        write_json(config.akkoma_files_path, build_file_mapping(staged.records))
        write_json(
            config.akkoma_manifest_path,
            build_akkoma_manifest(config, src_sha256=zip_sha256),
        )

        logger.debug("Removing temporary directory")

    return PackResult(
        tar_path=config.tar_path,
        zip_path=config.zip_path,
        akkoma_files_path=config.akkoma_files_path,
        akkoma_manifest_path=config.akkoma_manifest_path,
        zip_sha256=zip_sha256,
        records=staged.records,
        skipped=staged.skipped,
    )


def verify_packs(config: PackConfig) -> None:
    """Check an output folder written by build_packs against itself."""

    required = (
        config.tar_path,
        config.zip_path,
        config.akkoma_files_path,
        config.akkoma_manifest_path,
    )
    for path in required:
        if not path.is_file():
            raise FileNotFoundError(f"missing required file: {path}")

    manifest = read_json_object(config.akkoma_manifest_path)
    pack = manifest.get(PACK_NAME)
    if not isinstance(pack, dict):
        raise ValueError(f"manifest has no {PACK_NAME!r} pack")
    if pack.get("src_sha256") != sha256_file(config.zip_path):
        raise ValueError("manifest src_sha256 does not match the Misskey zip")

    zip_names = set(zip_member_names(config.zip_path))
    if MISSKEY_META not in zip_names:
        raise ValueError(f"Misskey zip is missing {MISSKEY_META}")

    meta = json.loads(read_zip_member(config.zip_path, MISSKEY_META).decode("utf-8"))
    file_names = [e["fileName"] for e in meta.get("emojis", [])]
    if file_names != sorted(file_names, key=collation_key):
        raise ValueError(f"{MISSKEY_META} emojis are not sorted by fileName")
    missing = sorted(set(file_names) - zip_names)
    if missing:
        raise ValueError(f"Misskey zip is missing emoji files: {', '.join(missing)}")

    mapping = read_json_object(config.akkoma_files_path)
    names = list(mapping.keys())
    if names != sorted(names, key=collation_key):
        raise ValueError("Akkoma file mapping is not sorted by name")
    missing = sorted(set(mapping.values()) - zip_names)
    if missing:
        raise ValueError(f"Misskey zip is missing mapped files: {', '.join(missing)}")

    tar_names = {name.removeprefix("./") for name in tar_member_names(config.tar_path)}
    missing = sorted(set(mapping.values()) - tar_names)
    if missing:
        raise ValueError(f"Mastodon tar is missing mapped files: {', '.join(missing)}")


__all__ = ["PackResult", "build_packs", "verify_packs"]
