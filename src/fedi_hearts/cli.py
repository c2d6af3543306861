from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fedi_hearts.artifacts.archives import ArchiveError
from fedi_hearts.artifacts.hash_utils import sha256_prefix
from fedi_hearts.config import DEFAULT_HOST, LIST_FILENAME, OUTPUT_FOLDER_NAME, PackConfig
from fedi_hearts.pipeline import build_packs, verify_packs


def _setup_logging(verbose: bool, log_file: Path | None) -> None:
    """Configure logging to stderr and, optionally, a file."""

    root = logging.getLogger("fedi_hearts")
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
    )
    root.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(file_handler)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fedi-hearts-packs",
        description=(
            "Package the hearts emoji into Mastodon (tar.gz), Misskey (zip + meta.json) "
            "and Akkoma/Pleroma (mapping + manifest) packs."
        ),
    )
    p.add_argument(
        "--source-dir",
        type=Path,
        default=Path.cwd(),
        help="Folder the list entries are relative to (default: current directory)",
    )
    p.add_argument(
        "--list",
        dest="list_path",
        type=Path,
        default=None,
        help=f"Hearts list file (default: <source-dir>/{LIST_FILENAME})",
    )
    p.add_argument(
        "--out",
        type=Path,
        default=None,
        help=f"Output folder, emptied before the build (default: <source-dir>/../{OUTPUT_FOLDER_NAME})",
    )
    p.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Host written into Misskey meta.json (default: {DEFAULT_HOST})",
    )
    p.add_argument(
        "--exported-at",
        default=None,
        help="Fixed exportedAt timestamp for reproducible builds (default: now, UTC)",
    )
    p.add_argument(
        "--verify",
        action="store_true",
        help="Verify an existing output folder (no build)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug progress")
    p.add_argument("--log-file", type=Path, default=None, help="Also write a debug log here")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose, args.log_file)
    logger = logging.getLogger("fedi_hearts.cli")

    config = PackConfig.for_source_dir(
        args.source_dir,
        list_path=args.list_path,
        out_dir=args.out,
        host=args.host,
    )

    if args.verify:
        try:
            verify_packs(config)
        except (FileNotFoundError, ValueError) as exc:
            print(f"VERIFY FAILED: {exc}")
            return 1
        print(f"VERIFY OK: {config.out_dir}")
        return 0

    if not config.list_path.is_file():
        print(f"ERROR: hearts list not found: {config.list_path}", file=sys.stderr)
        return 2

    try:
        result = build_packs(config, exported_at=args.exported_at)
    except ArchiveError as exc:
        logger.error(f"{exc.__class__.__name__}: {exc}")
        return 1

    print(
        f"BUILD OK: {len(result.records)} emojis, {len(result.skipped)} skipped, "
        f"sha256={sha256_prefix(result.zip_sha256)}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
