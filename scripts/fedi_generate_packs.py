#!/usr/bin/env python3
"""Build the hearts packs from the folder this script lives in.

Drop this file next to ``fedi_hearts_list.txt``; the packs land in
``../Fediverse Packs``. Any flag of ``fedi-hearts-packs`` can still be passed.
"""

from __future__ import annotations

import sys
from pathlib import Path

from fedi_hearts.cli import main as cli_main

SCRIPT_DIR = Path(__file__).resolve().parent


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not any(a == "--source-dir" or a.startswith("--source-dir=") for a in args):
        args = ["--source-dir", str(SCRIPT_DIR), *args]
    return cli_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
