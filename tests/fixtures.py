from __future__ import annotations

from pathlib import Path

EXPORTED_AT = "2026-01-25T00:00:00.000Z"

# Image files referenced by HEARTS_LIST, relative to the hearts folder.
HEART_FILES: dict[str, bytes] = {
    "Gay Pride.gif": b"GIF89a-gay-pride",
    "MLM.png": b"\x89PNG-mlm",
    "Non-Binary (not made by me).gif": b"GIF89a-enby",
    "Trans.gif": b"GIF89a-trans",
}

HEARTS_LIST = """\
# Celeste hearts, curated by hand
../Hearts/Gay Pride.gif

../Hearts/MLM.png
../Hearts/Non-Binary (not made by me).gif
../Hearts/Trans.gif | Trans-Rights Pride
../Hearts/Missing.gif
"""


def make_hearts_tree(base: Path, list_text: str = HEARTS_LIST) -> Path:
    """Lay out <base>/Hearts/* and <base>/Convert Scripts/fedi_hearts_list.txt.

    Returns the "Convert Scripts" folder, which is the source dir of a build.
    """

    hearts = base / "Hearts"
    hearts.mkdir(parents=True)
    for name, data in HEART_FILES.items():
        (hearts / name).write_bytes(data)

    source_dir = base / "Convert Scripts"
    source_dir.mkdir()
    (source_dir / "fedi_hearts_list.txt").write_text(list_text, encoding="utf-8")
    return source_dir
