from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json_object(path: str | Path) -> dict[str, Any]:
    """Read a UTF-8 JSON file whose top-level value must be an object."""

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"expected JSON object in {path}")
    return data


def write_json(
    path: str | Path,
    data: Any,
    *,
    indent: int = 2,
    sort_keys: bool = False,
) -> Path:
    """Write pretty-printed JSON (UTF-8, LF newlines, trailing newline).

    Key order is preserved by default: the emoji formats document their fields
    in a fixed order, and callers sort mappings explicitly where required.
    """

    p = Path(path)
    p.write_text(
        json.dumps(data, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n",
        encoding="utf-8",
        newline="\n",
    )
    return p
