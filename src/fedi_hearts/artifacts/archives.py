"""Reproducible tar.gz and zip writers for a staging folder.

- Walk all files under root, sorted lexicographically
- Force stable member metadata (timestamp/owner/permissions)
- Raise ArchiveError on any failure instead of leaving a partial archive behind
"""

from __future__ import annotations

import gzip
import stat
import tarfile
import zipfile
from pathlib import Path

_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)  # earliest valid ZIP timestamp
_TAR_MTIME = 315532800  # 1980-01-01 UTC, same instant as the zip epoch


class ArchiveError(RuntimeError):
    """An archive could not be written."""


def _iter_files(root: Path) -> list[Path]:
    files = [p for p in root.rglob("*") if p.is_file()]
    files.sort(key=lambda p: p.relative_to(root).as_posix())
    return files


def _check_out_path(root: Path, out: Path) -> None:
    if out.is_relative_to(root):
        raise ValueError(f"archive output {out} must not be inside {root}")


def _tar_info(arcname: str, *, mode: int) -> tarfile.TarInfo:
    info = tarfile.TarInfo(arcname)
    info.mtime = _TAR_MTIME
    info.mode = mode
    info.uid = 0
    info.gid = 0
    info.uname = ""
    info.gname = ""
    return info


def write_tar(*, root: Path, out: Path) -> Path:
    """Write a gzip tar of everything under root.

    Members are stored as ``./`` and ``./<relative path>``, the layout
    ``tar -C root .`` produces and Mastodon's emoji importer accepts.
    """

    root = root.resolve()
    out = out.resolve()
    _check_out_path(root, out)
    out.parent.mkdir(parents=True, exist_ok=True)

    try:
        with out.open("wb") as raw, gzip.GzipFile(
            filename="", mode="wb", fileobj=raw, mtime=0
        ) as gz, tarfile.open(fileobj=gz, mode="w", format=tarfile.GNU_FORMAT) as tar:
            dir_info = _tar_info("./", mode=0o755)
            dir_info.type = tarfile.DIRTYPE
            tar.addfile(dir_info)

            for src in _iter_files(root):
                info = _tar_info("./" + src.relative_to(root).as_posix(), mode=0o644)
                info.size = src.stat().st_size
                with src.open("rb") as f:
                    tar.addfile(info, f)
    except (OSError, tarfile.TarError) as exc:
        out.unlink(missing_ok=True)
        raise ArchiveError(f"failed to write tar {out}: {exc}") from exc

    return out


def write_zip(*, root: Path, out: Path, flatten: bool = True) -> Path:
    """Write a deflate zip of everything under root.

    With ``flatten`` members are stored by base name only (``zip -j``), so a
    base name that occurs twice is rejected.
    """

    root = root.resolve()
    out = out.resolve()
    _check_out_path(root, out)
    out.parent.mkdir(parents=True, exist_ok=True)

    members: list[tuple[str, Path]] = []
    seen: set[str] = set()
    for src in _iter_files(root):
        arcname = src.name if flatten else src.relative_to(root).as_posix()
        if arcname in seen:
            raise ValueError(f"duplicate zip member name: {arcname}")
        seen.add(arcname)
        members.append((arcname, src))

    try:
        # Deflate with a fixed compresslevel for reproducible bytes.
        with zipfile.ZipFile(
            out,
            mode="w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=9,
            strict_timestamps=True,
        ) as zf:
            for arcname, src in members:
                zi = zipfile.ZipInfo(filename=arcname, date_time=_ZIP_EPOCH)
                zi.create_system = 3  # Unix
                zi.compress_type = zipfile.ZIP_DEFLATED
                zi.external_attr = (stat.S_IFREG | 0o644) << 16
                zf.writestr(zi, src.read_bytes(), compresslevel=9)
    except (OSError, zipfile.BadZipFile) as exc:
        out.unlink(missing_ok=True)
        raise ArchiveError(f"failed to write zip {out}: {exc}") from exc

    return out


def tar_member_names(path: Path) -> list[str]:
    with tarfile.open(path, mode="r:gz") as tar:
        return tar.getnames()


def zip_member_names(path: Path) -> list[str]:
    with zipfile.ZipFile(path) as zf:
        return zf.namelist()


def read_zip_member(path: Path, name: str) -> bytes:
    with zipfile.ZipFile(path) as zf:
        return zf.read(name)


__all__ = [
    "ArchiveError",
    "read_zip_member",
    "tar_member_names",
    "write_tar",
    "write_zip",
    "zip_member_names",
]
