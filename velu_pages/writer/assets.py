"""Mirror static assets (images, media, downloads) into the public folder."""

from __future__ import annotations

import shutil
import typing as typ

from velu_pages._constants import STATIC_EXTENSIONS

if typ.TYPE_CHECKING:
    from pathlib import Path

_SKIPPED_DIRS = frozenset({"node_modules"})


def is_static_asset(path: Path) -> bool:
    return path.suffix.lower() in STATIC_EXTENSIONS


def copy_static_assets(
    docs_dir: Path, public_dir: Path, *, exclude: tuple[Path, ...] = ()
) -> list[Path]:
    """Copy every static asset below ``docs_dir`` into ``public_dir``.

    Dot-prefixed entries, ``node_modules`` and any directory listed in
    ``exclude`` (typically the build output) are skipped. Relative paths are
    preserved.
    """
    public_dir.mkdir(parents=True, exist_ok=True)
    excluded = {path.resolve() for path in exclude}
    copied: list[Path] = []
    pending = [docs_dir]
    while pending:
        folder = pending.pop()
        for entry in sorted(folder.iterdir()):
            if entry.name.startswith(".") or entry.name in _SKIPPED_DIRS:
                continue
            if entry.is_dir():
                if entry.resolve() not in excluded:
                    pending.append(entry)
                continue
            if not is_static_asset(entry):
                continue
            destination = public_dir / entry.relative_to(docs_dir)
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(entry, destination)
            copied.append(destination)
    return copied


__all__ = ["copy_static_assets", "is_static_asset"]
