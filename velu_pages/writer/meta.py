"""Persist folder metadata and render partition landing pages."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
from jinja2 import Environment, FileSystemLoader, select_autoescape

from velu_pages._constants import META_FILENAME

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from velu_pages.artifacts import MetaFile

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def encode_json(data: cabc.Mapping[str, typ.Any]) -> bytes:
    """Encode ``data`` as two-space-indented JSON with a trailing newline."""
    return msgspec_json.format(msgspec_json.encode(data), indent=2) + b"\n"


def write_meta_files(
    content_dir: Path, meta_files: cabc.Iterable[MetaFile]
) -> list[Path]:
    """Write one ``meta.json`` per meta file under ``content_dir``.

    Returns
    -------
    list[Path]
        Written paths, in input order.
    """
    written: list[Path] = []
    for meta in meta_files:
        folder = content_dir / meta.directory if meta.directory else content_dir
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / META_FILENAME
        path.write_bytes(encode_json(meta.data))
        written.append(path)
    return written


class LandingPageRenderer:
    """Render the ``index.mdx`` landing page that links to the first page."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``index.mdx.jinja``. Defaults to the
            ``velu_pages/templates`` directory when ``None``.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("index.mdx.jinja")

    def render(self, href: str, *, title: str = "Overview") -> str:
        return self.template.render(href=href, title=title)

    def write(self, path: Path, href: str) -> Path:
        """Render the landing page for ``href`` into ``path``."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(href), encoding="utf-8")
        return path


__all__ = ["LandingPageRenderer", "encode_json", "write_meta_files"]
