r"""Copy Markdown/MDX page sources into the content tree with front matter.

The downstream framework needs a ``title`` in every page's front matter. When
a source page has none, the first level-one heading becomes the title (and is
removed from the body); failing that, the title is derived from the page's
file name.

Example
-------
>>> print(render_page("# Getting started\n\nHello.\n", "guides/start"), end="")
---
title: "Getting started"
---
<BLANKLINE>
Hello.
"""

from __future__ import annotations

import io
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.scalarstring import DoubleQuotedScalarString

from velu_pages._constants import PAGE_SUFFIXES

if typ.TYPE_CHECKING:
    from pathlib import Path

TITLE_HEADING_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_WORD_START = re.compile(r"\b\w")


def _build_front_matter_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def page_label_from_slug(ref: str) -> str:
    """Return a human title for a page reference (``getting_started`` -> ``Getting Started``)."""
    last = ref.split("/")[-1] or ref
    spaced = re.sub(r"[-_]", " ", last)
    return _WORD_START.sub(lambda match: match.group(0).upper(), spaced)


def front_matter(title: str) -> str:
    """Serialise a ``title`` front-matter block including its fences."""
    stream = io.StringIO()
    _build_front_matter_yaml().dump({"title": DoubleQuotedScalarString(title)}, stream)
    return f"---\n{stream.getvalue()}---\n"


def render_page(text: str, ref: str) -> str:
    """Return ``text`` with a title front matter block, adding one if absent.

    Parameters
    ----------
    text : str
        Raw page source.
    ref : str
        Page reference, used to derive a title when no heading exists.

    Returns
    -------
    str
        The page unchanged when it already starts with ``---``; otherwise the
        page prefixed with a front matter block.
    """
    if text.startswith("---"):
        return text
    match = TITLE_HEADING_PATTERN.search(text)
    if match:
        title = match.group(1).strip()
        body = (text[: match.start()] + text[match.end() :]).lstrip()
    else:
        title = page_label_from_slug(ref)
        body = text
    return f"{front_matter(title)}\n{body}"


def locate_page_source(docs_dir: Path, ref: str) -> Path | None:
    """Return the ``.mdx`` or ``.md`` source for ``ref``, preferring ``.mdx``."""
    for suffix in PAGE_SUFFIXES:
        candidate = docs_dir / f"{ref}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def write_page(source: Path, destination: Path, ref: str) -> Path:
    """Render ``source`` into ``destination``, creating parent folders."""
    content = render_page(source.read_text(encoding="utf-8"), ref)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(content, encoding="utf-8")
    return destination


__all__ = [
    "TITLE_HEADING_PATTERN",
    "front_matter",
    "locate_page_source",
    "page_label_from_slug",
    "render_page",
    "write_page",
]
