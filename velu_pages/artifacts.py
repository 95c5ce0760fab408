"""Walk canonical tabs into page mappings, folder metadata and a landing page.

:func:`build_artifacts` is the single pass over the canonical tree. For every
page reference it records where the page lands under the content root; for
every tab and group folder it records a ``meta.json`` payload listing the
folder's children in order; and it remembers the first page met in pre-order
(tab order, then group order, then page order) as the landing target.

The walk is a pure function of its input, so repeated rebuilds produce
byte-identical output.

Example
-------
>>> from velu_pages.navigation import normalize_navigation_tabs
>>> tabs = normalize_navigation_tabs(
...     {"tabs": [{"tab": "Guides", "groups": [{"group": "Start", "pages": ["a/intro"]}]}]}
... )
>>> artifacts = build_artifacts(tabs)
>>> artifacts.first_page
'guides/start/intro'
>>> [meta.directory for meta in artifacts.meta_files]
['guides/start', 'guides', '']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import DEFAULT_FIRST_PAGE
from .navigation.models import CanonicalGroup, CanonicalTab, Entry, Link, Separator

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True, frozen=True)
class PageMapping:
    """Source page reference and its destination path (both extension-less)."""

    src: str
    dest: str


@dc.dataclass(slots=True)
class MetaFile:
    """Ordering and display data for one content folder.

    Attributes
    ----------
    directory : str
        Folder path under the content root; ``""`` is the root itself.
    data : dict[str, Any]
        The ``meta.json`` payload (``title``, ``pages``, ``root``, ...).
    """

    directory: str
    data: dict[str, typ.Any]

    def rerooted(self, prefix: str) -> MetaFile:
        """Return a copy of this meta moved under ``prefix``."""
        if not prefix:
            return MetaFile(self.directory, dict(self.data))
        directory = f"{prefix}/{self.directory}" if self.directory else prefix
        return MetaFile(directory, dict(self.data))


@dc.dataclass(slots=True)
class BuildArtifacts:
    """Everything the writers need to materialise one content partition."""

    page_map: list[PageMapping]
    meta_files: list[MetaFile]
    first_page: str


def page_basename(ref: str) -> str:
    """Return the last path segment of a page reference."""
    return ref.split("/")[-1]


def link_entry(link: Link) -> str:
    if link.icon:
        return f"[{link.icon}][{link.label}]({link.href})"
    return f"[{link.label}]({link.href})"


def meta_entry(entry: Entry) -> str:
    """Encode one entry as it appears in a ``meta.json`` ``pages`` list."""
    match entry:
        case str():
            return entry
        case CanonicalGroup():
            return f"!{entry.slug}" if entry.is_hidden else entry.slug
        case Separator():
            return f"---{entry.label}---"
        case Link():
            return link_entry(entry)
    return str(entry)  # pragma: no cover - closed union


def _display_fields(icon: str | None, icon_type: str | None) -> dict[str, str]:
    fields: dict[str, str] = {}
    if icon:
        fields["icon"] = icon
    if icon_type:
        fields["iconType"] = icon_type
    return fields


class _ArtifactWalk:
    """Mutable accumulator for a single :func:`build_artifacts` pass."""

    def __init__(self) -> None:
        self.page_map: list[PageMapping] = []
        self.meta_files: list[MetaFile] = []
        self.first_page: str | None = None

    def add_page(self, ref: str, parent_dir: str) -> str:
        basename = page_basename(ref)
        dest = f"{parent_dir}/{basename}"
        self.page_map.append(PageMapping(src=ref, dest=dest))
        if self.first_page is None:
            self.first_page = dest
        return basename

    def add_group(self, group: CanonicalGroup, parent_dir: str) -> None:
        group_dir = f"{parent_dir}/{group.slug}"
        pages: list[str] = []
        for entry in group.pages:
            match entry:
                case str():
                    pages.append(self.add_page(entry, group_dir))
                case CanonicalGroup():
                    self.add_group(entry, group_dir)
                    pages.append(meta_entry(entry))
                case _:
                    pages.append(meta_entry(entry))

        data: dict[str, typ.Any] = {
            "title": group.group,
            "pages": pages,
            "defaultOpen": group.is_expanded,
        }
        data.update(_display_fields(group.icon, group.icon_type))
        if group.description:
            data["description"] = group.description
        self.meta_files.append(MetaFile(group_dir, data))

    def add_tab(self, tab: CanonicalTab) -> None:
        pages: list[str] = []
        for group in tab.groups:
            self.add_group(group, tab.slug)
            pages.append(meta_entry(group))
        for entry in tab.pages:
            if isinstance(entry, str):
                pages.append(self.add_page(entry, tab.slug))
            else:
                pages.append(meta_entry(entry))

        data: dict[str, typ.Any] = {"title": tab.tab, "root": True, "pages": pages}
        data.update(_display_fields(tab.icon, tab.icon_type))
        self.meta_files.append(MetaFile(tab.slug, data))


def build_artifacts(tabs: cabc.Sequence[CanonicalTab]) -> BuildArtifacts:
    """Compute page mappings, folder metas and the first page for ``tabs``.

    Parameters
    ----------
    tabs : Sequence[CanonicalTab]
        Canonical tabs of one partition, already slugged in their own scope.

    Returns
    -------
    BuildArtifacts
        ``page_map`` in pre-order, one meta per group and content tab followed
        by the root meta (only when at least one content tab exists), and the
        first page destination or ``quickstart`` when there are no pages.
    """
    walk = _ArtifactWalk()
    root_tabs = [tab for tab in tabs if not tab.is_link]
    for tab in root_tabs:
        walk.add_tab(tab)
    if root_tabs:
        walk.meta_files.append(
            MetaFile("", {"pages": [tab.slug for tab in root_tabs]})
        )
    return BuildArtifacts(
        page_map=walk.page_map,
        meta_files=walk.meta_files,
        first_page=walk.first_page or DEFAULT_FIRST_PAGE,
    )


__all__ = [
    "BuildArtifacts",
    "MetaFile",
    "PageMapping",
    "build_artifacts",
    "link_entry",
    "meta_entry",
    "page_basename",
]
