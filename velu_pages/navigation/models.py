"""Typed dataclasses describing the canonical navigation tree."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(slots=True, frozen=True)
class Separator:
    """A labelled divider inside a page list."""

    label: str

    def to_dict(self) -> dict[str, typ.Any]:
        return {"separator": self.label}


@dc.dataclass(slots=True, frozen=True)
class Link:
    """An external link rendered inline within a page list."""

    href: str
    label: str
    icon: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        out: dict[str, typ.Any] = {"href": self.href, "label": self.label}
        if self.icon:
            out["icon"] = self.icon
        return out


@dc.dataclass(slots=True)
class CanonicalGroup:
    """A labelled container of entries; every nested container folds into this."""

    group: str
    slug: str
    pages: list[Entry] = dc.field(default_factory=list)
    icon: str | None = None
    icon_type: str | None = None
    tag: str | None = None
    description: str | None = None
    expanded: bool | None = None
    hidden: bool | None = None

    @property
    def is_expanded(self) -> bool:
        return self.expanded is not False

    @property
    def is_hidden(self) -> bool:
        return self.hidden is True

    def to_dict(self) -> dict[str, typ.Any]:
        out: dict[str, typ.Any] = {
            "group": self.group,
            "slug": self.slug,
            "pages": [entry_to_dict(entry) for entry in self.pages],
        }
        optional = {
            "icon": self.icon,
            "iconType": self.icon_type,
            "tag": self.tag,
            "expanded": self.expanded,
            "description": self.description,
            "hidden": self.hidden,
        }
        out.update({key: value for key, value in optional.items() if value is not None})
        return out


@dc.dataclass(slots=True)
class CanonicalTab:
    """A top-level navigation tab.

    A tab carrying ``href`` is a terminal link: it never has groups or pages.
    """

    tab: str
    slug: str
    icon: str | None = None
    icon_type: str | None = None
    href: str | None = None
    groups: list[CanonicalGroup] = dc.field(default_factory=list)
    pages: list[Entry] = dc.field(default_factory=list)

    @property
    def is_link(self) -> bool:
        return bool(self.href)

    def to_dict(self) -> dict[str, typ.Any]:
        out: dict[str, typ.Any] = {"tab": self.tab, "slug": self.slug}
        if self.icon is not None:
            out["icon"] = self.icon
        if self.icon_type is not None:
            out["iconType"] = self.icon_type
        if self.href:
            out["href"] = self.href
            return out
        if self.groups:
            out["groups"] = [group.to_dict() for group in self.groups]
        if self.pages:
            out["pages"] = [entry_to_dict(entry) for entry in self.pages]
        return out


Entry = str | CanonicalGroup | Separator | Link


def entry_to_dict(entry: Entry) -> str | dict[str, typ.Any]:
    """Return the JSON-shaped form of a single entry."""
    if isinstance(entry, str):
        return entry
    return entry.to_dict()


@dc.dataclass(slots=True)
class LanguageNavigation:
    """Independently normalized navigation for one language."""

    language: str
    tabs: list[CanonicalTab]
    raw: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class NormalizedNavigation:
    """Canonical navigation plus the raw axes exposed for switcher UIs."""

    tabs: list[CanonicalTab] = dc.field(default_factory=list)
    languages: list[LanguageNavigation] = dc.field(default_factory=list)
    products: list[typ.Any] = dc.field(default_factory=list)
    versions: list[typ.Any] = dc.field(default_factory=list)
    global_anchors: list[typ.Any] = dc.field(default_factory=list)
    global_tabs: list[typ.Any] = dc.field(default_factory=list)

    @property
    def external_tabs(self) -> list[CanonicalTab]:
        """Link-only tabs, shown in the header but never generating content."""
        return [tab for tab in self.tabs if tab.is_link]


__all__ = [
    "CanonicalGroup",
    "CanonicalTab",
    "Entry",
    "LanguageNavigation",
    "Link",
    "NormalizedNavigation",
    "Separator",
    "entry_to_dict",
]
