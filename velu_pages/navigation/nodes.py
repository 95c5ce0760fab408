"""Decode raw navigation JSON into tagged nodes once, at the boundary.

User documents mix container shapes freely, so each raw object is classified
a single time into a :class:`NavNode` carrying its :class:`NodeKind`. The
normalizer then matches on the closed set of kinds instead of re-probing
dictionary keys. Objects that match no accepted kind are skipped silently.

When an object carries more than one discriminant, the first kind in
:data:`KIND_PRIORITY` that the surrounding collection accepts wins.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ

CONTENT_KEYS = ("menu", "groups", "pages", "anchors", "dropdowns", "tabs")
_SIMPLE_CONTENT_KEYS = ("pages", "groups", "menu", "tabs", "dropdowns")


class NodeKind(enum.Enum):
    """Closed set of raw navigation shapes."""

    TAB = "tab"
    DROPDOWN = "dropdown"
    ANCHOR = "anchor"
    GROUP = "group"
    MENU_ITEM = "item"
    SEPARATOR = "separator"
    LINK = "link"


KIND_PRIORITY: tuple[NodeKind, ...] = (
    NodeKind.TAB,
    NodeKind.DROPDOWN,
    NodeKind.ANCHOR,
    NodeKind.GROUP,
    NodeKind.MENU_ITEM,
    NodeKind.SEPARATOR,
    NodeKind.LINK,
)


@dc.dataclass(slots=True, frozen=True)
class NavNode:
    """A raw navigation object tagged with the shape it was decoded as.

    Attributes
    ----------
    kind : NodeKind
        The winning discriminant.
    label : str
        Display label read from the discriminant field (``label`` for links).
    raw : Mapping[str, Any]
        The untouched source object, used for optional fields and children.
    """

    kind: NodeKind
    label: str
    raw: cabc.Mapping[str, typ.Any]

    def text(self, key: str) -> str | None:
        """Return ``raw[key]`` when it is a string, else ``None``."""
        return string_field(self.raw, key)

    def flag(self, key: str) -> bool | None:
        """Return ``raw[key]`` when it is a boolean, else ``None``."""
        value = self.raw.get(key)
        return value if isinstance(value, bool) else None


def string_field(raw: cabc.Mapping[str, typ.Any], key: str) -> str | None:
    value = raw.get(key)
    return value if isinstance(value, str) else None


def nonempty_string_field(raw: cabc.Mapping[str, typ.Any], key: str) -> str | None:
    value = string_field(raw, key)
    return value or None


def list_field(raw: cabc.Mapping[str, typ.Any], key: str) -> list[typ.Any]:
    """Return ``raw[key]`` when it is a list, else an empty list."""
    value = raw.get(key)
    return value if isinstance(value, list) else []


def _matches(value: cabc.Mapping[str, typ.Any], kind: NodeKind) -> bool:
    if kind is NodeKind.LINK:
        return isinstance(value.get("href"), str) and isinstance(
            value.get("label"), str
        )
    return isinstance(value.get(kind.value), str)


def classify(value: object) -> NodeKind | None:
    """Return the highest-priority kind ``value`` matches, if any."""
    if not isinstance(value, cabc.Mapping):
        return None
    for kind in KIND_PRIORITY:
        if _matches(value, kind):
            return kind
    return None


def decode_node(
    value: object, accepted: cabc.Collection[NodeKind] = KIND_PRIORITY
) -> NavNode | None:
    """Decode ``value`` as the first accepted kind in priority order.

    Parameters
    ----------
    value : object
        Raw JSON value taken from a navigation collection.
    accepted : Collection[NodeKind]
        Kinds the surrounding collection can hold.

    Returns
    -------
    NavNode or None
        ``None`` when ``value`` is not an object or matches none of the
        accepted kinds.
    """
    if not isinstance(value, cabc.Mapping):
        return None
    for kind in KIND_PRIORITY:
        if kind in accepted and _matches(value, kind):
            field = "label" if kind is NodeKind.LINK else kind.value
            return NavNode(kind=kind, label=value[field], raw=value)
    return None


def has_content(raw: cabc.Mapping[str, typ.Any]) -> bool:
    """Return True when ``raw`` holds navigable children.

    Nested anchors only count when at least one of them is anchor-shaped and
    carries children of its own.
    """
    if any(list_field(raw, key) for key in _SIMPLE_CONTENT_KEYS):
        return True
    for anchor in list_field(raw, "anchors"):
        if decode_node(anchor, (NodeKind.ANCHOR,)) is None:
            continue
        if any(list_field(anchor, key) for key in (*_SIMPLE_CONTENT_KEYS, "anchors")):
            return True
    return False


def content_of(raw: cabc.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Return just the child collections of ``raw``."""
    return {key: raw[key] for key in CONTENT_KEYS if key in raw}


__all__ = [
    "CONTENT_KEYS",
    "KIND_PRIORITY",
    "NavNode",
    "NodeKind",
    "classify",
    "content_of",
    "decode_node",
    "has_content",
    "list_field",
    "nonempty_string_field",
    "string_field",
]
