"""Normalize multi-shape navigation documents into canonical tabs.

Authors may describe navigation with any mix of tabs, dropdowns, products,
versions, languages, anchors, groups, menus and bare pages, nested to any
depth. This module rewrites all of it into one shape: a list of
:class:`~velu_pages.navigation.models.CanonicalTab`, each holding groups and
pages. Below the top level every labelled container (group, menu item,
dropdown, anchor with content, nested tab) becomes a
:class:`~velu_pages.navigation.models.CanonicalGroup`.

Malformed nodes are skipped rather than reported; the normalizer never raises
for shape problems.

Example
-------
>>> from velu_pages.navigation import normalize_navigation_tabs
>>> tabs = normalize_navigation_tabs({"pages": ["intro", "setup"]})
>>> tabs[0].to_dict()
{'tab': 'Documentation', 'slug': 'documentation', 'pages': ['intro', 'setup']}
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from velu_pages._constants import FALLBACK_TAB_LABEL, FALLBACK_TAB_SLUG
from velu_pages.slugs import SlugScope, slugify

from .models import (
    CanonicalGroup,
    CanonicalTab,
    Entry,
    LanguageNavigation,
    Link,
    NormalizedNavigation,
    Separator,
)
from .nodes import (
    NavNode,
    NodeKind,
    content_of,
    decode_node,
    has_content,
    list_field,
    nonempty_string_field,
    string_field,
)

_PAGE_KINDS = (NodeKind.GROUP, NodeKind.SEPARATOR, NodeKind.LINK)
_SLUG_FALLBACKS = {
    NodeKind.GROUP: "group",
    NodeKind.MENU_ITEM: "menu",
    NodeKind.TAB: "tab",
    NodeKind.DROPDOWN: "tab",
    NodeKind.ANCHOR: "anchor",
}


def collect_entries(
    container: cabc.Mapping[str, typ.Any], scope: SlugScope
) -> list[Entry]:
    """Gather the children of ``container`` into one ordered entry list.

    Collections are visited in a fixed order: menu, groups, pages, anchors,
    dropdowns, tabs. Every group-like child claims its slug from ``scope``.
    """
    entries: list[Entry] = []

    for raw in list_field(container, "menu"):
        if node := decode_node(raw, (NodeKind.MENU_ITEM,)):
            entries.append(normalize_group(node, scope))

    for raw in list_field(container, "groups"):
        if node := decode_node(raw, (NodeKind.GROUP,)):
            entries.append(normalize_group(node, scope))

    for raw in list_field(container, "pages"):
        if isinstance(raw, str):
            entries.append(raw)
            continue
        node = decode_node(raw, _PAGE_KINDS)
        if node is None:
            continue
        match node.kind:
            case NodeKind.SEPARATOR:
                entries.append(Separator(node.label))
            case NodeKind.LINK:
                entries.append(
                    Link(
                        href=node.raw["href"],
                        label=node.label,
                        icon=nonempty_string_field(node.raw, "icon"),
                    )
                )
            case _:
                entries.append(normalize_group(node, scope))

    for raw in list_field(container, "anchors"):
        node = decode_node(raw, (NodeKind.ANCHOR,))
        if node is None:
            continue
        href = nonempty_string_field(node.raw, "href")
        if href and not has_content(node.raw):
            entries.append(Link(href=href, label=node.label, icon=node.text("icon")))
        else:
            entries.append(normalize_group(node, scope))

    for raw in list_field(container, "dropdowns"):
        if node := decode_node(raw, (NodeKind.DROPDOWN,)):
            entries.append(normalize_group(node, scope))

    for raw in list_field(container, "tabs"):
        if node := decode_node(raw, (NodeKind.TAB,)):
            entries.append(normalize_group(node, scope))

    return entries


def normalize_group(node: NavNode, scope: SlugScope) -> CanonicalGroup:
    """Fold any labelled container node into a :class:`CanonicalGroup`.

    Parameters
    ----------
    node : NavNode
        A group, menu item, dropdown, anchor or tab node.
    scope : SlugScope
        Slug namespace shared with the node's siblings.

    Returns
    -------
    CanonicalGroup
        The folded group; its own children were slugged in a fresh scope.
    """
    slug_source = node.text("slug")
    if slug_source is None:
        slug_source = node.label
    slug = scope.claim(slugify(slug_source, _SLUG_FALLBACKS[node.kind]))
    pages = collect_entries(node.raw, scope.child())
    group = CanonicalGroup(
        group=node.label, slug=slug, pages=pages, icon=node.text("icon")
    )

    match node.kind:
        case NodeKind.GROUP:
            group.icon_type = node.text("iconType")
            group.tag = node.text("tag")
            group.expanded = node.flag("expanded")
            group.description = node.text("description")
            group.hidden = node.flag("hidden")
        case NodeKind.TAB | NodeKind.DROPDOWN:
            href = nonempty_string_field(node.raw, "href")
            if href and not has_content(node.raw):
                group.pages.append(Link(href=href, label=node.label, icon=group.icon))
        case _:
            pass
    return group


def normalize_tab(node: NavNode, scope: SlugScope, slug_prefix: str = "") -> CanonicalTab:
    """Normalize a tab-like node (tab or dropdown) into a :class:`CanonicalTab`.

    The slug is ``prefix/part`` when ``slug_prefix`` is given and is claimed
    from the tab-level ``scope``. A node with only an ``href`` becomes a
    terminal link tab.
    """
    slug_source = node.text("slug")
    if slug_source is None:
        slug_source = node.label
    part = slugify(slug_source, "tab")
    slug = scope.claim(f"{slug_prefix}/{part}" if slug_prefix else part)
    tab = CanonicalTab(
        tab=node.label,
        slug=slug,
        icon=node.text("icon"),
        icon_type=node.text("iconType"),
    )

    href = nonempty_string_field(node.raw, "href")
    if href and not has_content(node.raw):
        tab.href = href
        return tab

    for entry in collect_entries(node.raw, scope.child()):
        if isinstance(entry, CanonicalGroup):
            tab.groups.append(entry)
        else:
            tab.pages.append(entry)
    return tab


def _normalize_tab_list(
    items: list[typ.Any], scope: SlugScope, slug_prefix: str = ""
) -> list[CanonicalTab]:
    return [
        normalize_tab(node, scope, slug_prefix)
        for raw in items
        if (node := decode_node(raw, (NodeKind.TAB,)))
    ]


def _normalize_dropdown_list(
    items: list[typ.Any], scope: SlugScope, slug_prefix: str = ""
) -> list[CanonicalTab]:
    return [
        normalize_tab(node, scope, slug_prefix)
        for raw in items
        if (node := decode_node(raw, (NodeKind.DROPDOWN,)))
    ]


def _synthetic_tab(
    label: str,
    slug: str,
    source: cabc.Mapping[str, typ.Any] | None = None,
    *,
    icon: str | None = None,
    href: str | None = None,
) -> NavNode:
    """Build a tab node wrapping ``source``'s children under a derived label."""
    raw: dict[str, typ.Any] = {"tab": label, "slug": slug}
    if icon is not None:
        raw["icon"] = icon
    if href is not None:
        raw["href"] = href
    if source is not None:
        raw.update(content_of(source))
    return NavNode(kind=NodeKind.TAB, label=label, raw=raw)


def _normalize_axis_entry(
    entry: cabc.Mapping[str, typ.Any],
    field: str,
    index: int,
    scope: SlugScope,
    *,
    keep_icon: bool,
) -> list[CanonicalTab]:
    """Normalize one product or version into tabs namespaced by its slug."""
    name = string_field(entry, field)
    if name is None:
        name = f"{field.title()} {index}"
    prefix = slugify(name, f"{field}-{index}")
    icon = string_field(entry, "icon") if keep_icon else None

    tabs = _normalize_tab_list(list_field(entry, "tabs"), scope, prefix)
    tabs.extend(_normalize_dropdown_list(list_field(entry, "dropdowns"), scope, prefix))
    if isinstance(entry.get("tabs"), list) or isinstance(entry.get("dropdowns"), list):
        return tabs

    if has_content(entry):
        tabs.append(normalize_tab(_synthetic_tab(name, prefix, entry, icon=icon), scope))
    elif href := nonempty_string_field(entry, "href"):
        tabs.append(normalize_tab(_synthetic_tab(name, prefix, icon=icon, href=href), scope))
    return tabs


def normalize_navigation_tabs(
    navigation: object, scope: SlugScope | None = None
) -> list[CanonicalTab]:
    """Return the canonical tab list for one navigation object.

    Tabs are gathered in a fixed order: ``tabs``, ``dropdowns``, ``products``,
    ``versions``, ``anchors``. When none of these yields a tab but the
    navigation has top-level groups, pages or menu entries, a single
    ``Documentation`` tab wraps them.

    Parameters
    ----------
    navigation : object
        The raw ``navigation`` object (or one per-language entry).
    scope : SlugScope, optional
        Tab-level slug namespace; a fresh one is used when omitted.

    Returns
    -------
    list[CanonicalTab]
        Canonical tabs with slugs unique across the list. Empty when
        ``navigation`` is not an object or carries no content.
    """
    if not isinstance(navigation, cabc.Mapping):
        return []
    scope = scope if scope is not None else SlugScope()

    tabs = _normalize_tab_list(list_field(navigation, "tabs"), scope)
    tabs.extend(_normalize_dropdown_list(list_field(navigation, "dropdowns"), scope))

    for index, product in enumerate(list_field(navigation, "products"), start=1):
        if isinstance(product, cabc.Mapping):
            tabs.extend(
                _normalize_axis_entry(product, "product", index, scope, keep_icon=True)
            )

    for index, version in enumerate(list_field(navigation, "versions"), start=1):
        if isinstance(version, cabc.Mapping):
            tabs.extend(
                _normalize_axis_entry(version, "version", index, scope, keep_icon=False)
            )

    for index, raw in enumerate(list_field(navigation, "anchors"), start=1):
        node = decode_node(raw, (NodeKind.ANCHOR,))
        if node is None:
            continue
        prefix = slugify(node.label, f"anchor-{index}")
        if isinstance(node.raw.get("tabs"), list):
            tabs.extend(_normalize_tab_list(node.raw["tabs"], scope, prefix))
        elif has_content(node.raw):
            synthetic = _synthetic_tab(node.label, prefix, node.raw, icon=node.text("icon"))
            tabs.append(normalize_tab(synthetic, scope))

    if not tabs and any(
        list_field(navigation, key) for key in ("groups", "pages", "menu")
    ):
        fallback = _synthetic_tab(FALLBACK_TAB_LABEL, FALLBACK_TAB_SLUG, navigation)
        tabs.append(normalize_tab(fallback, scope))

    return tabs


def normalize_language_entries(languages: object) -> list[LanguageNavigation]:
    """Normalize each ``navigation.languages`` entry in its own tab scope.

    Entries without a string ``language`` code are skipped.
    """
    result: list[LanguageNavigation] = []
    for entry in languages if isinstance(languages, list) else []:
        if not isinstance(entry, cabc.Mapping):
            continue
        code = nonempty_string_field(entry, "language")
        if code is None:
            continue
        result.append(
            LanguageNavigation(
                language=code,
                tabs=normalize_navigation_tabs(entry, SlugScope()),
                raw=dict(entry),
            )
        )
    return result


def normalize_config_navigation(document: object) -> NormalizedNavigation:
    """Normalize the ``navigation`` section of a whole site document.

    Example
    -------
    >>> nav = normalize_config_navigation(
    ...     {"navigation": {"tabs": [{"tab": "API", "href": "https://x.invalid"}]}}
    ... )
    >>> [tab.to_dict() for tab in nav.external_tabs]
    [{'tab': 'API', 'slug': 'api', 'href': 'https://x.invalid'}]
    """
    navigation: cabc.Mapping[str, typ.Any] = {}
    if isinstance(document, cabc.Mapping) and isinstance(
        document.get("navigation"), cabc.Mapping
    ):
        navigation = document["navigation"]
    global_nav = navigation.get("global")
    if not isinstance(global_nav, cabc.Mapping):
        global_nav = {}

    return NormalizedNavigation(
        tabs=normalize_navigation_tabs(navigation),
        languages=normalize_language_entries(navigation.get("languages")),
        products=list_field(navigation, "products"),
        versions=list_field(navigation, "versions"),
        global_anchors=list_field(global_nav, "anchors"),
        global_tabs=list_field(global_nav, "tabs"),
    )


__all__ = [
    "collect_entries",
    "normalize_config_navigation",
    "normalize_group",
    "normalize_language_entries",
    "normalize_navigation_tabs",
    "normalize_tab",
]
