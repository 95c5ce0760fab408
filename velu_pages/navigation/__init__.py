"""Normalize site navigation documents into a canonical tab/group tree.

This subpackage decodes the user-authored ``navigation`` object (tabs,
dropdowns, products, versions, languages, anchors, groups, menus, pages) and
produces typed dataclasses (:class:`CanonicalTab`, :class:`CanonicalGroup`,
:class:`Separator`, :class:`Link`) that the artifact builder walks. The
primary entry point is :func:`normalize_config_navigation`.

Examples
--------
>>> from velu_pages.navigation import normalize_config_navigation
>>> nav = normalize_config_navigation(
...     {"navigation": {"tabs": [{"tab": "Guides", "pages": ["intro"]}]}}
... )
>>> nav.tabs[0].slug
'guides'
"""

from .models import (
    CanonicalGroup,
    CanonicalTab,
    Entry,
    LanguageNavigation,
    Link,
    NormalizedNavigation,
    Separator,
    entry_to_dict,
)
from .nodes import NavNode, NodeKind, classify, decode_node, has_content
from .normalizer import (
    collect_entries,
    normalize_config_navigation,
    normalize_group,
    normalize_language_entries,
    normalize_navigation_tabs,
    normalize_tab,
)

__all__ = [
    "CanonicalGroup",
    "CanonicalTab",
    "Entry",
    "LanguageNavigation",
    "Link",
    "NavNode",
    "NodeKind",
    "NormalizedNavigation",
    "Separator",
    "classify",
    "collect_entries",
    "decode_node",
    "entry_to_dict",
    "has_content",
    "normalize_config_navigation",
    "normalize_group",
    "normalize_language_entries",
    "normalize_navigation_tabs",
    "normalize_tab",
]
