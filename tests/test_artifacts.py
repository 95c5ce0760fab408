"""Tests for page destinations, folder metadata and first-page selection."""

from __future__ import annotations

import typing as typ

import pytest

from velu_pages.artifacts import (
    MetaFile,
    PageMapping,
    build_artifacts,
    meta_entry,
    page_basename,
)
from velu_pages.navigation import (
    CanonicalGroup,
    Link,
    Separator,
    normalize_navigation_tabs,
)
from velu_pages.writer import encode_json

if typ.TYPE_CHECKING:
    from velu_pages.artifacts import BuildArtifacts


def _artifacts(navigation: dict[str, typ.Any]) -> BuildArtifacts:
    return build_artifacts(normalize_navigation_tabs(navigation))


def _metas(artifacts: BuildArtifacts) -> dict[str, dict[str, typ.Any]]:
    return {meta.directory: meta.data for meta in artifacts.meta_files}


RICH_NAVIGATION: dict[str, typ.Any] = {
    "tabs": [
        {
            "tab": "Docs",
            "icon": "book",
            "iconType": "duotone",
            "groups": [
                {
                    "group": "G",
                    "hidden": True,
                    "expanded": False,
                    "icon": "x",
                    "description": "desc",
                    "pages": [
                        "a/b",
                        {"separator": "More"},
                        {"label": "Site", "href": "https://s.invalid", "icon": "Globe"},
                        {"label": "Plain", "href": "https://p.invalid"},
                        {"group": "Sub", "pages": ["c"]},
                    ],
                }
            ],
            "pages": ["top"],
        },
        {"tab": "External", "href": "https://ext.invalid"},
    ],
    "products": [
        {"product": "Cloud", "tabs": [{"tab": "API", "pages": ["api/intro"]}]}
    ],
}


def test_same_named_groups_map_to_distinct_folders() -> None:
    artifacts = _artifacts(
        {
            "tabs": [
                {
                    "tab": "Guides",
                    "groups": [
                        {"group": "Guides", "pages": ["intro"]},
                        {"group": "Guides", "pages": ["intro"]},
                    ],
                }
            ]
        }
    )
    assert artifacts.page_map == [
        PageMapping(src="intro", dest="guides/guides/intro"),
        PageMapping(src="intro", dest="guides/guides-2/intro"),
    ], f"unexpected page map {artifacts.page_map!r}"
    assert artifacts.first_page == "guides/guides/intro"


def test_page_map_follows_preorder_and_uses_basenames() -> None:
    artifacts = _artifacts(RICH_NAVIGATION)
    assert artifacts.page_map == [
        PageMapping(src="a/b", dest="docs/g/b"),
        PageMapping(src="c", dest="docs/g/sub/c"),
        PageMapping(src="top", dest="docs/top"),
        PageMapping(src="api/intro", dest="cloud/api/intro"),
    ]
    assert artifacts.first_page == "docs/g/b"


def test_meta_files_encode_entries_and_display_fields() -> None:
    metas = _metas(_artifacts(RICH_NAVIGATION))
    assert list(metas) == ["docs/g/sub", "docs/g", "docs", "cloud/api", ""], (
        "metas are emitted children-first, then the root meta last"
    )
    assert metas["docs/g"] == {
        "title": "G",
        "pages": [
            "b",
            "---More---",
            "[Globe][Site](https://s.invalid)",
            "[Plain](https://p.invalid)",
            "sub",
        ],
        "defaultOpen": False,
        "icon": "x",
        "description": "desc",
    }
    assert metas["docs/g/sub"] == {"title": "Sub", "pages": ["c"], "defaultOpen": True}
    assert metas["docs"] == {
        "title": "Docs",
        "root": True,
        "pages": ["!g", "top"],
        "icon": "book",
        "iconType": "duotone",
    }
    assert metas[""] == {"pages": ["docs", "cloud/api"]}, (
        "link tabs must not appear in the root meta"
    )


def test_link_only_navigation_has_no_content() -> None:
    artifacts = _artifacts({"tabs": [{"tab": "API", "href": "https://api.invalid"}]})
    assert artifacts.page_map == []
    assert artifacts.meta_files == []
    assert artifacts.first_page == "quickstart"


def test_empty_navigation_defaults_first_page() -> None:
    artifacts = build_artifacts([])
    assert artifacts.first_page == "quickstart"
    assert artifacts.meta_files == []


def test_meta_pages_never_dangle() -> None:
    artifacts = _artifacts(RICH_NAVIGATION)
    destinations = {mapping.dest for mapping in artifacts.page_map}
    directories = {meta.directory for meta in artifacts.meta_files}
    for meta in artifacts.meta_files:
        for entry in meta.data["pages"]:
            if entry.startswith("---") or entry.startswith("["):
                continue
            name = entry.removeprefix("!")
            target = f"{meta.directory}/{name}" if meta.directory else name
            assert target in destinations or target in directories, (
                f"meta {meta.directory!r} references unknown entry {entry!r}"
            )


def test_build_artifacts_is_deterministic() -> None:
    tabs = normalize_navigation_tabs(RICH_NAVIGATION)
    first = build_artifacts(tabs)
    second = build_artifacts(tabs)
    assert first == second
    assert [encode_json(meta.data) for meta in first.meta_files] == [
        encode_json(meta.data) for meta in second.meta_files
    ], "repeated builds must produce byte-identical meta files"


@pytest.mark.parametrize(
    ("entry", "expected"),
    [
        ("guides/setup", "guides/setup"),
        (CanonicalGroup(group="G", slug="g"), "g"),
        (CanonicalGroup(group="G", slug="g", hidden=True), "!g"),
        (Separator("Resources"), "---Resources---"),
        (Link(href="https://x.invalid", label="X"), "[X](https://x.invalid)"),
        (Link(href="https://x.invalid", label="X", icon="Star"), "[Star][X](https://x.invalid)"),
    ],
)
def test_meta_entry_encodings(entry: object, expected: str) -> None:
    assert meta_entry(entry) == expected  # type: ignore[arg-type]


def test_page_basename_takes_last_segment() -> None:
    assert page_basename("api-reference/auth/tokens") == "tokens"
    assert page_basename("intro") == "intro"


def test_meta_file_rerooting() -> None:
    data = {"pages": ["a"]}
    root = MetaFile("", data)
    nested = MetaFile("guides", data)
    assert root.rerooted("en").directory == "en"
    assert nested.rerooted("en").directory == "en/guides"
    assert nested.rerooted("").directory == "guides"
    moved = nested.rerooted("ja")
    assert moved.data == data
    assert moved.data is not data, "rerooted metas must not share payloads"
