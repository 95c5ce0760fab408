from __future__ import annotations

import pytest

from velu_pages.slugs import SlugScope, slugify, unique_slug


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Getting Started", "getting-started"),
        ("  API / Reference  ", "api-reference"),
        ("C++ & Rust!", "c-rust"),
        ("already-slugged", "already-slugged"),
        (42, "42"),
    ],
)
def test_slugify_reduces_labels(value: object, expected: str) -> None:
    assert slugify(value, "group") == expected, (
        f"expected {value!r} to slugify to {expected!r}"
    )


@pytest.mark.parametrize("value", ["", "   ", "!!!", "日本語"])
def test_slugify_uses_fallback_when_nothing_remains(value: str) -> None:
    assert slugify(value, "menu") == "menu", (
        f"expected fallback slug for {value!r}"
    )


def test_unique_slug_suffixes_collisions_in_order() -> None:
    used: set[str] = set()
    slugs = [unique_slug("guides", used) for _ in range(4)]
    assert slugs == ["guides", "guides-2", "guides-3", "guides-4"], (
        f"expected numbered suffixes for repeated labels, got {slugs!r}"
    )
    assert used == set(slugs), "every returned slug should be reserved"


def test_unique_slug_skips_taken_suffixes() -> None:
    used = {"guides", "guides-2"}
    assert unique_slug("guides", used) == "guides-3"


def test_scope_children_do_not_share_reservations() -> None:
    scope = SlugScope()
    assert scope.claim("intro") == "intro"
    child = scope.child()
    assert child.claim("intro") == "intro", (
        "a child scope must not see its parent's slugs"
    )
    assert scope.claim("intro") == "intro-2"
    assert "intro-2" in scope
    assert len(scope) == 2
    assert len(child) == 1


def test_scope_honours_reserved_slugs() -> None:
    scope = SlugScope(reserved=["documentation"])
    assert scope.claim("documentation") == "documentation-2"
