"""Behaviour tests for navigation normalization using pytest-bdd.

These scenarios feed small navigation documents through the normalizer and
the artifact builder and check the canonical tabs and page destinations they
produce.

Usage
-----
Run ``pytest tests/bdd/test_navigation_normalization.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from velu_pages.artifacts import PageMapping, build_artifacts
from velu_pages.navigation import normalize_config_navigation

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "navigation_normalization.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a navigation document with only top-level pages")
def given_bare_pages(scenario_state: ScenarioState) -> None:
    """Store a document whose navigation lists pages without any tabs."""
    scenario_state["document"] = {"navigation": {"pages": ["a", "b"]}}


@given("a tab with two groups both named Guides")
def given_same_named_groups(scenario_state: ScenarioState) -> None:
    """Store a document with colliding sibling group labels."""
    scenario_state["document"] = {
        "navigation": {
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
    }


@when("the navigation is normalized")
def when_normalized(scenario_state: ScenarioState) -> None:
    """Normalize the stored document and keep the canonical tabs."""
    navigation = normalize_config_navigation(scenario_state["document"])
    scenario_state["tabs"] = navigation.tabs


@when("the build artifacts are computed")
def when_artifacts_computed(scenario_state: ScenarioState) -> None:
    """Normalize the stored document and walk it into build artifacts."""
    navigation = normalize_config_navigation(scenario_state["document"])
    scenario_state["artifacts"] = build_artifacts(navigation.tabs)


@then("a single Documentation tab wraps the pages")
def then_documentation_tab(scenario_state: ScenarioState) -> None:
    """Verify the fallback tab carries the top-level pages unchanged."""
    tabs = [tab.to_dict() for tab in scenario_state["tabs"]]
    assert tabs == [
        {"tab": "Documentation", "slug": "documentation", "pages": ["a", "b"]}
    ], f"expected a single Documentation tab, got {tabs!r}"


@then("each group's intro page lands in its own folder")
def then_distinct_folders(scenario_state: ScenarioState) -> None:
    """Verify colliding groups were slugged ``guides`` and ``guides-2``."""
    page_map = scenario_state["artifacts"].page_map
    assert page_map == [
        PageMapping(src="intro", dest="guides/guides/intro"),
        PageMapping(src="intro", dest="guides/guides-2/intro"),
    ], f"unexpected page map {page_map!r}"
