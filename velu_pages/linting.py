"""Check a docs directory for missing and duplicated page references.

The navigation itself is normalized permissively, so linting is where a user
learns that ``guides/setup`` points at no file, or that a page is listed
twice. With per-language navigation, duplicates are checked within each
language only.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec

from .artifacts import build_artifacts
from .config import find_config_path, load_site_document
from .writer import locate_page_source

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .navigation import CanonicalTab


@dc.dataclass(slots=True)
class LintReport:
    """Problems found in one docs directory."""

    config_path: Path | None = None
    errors: list[str] = dc.field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def collect_page_refs(tabs: cabc.Sequence[CanonicalTab]) -> list[str]:
    """Return every page reference in ``tabs`` in navigation order."""
    return [mapping.src for mapping in build_artifacts(tabs).page_map]


def _duplicates(refs: cabc.Iterable[str]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for ref in refs:
        if ref in seen:
            duplicates.append(ref)
        seen.add(ref)
    return duplicates


def lint_site(docs_dir: Path) -> LintReport:
    """Validate the navigation document and page sources in ``docs_dir``.

    Parameters
    ----------
    docs_dir : Path
        Directory holding ``docs.json`` (or ``velu.json``) and the pages.

    Returns
    -------
    LintReport
        Every problem found; ``valid`` is True when there are none.
    """
    report = LintReport(config_path=find_config_path(docs_dir))
    if report.config_path is None:
        report.errors.append(
            f"No docs.json or velu.json found in {docs_dir}"
        )
        return report

    try:
        document = load_site_document(report.config_path)
    except (msgspec.DecodeError, TypeError) as exc:
        report.errors.append(f"Invalid navigation document: {exc}")
        return report

    navigation = document.navigation
    if navigation.languages:
        scopes = [
            (entry.language, collect_page_refs(entry.tabs))
            for entry in navigation.languages
        ]
    else:
        scopes = [(None, collect_page_refs(navigation.tabs))]

    missing_seen: set[str] = set()
    for _language, refs in scopes:
        for ref in refs:
            if ref in missing_seen or locate_page_source(docs_dir, ref):
                continue
            missing_seen.add(ref)
            report.errors.append(
                f"Missing page: {ref}.mdx or {ref}.md (expected under {docs_dir})"
            )

    for language, refs in scopes:
        for ref in _duplicates(refs):
            if language is None:
                report.errors.append(f"Duplicate page reference: {ref}")
            else:
                report.errors.append(
                    f"Duplicate page reference in language '{language}': {ref}"
                )
    return report


__all__ = ["LintReport", "collect_page_refs", "lint_site"]
