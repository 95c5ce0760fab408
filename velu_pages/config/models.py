"""Typed dataclasses describing the site document and build options."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from velu_pages._constants import CONTENT_SUBDIR, PUBLIC_SUBDIR
from velu_pages.navigation.models import NormalizedNavigation

Appearance = typ.Literal["system", "light", "dark"]


class SiteConfigError(ValueError):
    """Raised when the site configuration or build inputs are invalid."""


@dc.dataclass(slots=True)
class SiteDocument:
    """A parsed ``docs.json``/``velu.json`` with normalized navigation.

    Attributes
    ----------
    path : Path or None
        File the document was read from, when it came from disk.
    raw : dict[str, Any]
        The decoded JSON object, untouched.
    navigation : NormalizedNavigation
        Canonical tabs, per-language trees and pass-through axes.
    languages : list[str]
        Flat top-level language codes (shared-navigation mode).
    """

    raw: dict[str, typ.Any]
    navigation: NormalizedNavigation
    languages: list[str] = dc.field(default_factory=list)
    theme: str | None = None
    colors: dict[str, typ.Any] = dc.field(default_factory=dict)
    appearance: Appearance = "system"
    styling: dict[str, typ.Any] = dc.field(default_factory=dict)
    path: Path | None = None


@dc.dataclass(slots=True)
class BuildOptions:
    """Filesystem layout for one site build."""

    docs_dir: Path
    output_dir: Path
    content_subdir: str = CONTENT_SUBDIR
    public_subdir: str = PUBLIC_SUBDIR

    @property
    def content_dir(self) -> Path:
        return self.output_dir / self.content_subdir

    @property
    def public_dir(self) -> Path:
        return self.output_dir / self.public_subdir


__all__ = ["Appearance", "BuildOptions", "SiteConfigError", "SiteDocument"]
