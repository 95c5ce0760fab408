"""Split generated content into per-language storage partitions.

Two configuration axes select how content is laid out:

* ``navigation.languages`` gives every language its own navigation tree.
  Each language gets its own artifacts and its own storage folder, including
  the first one, which is still addressed without a URL prefix.
* A flat ``languages`` list shares one navigation tree. With more than one
  code, the same artifacts are replicated into one folder per language; with
  zero or one code, content sits directly at the content root.

In both folder modes the root ``meta.json`` lists every language folder as
hidden (``!en``) so none renders as a visible navigation item.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from ._constants import DEFAULT_LANGUAGE, INDEX_FILENAME
from .artifacts import BuildArtifacts, MetaFile, PageMapping, build_artifacts

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .navigation.models import NormalizedNavigation


class PartitionMode(enum.Enum):
    """How generated content is spread over storage folders."""

    SINGLE = "single"
    LANGUAGE_FOLDERS = "language-folders"
    PER_LANGUAGE = "per-language"


@dc.dataclass(slots=True)
class Partition:
    """One language's complete content tree and where it is stored.

    Attributes
    ----------
    language : str
        Language code owning the partition.
    storage_prefix : str
        Folder under the content root; empty for unprefixed content.
    url_prefix : str
        Leading URL segment; empty for the default language.
    artifacts : BuildArtifacts
        Output of the artifact builder for this partition's navigation.
    """

    language: str
    storage_prefix: str
    url_prefix: str
    artifacts: BuildArtifacts

    @property
    def meta_files(self) -> list[MetaFile]:
        """Meta files re-rooted under the storage prefix."""
        return [meta.rerooted(self.storage_prefix) for meta in self.artifacts.meta_files]

    @property
    def page_map(self) -> list[PageMapping]:
        return self.artifacts.page_map

    def destination(self, mapping: PageMapping) -> str:
        """Return the storage path (no extension) for a mapped page."""
        if self.storage_prefix:
            return f"{self.storage_prefix}/{mapping.dest}"
        return mapping.dest

    @property
    def landing_href(self) -> str:
        first_page = self.artifacts.first_page
        if self.url_prefix:
            return f"/{self.url_prefix}/{first_page}/"
        return f"/{first_page}/"

    @property
    def index_path(self) -> str:
        if self.storage_prefix:
            return f"{self.storage_prefix}/{INDEX_FILENAME}"
        return INDEX_FILENAME


@dc.dataclass(slots=True)
class PartitionPlan:
    """Ordered partitions plus the root meta that hides language folders."""

    mode: PartitionMode
    partitions: list[Partition]
    root_meta: MetaFile | None = None

    @property
    def default(self) -> Partition:
        """The first partition, treated as the default language."""
        return self.partitions[0]


def _hidden_root_meta(codes: cabc.Iterable[str]) -> MetaFile:
    return MetaFile("", {"pages": [f"!{code}" for code in codes]})


def plan_partitions(
    navigation: NormalizedNavigation, languages: cabc.Sequence[str] = ()
) -> PartitionPlan:
    """Run the artifact builder once per partition and decide its prefixes.

    Parameters
    ----------
    navigation : NormalizedNavigation
        Normalized navigation, including any per-language trees.
    languages : Sequence[str], optional
        The flat top-level ``languages`` list, used only when no per-language
        navigation is configured.

    Returns
    -------
    PartitionPlan
        Always holds at least one partition.

    Examples
    --------
    >>> from velu_pages.navigation import normalize_config_navigation
    >>> nav = normalize_config_navigation({"navigation": {"pages": ["intro"]}})
    >>> plan = plan_partitions(nav, ["en", "fr"])
    >>> [(p.storage_prefix, p.landing_href) for p in plan.partitions]
    [('en', '/documentation/intro/'), ('fr', '/fr/documentation/intro/')]
    """
    if navigation.languages:
        partitions = [
            Partition(
                language=entry.language,
                storage_prefix=entry.language,
                url_prefix="" if index == 0 else entry.language,
                artifacts=build_artifacts(entry.tabs),
            )
            for index, entry in enumerate(navigation.languages)
        ]
        return PartitionPlan(
            mode=PartitionMode.PER_LANGUAGE,
            partitions=partitions,
            root_meta=_hidden_root_meta(p.language for p in partitions),
        )

    artifacts = build_artifacts(navigation.tabs)
    codes = [code for code in languages if isinstance(code, str) and code]
    if len(codes) > 1:
        partitions = [
            Partition(
                language=code,
                storage_prefix=code,
                url_prefix="" if index == 0 else code,
                artifacts=artifacts,
            )
            for index, code in enumerate(codes)
        ]
        return PartitionPlan(
            mode=PartitionMode.LANGUAGE_FOLDERS,
            partitions=partitions,
            root_meta=_hidden_root_meta(codes),
        )

    single = Partition(
        language=codes[0] if codes else DEFAULT_LANGUAGE,
        storage_prefix="",
        url_prefix="",
        artifacts=artifacts,
    )
    return PartitionPlan(mode=PartitionMode.SINGLE, partitions=[single])


__all__ = ["Partition", "PartitionMode", "PartitionPlan", "plan_partitions"]
