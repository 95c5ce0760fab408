"""High-level orchestration for generating the site content tree.

:class:`SiteBuilder` ties the pure core (normalizer, partitioner, artifact
builder) to the writers. A rebuild clears the content folder, writes every
partition's ``meta.json`` files, pages and landing page, writes the root meta
that hides language folders, copies static assets, and mirrors the navigation
document into the output directory.

Calls are serialised with a lock: two rebuilds never race on the same output
directory.

Example
-------
>>> from pathlib import Path
>>> from velu_pages.builder import SiteBuilder
>>> from velu_pages.config import BuildOptions
>>> builder = SiteBuilder(BuildOptions(Path("docs"), Path(".velu-out")))  # doctest: +SKIP
>>> report = builder.rebuild()  # doctest: +SKIP
>>> report.first_page  # doctest: +SKIP
'getting-started/guides/configuration'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import shutil
import threading
import typing as typ

from ._constants import CONFIG_FILENAMES
from .config import BuildOptions, ConfigCache, SiteConfigError
from .partition import PartitionPlan, plan_partitions
from .writer import (
    LandingPageRenderer,
    copy_static_assets,
    locate_page_source,
    write_meta_files,
    write_page,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .artifacts import PageMapping
    from .partition import Partition

logger = logging.getLogger(__name__)

_PAGE_SUFFIX_PATTERN = re.compile(r"\.(md|mdx)$")


@dc.dataclass(slots=True, frozen=True)
class MissingPage:
    """A page reference whose source file could not be found."""

    ref: str
    language: str


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of one rebuild."""

    plan: PartitionPlan
    written: list[Path] = dc.field(default_factory=list)
    missing: list[MissingPage] = dc.field(default_factory=list)

    @property
    def page_map(self) -> list[PageMapping]:
        """Page mappings of the default partition."""
        return self.plan.default.page_map

    @property
    def first_page(self) -> str:
        return self.plan.default.artifacts.first_page


class SiteBuilder:
    """Generate and refresh the content tree for one docs directory."""

    def __init__(
        self,
        options: BuildOptions,
        *,
        landing_renderer: LandingPageRenderer | None = None,
        cache: ConfigCache | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        options : BuildOptions
            Source docs directory and output layout.
        landing_renderer : LandingPageRenderer, optional
            Renderer used for each partition's ``index.mdx``.
        cache : ConfigCache, optional
            Shared document cache; one is created for ``options.docs_dir``
            when omitted.
        """
        self.options = options
        self.landing_renderer = landing_renderer or LandingPageRenderer()
        self.cache = cache or ConfigCache(options.docs_dir)
        self._lock = threading.Lock()
        self._plan: PartitionPlan | None = None

    def rebuild(self) -> BuildReport:
        """Regenerate the whole content tree from the navigation document.

        Returns
        -------
        BuildReport
            Written paths, missing page sources and the partition plan.

        Raises
        ------
        FileNotFoundError
            If no navigation document exists in the docs directory.
        msgspec.DecodeError
            If the navigation document is not valid JSON.
        SiteConfigError
            If the output directory is the docs directory itself.
        """
        with self._lock:
            return self._rebuild()

    def sync_config(self) -> BuildReport:
        """Re-read the navigation document and rebuild everything."""
        with self._lock:
            self.cache.invalidate()
            return self._rebuild()

    def sync_page(self, filename: str) -> list[Path]:
        """Re-render every destination fed by one changed page source.

        Parameters
        ----------
        filename : str
            Path of the changed ``.md``/``.mdx`` file relative to the docs
            directory.

        Returns
        -------
        list[Path]
            Rewritten paths. A vanished source triggers a full rebuild, whose
            written paths are returned instead.
        """
        ref = _PAGE_SUFFIX_PATTERN.sub("", filename.replace("\\", "/"))
        with self._lock:
            source = locate_page_source(self.options.docs_dir, ref)
            if source is None or self._plan is None:
                return self._rebuild().written

            written: list[Path] = []
            for partition in self._plan.partitions:
                for mapping in partition.page_map:
                    if mapping.src == ref:
                        written.append(
                            write_page(source, self._page_path(partition, mapping), ref)
                        )
            if not written:
                logger.debug("Ignoring %s: not referenced by navigation", ref)
            return written

    def _page_path(self, partition: Partition, mapping: PageMapping) -> Path:
        return self.options.content_dir / f"{partition.destination(mapping)}.mdx"

    def _rebuild(self) -> BuildReport:
        if self.options.docs_dir.resolve() == self.options.output_dir.resolve():
            msg = "Output directory must differ from the docs directory."
            raise SiteConfigError(msg)
        document = self.cache.load()
        plan = plan_partitions(document.navigation, document.languages)
        report = BuildReport(plan=plan)

        content_dir = self.options.content_dir
        if content_dir.exists():
            shutil.rmtree(content_dir)
        content_dir.mkdir(parents=True)

        for partition in plan.partitions:
            report.written.extend(write_meta_files(content_dir, partition.meta_files))
            report.written.extend(self._write_partition_pages(partition, report))
            report.written.append(
                self.landing_renderer.write(
                    content_dir / partition.index_path, partition.landing_href
                )
            )
        if plan.root_meta is not None:
            report.written.extend(write_meta_files(content_dir, [plan.root_meta]))

        report.written.extend(
            copy_static_assets(
                self.options.docs_dir,
                self.options.public_dir,
                exclude=(self.options.output_dir,),
            )
        )
        if document.path is not None:
            report.written.extend(self._mirror_document(document.path))

        self._plan = plan
        logger.info(
            "Generated %d files across %d partition(s)",
            len(report.written),
            len(plan.partitions),
        )
        return report

    def _write_partition_pages(
        self, partition: Partition, report: BuildReport
    ) -> list[Path]:
        written: list[Path] = []
        for mapping in partition.page_map:
            source = locate_page_source(self.options.docs_dir, mapping.src)
            if source is None:
                logger.warning(
                    "Missing page source: %s (language: %s)",
                    mapping.src,
                    partition.language,
                )
                report.missing.append(MissingPage(mapping.src, partition.language))
                continue
            written.append(
                write_page(source, self._page_path(partition, mapping), mapping.src)
            )
        return written

    def _mirror_document(self, source: Path) -> list[Path]:
        """Copy the navigation document into the output under both names."""
        output_dir = self.options.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        mirrored: list[Path] = []
        for name in CONFIG_FILENAMES:
            target = output_dir / name
            shutil.copyfile(source, target)
            mirrored.append(target)
        return mirrored


__all__ = ["BuildReport", "MissingPage", "SiteBuilder"]
