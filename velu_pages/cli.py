"""Cyclopts CLI entrypoint for generating velu documentation content.

The ``velu-pages`` console script defined here can scaffold a starter docs
project, lint a navigation document against the page sources on disk, and
generate the content tree (pages, ``meta.json`` files, landing pages and
static assets) consumed by the downstream site framework.

Examples
--------
Generate content for the docs in the current directory:

>>> from velu_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom output directory:

>>> from velu_pages.cli import app
>>> app(["build", "--docs-dir", "docs", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter

from .builder import SiteBuilder
from .config import BuildOptions
from .linting import lint_site
from .scaffold import init_project

DEFAULT_OUTPUT_DIR = Path(".velu-out")

app = App(name="velu-pages", help="Generate documentation site content.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Generate the content tree from docs.json and Markdown pages.")
def build(
    *,
    docs_dir: typ.Annotated[
        Path, Parameter(help="Directory holding docs.json", env_var="VELU_DOCS_DIR")
    ] = Path(),
    output_dir: typ.Annotated[
        Path,
        Parameter(help="Where to write generated content", env_var="VELU_OUTPUT_DIR"),
    ] = DEFAULT_OUTPUT_DIR,
    verbose: bool = False,
) -> None:
    """Generate pages, metadata files and landing pages for ``docs_dir``.

    Parameters
    ----------
    docs_dir : Path, optional
        Directory containing ``docs.json``/``velu.json`` and page sources;
        defaults to the current directory (overridable via ``VELU_DOCS_DIR``).
    output_dir : Path, optional
        Output directory for the generated project (overridable via
        ``VELU_OUTPUT_DIR``).
    verbose : bool, optional
        Log progress at INFO level.

    Returns
    -------
    None
        Writes generated artifacts and prints the written paths.
    """
    _configure_logging(verbose=verbose)
    builder = SiteBuilder(BuildOptions(docs_dir=docs_dir, output_dir=output_dir))
    report = builder.rebuild()
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for missing in report.missing:
        print(f"missing {missing.ref} ({missing.language})", file=sys.stderr)


@app.command(help="Validate docs.json and check that referenced pages exist.")
def lint(
    *,
    docs_dir: typ.Annotated[
        Path, Parameter(help="Directory holding docs.json", env_var="VELU_DOCS_DIR")
    ] = Path(),
) -> None:
    """Report missing and duplicated page references, exiting 1 on failure."""
    report = lint_site(docs_dir)
    if report.valid:
        print("Navigation is valid. All referenced pages exist.")
        return
    print("Validation failed:", file=sys.stderr)
    for error in report.errors:
        print(f"  - {error}", file=sys.stderr)
    sys.exit(1)


@app.command(help="Scaffold a new docs project with example files.")
def init(
    *,
    target_dir: typ.Annotated[
        Path, Parameter(help="Directory to scaffold into")
    ] = Path(),
) -> None:
    """Write a starter ``docs.json`` and example pages into ``target_dir``."""
    for path in init_project(target_dir):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``velu-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
