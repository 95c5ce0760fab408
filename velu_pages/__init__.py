"""Utilities for generating velu documentation site content.

This package normalizes a ``docs.json`` navigation document into canonical
tabs and groups, computes page destinations and per-folder ``meta.json``
files, partitions content per language, and writes the resulting tree for a
downstream static-site framework.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from velu_pages import main
>>> main()  # doctest: +SKIP
>>> from velu_pages import app
>>> app(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
