"""Load the site navigation document and describe build options.

This subpackage finds the project's ``docs.json`` (falling back to the legacy
``velu.json``), decodes it with msgspec, normalizes its navigation, and
returns a :class:`SiteDocument` that the partitioner and writers consume.
:class:`ConfigCache` keeps the parsed document between rebuilds until the
file changes.

Examples
--------
>>> from pathlib import Path
>>> from velu_pages.config import load_site_document, resolve_config_path
>>> path = resolve_config_path(Path("docs"))  # doctest: +SKIP
>>> document = load_site_document(path)  # doctest: +SKIP
>>> document.appearance  # doctest: +SKIP
'system'
"""

from .loader import (
    ConfigCache,
    find_config_path,
    load_site_document,
    parse_site_document,
    resolve_config_path,
)
from .models import Appearance, BuildOptions, SiteConfigError, SiteDocument

__all__ = [
    "Appearance",
    "BuildOptions",
    "ConfigCache",
    "SiteConfigError",
    "SiteDocument",
    "find_config_path",
    "load_site_document",
    "parse_site_document",
    "resolve_config_path",
]
