"""Locate and load the site navigation document into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import threading
import typing as typ

import msgspec.json as msgspec_json

from velu_pages._constants import CONFIG_FILENAMES
from velu_pages.navigation import normalize_config_navigation

from .models import Appearance, SiteDocument

if typ.TYPE_CHECKING:
    from pathlib import Path

_APPEARANCES: tuple[Appearance, ...] = ("system", "light", "dark")


def resolve_config_path(docs_dir: Path) -> Path:
    """Return the navigation document path, preferring ``docs.json``.

    The legacy ``velu.json`` path is returned when ``docs.json`` is absent,
    whether or not it exists.
    """
    for name in CONFIG_FILENAMES:
        candidate = docs_dir / name
        if candidate.exists():
            return candidate
    return docs_dir / CONFIG_FILENAMES[-1]


def find_config_path(docs_dir: Path) -> Path | None:
    """Return the navigation document path, or ``None`` when neither exists."""
    path = resolve_config_path(docs_dir)
    return path if path.exists() else None


def parse_site_document(
    raw: cabc.Mapping[str, typ.Any], *, path: Path | None = None
) -> SiteDocument:
    """Build a :class:`SiteDocument` from an already decoded JSON object.

    Optional top-level fields with the wrong type fall back to their
    defaults; navigation shape problems are absorbed by the normalizer.
    """
    languages = raw.get("languages")
    theme = raw.get("theme")
    colors = raw.get("colors")
    styling = raw.get("styling")
    appearance = raw.get("appearance")
    return SiteDocument(
        raw=dict(raw),
        navigation=normalize_config_navigation(raw),
        languages=[
            code for code in languages if isinstance(code, str) and code
        ]
        if isinstance(languages, list)
        else [],
        theme=theme if isinstance(theme, str) else None,
        colors=dict(colors) if isinstance(colors, cabc.Mapping) else {},
        appearance=appearance if appearance in _APPEARANCES else "system",
        styling=dict(styling) if isinstance(styling, cabc.Mapping) else {},
        path=path,
    )


def load_site_document(path: Path) -> SiteDocument:
    """Load and normalize the JSON navigation document at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to ``docs.json`` or ``velu.json``.

    Returns
    -------
    SiteDocument
        Parsed document with normalized navigation.

    Raises
    ------
    FileNotFoundError
        If the document does not exist at ``path``.
    TypeError
        If the top-level JSON value is not an object.
    msgspec.DecodeError
        If the content is not valid JSON.

    Examples
    --------
    >>> from pathlib import Path
    >>> document = load_site_document(Path("docs/docs.json"))  # doctest: +SKIP
    >>> document.navigation.tabs[0].slug  # doctest: +SKIP
    'getting-started'
    """
    if not path.exists():
        msg = f"Navigation document '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = msgspec_json.decode(path.read_bytes())
    if not isinstance(loaded, dict):
        msg = "Top-level JSON structure must be an object."
        raise TypeError(msg)
    return parse_site_document(loaded, path=path)


@dc.dataclass(slots=True, frozen=True)
class _Fingerprint:
    path: Path
    mtime_ns: int
    size: int


class ConfigCache:
    """Memoize the parsed navigation document of one docs directory.

    The cached document is reused only while the resolved file path, its
    modification time and its size are unchanged.
    """

    def __init__(self, docs_dir: Path) -> None:
        self.docs_dir = docs_dir
        self._lock = threading.Lock()
        self._fingerprint: _Fingerprint | None = None
        self._document: SiteDocument | None = None

    def load(self) -> SiteDocument:
        """Return the current document, re-reading it when the file changed."""
        path = resolve_config_path(self.docs_dir)
        stat = path.stat()
        fingerprint = _Fingerprint(path, stat.st_mtime_ns, stat.st_size)
        with self._lock:
            if self._document is None or fingerprint != self._fingerprint:
                self._document = load_site_document(path)
                self._fingerprint = fingerprint
            return self._document

    def invalidate(self) -> None:
        """Drop the cached document so the next load re-reads the file."""
        with self._lock:
            self._document = None
            self._fingerprint = None


__all__ = [
    "ConfigCache",
    "find_config_path",
    "load_site_document",
    "parse_site_document",
    "resolve_config_path",
]
