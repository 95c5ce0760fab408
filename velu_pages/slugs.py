r"""Allocate URL-safe slugs that stay unique within a sibling scope.

Every tab list, and every group's own children, owns one :class:`SlugScope`.
Labels are reduced with :func:`slugify` and then claimed from the scope; a
label that collides with an earlier sibling receives a numeric suffix
(``guides``, ``guides-2``, ``guides-3`` ...).

Example
-------
>>> from velu_pages.slugs import SlugScope
>>> scope = SlugScope()
>>> [scope.claim(slugify(label, "group")) for label in ("Guides", "Guides!")]
['guides', 'guides-2']
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def slugify(value: object, fallback: str) -> str:
    """Return a lowercase hyphen-separated token for ``value``.

    Parameters
    ----------
    value : object
        Free-text label; non-strings are converted with ``str``.
    fallback : str
        Returned when nothing slug-worthy remains.

    Returns
    -------
    str
        The slug, or ``fallback`` when the reduced value is empty.
    """
    reduced = _NON_SLUG_RUN.sub("-", str(value).lower().strip()).strip("-")
    return reduced or fallback


def unique_slug(base: str, used: set[str]) -> str:
    """Reserve and return ``base`` or the first free ``base-N`` (N >= 2).

    ``used`` is mutated so later siblings see the reservation.
    """
    if base not in used:
        used.add(base)
        return base
    suffix = 2
    while f"{base}-{suffix}" in used:
        suffix += 1
    candidate = f"{base}-{suffix}"
    used.add(candidate)
    return candidate


class SlugScope:
    """One slug namespace, shared by all siblings of a single parent."""

    __slots__ = ("_used",)

    def __init__(self, reserved: cabc.Iterable[str] = ()) -> None:
        self._used: set[str] = set(reserved)

    def claim(self, base: str) -> str:
        """Reserve ``base`` (or its first free suffixed form) in this scope."""
        return unique_slug(base, self._used)

    def child(self) -> SlugScope:
        """Return a fresh scope for the children of a node in this scope."""
        return SlugScope()

    def __contains__(self, slug: object) -> bool:
        return slug in self._used

    def __len__(self) -> int:
        return len(self._used)


__all__ = ["SlugScope", "slugify", "unique_slug"]
