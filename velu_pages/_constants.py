"""Common literal values used across velu_pages.

These constants keep filenames and fallback values centralized so the
normalizer, builders, writers, and tests can import the same values without
drifting. Intended for internal use within the velu_pages package.

Examples
--------
>>> from velu_pages import _constants
>>> _constants.CONFIG_FILENAMES
('docs.json', 'velu.json')
>>> _constants.META_FILENAME
'meta.json'
"""

PRIMARY_CONFIG_NAME = "docs.json"
LEGACY_CONFIG_NAME = "velu.json"
CONFIG_FILENAMES = (PRIMARY_CONFIG_NAME, LEGACY_CONFIG_NAME)

META_FILENAME = "meta.json"
INDEX_FILENAME = "index.mdx"
PAGE_SUFFIXES = (".mdx", ".md")

DEFAULT_FIRST_PAGE = "quickstart"
DEFAULT_LANGUAGE = "en"
FALLBACK_TAB_LABEL = "Documentation"
FALLBACK_TAB_SLUG = "documentation"

CONTENT_SUBDIR = "content/docs"
PUBLIC_SUBDIR = "public"

STATIC_EXTENSIONS = frozenset(
    {
        ".png",
        ".jpg",
        ".jpeg",
        ".webp",
        ".gif",
        ".svg",
        ".ico",
        ".avif",
        ".mp4",
        ".webm",
        ".ogg",
        ".mp3",
        ".wav",
        ".pdf",
        ".txt",
    }
)
