"""Writers that materialise build artifacts on disk."""

from .assets import copy_static_assets, is_static_asset
from .meta import LandingPageRenderer, encode_json, write_meta_files
from .pages import locate_page_source, page_label_from_slug, render_page, write_page

__all__ = [
    "LandingPageRenderer",
    "copy_static_assets",
    "encode_json",
    "is_static_asset",
    "locate_page_source",
    "page_label_from_slug",
    "render_page",
    "write_meta_files",
    "write_page",
]
