"""Scaffold a starter docs project: a ``docs.json`` plus example pages."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

from ._constants import CONFIG_FILENAMES, PRIMARY_CONFIG_NAME
from .config import SiteConfigError
from .writer import encode_json

if typ.TYPE_CHECKING:
    from pathlib import Path

STARTER_DOCUMENT: dict[str, typ.Any] = {
    "theme": "neutral",
    "navigation": {
        "tabs": [
            {
                "tab": "Getting Started",
                "slug": "getting-started",
                "pages": [
                    "quickstart",
                    "installation",
                    {"separator": "Resources"},
                    {"label": "Velu Website", "href": "https://getvelu.com"},
                ],
                "groups": [
                    {
                        "group": "Guides",
                        "slug": "guides",
                        "description": (
                            "Step-by-step guides to configure and deploy your docs."
                        ),
                        "pages": ["guides/configuration", "guides/deployment"],
                    }
                ],
            },
            {
                "tab": "API Reference",
                "slug": "api-reference",
                "pages": ["api-reference/overview", "api-reference/authentication"],
            },
        ],
        "anchors": [
            {
                "anchor": "GitHub",
                "href": "https://github.com/aravindc26/velu",
                "icon": "Github",
            }
        ],
    },
}

STARTER_PAGES: dict[str, str] = {
    "quickstart.md": dedent(
        """\
        # Quickstart

        Welcome to your new documentation site!

        ## Getting Started

        1. Edit the markdown files in this directory
        2. Update `docs.json` to configure navigation
        3. Run `velu-pages build` to generate the site content
        """
    ),
    "installation.md": dedent(
        """\
        # Installation

        Install the generator into your environment:

        ```bash
        pip install velu-pages
        ```
        """
    ),
    "guides/configuration.md": dedent(
        """\
        # Configuration

        `docs.json` defines your site's navigation.

        - **Tabs**: top-level horizontal navigation
        - **Groups**: collapsible sidebar sections within a tab
        - **Pages**: individual markdown documents
        """
    ),
    "guides/deployment.md": dedent(
        """\
        # Deployment

        Generate the content tree, then hand it to your static-site toolchain.
        """
    ),
    "api-reference/overview.md": dedent(
        """\
        # API Overview

        | Method | Path | Description |
        |--------|------|-------------|
        | GET | /api/health | Health check |
        | POST | /api/data | Create data |
        """
    ),
    "api-reference/authentication.md": dedent(
        """\
        # Authentication

        All API requests require an API key:

        ```
        Authorization: Bearer YOUR_API_KEY
        ```
        """
    ),
}


def init_project(target_dir: Path) -> list[Path]:
    """Write the starter document and pages into ``target_dir``.

    Raises
    ------
    SiteConfigError
        If ``target_dir`` already holds a navigation document.
    """
    for name in CONFIG_FILENAMES:
        if (target_dir / name).exists():
            msg = f"{name} already exists in {target_dir}."
            raise SiteConfigError(msg)

    target_dir.mkdir(parents=True, exist_ok=True)
    config_path = target_dir / PRIMARY_CONFIG_NAME
    config_path.write_bytes(encode_json(STARTER_DOCUMENT))
    written = [config_path]
    for relative, content in STARTER_PAGES.items():
        path = target_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written


__all__ = ["STARTER_DOCUMENT", "STARTER_PAGES", "init_project"]
