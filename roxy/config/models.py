"""Typed dataclasses describing roxy site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_CONTENT_EXTENSIONS, DEFAULT_LAYOUT

DEFAULT_OUTPUT_DIR = Path("build")
DEFAULT_CONTENT_DIR = Path("content")
DEFAULT_LAYOUTS_DIR = Path("layouts")


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Locations and options for a single build.

    Attributes
    ----------
    output_dir : Path
        Root of the generated site.
    content_dir : Path
        Tree of content files and passthrough assets.
    layouts_dir : Path
        Directory of Jinja layouts.
    theme : str or None
        Pygments style name or YAML theme file; ``None`` disables
        highlighting.
    content_extensions : tuple[str, ...]
        Extensions treated as content; everything else is copied verbatim.
    allow_qualifiers : bool
        Accept trailing suffixes after a content extension (``post.md.txt``).
        Off by default so compressed copies such as ``page.html.gz`` are assets.
    default_layout : str
        Layout used when a page's header does not name one.
    """

    output_dir: Path = DEFAULT_OUTPUT_DIR
    content_dir: Path = DEFAULT_CONTENT_DIR
    layouts_dir: Path = DEFAULT_LAYOUTS_DIR
    theme: str | None = None
    content_extensions: tuple[str, ...] = DEFAULT_CONTENT_EXTENSIONS
    allow_qualifiers: bool = False
    default_layout: str = DEFAULT_LAYOUT


__all__ = [
    "DEFAULT_CONTENT_DIR",
    "DEFAULT_LAYOUTS_DIR",
    "DEFAULT_OUTPUT_DIR",
    "SiteConfig",
    "SiteConfigError",
]
