"""A very small static site generator.

roxy compiles a tree of markdown files with optional ``key: value`` headers
into a mirrored tree of HTML pages rendered through Jinja layouts, optionally
highlighting fenced code with Pygments, and copies every other file verbatim.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``SiteBuilder`` / ``build_site``: programmatic access to the pipeline.

Examples
--------
>>> from roxy import main
>>> main()  # doctest: +SKIP
>>> from roxy import SiteBuilder
>>> from roxy.config import SiteConfig
>>> SiteBuilder(SiteConfig()).run()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .pipeline import SiteBuilder, build_site

__all__ = ["SiteBuilder", "app", "build_site", "main"]
