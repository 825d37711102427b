"""High-level orchestration for a complete site build.

:class:`SiteBuilder` owns the template engine and markdown renderer for the
duration of a run and passes them to each stage:

1. compile the content tree into items;
2. group the items into the section index;
3. render each item through its layout and write the page;
4. copy passthrough assets.

Example
-------
>>> from roxy.config import SiteConfig
>>> from roxy.pipeline import SiteBuilder
>>> report = SiteBuilder(SiteConfig(theme="monokai")).run()  # doctest: +SKIP
>>> report.written[0]  # doctest: +SKIP
PosixPath('build/index.html')
"""

from __future__ import annotations

import logging

from .compiler import ContentCompiler
from .config import SiteConfig
from .materializer import OutputMaterializer, build_base_context
from .models import BuildReport
from .paths import ContentMatcher
from .renderer import HtmlContentRenderer
from .sections import build_section_index
from .static import StaticCopier
from .templates import TemplateEngine

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Run the compile, aggregate, render, and copy passes for one site."""

    def __init__(self, config: SiteConfig) -> None:
        """Initialize the builder and its shared collaborators.

        Parameters
        ----------
        config : SiteConfig
            Directories and options for the build.

        Raises
        ------
        TemplateLoadError
            If any layout fails to compile.
        HighlightError
            If the configured highlighting theme cannot be resolved.

        Notes
        -----
        Both failures happen here, before any content is read.
        """
        self.config = config
        self.matcher = ContentMatcher(
            config.content_extensions, allow_qualifiers=config.allow_qualifiers
        )
        self.engine = TemplateEngine(config.layouts_dir)
        self.renderer = HtmlContentRenderer(config.theme)

    def run(self) -> BuildReport:
        """Build the site and return a summary of what was produced.

        Raises
        ------
        FileNotFoundError
            If the content directory does not exist.
        OSError
            If reading content or writing pages fails.
        HighlightError
            If a code block cannot be highlighted.
        """
        config = self.config
        compiler = ContentCompiler(
            config.content_dir,
            engine=self.engine,
            renderer=self.renderer,
            matcher=self.matcher,
        )
        items = compiler.run()
        logger.info("compiled %d page(s) from %s", len(items), config.content_dir)

        base_context = build_base_context(build_section_index(items))
        materializer = OutputMaterializer(
            config.output_dir,
            engine=self.engine,
            matcher=self.matcher,
            default_layout=config.default_layout,
        )
        pages = materializer.run(items, base_context)

        assets = StaticCopier(
            config.content_dir, config.output_dir, matcher=self.matcher
        ).run()
        logger.info("copied %d asset(s)", len(assets.copied))

        return BuildReport(
            output_dir=config.output_dir,
            items=items,
            written=pages.written,
            failed=pages.failed,
            copied=assets.copied,
            copy_failures=assets.failed,
        )


def build_site(config: SiteConfig) -> BuildReport:
    """Build the site described by ``config``."""
    return SiteBuilder(config).run()


__all__ = ["SiteBuilder", "build_site"]
