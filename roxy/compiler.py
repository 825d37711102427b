"""Compile the content tree into :class:`~roxy.models.ContentItem` values.

For each content file the compiler splits the metadata header from the body,
converts the markdown, runs the result once through the template engine with
an empty context so markdown sources can embed template snippets, and derives
the public slug.

Example
-------
>>> from pathlib import Path
>>> from roxy.compiler import ContentCompiler
>>> from roxy.paths import ContentMatcher
>>> from roxy.renderer import HtmlContentRenderer
>>> from roxy.templates import TemplateEngine
>>> compiler = ContentCompiler(
...     Path("content"),
...     engine=TemplateEngine(Path("layouts")),
...     renderer=HtmlContentRenderer("monokai"),
...     matcher=ContentMatcher(),
... )  # doctest: +SKIP
>>> [item.slug for item in compiler.run()]  # doctest: +SKIP
['/', '/about', '/blog/post']
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import TemplateRenderError
from .header import read_header
from .models import ContentItem
from .paths import ContentMatcher, walk_source_files
from .renderer import HtmlContentRenderer
from .templates import TemplateEngine

logger = logging.getLogger(__name__)


class ContentCompiler:
    """Walk a content root and emit compiled items in traversal order."""

    def __init__(
        self,
        content_dir: Path,
        *,
        engine: TemplateEngine,
        renderer: HtmlContentRenderer,
        matcher: ContentMatcher,
    ) -> None:
        """Initialize the compiler.

        Parameters
        ----------
        content_dir : Path
            Root of the content tree.
        engine : TemplateEngine
            Engine used for the inline self-render pass.
        renderer : HtmlContentRenderer
            Markdown renderer, optionally highlighting fenced code.
        matcher : ContentMatcher
            Decides which files are content and derives their slugs.
        """
        self.content_dir = content_dir
        self.engine = engine
        self.renderer = renderer
        self.matcher = matcher

    def run(self) -> list[ContentItem]:
        """Compile every content file under the content root.

        Returns
        -------
        list[ContentItem]
            Items in traversal order. Hidden files, files without a recognized
            extension, and bodies that are not valid UTF-8 produce no item.

        Raises
        ------
        FileNotFoundError
            If the content root does not exist.
        OSError
            If a content file cannot be read.
        HighlightError
            If a code block cannot be highlighted with the configured theme.
        """
        if not self.content_dir.is_dir():
            msg = f"Content directory '{self.content_dir}' not found."
            raise FileNotFoundError(msg)

        items: list[ContentItem] = []
        for source in walk_source_files(self.content_dir):
            rel_path = source.relative_to(self.content_dir).as_posix()
            if not self.matcher.is_content(rel_path):
                continue
            item = self.compile_file(source, rel_path)
            if item is not None:
                items.append(item)
        logger.debug("compiled %d item(s) from %s", len(items), self.content_dir)
        return items

    def compile_file(self, source: Path, rel_path: str) -> ContentItem | None:
        """Compile a single content file, or return ``None`` if it is not text."""
        with source.open("rb") as handle:
            metadata = read_header(handle)
            raw_body = handle.read()
        try:
            text = raw_body.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("skipping %s: body is not valid UTF-8", rel_path)
            return None

        html = self.renderer.markdown(text)
        try:
            html = self.engine.render_inline(html)
        except TemplateRenderError as exc:
            logger.error("Failed to render %s: %s", rel_path, exc.cause)

        return ContentItem(
            path=rel_path,
            slug=self.matcher.slug_for(rel_path),
            metadata=metadata,
            body=html,
        )


__all__ = ["ContentCompiler"]
