"""Render compiled items through their layouts and write the pages.

Each item lands at ``<output>/<derived-dir>/index.html``. A layout failure is
logged and skips that item only; filesystem errors abort the pass.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import types
import typing as typ
from pathlib import Path

from ._constants import (
    DEFAULT_LAYOUT,
    LAYOUT_KEY,
    OUTPUT_FILENAME,
    SECTION_CONTEXT_KEY,
)
from .errors import TemplateRenderError
from .models import ContentItem, MaterializeResult, SectionIndex
from .paths import ContentMatcher
from .templates import TemplateEngine

logger = logging.getLogger(__name__)


def build_base_context(index: SectionIndex) -> cabc.Mapping[str, typ.Any]:
    """Return the read-only context shared by every layout render."""
    return types.MappingProxyType({SECTION_CONTEXT_KEY: index})


def build_render_context(
    base: cabc.Mapping[str, typ.Any], item: ContentItem
) -> dict[str, typ.Any]:
    """Return a fresh context of ``base`` overlaid with ``item``'s fields.

    Item fields win on key collisions; ``base`` is never modified.
    """
    context = dict(base)
    context.update(item.as_context())
    return context


class OutputMaterializer:
    """Write one rendered page per content item."""

    def __init__(
        self,
        output_dir: Path,
        *,
        engine: TemplateEngine,
        matcher: ContentMatcher,
        default_layout: str = DEFAULT_LAYOUT,
    ) -> None:
        """Initialize the materializer.

        Parameters
        ----------
        output_dir : Path
            Root of the generated site.
        engine : TemplateEngine
            Engine holding the layouts.
        matcher : ContentMatcher
            Derives each item's output directory from its source path.
        default_layout : str, optional
            Layout used when an item's metadata names none.
        """
        self.output_dir = output_dir
        self.engine = engine
        self.matcher = matcher
        self.default_layout = default_layout

    def output_path_for(self, item: ContentItem) -> Path:
        """Return the file the rendered ``item`` is written to."""
        relative_dir = self.matcher.output_dir_for(item.path)
        return self.output_dir / relative_dir / OUTPUT_FILENAME

    def run(
        self,
        items: cabc.Iterable[ContentItem],
        base_context: cabc.Mapping[str, typ.Any],
    ) -> MaterializeResult:
        """Render and write every item.

        Returns
        -------
        MaterializeResult
            Written paths plus a mapping of source path to error message for
            items whose layout failed.

        Raises
        ------
        OSError
            If an output directory cannot be created or a page cannot be
            written.
        """
        result = MaterializeResult()
        for item in items:
            output_path = self.output_path_for(item)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            layout = item.metadata.get(LAYOUT_KEY, self.default_layout)
            context = build_render_context(base_context, item)
            try:
                html = self.engine.render(layout, context)
            except TemplateRenderError as exc:
                logger.error("Error rendering template %s: %s", item.path, exc)
                result.failed[item.path] = str(exc)
                continue
            output_path.write_text(html, encoding="utf-8")
            logger.debug("wrote %s", output_path)
            result.written.append(output_path)
        return result


__all__ = [
    "OutputMaterializer",
    "build_base_context",
    "build_render_context",
]
