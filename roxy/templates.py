"""Jinja2 environment shared by the inline pass and the layout renders.

:class:`TemplateEngine` compiles every layout up front so a malformed template
anywhere in the layouts tree stops the build before any content is compiled.
Once constructed the engine is only read from.

Example
-------
>>> from pathlib import Path
>>> engine = TemplateEngine(Path("layouts"))  # doctest: +SKIP
>>> engine.render("index.html", {"body": "<p>Hi</p>"})  # doctest: +SKIP
'<html>...'
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, TemplateError

from .errors import TemplateLoadError, TemplateRenderError
from .paths import walk_source_files

logger = logging.getLogger(__name__)

INLINE_TEMPLATE_NAME = "<inline>"

# Python errors a template expression can raise at render time.
_RUNTIME_ERRORS = (ArithmeticError, AttributeError, LookupError, TypeError, ValueError)


class TemplateEngine:
    """Compile and render layouts from a directory of Jinja templates."""

    def __init__(self, layouts_dir: Path) -> None:
        """Build the environment and eagerly compile every layout.

        Parameters
        ----------
        layouts_dir : Path
            Directory holding the templates. Names are slash-separated paths
            relative to this directory. A missing directory yields an engine
            without layouts.

        Raises
        ------
        TemplateLoadError
            If any template fails to parse or decode.
        """
        self.layouts_dir = layouts_dir
        self.env = Environment(
            loader=FileSystemLoader(str(layouts_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._templates = self._load_all()
        logger.debug(
            "loaded %d layout(s) from %s", len(self._templates), self.layouts_dir
        )

    @property
    def template_names(self) -> list[str]:
        """Return the names of all compiled layouts."""
        return sorted(self._templates)

    def render(self, layout: str, context: cabc.Mapping[str, typ.Any]) -> str:
        """Render the named layout with ``context``.

        Raises
        ------
        TemplateRenderError
            If the layout does not exist or fails while rendering.
        """
        template = self._templates.get(layout)
        if template is None:
            try:
                template = self.env.get_template(layout)
            except TemplateError as exc:
                raise TemplateRenderError(layout, exc) from exc
        return self._render(layout, template, context)

    def render_inline(self, source: str) -> str:
        """Render ``source`` as a template with an empty context.

        Inline expressions can include layouts and macros from the layouts
        directory but see no page or section data.
        """
        try:
            template = self.env.from_string(source)
        except TemplateError as exc:
            raise TemplateRenderError(INLINE_TEMPLATE_NAME, exc) from exc
        return self._render(INLINE_TEMPLATE_NAME, template, {})

    @staticmethod
    def _render(
        name: str, template: Template, context: cabc.Mapping[str, typ.Any]
    ) -> str:
        try:
            return template.render(context)
        except TemplateError as exc:
            raise TemplateRenderError(name, exc) from exc
        except _RUNTIME_ERRORS as exc:
            raise TemplateRenderError(name, exc) from exc

    def _load_all(self) -> dict[str, Template]:
        """Compile every non-hidden file under the layouts directory."""
        if not self.layouts_dir.is_dir():
            return {}
        templates: dict[str, Template] = {}
        for path in walk_source_files(self.layouts_dir):
            name = path.relative_to(self.layouts_dir).as_posix()
            try:
                templates[name] = self.env.get_template(name)
            except TemplateError as exc:
                msg = f"Failed to parse template '{name}': {exc}"
                raise TemplateLoadError(msg) from exc
            except UnicodeDecodeError as exc:
                msg = f"Template '{name}' is not valid UTF-8: {exc}"
                raise TemplateLoadError(msg) from exc
        return templates


__all__ = ["INLINE_TEMPLATE_NAME", "TemplateEngine"]
