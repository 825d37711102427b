"""Utilities for rendering markdown and syntax-highlighted code blocks.

The highlighting theme is either a Pygments style name (``"monokai"``) or a
path to a YAML theme file::

    background_color: "#1e1e1e"
    styles:
      Comment: "italic #6a9955"
      Keyword: "bold #569cd6"
      Token.Literal.String: "#ce9178"

Highlighted blocks carry inline styles, so pages need no extra stylesheet.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape
from pathlib import Path

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter
from pygments.style import Style
from pygments.styles import get_style_by_name
from pygments.token import string_to_tokentype
from pygments.util import ClassNotFound, OptionError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import HighlightError

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
BASE_EXTENSIONS = ("fenced_code", "tables", "sane_lists")


def resolve_style(theme: str | Path | None) -> type[Style] | None:
    """Return the Pygments style for ``theme``, or ``None`` to skip highlighting.

    Parameters
    ----------
    theme : str or Path or None
        Pygments style name or path to a YAML theme file.

    Returns
    -------
    type[Style] or None
        Style class usable by ``HtmlFormatter``.

    Raises
    ------
    HighlightError
        If the style name is unknown or the theme file cannot be loaded.
    """
    if theme is None or not str(theme).strip():
        return None
    path = Path(theme)
    if path.is_file():
        return load_theme_file(path)
    try:
        return get_style_by_name(str(theme).strip())
    except ClassNotFound as exc:
        msg = f"Unknown highlighting theme '{theme}'."
        raise HighlightError(msg) from exc


def load_theme_file(path: Path) -> type[Style]:
    """Build a Pygments style class from a YAML theme file.

    Raises
    ------
    HighlightError
        If the file is unreadable, malformed, or names unknown tokens or
        invalid colours.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = loader.load(handle) or {}
    except (OSError, UnicodeDecodeError, YAMLError) as exc:
        msg = f"Unable to read highlighting theme '{path}': {exc}"
        raise HighlightError(msg) from exc
    if not isinstance(raw, dict):
        msg = f"Highlighting theme '{path}' must be a mapping."
        raise HighlightError(msg)

    styles_raw = raw.get("styles") or {}
    if not isinstance(styles_raw, dict):
        msg = f"'styles' in highlighting theme '{path}' must be a mapping."
        raise HighlightError(msg)
    styles = {
        string_to_tokentype(_token_name(str(token))): str(rule)
        for token, rule in styles_raw.items()
    }
    attrs: dict[str, typ.Any] = {"styles": styles}
    for key in ("background_color", "highlight_color"):
        if raw.get(key):
            attrs[key] = str(raw[key])
    name = str(raw.get("name") or path.stem)
    try:
        style = typ.cast("type[Style]", type(f"{name}_style", (Style,), attrs))
        HtmlFormatter(style=style, noclasses=True).get_style_defs()
    except (AssertionError, KeyError, ValueError) as exc:
        msg = f"Invalid highlighting theme '{path}': {exc}"
        raise HighlightError(msg) from exc
    return style


def _token_name(token: str) -> str:
    return token.removeprefix("Token.")


class LanguageHtmlFormatter(HtmlFormatter):
    """HTML formatter that tags the wrapping ``div`` with the block language.

    ``codehilite`` instantiates the formatter once per code block and passes
    the resolved language as ``lang_str``, so fenced blocks of any kind and
    indented blocks (reported as ``text``) are each labelled.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str or "text"

    def _wrap_div(
        self, inner: typ.Iterable[tuple[int, str]]
    ) -> typ.Iterator[tuple[int, str]]:
        attribute = f' data-language="{escape(self.language, quote=True)}"'
        for index, (kind, text) in enumerate(super()._wrap_div(inner)):
            if index == 0:
                text = text.replace("<div", f"<div{attribute}", 1)
            yield kind, text


class HtmlContentRenderer:
    """Render markdown with optional syntax highlighting."""

    def __init__(self, theme: str | Path | None = None) -> None:
        """Initialize the renderer and resolve the highlighting theme.

        Parameters
        ----------
        theme : str or Path or None, optional
            Pygments style name or YAML theme file. ``None`` renders fenced
            code as plain ``<pre><code>`` blocks.

        Raises
        ------
        HighlightError
            If ``theme`` cannot be resolved.
        """
        self.theme = theme
        self.style = resolve_style(theme)

    @property
    def highlighting(self) -> bool:
        """Return ``True`` when fenced code is highlighted."""
        return self.style is not None

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions.

        Raises
        ------
        HighlightError
            If Pygments fails while highlighting a code block.
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = list(BASE_EXTENSIONS)
        extension_configs: dict[str, dict[str, typ.Any]] = {}
        if self.style is not None:
            extensions.append("codehilite")
            extension_configs["codehilite"] = {
                "linenums": False,
                "guess_lang": False,
                "css_class": "codehilite",
                "pygments_style": self.style,
                "pygments_formatter": LanguageHtmlFormatter,
                "lang_prefix": "",
                "noclasses": True,
            }
        md = Markdown(extensions=extensions, extension_configs=extension_configs)
        if self.style is None:
            return md.convert(normalized)
        try:
            return md.convert(normalized)
        except (ClassNotFound, OptionError) as exc:
            msg = f"Highlighting failed with theme '{self.theme}': {exc}"
            raise HighlightError(msg) from exc

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = [
    "HtmlContentRenderer",
    "LanguageHtmlFormatter",
    "load_theme_file",
    "resolve_style",
]
