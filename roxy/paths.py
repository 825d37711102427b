"""Classify source files and derive slugs and output locations.

:class:`ContentMatcher` replaces a loose filename pattern with an explicit
grammar: a content file name is ``<stem>.<extension>`` where ``<extension>``
belongs to an enumerated set, optionally followed by ``.<qualifier>`` suffixes
when qualifiers are enabled. Everything else under the content root is a
passthrough asset.

Examples
--------
>>> matcher = ContentMatcher()
>>> matcher.slug_for("blog/post.md")
'/blog/post'
>>> matcher.slug_for("about/index.html")
'/about/'
>>> str(matcher.output_dir_for("about.md"))
'about'
>>> matcher.is_content("logo.png")
False
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
from pathlib import Path, PurePosixPath

from ._constants import DEFAULT_CONTENT_EXTENSIONS, INDEX_STEM


def is_hidden(name: str) -> bool:
    """Return ``True`` for dot-files."""
    return name.startswith(".")


def walk_source_files(root: Path) -> cabc.Iterator[Path]:
    """Yield regular, non-hidden files below ``root`` in sorted order.

    Only the file's own name is checked for a leading dot; files inside
    dot-directories are still yielded.
    """
    for candidate in sorted(root.rglob("*")):
        if candidate.is_file() and not is_hidden(candidate.name):
            yield candidate


@dc.dataclass(frozen=True, slots=True)
class ContentName:
    """Pieces of a content file name split around its recognized extension.

    Attributes
    ----------
    stem_path : str
        Slash-separated path with the extension and qualifier removed.
    stem : str
        Final segment of ``stem_path``.
    extension : str
        Recognized extension, lower-cased and without the dot.
    qualifier : str
        Trailing text after the extension (for example ``".txt"``), or ``""``.
    """

    stem_path: str
    stem: str
    extension: str
    qualifier: str


class ContentMatcher:
    """Explicit matcher over an enumerated content-extension set."""

    def __init__(
        self,
        extensions: cabc.Iterable[str] = DEFAULT_CONTENT_EXTENSIONS,
        *,
        allow_qualifiers: bool = False,
    ) -> None:
        """Initialize the matcher.

        Parameters
        ----------
        extensions : Iterable[str], optional
            Recognized content extensions, with or without a leading dot.
            Matching is case-insensitive.
        allow_qualifiers : bool, optional
            When ``True`` the first recognized suffix in a file name wins and
            anything after it is treated as a qualifier, so ``draft.md.txt`` is
            content. When ``False`` (default) only the final suffix is
            considered, so ``manual.html.gz`` stays an asset.
        """
        self.extensions = frozenset(
            ext.strip().lstrip(".").lower() for ext in extensions if ext.strip()
        )
        self.allow_qualifiers = allow_qualifiers

    def split(self, path: str) -> ContentName | None:
        """Split ``path`` around its recognized extension, or return ``None``."""
        parent, _, name = path.rpartition("/")
        parts = name.split(".")
        candidates = range(1, len(parts))
        if not self.allow_qualifiers:
            candidates = range(len(parts) - 1, len(parts))
        for idx in candidates:
            extension = parts[idx].lower()
            if extension not in self.extensions:
                continue
            stem = ".".join(parts[:idx])
            qualifier = "".join(f".{part}" for part in parts[idx + 1 :])
            stem_path = f"{parent}/{stem}" if parent else stem
            return ContentName(
                stem_path=stem_path,
                stem=stem,
                extension=extension,
                qualifier=qualifier,
            )
        return None

    def is_content(self, path: str) -> bool:
        """Return ``True`` when ``path`` carries a recognized content extension."""
        return self.split(path) is not None

    def slug_for(self, path: str) -> str:
        """Return the public URL path for the content file at ``path``.

        The extension and qualifier are dropped, then a trailing ``index``
        segment is removed while its preceding slash is kept.

        Raises
        ------
        ValueError
            If ``path`` is not a content file.
        """
        name = self._require(path)
        stem_path = name.stem_path
        if name.stem.lower() == INDEX_STEM:
            stem_path = stem_path[: -len(name.stem)]
        return f"/{stem_path}"

    def output_dir_for(self, path: str) -> PurePosixPath:
        """Return the output directory, relative to the output root, for ``path``.

        ``about.md`` maps to ``about``, ``index.md`` to the root and
        ``blog/post.md`` to ``blog/post``.
        """
        name = self._require(path)
        directory = PurePosixPath(path).parent
        if not name.stem or name.stem.lower() == INDEX_STEM:
            return directory
        return directory / name.stem

    def _require(self, path: str) -> ContentName:
        name = self.split(path)
        if name is None:
            msg = f"'{path}' does not have a recognized content extension."
            raise ValueError(msg)
        return name


__all__ = ["ContentMatcher", "ContentName", "is_hidden", "walk_source_files"]
