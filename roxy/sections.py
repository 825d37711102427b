"""Group compiled items by their top-level path segment.

The resulting mapping is exposed to every layout render as ``data`` so
templates can build navigation, e.g. ``{% for post in data.blog %}``.

Example
-------
>>> from roxy.models import ContentItem
>>> items = [
...     ContentItem("blog/post.md", "/blog/post", {}, ""),
...     ContentItem("about.md", "/about", {}, ""),
... ]
>>> index = build_section_index(items)
>>> [item.path for item in index["blog"]]
['blog/post.md']
>>> [item.path for item in index["default"]]
['about.md']
"""

from __future__ import annotations

import collections.abc as cabc
import types

from ._constants import DEFAULT_SECTION
from .models import ContentItem, SectionIndex


def section_for(path: str) -> str:
    """Return the section key for a slash-separated source ``path``."""
    section, sep, _ = path.partition("/")
    return section if sep else DEFAULT_SECTION


def build_section_index(items: cabc.Iterable[ContentItem]) -> SectionIndex:
    """Return a read-only mapping of section name to items, in input order.

    The ``default`` bucket is always present, even when empty. Items are held
    by reference; nothing is copied.
    """
    groups: dict[str, list[ContentItem]] = {DEFAULT_SECTION: []}
    for item in items:
        groups.setdefault(section_for(item.path), []).append(item)
    return types.MappingProxyType(
        {section: tuple(members) for section, members in groups.items()}
    )


__all__ = ["build_section_index", "section_for"]
