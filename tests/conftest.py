"""Shared fixtures that lay out a small site on disk.

The ``sample_site`` fixture writes a content tree, a layouts directory, and
returns a :class:`~roxy.config.SiteConfig` pointing at a fresh output
directory. The tree deliberately mixes pages, a page naming a missing layout,
inline template expressions, hidden files, undecodable bodies, and
passthrough assets so each test can assert on the slice it cares about.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from roxy.config import SiteConfig

LOGO_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"

PAGE_LAYOUT = (
    "<html><head><title>{{ metadata.title }}</title></head><body>\n"
    "<nav>\n"
    "{% for post in data.blog %}\n"
    '<a class="post" href="{{ post.slug }}">{{ post.metadata.title }}</a>\n'
    "{% endfor %}\n"
    "</nav>\n"
    '<main data-slug="{{ slug }}" data-path="{{ path }}">{{ body }}</main>\n'
    "</body></html>\n"
)

POST_LAYOUT = (
    '{% include "partials/banner.html" %}\n'
    '<article class="post">{{ body }}</article>\n'
    "<footer>{{ data.default | length }} top-level page(s)</footer>\n"
)

CONTENT_FILES: dict[str, str | bytes] = {
    "index.md": "---\ntitle: Home\n---\n# Welcome\n\nHello from the home page.\n",
    "about.md": "---\ntitle: About\n---\nAbout this site.\n",
    "blog/post.md": (
        "---\n"
        "title: First Post\n"
        "layout: post.html\n"
        "---\n"
        "Some code:\n\n"
        "```python\n"
        "def greet():\n"
        "    return 'hi'\n"
        "```\n"
    ),
    "blog/broken.md": "---\ntitle: Broken\nlayout: missing.html\n---\nNever shown.\n",
    "docs/index.html": "---\ntitle: Docs\n---\n<p>Docs landing</p>\n",
    "inline.md": "Total: {{ 1 + 2 }}\n",
    "bad-inline.md": "Broken {{ expression\n",
    "binary.md": b"---\ntitle: Binary\n---\n\xff\xfe\xfd\n",
    ".draft.md": "---\ntitle: Hidden\n---\nSecret.\n",
    "notes.txt": "plain notes\n",
    "images/logo.png": LOGO_BYTES,
    ".gitkeep": "",
}

LAYOUT_FILES: dict[str, str] = {
    "index.html": PAGE_LAYOUT,
    "post.html": POST_LAYOUT,
    "partials/banner.html": '<header class="banner">Blog</header>\n',
}


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    """Write ``files`` (relative path to text or bytes) below ``root``."""
    for rel_path, payload in files.items():
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, bytes):
            target.write_bytes(payload)
        else:
            target.write_text(payload, encoding="utf-8")


@pytest.fixture
def sample_site(tmp_path: Path) -> SiteConfig:
    """Write the sample content and layouts and return a config for them."""
    content_dir = tmp_path / "content"
    layouts_dir = tmp_path / "layouts"
    write_tree(content_dir, CONTENT_FILES)
    write_tree(layouts_dir, LAYOUT_FILES)
    return SiteConfig(
        output_dir=tmp_path / "build",
        content_dir=content_dir,
        layouts_dir=layouts_dir,
    )
