"""Behaviour tests for building a small site end to end.

These pytest-bdd scenarios are driven by ``features/site_build.feature``. Each
scenario writes a content tree and layouts into ``tmp_path``, runs
:func:`roxy.pipeline.build_site`, and inspects the generated HTML with
BeautifulSoup.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v`` after installing the test
extras (``pip install -e .[test]``). No network access is required.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from roxy.config import SiteConfig
from roxy.pipeline import build_site

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(FEATURE_FILE)

STYLESHEET = "body { color: #333; }\n"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@given("a content tree with pages, a code sample, and a stylesheet")
def given_content_tree(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write content, layouts, and a static asset for the scenario."""
    content = tmp_path / "content"
    layouts = tmp_path / "layouts"
    _write(content / "index.md", "---\ntitle: Home\n---\nWelcome.\n")
    _write(
        content / "blog" / "hello.md",
        "---\ntitle: Hello\n---\n```python\nprint('hello')\n```\n",
    )
    _write(content / "css" / "site.css", STYLESHEET)
    _write(
        layouts / "index.html",
        "<ul>{% for post in data.blog %}"
        '<li><a href="{{ post.slug }}">{{ post.metadata.title }}</a></li>'
        "{% endfor %}</ul>\n<main>{{ body }}</main>\n",
    )
    scenario_state["config"] = SiteConfig(
        output_dir=tmp_path / "build", content_dir=content, layouts_dir=layouts
    )


@given("a page that names a layout which does not exist")
def given_missing_layout_page(scenario_state: dict[str, object]) -> None:
    """Add a page whose header selects an unknown layout."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    _write(
        config.content_dir / "blog" / "orphan.md",
        "---\ntitle: Orphan\nlayout: gone.html\n---\nLost.\n",
    )


@when(parsers.parse('I build the site with the "{theme}" theme'))
def when_build_with_theme(theme: str, scenario_state: dict[str, object]) -> None:
    """Build the site with the given highlighting theme."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    scenario_state["report"] = build_site(dc.replace(config, theme=theme))


@when("I build the site without a theme")
def when_build_plain(scenario_state: dict[str, object]) -> None:
    """Build the site without highlighting."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    scenario_state["report"] = build_site(config)


@when("I build the site twice without a theme")
def when_build_twice(scenario_state: dict[str, object]) -> None:
    """Build twice, capturing the output tree after each run."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    build_site(config)
    scenario_state["first"] = _snapshot(config.output_dir)
    build_site(config)
    scenario_state["second"] = _snapshot(config.output_dir)


@then("the home page lists the blog posts")
def then_home_lists_posts(scenario_state: dict[str, object]) -> None:
    """Verify the section index reached the home page layout."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    soup = BeautifulSoup(
        (config.output_dir / "index.html").read_text(encoding="utf-8"), "html.parser"
    )
    links = [(a["href"], a.get_text()) for a in soup.select("ul li a")]
    assert links == [("/blog/hello", "Hello")], "expected the blog post link"


@then(parsers.parse('the blog post contains a highlighted "{language}" code block'))
def then_post_highlighted(language: str, scenario_state: dict[str, object]) -> None:
    """Verify the post's code block was highlighted."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    html = (config.output_dir / "blog" / "hello" / "index.html").read_text(
        encoding="utf-8"
    )
    block = BeautifulSoup(html, "html.parser").select_one("main div.codehilite")
    assert block is not None, "expected a highlighted code block"
    assert block.get("data-language") == language


@then("the stylesheet is copied unchanged")
def then_stylesheet_copied(scenario_state: dict[str, object]) -> None:
    """Verify the static asset mirrors its source."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    copied = config.output_dir / "css" / "site.css"
    assert copied.read_text(encoding="utf-8") == STYLESHEET


@then("the page with the missing layout has no output")
def then_orphan_missing(scenario_state: dict[str, object]) -> None:
    """Verify the failing page was skipped and reported."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    assert not (config.output_dir / "blog" / "orphan" / "index.html").exists()
    report = scenario_state["report"]
    assert "blog/orphan.md" in report.failed  # type: ignore[attr-defined]


@then("the blog post is still rendered")
def then_post_rendered(scenario_state: dict[str, object]) -> None:
    """Verify sibling pages were still written."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    assert (config.output_dir / "blog" / "hello" / "index.html").is_file()


@then("both builds produce identical files")
def then_identical(scenario_state: dict[str, object]) -> None:
    """Verify the second build reproduced the first byte for byte."""
    assert scenario_state["first"] == scenario_state["second"]
    assert scenario_state["first"], "expected the build to produce files"
