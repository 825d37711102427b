"""Cyclopts CLI entrypoint for building roxy sites.

The ``roxy`` console script renders a content tree of markdown files into a
mirrored tree of HTML pages using the layouts directory, and copies every
other file verbatim. Options can also be supplied through ``ROXY_*``
environment variables (for example ``ROXY_THEME=monokai``) or a ``roxy.yaml``
file in the working directory.

Examples
--------
Build with the defaults (``content/`` into ``build/`` using ``layouts/``):

>>> from roxy.cli import main
>>> main()  # doctest: +SKIP

Build with highlighting into a custom directory:

>>> from roxy.cli import app
>>> app(["build", "--theme", "monokai", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from pygments.styles import get_all_styles
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONFIG_FILENAME
from .config import SiteConfig, SiteConfigError, load_site_config
from .errors import RoxyError
from .pipeline import SiteBuilder

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)

app = App(
    name="roxy",
    help="A very small static site generator.",
    config=cyclopts.config.Env("ROXY_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    """Send pipeline log records to stdout as bare messages."""
    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    logging.getLogger("roxy").setLevel(logging.DEBUG if verbose else logging.INFO)


def _resolve_config(
    config: Path | None,
    *,
    output_dir: Path | None,
    content_dir: Path | None,
    layouts_dir: Path | None,
    theme: str | None,
) -> SiteConfig:
    """Load ``config`` and layer command-line overrides on top.

    Without an explicit ``config`` the default ``roxy.yaml`` is read when
    present; a named file must exist.
    """
    if config is None:
        site_config = load_site_config(DEFAULT_CONFIG, required=False)
    else:
        site_config = load_site_config(config, required=True)
    overrides: dict[str, typ.Any] = {
        "output_dir": output_dir,
        "content_dir": content_dir,
        "layouts_dir": layouts_dir,
        "theme": theme,
    }
    return dc.replace(
        site_config, **{key: value for key, value in overrides.items() if value}
    )


@app.command(help="Render the content tree into HTML pages.")
def build(
    *,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Directory receiving the generated site")
    ] = None,
    content_dir: typ.Annotated[
        Path | None, Parameter(help="Directory of content files and assets")
    ] = None,
    layouts_dir: typ.Annotated[
        Path | None, Parameter(help="Directory of Jinja layouts")
    ] = None,
    theme: typ.Annotated[
        str | None,
        Parameter(help="Pygments style name or YAML theme file for code blocks"),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config (default roxy.yaml)")
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log skipped files and copied assets")
    ] = False,
) -> None:
    """Build the site and report the generated pages.

    Parameters
    ----------
    output_dir : Path or None, optional
        Override the output directory (default ``build/``).
    content_dir : Path or None, optional
        Override the content directory (default ``content/``).
    layouts_dir : Path or None, optional
        Override the layouts directory (default ``layouts/``).
    theme : str or None, optional
        Highlighting theme; omit to leave code blocks unhighlighted.
    config : Path or None, optional
        Site configuration file. When omitted ``roxy.yaml`` is used if it
        exists; an explicitly named file must exist, even ``roxy.yaml``.
    verbose : bool, optional
        Emit debug-level progress.

    Returns
    -------
    None
        Writes the site and prints progress lines.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is invalid, a layout or the
        theme is unusable, or a filesystem error aborts the build.
    """
    _configure_logging(verbose=verbose)
    try:
        site_config = _resolve_config(
            config,
            output_dir=output_dir,
            content_dir=content_dir,
            layouts_dir=layouts_dir,
            theme=theme,
        )
    except (SiteConfigError, TypeError, YAMLError, OSError) as exc:
        print(f"error: {exc}")
        raise SystemExit(1) from exc

    try:
        report = SiteBuilder(site_config).run()
    except (RoxyError, OSError) as exc:
        print(f"error: {exc}")
        raise SystemExit(1) from exc

    for path in report.written:
        print(f"wrote {_format_path(path)}")

    if report.failed:
        print(f"{len(report.failed)} page(s) failed to render")
    if report.copy_failures:
        print(f"{len(report.copy_failures)} asset(s) failed to copy")
    print(f"Output files at {report.output_dir.resolve()}")


@app.command(help="List the highlighting themes bundled with Pygments.")
def themes() -> None:
    """Print every Pygments style name, one per line."""
    for name in sorted(get_all_styles()):
        print(name)


def main() -> None:
    """Invoke the Cyclopts application that powers the `roxy` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
