"""Load site configuration YAML into a typed dataclass."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _normalize_extensions, _optional_str, _parse_bool
from .models import SiteConfig, SiteConfigError

KNOWN_KEYS = frozenset(
    {
        "output_dir",
        "content_dir",
        "layouts_dir",
        "theme",
        "content_extensions",
        "allow_qualifiers",
        "default_layout",
    }
)


def load_site_config(
    path: Path | None = None, *, required: bool = True
) -> SiteConfig:
    """Load the YAML configuration describing a site build.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to the YAML file (for example, ``roxy.yaml``). When
        ``None`` the built-in defaults are returned.
    required : bool, optional
        When ``False`` a missing file yields the defaults instead of an error.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for absent keys.

    Raises
    ------
    FileNotFoundError
        If ``required`` is set and the file does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a key is unknown or a value is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from roxy.config import load_site_config
    >>> config = load_site_config(Path("roxy.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('build')
    """
    if path is None:
        return SiteConfig()
    if not path.exists():
        if not required:
            return SiteConfig()
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}."
        raise SiteConfigError(msg)
    return _build_site_config(raw)


def _build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a SiteConfig from a parsed mapping, applying defaults."""
    base = SiteConfig()
    extensions = base.content_extensions
    if raw.get("content_extensions") is not None:
        extensions = _normalize_extensions(raw["content_extensions"])
    allow_qualifiers = base.allow_qualifiers
    if raw.get("allow_qualifiers") is not None:
        allow_qualifiers = _parse_bool(raw["allow_qualifiers"], key="allow_qualifiers")
    return SiteConfig(
        output_dir=_path_or(raw.get("output_dir"), base.output_dir),
        content_dir=_path_or(raw.get("content_dir"), base.content_dir),
        layouts_dir=_path_or(raw.get("layouts_dir"), base.layouts_dir),
        theme=_optional_str(raw.get("theme")),
        content_extensions=extensions,
        allow_qualifiers=allow_qualifiers,
        default_layout=_optional_str(raw.get("default_layout")) or base.default_layout,
    )


def _path_or(value: object | None, default: Path) -> Path:
    text = _optional_str(value)
    return Path(text) if text else default


__all__ = ["load_site_config"]
