"""Utility helpers shared by the roxy configuration loader."""

from __future__ import annotations

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_extensions(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize extension definitions into lower-case names without dots."""
    if isinstance(value, str):
        segments: list[object] = list(value.split())
    elif isinstance(value, list):
        segments = value
    else:
        msg = "'content_extensions' must be a list or a space-separated string."
        raise SiteConfigError(msg)
    normalized: list[str] = []
    for segment in segments:
        text = str(segment).strip().lstrip(".").lower()
        if text and text not in normalized:
            normalized.append(text)
    if not normalized:
        msg = "'content_extensions' must name at least one extension."
        raise SiteConfigError(msg)
    return tuple(normalized)


def _parse_bool(value: object, *, key: str) -> bool:
    """Return ``value`` as a bool, accepting the usual YAML spellings."""
    match value:
        case bool():
            return value
        case str() as text if text.strip().lower() in {"true", "yes", "on", "1"}:
            return True
        case str() as text if text.strip().lower() in {"false", "no", "off", "0"}:
            return False
        case _:
            msg = f"'{key}' must be a boolean."
            raise SiteConfigError(msg)


__all__ = ["_normalize_extensions", "_optional_str", "_parse_bool"]
