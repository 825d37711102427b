"""Shared dataclasses used by the build pipeline."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import types
import typing as typ
from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class ContentItem:
    """A compiled content file ready for layout rendering.

    Attributes
    ----------
    path : str
        Slash-separated source path relative to the content root.
    slug : str
        Public URL path; always starts with ``/``.
    metadata : Mapping[str, str]
        Read-only header values. ``layout`` selects the template.
    body : str
        Rendered HTML for the markdown body.
    """

    path: str
    slug: str
    metadata: cabc.Mapping[str, str]
    body: str

    def __post_init__(self) -> None:
        """Freeze ``metadata`` into a read-only copy owned by the item."""
        frozen = types.MappingProxyType(dict(self.metadata))
        object.__setattr__(self, "metadata", frozen)

    def as_context(self) -> dict[str, typ.Any]:
        """Return the item's fields as a fresh template context mapping."""
        return {
            "path": self.path,
            "slug": self.slug,
            "metadata": self.metadata,
            "body": self.body,
        }


SectionIndex = cabc.Mapping[str, tuple[ContentItem, ...]]


@dc.dataclass(slots=True)
class MaterializeResult:
    """Outcome of writing rendered pages."""

    written: list[Path] = dc.field(default_factory=list)
    failed: dict[str, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class StaticCopyResult:
    """Outcome of copying passthrough assets."""

    copied: list[Path] = dc.field(default_factory=list)
    failed: dict[str, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class BuildReport:
    """Summary of a complete pipeline run.

    Attributes
    ----------
    output_dir : Path
        Root of the generated site.
    items : list[ContentItem]
        Compiled items in traversal order.
    written : list[Path]
        Rendered pages written to disk.
    failed : dict[str, str]
        Source path to error message for items whose layout failed.
    copied : list[Path]
        Passthrough assets copied to the output tree.
    copy_failures : dict[str, str]
        Source path to error message for assets that could not be copied.
    """

    output_dir: Path
    items: list[ContentItem]
    written: list[Path]
    failed: dict[str, str]
    copied: list[Path]
    copy_failures: dict[str, str]

    @property
    def ok(self) -> bool:
        """Return ``True`` when every item rendered and every asset copied."""
        return not self.failed and not self.copy_failures


__all__ = [
    "BuildReport",
    "ContentItem",
    "MaterializeResult",
    "SectionIndex",
    "StaticCopyResult",
]
