"""Exception types raised by the roxy build pipeline."""

from __future__ import annotations


class RoxyError(RuntimeError):
    """Base class for roxy pipeline failures."""


class TemplateLoadError(RoxyError):
    """Raised when the layouts tree contains a template that cannot be compiled."""


class HighlightError(RoxyError):
    """Raised when the highlighting theme is unusable."""


class TemplateRenderError(RoxyError):
    """Raised when a layout or inline template fails to render.

    Attributes
    ----------
    template : str
        Name of the layout, or ``"<inline>"`` for the inline pass.
    """

    def __init__(self, template: str, cause: BaseException) -> None:
        self.template = template
        self.cause = cause
        super().__init__(f"{template}: {cause}")


__all__ = [
    "HighlightError",
    "RoxyError",
    "TemplateLoadError",
    "TemplateRenderError",
]
