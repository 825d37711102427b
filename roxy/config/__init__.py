"""Load and validate the optional ``roxy.yaml`` site configuration.

The primary entry point is :func:`load_site_config`, which applies built-in
defaults for every key the file omits and returns a :class:`SiteConfig` ready
for :class:`~roxy.pipeline.SiteBuilder`. Command-line options are layered on
top with :func:`dataclasses.replace`.

Examples
--------
>>> from roxy.config import load_site_config
>>> load_site_config().layouts_dir
PosixPath('layouts')
"""

from .loader import load_site_config
from .models import (
    DEFAULT_CONTENT_DIR,
    DEFAULT_LAYOUTS_DIR,
    DEFAULT_OUTPUT_DIR,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "DEFAULT_CONTENT_DIR",
    "DEFAULT_LAYOUTS_DIR",
    "DEFAULT_OUTPUT_DIR",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
