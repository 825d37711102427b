"""Common literal values used across roxy.

These constants keep defaults and reserved names centralized so the pipeline,
configuration loader, and tests can import the same values without drifting.
Intended for internal use within the roxy package.

Examples
--------
>>> from roxy import _constants
>>> _constants.DEFAULT_LAYOUT
'index.html'
>>> "md" in _constants.DEFAULT_CONTENT_EXTENSIONS
True
"""

HEADER_DELIMITER = b"---"
LAYOUT_KEY = "layout"
DEFAULT_LAYOUT = "index.html"
DEFAULT_SECTION = "default"
SECTION_CONTEXT_KEY = "data"
OUTPUT_FILENAME = "index.html"
INDEX_STEM = "index"
DEFAULT_CONTENT_EXTENSIONS = ("md", "markdown", "html")
DEFAULT_CONFIG_FILENAME = "roxy.yaml"
