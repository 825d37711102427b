r"""Read the optional ``key: value`` metadata block at the top of a content file.

A header opens with ``---`` as the first three bytes of the file and closes on
the first line starting with ``-``. Lines without a colon are ignored.

Example
-------
>>> import io
>>> stream = io.BytesIO(b"---\ntitle: Hello\n---\nBody text\n")
>>> read_header(stream)
{'title': 'Hello'}
>>> stream.read()
b'Body text\n'
"""

from __future__ import annotations

import typing as typ

from ._constants import HEADER_DELIMITER


def read_header(stream: typ.BinaryIO) -> dict[str, str]:
    """Consume the metadata header from ``stream`` and return its mapping.

    Parameters
    ----------
    stream : BinaryIO
        Readable, seekable stream positioned at the start of the file.

    Returns
    -------
    dict[str, str]
        Trimmed keys and values, split on the first colon of each line. Empty
        when the stream does not open with ``---``.

    Notes
    -----
    When no header is present the stream is rewound to position zero. In
    every case the cursor is left on the first byte of the body.
    """
    if stream.read(len(HEADER_DELIMITER)) != HEADER_DELIMITER:
        stream.seek(0)
        return {}

    metadata: dict[str, str] = {}
    for raw_line in iter(stream.readline, b""):
        line = raw_line.decode("utf-8", errors="replace")
        if line.startswith("-"):
            break
        key, sep, value = line.partition(":")
        if sep:
            metadata[key.strip()] = value.strip()
    return metadata


__all__ = ["read_header"]
