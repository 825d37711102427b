"""Unit tests for metadata header parsing."""

from __future__ import annotations

import io

from roxy.header import read_header


def test_missing_header_rewinds_stream() -> None:
    """Files without a leading delimiter have no metadata and keep their body."""
    stream = io.BytesIO(b"# Title\n\nBody\n")
    assert read_header(stream) == {}, "expected empty metadata without a header"
    assert stream.tell() == 0, "stream should be rewound to the start"
    assert stream.read() == b"# Title\n\nBody\n"


def test_header_is_parsed_and_cursor_left_at_body() -> None:
    """Header lines become trimmed key/value pairs ahead of the body."""
    stream = io.BytesIO(b"---\ntitle: Hello\n  layout :  post.html  \n---\nBody text\n")
    assert read_header(stream) == {"title": "Hello", "layout": "post.html"}
    assert stream.read() == b"Body text\n", "cursor should sit on the body"


def test_value_keeps_colons_after_the_first() -> None:
    """Only the first colon separates the key from the value."""
    stream = io.BytesIO(b"---\nlink: https://example.com:8080/x\n---\n")
    assert read_header(stream) == {"link": "https://example.com:8080/x"}


def test_lines_without_colon_are_skipped() -> None:
    """Stray lines inside the header are ignored silently."""
    stream = io.BytesIO(b"---\njust words\ntitle: Kept\n\n---\nBody\n")
    assert read_header(stream) == {"title": "Kept"}
    assert stream.read() == b"Body\n"


def test_any_dash_line_closes_the_header() -> None:
    """A line starting with a dash closes the block."""
    stream = io.BytesIO(b"---\ntitle: A\n- end\nafter: body\n")
    assert read_header(stream) == {"title": "A"}
    assert stream.read() == b"after: body\n", "text after the close is body"


def test_unterminated_header_consumes_stream() -> None:
    """Without a closing line the header runs to the end of the stream."""
    stream = io.BytesIO(b"---\ntitle: Only\nauthor: Me\n")
    assert read_header(stream) == {"title": "Only", "author": "Me"}
    assert stream.read() == b"", "no body should remain"


def test_empty_stream_has_no_metadata() -> None:
    """An empty file is all body, and the body is empty."""
    stream = io.BytesIO(b"")
    assert read_header(stream) == {}
    assert stream.tell() == 0
