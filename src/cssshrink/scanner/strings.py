"""Low-level scanning helpers: string literals, comments, and opaque segments.

Every pass walks the stylesheet left to right and must step over string
literals and license comments without looking inside them.  The helpers
here return offsets rather than substrings so callers can copy whole spans
in one slice.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

__all__ = [
    "QUOTES",
    "CODE",
    "STRING",
    "COMMENT",
    "URL",
    "is_name_char",
    "string_end",
    "comment_end",
    "skip_opaque",
    "iter_segments",
]

QUOTES = "\"'"

# Segment kinds yielded by iter_segments().
CODE = "code"
STRING = "string"
COMMENT = "comment"
URL = "url"

# ``url(`` whose argument is not a quoted string.
_UNQUOTED_URL_RE = re.compile(r"url\(\s*(?=[^\s\"')])", re.IGNORECASE)


def is_name_char(ch: str) -> bool:
    """Return True if *ch* can appear inside a CSS identifier."""
    return ch.isalnum() or ch in "-_"


def string_end(text: str, start: int, end: int | None = None) -> int:
    """Return the index just past the string literal opening at *start*.

    A quote preceded by an odd number of backslashes is escaped and does
    not close the literal.  An unterminated literal runs to *end*.
    """
    end = len(text) if end is None else end
    quote = text[start]
    i = start + 1
    while i < end:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return end


def comment_end(text: str, start: int, end: int | None = None) -> int:
    """Return the index just past the ``/* ... */`` comment opening at *start*."""
    end = len(text) if end is None else end
    close = text.find("*/", start + 2, end)
    return end if close == -1 else close + 2


def skip_opaque(text: str, i: int, end: int | None = None) -> int | None:
    """Skip a string literal or comment starting at *i*.

    Returns the index just past it, or None when *i* starts neither.
    """
    ch = text[i]
    if ch in QUOTES:
        return string_end(text, i, end)
    if ch == "/" and text.startswith("/*", i):
        return comment_end(text, i, end)
    return None


def iter_segments(text: str, opaque_urls: bool = False) -> Iterator[tuple[str, int, int]]:
    """Split *text* into ``(kind, start, end)`` segments covering it in order.

    Kinds are CODE, STRING, COMMENT and, when *opaque_urls* is set, URL for
    the body of an unquoted ``url(...)`` (the ``url(`` and ``)`` stay in the
    surrounding code segments).
    """
    n = len(text)
    pos = i = 0
    while i < n:
        ch = text[i]
        if ch in QUOTES:
            kind, start, stop = STRING, i, string_end(text, i)
        elif ch == "/" and text.startswith("/*", i):
            kind, start, stop = COMMENT, i, comment_end(text, i)
        elif opaque_urls and ch in "uU" and (i == 0 or not is_name_char(text[i - 1])):
            match = _UNQUOTED_URL_RE.match(text, i)
            if match is None:
                i += 1
                continue
            start = match.end()
            close = text.find(")", start)
            kind, stop = URL, n if close == -1 else close
        else:
            i += 1
            continue
        if pos < start:
            yield CODE, pos, start
        yield kind, start, stop
        pos = i = stop
    if pos < n:
        yield CODE, pos, n
