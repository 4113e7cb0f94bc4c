"""Brace matching and declaration splitting over offset spans.

The structural passes never build a tree.  They walk matched ``{...}``
spans with :func:`iter_blocks`, recurse into bodies that hold further
blocks, and rewrite flat bodies as lists of :class:`Declaration`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from cssshrink.scanner.strings import skip_opaque

__all__ = [
    "Block",
    "Declaration",
    "find_block_end",
    "iter_blocks",
    "has_nested_block",
    "rewrite_blocks",
    "split_declarations",
    "parse_declaration",
]

_IMPORTANT_RE = re.compile(r"!\s*important\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Block:
    """A ``prelude{body}`` span addressed by offsets into the scanned text.

    Attributes:
        start: First character of the prelude (selector or at-rule text).
        brace: Index of the opening ``{``.
        close: Index of the matching ``}``, or the end of the scanned
            range when the block is unterminated.
        closed: Whether a matching ``}`` was found.
    """

    start: int
    brace: int
    close: int
    closed: bool

    @property
    def end(self) -> int:
        """Index just past the block, including its ``}`` when present."""
        return self.close + 1 if self.closed else self.close

    def prelude(self, text: str) -> str:
        return text[self.start:self.brace]

    def body(self, text: str) -> str:
        return text[self.brace + 1:self.close]


@dataclass(frozen=True)
class Declaration:
    """One ``property:value`` entry of a flat block."""

    text: str
    property: str
    value: str

    @classmethod
    def build(cls, prop: str, value: str) -> Declaration:
        return cls(text=f"{prop}:{value}", property=prop, value=value)

    @property
    def key(self) -> str:
        """Property name used for comparisons (custom properties keep their case)."""
        if self.property.startswith("--"):
            return self.property
        return self.property.lower()

    @property
    def important(self) -> bool:
        return _IMPORTANT_RE.search(self.value) is not None


def find_block_end(text: str, brace: int, end: int | None = None) -> int:
    """Return the index of the ``}`` matching the ``{`` at *brace*.

    Braces inside string literals and comments are ignored.  Returns *end*
    when the block is never closed.
    """
    end = len(text) if end is None else end
    depth = 0
    i = brace
    while i < end:
        skipped = skip_opaque(text, i, end)
        if skipped is not None:
            i = skipped
            continue
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return end


def iter_blocks(text: str, start: int = 0, end: int | None = None) -> Iterator[Block]:
    """Yield the top-level blocks of ``text[start:end]`` in order.

    Each block's prelude runs from the end of the previous block (or
    *start*) to its opening brace.
    """
    end = len(text) if end is None else end
    pos = i = start
    while i < end:
        skipped = skip_opaque(text, i, end)
        if skipped is not None:
            i = skipped
            continue
        if text[i] == "{":
            close = find_block_end(text, i, end)
            block = Block(start=pos, brace=i, close=close, closed=close < end)
            yield block
            pos = i = block.end
            continue
        i += 1


def has_nested_block(text: str, start: int, end: int) -> bool:
    """Return True if ``text[start:end]`` contains a ``{`` outside strings."""
    return next(iter_blocks(text, start, end), None) is not None


def rewrite_blocks(text: str, rewrite_body: Callable[[str], str]) -> str:
    """Apply *rewrite_body* to the body of every flat block in *text*.

    Bodies that contain further blocks (``@media``, ``@supports``, nested
    rules) are descended into instead of being rewritten themselves.
    """
    out: list[str] = []
    _rewrite_span(text, 0, len(text), rewrite_body, out)
    return "".join(out)


def _rewrite_span(
    text: str,
    start: int,
    end: int,
    rewrite_body: Callable[[str], str],
    out: list[str],
) -> None:
    pos = start
    for block in iter_blocks(text, start, end):
        out.append(text[pos:block.brace + 1])
        if has_nested_block(text, block.brace + 1, block.close):
            _rewrite_span(text, block.brace + 1, block.close, rewrite_body, out)
        else:
            out.append(rewrite_body(block.body(text)))
        pos = block.close
    out.append(text[pos:end])


def split_declarations(body: str) -> list[str]:
    """Split a flat block body on ``;`` outside strings, comments and parens.

    Empty entries are dropped; surrounding whitespace is stripped.
    """
    parts: list[str] = []
    depth = 0
    pos = i = 0
    n = len(body)
    while i < n:
        skipped = skip_opaque(body, i)
        if skipped is not None:
            i = skipped
            continue
        ch = body[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == ";" and depth == 0:
            parts.append(body[pos:i])
            pos = i + 1
        i += 1
    parts.append(body[pos:])
    return [part.strip() for part in parts if part.strip()]


def parse_declaration(text: str) -> Declaration:
    """Split one declaration at its first ``:`` outside strings.

    Text without a colon yields a Declaration with an empty property.
    """
    i = 0
    while i < len(text):
        skipped = skip_opaque(text, i)
        if skipped is not None:
            i = skipped
            continue
        if text[i] == ":":
            return Declaration(
                text=text,
                property=text[:i].strip(),
                value=text[i + 1:].strip(),
            )
        i += 1
    return Declaration(text=text, property="", value=text.strip())
