"""Value optimization: runs the value-rule table over every code segment."""

from __future__ import annotations

import re

from cssshrink.scanner import CODE, iter_segments
from cssshrink.values import VALUE_RULES, ValueRule, optimize_segment

_DELIMITER_RE = re.compile(r"[{};]")


def _ends_in_custom_property(segment: str, inside: bool) -> bool:
    """Whether the text after *segment* still belongs to a ``--name:`` value.

    *inside* is the state at the start of the segment; it carries over when
    the segment holds no ``{``, ``}`` or ``;``.
    """
    last = max(segment.rfind(ch) for ch in "{};")
    if last == -1:
        return inside
    return segment[last + 1:].lstrip().startswith("--")


class ValueOptimizer:
    """Apply the value rules to everything outside strings, comments and ``url()`` bodies.

    A custom property value that continues past a string literal
    (``--x:"a" 0px``) is left as written up to the end of its declaration.
    """

    name = "values"

    def __init__(self, rules: list[ValueRule] | None = None) -> None:
        self.rules = list(VALUE_RULES if rules is None else rules)

    def apply(self, css: str) -> str:
        parts: list[str] = []
        custom = False
        for kind, start, end in iter_segments(css, opaque_urls=True):
            segment = css[start:end]
            if kind == CODE:
                head = ""
                if custom:
                    delimiter = _DELIMITER_RE.search(segment)
                    cut = len(segment) if delimiter is None else delimiter.start()
                    head, segment = segment[:cut], segment[cut:]
                custom = _ends_in_custom_property(head + segment, custom)
                segment = head + optimize_segment(segment, self.rules)
            parts.append(segment)
        return "".join(parts)
