"""Whitespace collapsing.

Runs of whitespace outside strings and license comments are either dropped
or replaced by one space.  A run is dropped when the character before or
after it is a *strip char* for the current nesting:

    ``{ } ; ,``     always
    ``:``           inside a block or parens (a top-level ``:`` is a selector
                    pseudo-class, where ``.a :hover`` differs from ``.a:hover``)
    ``> + ~``       outside parens (combinators; inside ``calc()`` they are
                    operators that need their spaces)
    ``* /``         inside parens
    ``!``           inside a block (``red !important``)
"""

from __future__ import annotations

from cssshrink.scanner import skip_opaque

WHITESPACE = " \t\r\n"


def is_strip_char(ch: str, brace_depth: int, paren_depth: int) -> bool:
    """Return True if whitespace next to *ch* can be removed."""
    if ch in "{};,":
        return True
    if ch == ":":
        return brace_depth > 0 or paren_depth > 0
    if ch in ">+~":
        return paren_depth == 0
    if ch in "*/":
        return paren_depth > 0
    if ch == "!":
        return brace_depth > 0
    return False


class WhitespaceCollapser:
    """Collapse insignificant whitespace and drop ``;`` before ``}``."""

    name = "whitespace"

    def apply(self, css: str) -> str:
        out: list[str] = []
        brace_depth = paren_depth = 0
        n = len(css)
        i = 0
        while i < n:
            skipped = skip_opaque(css, i)
            if skipped is not None:
                out.append(css[i:skipped])
                i = skipped
                continue
            ch = css[i]
            if ch in WHITESPACE:
                j = i + 1
                while j < n and css[j] in WHITESPACE:
                    j += 1
                # Runs at either end of the document are dropped outright.
                if out and j < n:
                    prev = out[-1][-1]
                    if not (
                        is_strip_char(prev, brace_depth, paren_depth)
                        or is_strip_char(css[j], brace_depth, paren_depth)
                    ):
                        out.append(" ")
                i = j
                continue
            if ch == "{":
                brace_depth += 1
            elif ch == "}":
                brace_depth = max(brace_depth - 1, 0)
                while out and out[-1] == ";":
                    out.pop()
            elif ch == "(":
                paren_depth += 1
            elif ch == ")":
                paren_depth = max(paren_depth - 1, 0)
            out.append(ch)
            i += 1
        return "".join(out)
