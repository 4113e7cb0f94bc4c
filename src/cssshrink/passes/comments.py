"""Comment stripping: drops ``/* ... */`` except ``/*! ... */`` license comments."""

from __future__ import annotations

from cssshrink.scanner import QUOTES, string_end


class CommentStripper:
    """Remove every comment outside string literals, keeping license comments.

    An unterminated regular comment swallows the rest of the input; an
    unterminated license comment is left in place with everything after it.
    """

    name = "comments"

    def apply(self, css: str) -> str:
        out: list[str] = []
        n = len(css)
        pos = i = 0
        while i < n:
            ch = css[i]
            if ch in QUOTES:
                i = string_end(css, i)
                continue
            if ch != "/" or not css.startswith("/*", i):
                i += 1
                continue
            if css.startswith("/*!", i):
                close = css.find("*/", i + 3)
                if close == -1:
                    break
                i = close + 2
                continue
            out.append(css[pos:i])
            close = css.find("*/", i + 2)
            pos = i = n if close == -1 else close + 2
        out.append(css[pos:])
        return "".join(out)
