"""Quote removal from ``url("...")`` arguments and attribute-selector values."""

from __future__ import annotations

import re

from cssshrink.scanner import is_name_char, skip_opaque

# url("target") whose target survives unquoted.
_QUOTED_URL_RE = re.compile(
    r"""
    url\(\s*
    (?P<quote>["'])
    (?P<target>(?:(?!/\*)[^\s"'()\\;{}])+)   # must still scan as one token unquoted
    (?P=quote)
    \s*\)
    """,
    re.VERBOSE | re.IGNORECASE,
)

# [name op "ident" flag] whose value is a valid identifier.
_ATTRIBUTE_RE = re.compile(
    r"""
    \[\s*
    (?P<name>[\w-]+)\s*
    (?P<operator>[\^$*~|]?=)\s*
    (?P<quote>["'])
    (?P<value>(?:-?[^\W\d]|--)[\w-]*)   # letter, _ or - first; -digit is not allowed
    (?P=quote)\s*
    (?P<flag>[iIsS]\s*)?
    \]
    """,
    re.VERBOSE,
)


def _unquote_url(match: re.Match[str]) -> str:
    return f"{match.group(0)[:3]}({match.group('target')})"


def _unquote_attribute(match: re.Match[str]) -> str:
    flag = match.group("flag")
    suffix = f" {flag.strip()}" if flag else ""
    return f"[{match.group('name')}{match.group('operator')}{match.group('value')}{suffix}]"


class QuotedTokenOptimizer:
    """Drop quotes CSS syntax does not require.

    Only ``url(`` (not preceded by a name character) and ``[`` trigger a
    lookahead; anything that does not match is copied unchanged.
    """

    name = "quotes"

    def apply(self, css: str) -> str:
        out: list[str] = []
        n = len(css)
        pos = i = 0
        while i < n:
            skipped = skip_opaque(css, i)
            if skipped is not None:
                i = skipped
                continue
            ch = css[i]
            match = None
            replacement = ""
            if ch in "uU" and (i == 0 or not is_name_char(css[i - 1])):
                match = _QUOTED_URL_RE.match(css, i)
                if match is not None:
                    replacement = _unquote_url(match)
            elif ch == "[":
                match = _ATTRIBUTE_RE.match(css, i)
                if match is not None:
                    replacement = _unquote_attribute(match)
            if match is None:
                i += 1
                continue
            out.append(css[pos:i])
            out.append(replacement)
            pos = i = match.end()
        out.append(css[pos:])
        return "".join(out)
