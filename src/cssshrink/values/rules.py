"""Value-level rewrite rules.

Each rule is a compiled pattern, an optional context predicate and a
rewrite function.  Rules run in table order over one code segment at a
time (string literals, comments and unquoted ``url()`` bodies are never
passed in), and each rule sees the output of the one before it.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from cssshrink.scanner import is_name_char


@dataclass(frozen=True)
class ValueRule:
    """A single rewrite: *pattern* matches, *applies* vets, *rewrite* replaces."""

    name: str
    pattern: re.Pattern[str]
    rewrite: Callable[[re.Match[str]], str]
    applies: Callable[[re.Match[str]], bool] | None = None

    def apply(self, segment: str) -> str:
        def substitute(match: re.Match[str]) -> str:
            if self.applies is not None and not self.applies(match):
                return match.group(0)
            return self.rewrite(match)

        return self.pattern.sub(substitute, segment)


# ---------------------------------------------------------------------------
# Context helpers
# ---------------------------------------------------------------------------

# Functions whose arguments may not lose a zero's unit.
MATH_FUNCTIONS = frozenset({"calc", "min", "max", "clamp"})

# Color functions where a bare 0 may not stand in for 0% (rgb() channels must
# all be numbers or all be percentages).
PERCENT_FUNCTIONS = frozenset({"hsl", "hsla", "hwb", "rgb", "rgba"})

_STATEMENT_END_RE = re.compile(r"[{};]")


def _open_functions(segment: str, pos: int) -> list[str]:
    """Names of the function calls still open at *pos*, innermost first."""
    names: list[str] = []
    depth = 0
    i = pos - 1
    while i >= 0:
        ch = segment[i]
        if ch == ")":
            depth += 1
        elif ch == "(":
            if depth:
                depth -= 1
            else:
                j = i
                while j > 0 and is_name_char(segment[j - 1]):
                    j -= 1
                names.append(segment[j:i].lower())
        elif ch in "{};":
            break
        i -= 1
    return names


def _in_custom_property(segment: str, pos: int) -> bool:
    """True if *pos* sits in the value of a ``--name:`` declaration."""
    boundary = max(segment.rfind(";", 0, pos), segment.rfind("{", 0, pos))
    return segment[boundary + 1:pos].lstrip().startswith("--")


def _is_value(match: re.Match[str]) -> bool:
    """False when the next statement delimiter is ``{``, i.e. a selector."""
    delimiter = _STATEMENT_END_RE.search(match.string, match.end())
    return delimiter is None or delimiter.group() != "{"


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

_HEX8_RE = re.compile(
    r"#([0-9a-f])\1([0-9a-f])\2([0-9a-f])\3([0-9a-f])\4(?![0-9a-f])",
    re.IGNORECASE,
)

_HEX6_RE = re.compile(
    r"#([0-9a-f])\1([0-9a-f])\2([0-9a-f])\3(?![0-9a-f])",
    re.IGNORECASE,
)


def _short_hex(match: re.Match[str]) -> str:
    return "#" + "".join(match.groups()).lower()


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

ZERO_UNITS = (
    "px", "em", "rem", "pt", "cm", "mm", "in", "pc", "ex", "ch",
    "vw", "vh", "vmin", "vmax", "deg", "rad", "turn", "ms", "s", "%",
)

_ZERO_UNIT_RE = re.compile(
    r"(?<=[:\s,(/])0(?:" + "|".join(ZERO_UNITS) + r")(?![\w%.-])",
    re.IGNORECASE,
)

_LEADING_ZERO_RE = re.compile(r"(?<=[:\s,(/-])0(?=\.\d)")


def _zero_unit_applies(match: re.Match[str]) -> bool:
    segment = match.string
    start = match.start()
    functions = _open_functions(segment, start)
    if match.group().endswith("%"):
        # 0%{ is a keyframe selector
        if segment.startswith("{", match.end()):
            return False
        if any(name in PERCENT_FUNCTIONS for name in functions):
            return False
    if any(name in MATH_FUNCTIONS for name in functions):
        return False
    return not _in_custom_property(segment, start)


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

FONT_WEIGHTS = {"normal": "400", "bold": "700"}

_FONT_WEIGHT_RE = re.compile(r"(?<![\w-])font-weight:(normal|bold)(?=[;}\"]|\Z)")

_BACKGROUND_NONE_RE = re.compile(r"(?<![\w-])background:(?:transparent|none)(?=[;},!])")

_OUTLINE_NONE_RE = re.compile(r"(?<![\w-])outline:none(?=[;},!])")


# ---------------------------------------------------------------------------
# Keyframe selectors
# ---------------------------------------------------------------------------

_KEYFRAME_FROM_RE = re.compile(r"(?<=[{}])from(?=[{,])")

_KEYFRAME_100_RE = re.compile(r"(?<=[{}])100%(?=[{,])")


# ---------------------------------------------------------------------------
# Transform functions
# ---------------------------------------------------------------------------

# One argument: anything up to a top-level comma or paren, one level of nesting.
_ARG = r"((?:[^(),]|\([^()]*\))+)"

_TRANSLATE3D_RE = re.compile(r"(?<![\w-])translate3d\(0,0," + _ARG + r"\)")

_SCALE3D_RE = re.compile(r"(?<![\w-])scale3d\(1,1,1\)")

_ROTATE3D_RE = re.compile(r"(?<![\w-])rotate3d\((0,0,1|0,1,0|1,0,0)," + _ARG + r"\)")

ROTATE_AXES = {"0,0,1": "rotate", "0,1,0": "rotateY", "1,0,0": "rotateX"}


def _rotate(match: re.Match[str]) -> str:
    return f"{ROTATE_AXES[match.group(1)]}({match.group(2)})"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

VALUE_RULES: list[ValueRule] = [
    ValueRule("hex8", _HEX8_RE, _short_hex, _is_value),
    ValueRule("hex6", _HEX6_RE, _short_hex, _is_value),
    ValueRule("zero-unit", _ZERO_UNIT_RE, lambda m: "0", _zero_unit_applies),
    ValueRule("leading-zero", _LEADING_ZERO_RE, lambda m: ""),
    ValueRule(
        "font-weight",
        _FONT_WEIGHT_RE,
        lambda m: "font-weight:" + FONT_WEIGHTS[m.group(1)],
    ),
    ValueRule("keyframe-from", _KEYFRAME_FROM_RE, lambda m: "0%"),
    ValueRule("keyframe-to", _KEYFRAME_100_RE, lambda m: "to"),
    ValueRule("translate3d", _TRANSLATE3D_RE, lambda m: f"translateZ({m.group(1)})"),
    ValueRule("scale3d", _SCALE3D_RE, lambda m: "scaleX(1)"),
    ValueRule("rotate3d", _ROTATE3D_RE, _rotate),
    ValueRule("background-none", _BACKGROUND_NONE_RE, lambda m: "background:0 0"),
    ValueRule("outline-none", _OUTLINE_NONE_RE, lambda m: "outline:0"),
]
