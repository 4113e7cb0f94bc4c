"""Value-rewrite rule table and the segment optimizer that runs it."""

from __future__ import annotations

from cssshrink.values.rules import VALUE_RULES, ValueRule

__all__ = ["VALUE_RULES", "ValueRule", "optimize_segment"]


def optimize_segment(segment: str, rules: list[ValueRule] | None = None) -> str:
    """Run *rules* (default: all built-in rules) over one code segment, in order."""
    for rule in VALUE_RULES if rules is None else rules:
        segment = rule.apply(segment)
    return segment
