from __future__ import annotations

import logging

from cssshrink.model import MinifyOptions
from cssshrink.passes.base import Pass
from cssshrink.passes.comments import CommentStripper
from cssshrink.passes.duplicates import DuplicatePropertyRemover
from cssshrink.passes.merge import AdjacentRuleMerger
from cssshrink.passes.quotes import QuotedTokenOptimizer
from cssshrink.passes.shorthand import ShorthandCollapser
from cssshrink.passes.values import ValueOptimizer
from cssshrink.passes.whitespace import WhitespaceCollapser

__all__ = [
    "BUILTIN_PASSES",
    "Pass",
    "CommentStripper",
    "WhitespaceCollapser",
    "ValueOptimizer",
    "QuotedTokenOptimizer",
    "ShorthandCollapser",
    "DuplicatePropertyRemover",
    "AdjacentRuleMerger",
    "apply_passes",
    "build_passes",
]

logger = logging.getLogger(__name__)

BUILTIN_PASSES: list[Pass] = [
    CommentStripper(),
    WhitespaceCollapser(),
    ValueOptimizer(),
    QuotedTokenOptimizer(),
    ShorthandCollapser(),
    DuplicatePropertyRemover(),
    AdjacentRuleMerger(),
]


def build_passes(options: MinifyOptions | None = None) -> list[Pass]:
    """The ordered pass sequence enabled by *options*."""
    options = options or MinifyOptions()
    enabled = {
        ValueOptimizer: options.optimize_values,
        QuotedTokenOptimizer: options.unquote_tokens,
        ShorthandCollapser: options.collapse_shorthands,
        DuplicatePropertyRemover: options.remove_duplicates,
        AdjacentRuleMerger: options.merge_rules,
    }
    return [p for p in BUILTIN_PASSES if enabled.get(type(p), True)]


def apply_passes(css: str, passes: list[Pass] | None = None) -> str:
    """Run *css* once through *passes* (default: all built-in passes)."""
    for p in BUILTIN_PASSES if passes is None else passes:
        before = len(css)
        css = p.apply(css)
        logger.debug("%s: %d -> %d chars", p.name, before, len(css))
    return css
