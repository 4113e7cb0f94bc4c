"""Minifier configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MinifyOptions:
    """Switches for the optional passes of the minification pipeline.

    Comment stripping and whitespace collapsing always run.  ``max_rounds``
    bounds how many times the pass sequence is re-applied while its output
    keeps changing.
    """

    optimize_values: bool = True
    unquote_tokens: bool = True
    collapse_shorthands: bool = True
    remove_duplicates: bool = True
    merge_rules: bool = True
    max_rounds: int = 4

    def __post_init__(self) -> None:
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {self.max_rounds}")
