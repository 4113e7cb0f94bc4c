"""Duplicate declaration removal that respects vendor fallback chains."""

from __future__ import annotations

import re

from cssshrink.scanner import Declaration, parse_declaration, rewrite_blocks, split_declarations

VENDOR_PREFIXES = ("-webkit-", "-moz-", "-ms-", "-o-")

# Properties that legitimately repeat within one block (@font-face src).
REPEATABLE_PROPERTIES = frozenset({"src"})

_VENDOR_TOKEN_RE = re.compile(r"(?<![\w-])-(?:webkit|moz|ms|o)-", re.IGNORECASE)

_MODERN_FUNCTION_RE = re.compile(r"(?<![\w-])(?:calc|var|min|max|clamp|env)\(", re.IGNORECASE)


def is_fallback_chain(key: str, group: list[Declaration], keys: set[str]) -> bool:
    """True if the repeated declarations in *group* must all be kept.

    *keys* holds every property name declared in the same block.
    """
    if key in REPEATABLE_PROPERTIES or key.startswith(VENDOR_PREFIXES):
        return True
    if any(prefix + key in keys for prefix in VENDOR_PREFIXES):
        return True
    return any(
        _VENDOR_TOKEN_RE.search(decl.value) or _MODERN_FUNCTION_RE.search(decl.value)
        for decl in group
    )


def _winner(declarations: list[Declaration], indices: list[int]) -> int:
    """Index of the declaration the cascade applies: last !important, else last."""
    important = [index for index in indices if declarations[index].important]
    return important[-1] if important else indices[-1]


class DuplicatePropertyRemover:
    """Drop declarations shadowed by a later one of the same property."""

    name = "duplicates"

    def apply(self, css: str) -> str:
        return rewrite_blocks(css, self.dedupe_block)

    def dedupe_block(self, body: str) -> str:
        declarations = [parse_declaration(text) for text in split_declarations(body)]
        groups: dict[str, list[int]] = {}
        for index, decl in enumerate(declarations):
            if decl.property:
                groups.setdefault(decl.key, []).append(index)

        keys = set(groups)
        dropped: set[int] = set()
        for key, indices in groups.items():
            if len(indices) < 2:
                continue
            if is_fallback_chain(key, [declarations[index] for index in indices], keys):
                continue
            keep = _winner(declarations, indices)
            dropped.update(index for index in indices if index != keep)

        if not dropped:
            return body
        return ";".join(
            decl.text for index, decl in enumerate(declarations) if index not in dropped
        )
