"""Adjacent rule merging: ``a{x}a{y}`` becomes ``a{x;y}``."""

from __future__ import annotations

from dataclasses import dataclass

from cssshrink.scanner import has_nested_block, iter_blocks


@dataclass(frozen=True)
class _MergeTarget:
    """The last emitted flat rule: its selector and where its body sits in the output."""

    selector: str
    body_index: int


def is_mergeable(selector: str) -> bool:
    """Plain rules merge; at-rules (``@font-face``, ``@page``) never do."""
    stripped = selector.strip()
    return bool(stripped) and not stripped.startswith("@")


def join_bodies(first: str, second: str) -> str:
    if not first.strip():
        return second
    if not second.strip():
        return first
    return f"{first};{second}"


class AdjacentRuleMerger:
    """Merge consecutive flat rules whose selector text is byte-identical.

    Bodies holding nested blocks are scanned the same way but are never
    merged themselves.
    """

    name = "merge"

    def apply(self, css: str) -> str:
        out: list[str] = []
        self._merge_span(css, 0, len(css), out)
        return "".join(out)

    def _merge_span(self, css: str, start: int, end: int, out: list[str]) -> None:
        pos = start
        previous: _MergeTarget | None = None
        for block in iter_blocks(css, start, end):
            selector = css[pos:block.brace]
            nested = has_nested_block(css, block.brace + 1, block.close)
            if (
                previous is not None
                and selector == previous.selector
                and block.closed
                and not nested
            ):
                out[previous.body_index] = join_bodies(
                    out[previous.body_index], block.body(css)
                )
                pos = block.end
                continue

            out.append(css[pos:block.brace + 1])
            if nested:
                self._merge_span(css, block.brace + 1, block.close, out)
                previous = None
            else:
                out.append(block.body(css))
                mergeable = block.closed and is_mergeable(selector)
                previous = _MergeTarget(selector, len(out) - 1) if mergeable else None
            out.append(css[block.close:block.end])
            pos = block.end
        out.append(css[pos:end])
