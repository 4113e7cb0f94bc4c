"""Shorthand collapsing of ``margin-*`` / ``padding-*`` side declarations."""

from __future__ import annotations

from cssshrink.scanner import Declaration, parse_declaration, rewrite_blocks, split_declarations

SHORTHAND_PROPERTIES = ("margin", "padding")

SIDES = ("top", "right", "bottom", "left")


def collapse_sides(top: str, right: str, bottom: str, left: str) -> str:
    """Shortest shorthand value for the four sides (CSS 1/2/3/4-value rule)."""
    if top == right == bottom == left:
        return top
    if top == bottom and right == left:
        return f"{top} {right}"
    if right == left:
        return f"{top} {right} {bottom}"
    return f"{top} {right} {bottom} {left}"


def _collapse_property(declarations: list[Declaration], prop: str) -> list[Declaration] | None:
    """Replace the four *prop* sides with one shorthand, or None to leave them.

    All four sides must be declared exactly once, none ``!important``, and
    the shorthand itself must not be declared after any of them.
    """
    longhands = {f"{prop}-{side}": side for side in SIDES}
    positions: dict[str, list[int]] = {}
    for index, decl in enumerate(declarations):
        if decl.key in longhands:
            positions.setdefault(longhands[decl.key], []).append(index)
    if len(positions) < len(SIDES) or any(len(found) != 1 for found in positions.values()):
        return None

    sides = {side: declarations[found[0]] for side, found in positions.items()}
    if any(decl.important or not decl.value for decl in sides.values()):
        return None
    indices = {found[0] for found in positions.values()}
    if any(decl.key == prop for decl in declarations[min(indices) + 1:]):
        return None

    value = collapse_sides(*(sides[side].value for side in SIDES))
    kept = [decl for index, decl in enumerate(declarations) if index not in indices]
    kept.append(Declaration.build(prop, value))
    return kept


class ShorthandCollapser:
    """Collapse complete sets of side longhands, block by block."""

    name = "shorthand"

    def apply(self, css: str) -> str:
        return rewrite_blocks(css, self.collapse_block)

    def collapse_block(self, body: str) -> str:
        declarations = [parse_declaration(text) for text in split_declarations(body)]
        changed = False
        for prop in SHORTHAND_PROPERTIES:
            collapsed = _collapse_property(declarations, prop)
            if collapsed is not None:
                declarations = collapsed
                changed = True
        if not changed:
            return body
        return ";".join(decl.text for decl in declarations)
