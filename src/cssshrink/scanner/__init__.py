"""Quote- and nesting-aware scanning primitives shared by the passes."""

from cssshrink.scanner.blocks import (
    Block,
    Declaration,
    find_block_end,
    has_nested_block,
    iter_blocks,
    parse_declaration,
    rewrite_blocks,
    split_declarations,
)
from cssshrink.scanner.strings import (
    CODE,
    COMMENT,
    QUOTES,
    STRING,
    URL,
    comment_end,
    is_name_char,
    iter_segments,
    skip_opaque,
    string_end,
)

__all__ = [
    # blocks
    "Block",
    "Declaration",
    "find_block_end",
    "has_nested_block",
    "iter_blocks",
    "parse_declaration",
    "rewrite_blocks",
    "split_declarations",
    # strings
    "CODE",
    "COMMENT",
    "QUOTES",
    "STRING",
    "URL",
    "comment_end",
    "is_name_char",
    "iter_segments",
    "skip_opaque",
    "string_end",
]
