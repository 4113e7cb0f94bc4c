"""The minification pipeline: the pass sequence applied until stable."""

from __future__ import annotations

import logging

from cssshrink.model import MinifyOptions
from cssshrink.passes import apply_passes, build_passes

logger = logging.getLogger(__name__)


def minify(source: str, options: MinifyOptions | None = None) -> str:
    """Minify a complete CSS document.

    Never raises on malformed CSS: unterminated comments, strings and
    blocks are carried through best-effort.  The pass sequence is re-run on
    its own output until nothing changes (at most ``options.max_rounds``
    times), so ``minify(minify(x)) == minify(x)``.
    """
    options = options or MinifyOptions()
    passes = build_passes(options)
    result = source
    for round_number in range(1, options.max_rounds + 1):
        previous = result
        result = apply_passes(result, passes)
        if result == previous:
            break
    logger.debug(
        "minified %d -> %d chars in %d round(s)", len(source), len(result), round_number
    )
    return result
