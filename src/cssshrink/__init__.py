"""cssshrink -- whole-document CSS minifier."""

__version__ = "0.1.0"

from cssshrink.model import MinifyOptions, SizeReport  # noqa: E402
from cssshrink.pipeline import minify  # noqa: E402

__all__ = ["MinifyOptions", "SizeReport", "__version__", "minify"]
