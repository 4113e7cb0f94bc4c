"""cssshrink model layer -- public type re-exports."""

from cssshrink.model.options import MinifyOptions
from cssshrink.model.report import SizeReport

__all__ = [
    "MinifyOptions",
    "SizeReport",
]
