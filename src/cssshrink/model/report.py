"""Size report: before/after byte counts for one minification."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SizeReport:
    """UTF-8 byte counts of a stylesheet before and after minification.

    Attributes:
        original: Size of the source text in bytes.
        minified: Size of the minified text in bytes.
    """

    original: int
    minified: int

    @classmethod
    def measure(cls, source: str, minified: str) -> SizeReport:
        return cls(
            original=len(source.encode("utf-8")),
            minified=len(minified.encode("utf-8")),
        )

    @property
    def saved(self) -> int:
        return self.original - self.minified

    @property
    def saved_percent(self) -> float:
        if not self.original:
            return 0.0
        return (1.0 - self.minified / self.original) * 100

    def __str__(self) -> str:
        return (
            f"Minified: {self.original} -> {self.minified} bytes "
            f"({self.saved_percent:.1f}% smaller)"
        )
