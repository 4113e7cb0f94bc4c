"""Base protocol for minification passes."""

from __future__ import annotations

from typing import Protocol


class Pass(Protocol):
    """A stylesheet-to-stylesheet text rewrite."""

    name: str

    def apply(self, css: str) -> str: ...
