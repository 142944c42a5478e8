"""Base painter protocol."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol


class Painter(Protocol):
    """Protocol that maps an opaque color token onto rendered text."""

    def paint(self, text: str, token: Hashable) -> str:
        """Return ``text`` decorated for ``token``."""
        ...


class PlainPainter:
    """Ignores tokens and returns the text unchanged."""

    def paint(self, text: str, token: Hashable) -> str:
        return text
