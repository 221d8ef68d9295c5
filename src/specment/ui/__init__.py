"""Console output for specment."""

from specment.ui.theme import THEME, Palette, Symbols
from specment.ui.formatter import console

__all__ = [
    "THEME",
    "Palette",
    "Symbols",
    "console",
]
