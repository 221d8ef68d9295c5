"""Console theme for specment output."""

from rich.style import Style
from rich.theme import Theme


class Palette:
    """Colors used by the message formatter."""

    PRIMARY = "#2e8555"      # Docusaurus green
    ACCENT = "#25c2a0"
    SUCCESS = "green"
    WARNING = "yellow"
    ERROR = "red"
    INFO = "blue"
    TEXT_DIM = "grey50"


THEME = Theme({
    "title": Style(color=Palette.PRIMARY, bold=True),
    "accent": Style(color=Palette.ACCENT),
    "success": Style(color=Palette.SUCCESS),
    "warning": Style(color=Palette.WARNING),
    "error": Style(color=Palette.ERROR, bold=True),
    "info": Style(color=Palette.INFO),
    "step": Style(color=Palette.INFO, bold=True),
    "text.dim": Style(color=Palette.TEXT_DIM),
})


class Symbols:
    """Status markers."""

    SUCCESS = "✓"
    WARNING = "⚠"
    ERROR = "✗"
    INFO = "ℹ"
    STEP = "▸"
    BULLET = "•"
