from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from pydantic_models.data.banner_line import BannerLine, BannerSegment

RICH_COLORS = {
    "green": "green",
    "red": "red",
    "orange": "dark_orange",
}


def segment_style(segment: BannerSegment) -> Optional[str]:
    parts = []
    if segment.bold:
        parts.append("bold")
    if segment.color:
        parts.append(RICH_COLORS[segment.color])
    return " ".join(parts) or None


def banner_text(lines: List[BannerLine]) -> Text:
    """Setzt die Bannerzeilen zu einem rich-Text mit Zeilenumbrüchen zusammen."""
    text = Text()
    for index, line in enumerate(lines):
        if index:
            text.append("\n")
        for segment in line:
            text.append(segment.text, style=segment_style(segment))
    return text


class ConsoleRenderer:
    """Gibt das Banner als Panel auf der Konsole aus."""

    def __init__(self, console: Optional[Console] = None, border_style: str = "#7986cb"):
        self.console = console or Console()
        self.border_style = border_style

    def render(self, lines: List[BannerLine]) -> None:
        self.console.print(Panel(banner_text(lines), title="Zeitsaldo", border_style=self.border_style))
