from __future__ import annotations
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict

SegmentColor = Literal["green", "red", "orange"]


class BannerSegment(BaseModel):
    """
    Ein formatierter Textabschnitt einer Bannerzeile.
    Die Darstellung (Konsole, HTML, Excel) entscheidet der jeweilige Renderer.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    bold: bool = False
    color: Optional[SegmentColor] = None


BannerLine = List[BannerSegment]


def line_text(line: BannerLine) -> str:
    """Gibt den reinen Text einer Bannerzeile zurück."""
    return "".join(segment.text for segment in line)
