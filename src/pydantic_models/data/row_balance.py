from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .banner_line import SegmentColor


class RowBalance(BaseModel):
    """
    Formatierter laufender Saldo für die ergänzte Spalte einer Tageszeile.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    color: SegmentColor
