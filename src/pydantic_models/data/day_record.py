from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict

class DayRecord(BaseModel):
    """
    Eine Tageszeile der Zeiterfassung, bereits in Bruchstunden umgerechnet.
    Fehlende Werte (noch nicht erfasst, keine Sollzeit hinterlegt) sind None.
    """
    model_config = ConfigDict(frozen=True)

    is_working_day: bool
    actual_worked: Optional[float] = None
    contracted_worked: Optional[float] = None
