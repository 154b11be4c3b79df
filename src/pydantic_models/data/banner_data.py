from __future__ import annotations
from pydantic import BaseModel, ConfigDict

class BannerData(BaseModel):
    """
    Hochrechnung für das Banner, abgeleitet aus dem AccumulatorState.
    """
    model_config = ConfigDict(frozen=True)

    remaining_days: int
    remaining_required: float
    avg_per_day: float
    cumulative_diff: float
    projected_overtime: float
