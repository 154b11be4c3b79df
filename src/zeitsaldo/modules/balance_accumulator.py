from __future__ import annotations

from typing import Iterable

from loguru import logger

from pydantic_models.config.balance_config import BalanceConfig
from pydantic_models.data.accumulator_state import AccumulatorState
from pydantic_models.data.day_record import DayRecord


class BalanceAccumulator:
    """
    Summiert Zeitsaldo und Überstunden in einem einzigen Durchlauf über die Tage.

    - Erfasster Arbeitstag: Saldo += Ist - Sollzeit pro Tag,
      Überstunden += Ist - vertragliche Zeit (nur wenn hinterlegt).
    - Arbeitstag ohne Ist-Zeit: zählt als verbleibender Arbeitstag.
    - Alle anderen Tage ändern nichts.

    Bereits verarbeitete Tage werden nicht mehr korrigiert.
    """

    def __init__(self, balance_config: BalanceConfig):
        self.balance_config = balance_config
        self.state = AccumulatorState()

    def add_day(self, day: DayRecord) -> None:
        state = self.state
        if day.actual_worked is not None and day.is_working_day:
            state.cumulative_diff += day.actual_worked - self.balance_config.expected_hours
            if day.contracted_worked is not None:
                state.overtime_diff += day.actual_worked - day.contracted_worked
            state.row_balances.append(state.cumulative_diff)
            return
        if day.actual_worked is None and day.is_working_day:
            state.remaining_days += 1
        state.row_balances.append(None)

    def finalize(self) -> AccumulatorState:
        logger.debug(
            f"Saldo {self.state.cumulative_diff:.2f} h, Überstunden {self.state.overtime_diff:.2f} h, "
            f"{self.state.remaining_days} verbleibende Arbeitstage"
        )
        return self.state


def accumulate(days: Iterable[DayRecord], balance_config: BalanceConfig) -> AccumulatorState:
    """Verarbeitet alle Tage in der gegebenen Reihenfolge und liefert den Endstand."""
    accumulator = BalanceAccumulator(balance_config)
    for day in days:
        accumulator.add_day(day)
    return accumulator.finalize()
