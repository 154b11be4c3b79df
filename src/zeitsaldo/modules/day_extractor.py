from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from pydantic_models.config.attendance_table_config import AttendanceTableConfig
from pydantic_models.data.day_record import DayRecord

from .time_parser import parse_work_time


class RowSource(Protocol):
    """Eine Tageszeile, deren Zellen über einen fachlichen Spaltenschlüssel gelesen werden."""

    def value(self, column_key: str) -> Optional[str]:
        ...


def is_working_day(schedule: Optional[str], holiday_marker: str) -> bool:
    """
    Ein Tag ist Arbeitstag, wenn der Arbeitsplan nicht leer ist
    und kein Feiertagskennzeichen enthält.
    """
    text = (schedule or "").strip()
    return text != "" and holiday_marker not in text


class DayExtractor:
    """
    Übersetzt Tageszeilen in DayRecords.
    Welche Spalten gelesen werden, bestimmt die AttendanceTableConfig.
    """

    def __init__(self, table_config: AttendanceTableConfig):
        self.table_config = table_config

    def _cell_hours(self, row: RowSource, column_key: str) -> Optional[float]:
        text = row.value(column_key)
        if text is None:
            return None
        return parse_work_time(text)

    def extract_day(self, row: RowSource) -> DayRecord:
        cfg = self.table_config
        return DayRecord(
            is_working_day=is_working_day(row.value(cfg.schedule_column), cfg.holiday_marker),
            actual_worked=self._cell_hours(row, cfg.actual_column),
            contracted_worked=self._cell_hours(row, cfg.contracted_column),
        )

    def extract(self, rows: Iterable[RowSource]) -> List[DayRecord]:
        """Baut die Tagesliste einmalig in der gegebenen Reihenfolge auf."""
        return [self.extract_day(row) for row in rows]
