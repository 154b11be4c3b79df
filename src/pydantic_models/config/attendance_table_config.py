from typing import Optional
from pydantic import BaseModel, Field

class AttendanceTableConfig(BaseModel):
    """
    Beschreibt den Zeiterfassungs-Export, aus dem die Tageszeilen gelesen werden.

    Attribute:
        source_file (str): Dateiname des Exports (xlsx, xls oder csv) im Datenverzeichnis.
        sheet_name (Optional[str]): Arbeitsblatt bei Excel-Dateien, sonst das erste Blatt.
        schedule_column (str): Spalte mit dem Arbeitsplan (leer = kein Arbeitstag).
        actual_column (str): Spalte mit der geleisteten Arbeitszeit ("H.MM").
        contracted_column (str): Spalte mit der vertraglichen Sollzeit ("H.MM").
        holiday_marker (str): Kennzeichen für Feiertage im Arbeitsplan.
        poll_interval (float): Sekunden zwischen zwei Prüfungen, ob der Export vorliegt.
        wait_timeout (float): Maximale Wartezeit in Sekunden.
    """
    source_file: str = "attendance.xlsx"
    sheet_name: Optional[str] = None
    schedule_column: str = "SCHEDULE"
    actual_column: str = "ALL_WORK_MINUTE"
    contracted_column: str = "FIXED_WORK_MINUTE"
    holiday_marker: str = "公休"
    poll_interval: float = Field(default=1.0, gt=0)
    wait_timeout: float = Field(default=0.0, ge=0)
