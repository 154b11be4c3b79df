from __future__ import annotations

import numbers
import time
from datetime import time as dt_time
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional

import pandas as pd
from loguru import logger

from pydantic_models.config.attendance_table_config import AttendanceTableConfig
from shared_modules.utils import safe_str, wait_until

EXCEL_SUFFIXES = {".xlsx", ".xls"}
CSV_SUFFIXES = {".csv"}


def cell_text(v: Any) -> str:
    """
    Wandelt einen Zellwert in Text im Format des Exports um.
    Als Zahl gespeicherte Zeiten erhalten zwei Nachkommastellen (8.3 -> "8.30", 8 -> "8.00"),
    Excel-Uhrzeiten werden zu "H.MM".
    """
    if v is None or isinstance(v, (str, bool)):
        return safe_str(v)
    if isinstance(v, dt_time):
        return f"{v.hour}.{v.minute:02d}"
    if isinstance(v, numbers.Integral):
        return f"{int(v)}.00"
    if isinstance(v, numbers.Real):
        return f"{float(v):.2f}"
    return safe_str(v)


class AttendanceRow:
    """
    Eine Tageszeile des Exports. Zellen werden über den Spaltennamen gelesen;
    fehlende Spalten ergeben None.
    """

    def __init__(self, cells: Dict[str, str]):
        self.cells = cells

    def value(self, column_key: str) -> Optional[str]:
        if column_key not in self.cells:
            return None
        return safe_str(self.cells[column_key])

    def __repr__(self) -> str:
        return f"AttendanceRow({self.cells!r})"


class AttendanceTable:
    """
    Zeiterfassungs-Export als geordnete Folge von Tageszeilen.
    Zellen liegen als Text vor; Excel-Zahlen werden über cell_text umgewandelt.
    """

    def __init__(self, frame: pd.DataFrame):
        self.frame = frame
        self.rows: List[AttendanceRow] = [
            AttendanceRow({str(col): cell_text(cell) for col, cell in record.items()})
            for record in frame.to_dict(orient="records")
        ]

    @property
    def columns(self) -> List[str]:
        return [str(col) for col in self.frame.columns]

    def __iter__(self) -> Iterator[AttendanceRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @classmethod
    def load(cls, path: Path, sheet_name: Optional[str] = None) -> "AttendanceTable":
        """
        Lädt einen Export (xlsx, xls oder csv).

        Raises:
            ValueError: Bei nicht unterstütztem Dateityp.
        """
        suffix = path.suffix.lower()
        logger.info(f"Lade Zeiterfassung: {path}")
        try:
            if suffix in EXCEL_SUFFIXES:
                # dtype=object behält Zahlen, damit 8.3 als "8.30" gelesen wird
                frame = pd.read_excel(
                    path, sheet_name=sheet_name or 0, dtype=object, keep_default_na=False
                )
            elif suffix in CSV_SUFFIXES:
                frame = pd.read_csv(path, dtype=str, keep_default_na=False)
            else:
                raise ValueError(f"Nicht unterstützter Dateityp: {path.suffix}")
        except pd.errors.EmptyDataError:
            logger.warning(f"Zeiterfassung {path} ist leer.")
            frame = pd.DataFrame()
        except Exception as e:
            logger.error(f"Fehler beim Laden der Zeiterfassung {path}: {e}")
            raise
        logger.info(f"{len(frame)} Tageszeilen geladen.")
        return cls(frame)


def wait_for_source(
    path: Path,
    table_config: AttendanceTableConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Wartet, bis der Export vorliegt. Liefert False nach Ablauf von wait_timeout.
    """
    if path.exists():
        return True
    logger.info(f"Warte auf Zeiterfassung {path} ...")
    return wait_until(
        path.exists,
        timeout=table_config.wait_timeout,
        poll_interval=table_config.poll_interval,
        sleep=sleep,
    )
