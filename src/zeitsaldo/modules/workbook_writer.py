from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from loguru import logger
from openpyxl import Workbook
from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont
from openpyxl.styles import Font, PatternFill

from pydantic_models.config.rendering_config import RenderingConfig
from pydantic_models.data.banner_line import BannerLine, BannerSegment
from pydantic_models.data.row_balance import RowBalance

from .attendance_table import AttendanceTable

EXCEL_COLORS = {
    "green": "008000",
    "red": "FF0000",
    "orange": "FFA500",
}


def excel_color(css_color: str) -> str:
    """Wandelt eine CSS-Farbe ("#e8eaf6") in das Excel-Format ("E8EAF6") um."""
    return css_color.lstrip("#").upper()


def rich_segment(segment: BannerSegment):
    if not segment.bold and not segment.color:
        return segment.text
    font = InlineFont(
        b=segment.bold or None,
        color=EXCEL_COLORS[segment.color] if segment.color else None,
    )
    return TextBlock(font, segment.text)


class WorkbookWriter:
    """
    Schreibt die Zeiterfassung mit ergänzter Saldo-Spalte und das Banner
    (Blatt "Zeitsaldo") in eine neue Excel-Datei.
    """

    TABLE_SHEET = "Zeiterfassung"
    BANNER_SHEET = "Zeitsaldo"

    def __init__(self, rendering_config: RenderingConfig):
        self.rendering_config = rendering_config

    def build(
        self,
        lines: List[BannerLine],
        table: AttendanceTable,
        row_balances: List[Optional[RowBalance]],
    ) -> Workbook:
        wb = Workbook()
        ws = wb.active
        ws.title = self.TABLE_SHEET
        highlight = excel_color(self.rendering_config.highlight_color)
        fill = PatternFill(start_color=highlight, end_color=highlight, fill_type="solid")

        columns = table.columns
        ws.append(columns + [self.rendering_config.balance_header])
        balance_col = len(columns) + 1
        ws.cell(row=1, column=balance_col).fill = fill

        for row_idx, (row, balance) in enumerate(zip(table.rows, row_balances), start=2):
            ws.append([row.value(column) for column in columns])
            cell = ws.cell(row=row_idx, column=balance_col)
            cell.fill = fill
            if balance is not None:
                cell.value = balance.text
                cell.font = Font(color=EXCEL_COLORS[balance.color])

        banner_ws = wb.create_sheet(self.BANNER_SHEET)
        for row_idx, line in enumerate(lines, start=1):
            banner_ws.cell(row=row_idx, column=1).value = CellRichText(
                *[rich_segment(segment) for segment in line]
            )
        return wb

    def write(
        self,
        path: Path,
        lines: List[BannerLine],
        table: AttendanceTable,
        row_balances: List[Optional[RowBalance]],
    ) -> Path:
        wb = self.build(lines, table, row_balances)
        wb.save(path)
        logger.info(f"Excel-Ausgabe geschrieben: {path}")
        return path
