from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger
from rich.console import Console

from pydantic_models.data.balance_report import BalanceReport
from shared_modules.config import Config
from shared_modules.utils import ensure_dir, log_exceptions

from .attendance_table import AttendanceTable, wait_for_source
from .balance_accumulator import accumulate
from .banner_builder import build_banner_data, build_banner_lines, format_row_balances, summary_message
from .console_renderer import ConsoleRenderer
from .day_extractor import DayExtractor, RowSource
from .html_renderer import HtmlRenderer
from .workbook_writer import WorkbookWriter


class BalanceProcessor:
    """
    Führt einen vollständigen Lauf aus: Export abwarten, Tageszeilen lesen,
    Saldo berechnen, Banner aufbauen und an die konfigurierten Ausgaben übergeben.
    Zwischen zwei Läufen wird kein Zustand gehalten.
    """

    def __init__(
        self,
        config: Config,
        console: Optional[Console] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config: Config = config
        self.extractor = DayExtractor(config.attendance_table)
        self.console_renderer = ConsoleRenderer(console)
        self.html_renderer = HtmlRenderer(config.rendering)
        self.workbook_writer = WorkbookWriter(config.rendering)
        self.sleep = sleep

    def compute(self, rows: Iterable[RowSource]) -> BalanceReport:
        """
        Reine Berechnung ohne Ein-/Ausgabe.
        """
        balance_cfg = self.config.balance
        days = self.extractor.extract(rows)
        state = accumulate(days, balance_cfg)
        banner_data = build_banner_data(state, balance_cfg)
        return BalanceReport(
            state=state,
            banner_data=banner_data,
            lines=build_banner_lines(banner_data, balance_cfg),
            row_balances=format_row_balances(state),
        )

    def source_path(self, source: Optional[Path] = None) -> Path:
        if source is not None:
            return Path(source)
        return self.config.data_dir / self.config.attendance_table.source_file

    def run(self, source: Optional[Path] = None) -> Optional[BalanceReport]:
        """
        Führt die Berechnung einmalig aus, sobald der Export vorliegt.

        Returns:
            Optional[BalanceReport]: None, wenn der Export nicht rechtzeitig vorliegt.
        """
        path = self.source_path(source)
        if not wait_for_source(path, self.config.attendance_table, sleep=self.sleep):
            logger.warning(f"Zeiterfassung nicht gefunden: {path}")
            return None

        table = AttendanceTable.load(path, self.config.attendance_table.sheet_name)
        report = self.compute(table)
        self.render(report, table)
        logger.info(summary_message(report.banner_data))
        return report

    def render(self, report: BalanceReport, table: AttendanceTable) -> None:
        rendering = self.config.rendering
        if rendering.console:
            self.console_renderer.render(report.lines)
        if not (rendering.html_file or rendering.xlsx_file):
            return

        output_dir = ensure_dir(self.config.output_dir)
        if rendering.html_file:
            with log_exceptions("Fehler beim Schreiben der HTML-Ausgabe", continue_on_error=False):
                self.html_renderer.write(
                    output_dir / rendering.html_file, report.lines, table, report.row_balances
                )
        if rendering.xlsx_file:
            with log_exceptions("Fehler beim Schreiben der Excel-Ausgabe", continue_on_error=False):
                self.workbook_writer.write(
                    output_dir / rendering.xlsx_file, report.lines, table, report.row_balances
                )
