import io

import pytest
import yaml
from rich.console import Console

from pydantic_models.data.banner_line import line_text
from shared_modules.config import Config
from zeitsaldo.modules.balance_processor import BalanceProcessor
from zeitsaldo.saldo_berechnen import main

CSV_EXPORT = (
    "DATE,SCHEDULE,ALL_WORK_MINUTE,FIXED_WORK_MINUTE\n"
    "01.10.,通常,9.30,8.00\n"
    "02.10.,通常,7.45,8.00\n"
    "03.10.,通常(公休),,\n"
    "04.10.,,,\n"
    "05.10.,通常,,8.00\n"
    "06.10.,通常,,8.00\n"
)


@pytest.fixture
def config_path(tmp_path):
    (tmp_path / "data").mkdir()
    data = {
        "structure": {"prj_root": str(tmp_path)},
        "logging": {"log_file": None, "log_level": "DEBUG"},
        "attendance_table": {"source_file": "oktober.csv", "poll_interval": 0.1, "wait_timeout": 0.3},
        "rendering": {"html_file": "saldo.html", "xlsx_file": "saldo.xlsx"},
    }
    path = tmp_path / "zeitsaldo_config.yaml"
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestBalanceProcessor:

    def test_compute_without_io(self, config_path, console, make_row):
        processor = BalanceProcessor(Config(config_path), console=console)
        report = processor.compute([make_row(schedule="通常", actual="10.00", contracted="8.00"), make_row(schedule="通常")])
        assert report.state.cumulative_diff == 2.0
        assert report.state.overtime_diff == 2.0
        assert report.banner_data.remaining_required == 6.0
        assert [b.text if b else None for b in report.row_balances] == ["+2:00", None]

    def test_empty_table(self, config_path, console):
        report = BalanceProcessor(Config(config_path), console=console).compute([])
        assert len(report.lines) == 2
        assert "+0:00" in line_text(report.lines[0])

    def test_run_with_empty_export(self, tmp_path, config_path, console):
        (tmp_path / "data" / "oktober.csv").write_text("", encoding="utf-8")
        report = BalanceProcessor(Config(config_path), console=console).run()
        assert report is not None
        assert len(report.lines) == 2
        assert "+0:00" in line_text(report.lines[0])
        assert report.row_balances == []

    def test_run_writes_outputs(self, tmp_path, config_path, console):
        (tmp_path / "data" / "oktober.csv").write_text(CSV_EXPORT, encoding="utf-8")
        report = BalanceProcessor(Config(config_path), console=console).run()

        assert report is not None
        # 9:30 + 7:45 gegen 2 x 8:00
        assert report.state.cumulative_diff == pytest.approx(1.25)
        assert report.state.overtime_diff == pytest.approx(1.25)
        assert report.state.remaining_days == 2
        assert [b.text if b else None for b in report.row_balances] == ["+1:30", "+1:15", None, None, None, None]
        assert "Noch 2 Tage / Sollzeit 14:45" in line_text(report.lines[0])

        assert "Aktueller Zeitsaldo: +1:15" in console.file.getvalue()
        assert (tmp_path / "output" / "saldo.html").exists()
        assert (tmp_path / "output" / "saldo.xlsx").exists()

    def test_explicit_source(self, tmp_path, config_path, console):
        source = tmp_path / "anderer_export.csv"
        source.write_text(CSV_EXPORT, encoding="utf-8")
        report = BalanceProcessor(Config(config_path), console=console).run(source)
        assert report.state.remaining_days == 2

    def test_missing_source_returns_none(self, config_path, console):
        sleeps = []
        processor = BalanceProcessor(Config(config_path), console=console, sleep=sleeps.append)
        assert processor.run() is None
        assert len(sleeps) == 3

    def test_runs_are_independent(self, tmp_path, config_path, console):
        (tmp_path / "data" / "oktober.csv").write_text(CSV_EXPORT, encoding="utf-8")
        processor = BalanceProcessor(Config(config_path), console=console)
        first = processor.run()
        second = processor.run()
        assert first.state == second.state


class TestMain:

    def test_main_with_source_argument(self, tmp_path, config_path, monkeypatch):
        source = tmp_path / "export.csv"
        source.write_text(CSV_EXPORT, encoding="utf-8")
        monkeypatch.setenv("ZEITSALDO_CONFIG", str(config_path))
        assert main([str(source)]) == 0
        assert (tmp_path / "output" / "saldo.html").exists()

    def test_main_without_export(self, config_path, monkeypatch):
        monkeypatch.setenv("ZEITSALDO_CONFIG", str(config_path))
        assert main([]) == 1
