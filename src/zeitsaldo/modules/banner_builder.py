from __future__ import annotations

from typing import List, Optional

from pydantic_models.config.balance_config import BalanceConfig
from pydantic_models.data.accumulator_state import AccumulatorState
from pydantic_models.data.banner_data import BannerData
from pydantic_models.data.banner_line import BannerLine, BannerSegment, SegmentColor
from pydantic_models.data.row_balance import RowBalance

from .time_formatter import format_signed, format_unsigned

GOAL_CLEARED_LABEL = "Soll bereits erfüllt"
AVG_PER_DAY_LABEL = "Ø pro Tag"
BALANCE_LABEL = "Aktueller Zeitsaldo: "
LIMIT_EXCEEDED_LABEL = "Grenze überschritten"
LIMIT_AVOIDABLE_LABEL = "vermeidbar"


def balance_color(hours: float) -> SegmentColor:
    return "green" if hours >= 0 else "red"


def build_banner_data(state: AccumulatorState, balance_config: BalanceConfig) -> BannerData:
    """
    Rechnet den Endstand des Durchlaufs auf den Rest des Monats hoch.

    - remaining_required: noch fehlende Stunden bis zur Monats-Sollzeit.
    - avg_per_day: nötiger Schnitt pro verbleibendem Arbeitstag (0 ohne Resttage).
    - projected_overtime: aktueller Überstundensaldo, unverändert übernommen.
    """
    remaining_required = (
        state.remaining_days * balance_config.expected_hours - state.cumulative_diff
    )
    avg_per_day = remaining_required / state.remaining_days if state.remaining_days > 0 else 0.0
    return BannerData(
        remaining_days=state.remaining_days,
        remaining_required=remaining_required,
        avg_per_day=avg_per_day,
        cumulative_diff=state.cumulative_diff,
        projected_overtime=state.overtime_diff,
    )


def _required_time_line(data: BannerData) -> BannerLine:
    if data.remaining_required <= 0:
        return [
            BannerSegment(
                text=f"Noch {data.remaining_days} Tage / Sollzeit {format_signed(data.remaining_required)}",
                bold=True,
            ),
            BannerSegment(text=f" ({GOAL_CLEARED_LABEL})"),
        ]
    return [
        BannerSegment(
            text=f"Noch {data.remaining_days} Tage / Sollzeit {format_unsigned(data.remaining_required)}",
            bold=True,
        ),
        BannerSegment(text=f" ({AVG_PER_DAY_LABEL} "),
        BannerSegment(text=format_unsigned(data.avg_per_day), bold=True),
        BannerSegment(text=")"),
    ]


def _balance_line(data: BannerData) -> BannerLine:
    return [
        BannerSegment(text=BALANCE_LABEL),
        BannerSegment(
            text=format_signed(data.cumulative_diff),
            color=balance_color(data.cumulative_diff),
        ),
    ]


def _overtime_line(data: BannerData, balance_config: BalanceConfig) -> Optional[BannerLine]:
    limit = balance_config.overtime_limit
    overtime = format_unsigned(data.projected_overtime)
    if data.projected_overtime >= limit:
        return [
            BannerSegment(
                text=f"⚠ Überstunden {overtime}: {limit:g}-Stunden-{LIMIT_EXCEEDED_LABEL}",
                bold=True,
                color="red",
            )
        ]
    if data.projected_overtime > balance_config.warning_threshold and data.remaining_days > 0:
        max_daily = balance_config.expected_hours + (limit - data.projected_overtime) / data.remaining_days
        return [
            BannerSegment(
                text=(
                    f"⚠ Überstunden {overtime}: nahe an {limit:g} Stunden, "
                    f"{LIMIT_AVOIDABLE_LABEL} mit höchstens {format_unsigned(max_daily)} pro Tag"
                ),
                bold=True,
                color="orange",
            )
        ]
    return None


def build_banner_lines(data: BannerData, balance_config: BalanceConfig) -> List[BannerLine]:
    """
    Stellt die Bannerzeilen zusammen: Sollzeit, Zeitsaldo und ggf. eine Überstunden-Warnung.
    Die Überschreitung der Grenze hat Vorrang vor der Warnstufe.
    """
    lines: List[BannerLine] = [_required_time_line(data), _balance_line(data)]
    overtime_line = _overtime_line(data, balance_config)
    if overtime_line is not None:
        lines.append(overtime_line)
    return lines


def format_row_balances(state: AccumulatorState) -> List[Optional[RowBalance]]:
    """Formatiert den laufenden Saldo pro Zeile für die ergänzte Spalte."""
    return [
        None if balance is None else RowBalance(text=format_signed(balance), color=balance_color(balance))
        for balance in state.row_balances
    ]


def summary_message(data: BannerData) -> str:
    return (
        f"[zeitsaldo] Saldo: {format_signed(data.cumulative_diff)}, "
        f"Rest: {data.remaining_days} Tage / {format_unsigned(data.remaining_required)}, "
        f"Ø pro Tag: {format_unsigned(data.avg_per_day)}, "
        f"Überstunden: {format_unsigned(data.projected_overtime)}"
    )
