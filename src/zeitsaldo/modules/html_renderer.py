from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from jinja2 import Environment
from loguru import logger

from pydantic_models.config.rendering_config import RenderingConfig
from pydantic_models.data.banner_line import BannerLine, BannerSegment
from pydantic_models.data.row_balance import RowBalance

from .attendance_table import AttendanceTable

BANNER_STYLE = (
    "padding:10px 14px;margin-bottom:8px;border-radius:4px;"
    "font-size:14px;line-height:1.8;color:#333;border-left:4px solid #7986cb;"
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Zeitsaldo</title></head>
<body>
<div class="zeitsaldo-banner" style="{{ banner_style }}background:{{ highlight }};">
{%- for line in lines %}
{%- for segment in line %}<span style="{{ segment | segment_style }}">{{ segment.text }}</span>{% endfor %}
{%- if not loop.last %}<br>{% endif %}
{%- endfor %}
</div>
<table>
<thead><tr>
{%- for column in columns %}<th>{{ column }}</th>{% endfor -%}
<th style="background:{{ highlight }}">{{ balance_header }}</th></tr></thead>
<tbody>
{%- for row, balance in rows %}
<tr>
{%- for column in columns %}<td>{{ row.value(column) }}</td>{% endfor -%}
<td style="text-align:right;white-space:nowrap;background:{{ highlight }};{% if balance %}color:{{ balance.color }};{% endif %}">
{%- if balance %}{{ balance.text }}{% endif %}</td>
</tr>
{%- endfor %}
</tbody>
</table>
</body>
</html>
"""


def segment_style(segment: BannerSegment) -> str:
    """Jinja2-Filter: CSS für ein Bannersegment."""
    styles = []
    if segment.color:
        styles.append(f"color:{segment.color}")
    if segment.bold:
        styles.append("font-weight:bold")
    return ";".join(styles)


def register_filters(env: Environment) -> None:
    env.filters["segment_style"] = segment_style


class HtmlRenderer:
    """
    Rendert Banner und Tabelle mit ergänzter Saldo-Spalte als HTML-Seite.
    """

    def __init__(self, rendering_config: RenderingConfig):
        self.rendering_config = rendering_config
        self.env = Environment(autoescape=True)
        register_filters(self.env)
        self.template = self.env.from_string(PAGE_TEMPLATE)

    def render(
        self,
        lines: List[BannerLine],
        table: AttendanceTable,
        row_balances: List[Optional[RowBalance]],
    ) -> str:
        return self.template.render(
            banner_style=BANNER_STYLE,
            highlight=self.rendering_config.highlight_color,
            lines=lines,
            columns=table.columns,
            balance_header=self.rendering_config.balance_header,
            rows=list(zip(table.rows, row_balances)),
        )

    def write(
        self,
        path: Path,
        lines: List[BannerLine],
        table: AttendanceTable,
        row_balances: List[Optional[RowBalance]],
    ) -> Path:
        path.write_text(self.render(lines, table, row_balances), encoding="utf-8")
        logger.info(f"HTML-Ausgabe geschrieben: {path}")
        return path
