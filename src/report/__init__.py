"""
Report layer: batch conversion and rendering.

Превращает список сырых значений в ConversionBatch и отображает его
в виде таблицы или JSON отчёта.
"""

from src.report.batch import ON_INVALID_ABORT, ON_INVALID_SKIP, build_batch
from src.report.json_report import REPORT_SCHEMA_VERSION, build_report, render_json
from src.report.table import render_digits, render_table, render_value

__all__ = [
    # Batch
    "ON_INVALID_ABORT",
    "ON_INVALID_SKIP",
    "build_batch",
    # Table
    "render_digits",
    "render_table",
    "render_value",
    # JSON
    "REPORT_SCHEMA_VERSION",
    "build_report",
    "render_json",
]
