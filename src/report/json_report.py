"""
JSON Report — Машиночитаемый отчёт о конверсии пакета

Контракт: src/core/contracts/schema/conversion_report.json
Отчёт проверяется по схеме перед выводом.
"""

import json
from typing import Any, Dict, Final

from src.core.contracts.validators import validate_conversion_report
from src.core.domain.conversion import ConversionBatch, FormatterConfig
from src.report.table import render_digits

REPORT_SCHEMA_VERSION: Final[str] = "1"


def build_report(batch: ConversionBatch, config: FormatterConfig | None = None) -> Dict[str, Any]:
    """
    Построение dict отчёта по пакету.

    Raises:
        ValidationError: Если отчёт не соответствует conversion_report схеме
    """
    config = config or FormatterConfig()
    report = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "base": batch.base,
        "max_digits": batch.max_digits,
        "records": [
            {
                "value": format(record.value, "f"),
                "digits": list(record.digits),
                "rendered": render_digits(record.digits, config),
                "truncated": record.truncated,
            }
            for record in batch.records
        ],
        "rejected": [
            {"raw": item.raw, "reason": item.reason} for item in batch.rejected
        ],
    }
    validate_conversion_report(report)
    return report


def render_json(batch: ConversionBatch, config: FormatterConfig | None = None) -> str:
    """JSON текст отчёта (отступ 2, стабильный порядок ключей)."""
    return json.dumps(build_report(batch, config), indent=2, sort_keys=True)
