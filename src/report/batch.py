"""
Batch — Конверсия списка значений в одном основании

Политика для невалидных значений:
- skip (по умолчанию): значение попадает в rejected, обработка продолжается
- abort: первое InvalidInput пробрасывается вызывающему

Невалидное основание всегда прерывает пакет до конверсии первого значения.
"""

import logging
from typing import Final, Iterable, Literal

from src.core.domain.conversion import (
    ConversionBatch,
    ConversionRecord,
    ConverterConfig,
    RejectedInput,
)
from src.core.math.radix import FractionalInput, InvalidInput, validate_base

logger = logging.getLogger(__name__)

ON_INVALID_SKIP: Final[str] = "skip"
ON_INVALID_ABORT: Final[str] = "abort"

OnInvalid = Literal["skip", "abort"]


def build_batch(
    raw_values: Iterable[FractionalInput],
    base: int,
    config: ConverterConfig | None = None,
    on_invalid: OnInvalid = ON_INVALID_SKIP,
) -> ConversionBatch:
    """
    Конверсия пакета значений с сохранением порядка ввода.

    Args:
        raw_values: Значения в [0, 1) (str, float, Decimal, ...)
        base: Целевое основание
        config: Параметры конвертера (default: ConverterConfig())
        on_invalid: Политика для невалидных значений ("skip" или "abort")

    Returns:
        ConversionBatch с записями и отклонёнными значениями

    Raises:
        InvalidBase: Если base < 2 (до обработки значений)
        InvalidInput: Если on_invalid="abort" и встретилось невалидное значение
        ValueError: Если on_invalid неизвестна
    """
    if on_invalid not in (ON_INVALID_SKIP, ON_INVALID_ABORT):
        raise ValueError(f"on_invalid must be 'skip' or 'abort', got {on_invalid!r}")

    validate_base(base)
    config = config or ConverterConfig()

    records: list[ConversionRecord] = []
    rejected: list[RejectedInput] = []

    for raw in raw_values:
        try:
            record = ConversionRecord.from_value(raw, base, config)
        except InvalidInput as e:
            if on_invalid == ON_INVALID_ABORT:
                raise
            logger.warning(f"Skipping {raw!r}: {e.reason}")
            rejected.append(RejectedInput(raw=str(raw), reason=e.reason))
            continue

        if record.truncated:
            logger.debug(
                f"{record.value} truncated to {config.max_digits} digits in base {base}"
            )
        records.append(record)

    return ConversionBatch(
        base=base,
        max_digits=config.max_digits,
        records=tuple(records),
        rejected=tuple(rejected),
    )
