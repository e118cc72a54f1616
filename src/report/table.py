"""
Table — Табличное отображение записей конверсии

Формат (markdown-таблица, заголовки по центру, ячейки по левому краю):

    |  Base 10   |         Base 2         |
    |:-----------|:-----------------------|
    | 0.5        | 0.1;                   |
    | 0.25       | 0.0;1;                 |

Ширина колонок растёт под самую широкую ячейку.
Чистые функции: одинаковый вход → одинаковый текст.
"""

from decimal import Decimal
from typing import Iterable, Sequence

from src.core.domain.conversion import ConversionRecord, FormatterConfig

VALUE_HEADER = "Base 10"


def render_digits(digits: Iterable[int], config: FormatterConfig | None = None) -> str:
    """
    Отображение цифр: префикс + каждая цифра с разделителем после неё.

    Examples:
        >>> render_digits([0, 1])
        '0.0;1;'
        >>> render_digits([12, 12])
        '0.12;12;'
        >>> render_digits([0, 1], FormatterConfig(separator=""))
        '0.01'
    """
    config = config or FormatterConfig()
    return config.prefix + "".join(f"{digit}{config.separator}" for digit in digits)


def render_value(value: Decimal, config: FormatterConfig | None = None) -> str:
    """
    Отображение исходного значения в колонке Base 10.

    Examples:
        >>> render_value(Decimal("0.25"))
        '0.25'
        >>> render_value(Decimal("0.25"), FormatterConfig(value_precision=8))
        '0.25000000'
    """
    config = config or FormatterConfig()
    if config.value_precision is None:
        return format(value, "f")
    return format(value, f".{config.value_precision}f")


def render_table(
    base: int,
    records: Sequence[ConversionRecord],
    config: FormatterConfig | None = None,
) -> str:
    """
    Таблица "Base 10" / "Base {base}" по одной строке на запись.

    Args:
        base: Основание для заголовка второй колонки
        records: Записи в порядке вывода
        config: Параметры отображения

    Returns:
        Текст таблицы без завершающего перевода строки
    """
    config = config or FormatterConfig()
    digits_header = f"Base {base}"

    rows = [
        (render_value(record.value, config), render_digits(record.digits, config))
        for record in records
    ]

    value_width = max(
        [config.value_min_width, len(VALUE_HEADER)] + [len(value) for value, _ in rows]
    )
    digits_width = max(
        [config.digits_min_width, len(digits_header)] + [len(digits) for _, digits in rows]
    )

    lines = [
        f"| {VALUE_HEADER:^{value_width}} | {digits_header:^{digits_width}} |",
        f"|:{'-' * (value_width + 1)}|:{'-' * (digits_width + 1)}|",
    ]
    for value, digits in rows:
        lines.append(f"| {value:<{value_width}} | {digits:<{digits_width}} |")

    return "\n".join(lines)
