"""
Тесты для табличного отображения

Проверяет:
1. render_digits: префикс, разделитель после каждой цифры
2. render_value: как введено / фиксированная точность
3. render_table: заголовки, выравнивание, ширина колонок
4. Идемпотентность
"""

from decimal import Decimal

import pytest

from src.core.domain.conversion import ConversionRecord, FormatterConfig
from src.report.table import render_digits, render_table, render_value


@pytest.fixture
def binary_records():
    """Записи 0.5 и 0.25 в base 2."""
    return [
        ConversionRecord.from_value("0.5", 2),
        ConversionRecord.from_value("0.25", 2),
    ]


class TestRenderDigits:
    """Тесты render_digits."""

    def test_separator_after_every_digit(self):
        assert render_digits([1]) == "0.1;"
        assert render_digits([0, 1]) == "0.0;1;"
        assert render_digits([1, 1]) == "0.1;1;"

    def test_multi_character_digits(self):
        assert render_digits([12]) == "0.12;"
        assert render_digits([9, 59, 58, 33, 36]) == "0.9;59;58;33;36;"

    def test_empty_separator(self):
        config = FormatterConfig(separator="")
        assert render_digits([0, 1], config) == "0.01"
        assert render_digits([1, 1], config) == "0.11"

    def test_custom_prefix_and_separator(self):
        config = FormatterConfig(prefix=".", separator=" ")
        assert render_digits([3, 7], config) == ".3 7 "

    def test_idempotent(self):
        digits = [2, 10, 10, 10, 3, 10, 13, 1]
        assert render_digits(digits) == render_digits(digits)


class TestRenderValue:
    """Тесты render_value."""

    def test_as_typed(self):
        assert render_value(Decimal("0.25")) == "0.25"
        assert render_value(Decimal("0.250")) == "0.250"
        assert render_value(Decimal("1E-5")) == "0.00001"

    def test_fixed_precision(self):
        config = FormatterConfig(value_precision=8)
        assert render_value(Decimal("0.5"), config) == "0.50000000"
        assert render_value(Decimal("0.16666"), FormatterConfig(value_precision=2)) == "0.17"


class TestRenderTable:
    """Тесты render_table."""

    def test_layout(self, binary_records):
        lines = render_table(2, binary_records).split("\n")

        assert lines[0] == "|" + " " * 2 + "Base 10" + " " * 3 + "|" + " " * 9 + "Base 2" + " " * 9 + "|"
        assert lines[1] == "|:" + "-" * 11 + "|:" + "-" * 23 + "|"
        assert lines[2] == "| " + "0.5".ljust(10) + " | " + "0.1;".ljust(22) + " |"
        assert lines[3] == "| " + "0.25".ljust(10) + " | " + "0.0;1;".ljust(22) + " |"
        assert len(lines) == 4

    def test_rows_in_input_order(self, binary_records):
        text = render_table(2, list(reversed(binary_records)))
        assert text.index("0.25") < text.index("0.5 ")

    def test_header_names_base(self):
        records = [ConversionRecord.from_value("0.5", 60)]
        text = render_table(60, records)
        assert "Base 60" in text
        assert "0.30;" in text

    def test_no_trailing_newline(self, binary_records):
        assert not render_table(2, binary_records).endswith("\n")

    def test_empty_records_header_only(self):
        lines = render_table(16, []).split("\n")
        assert len(lines) == 2
        assert "Base 16" in lines[0]

    def test_columns_grow_to_fit(self):
        records = [
            ConversionRecord.from_value("0.000000000001", 10),
            ConversionRecord.from_value("0.16666", 1000),
        ]
        text = render_table(1000, records, FormatterConfig(value_min_width=0, digits_min_width=0))
        widths = {len(line) for line in text.split("\n")}
        assert len(widths) == 1

    def test_wide_digits_column_aligned(self):
        records = [ConversionRecord.from_value("0.8", 16)]
        config = FormatterConfig()
        lines = render_table(16, records, config).split("\n")
        assert "0.12;12;12;12;12;12;12;12;" in lines[2]
        assert len({len(line) for line in lines}) == 1

    def test_fixed_precision_column(self, binary_records):
        text = render_table(2, binary_records, FormatterConfig(value_precision=8))
        assert "| 0.50000000 |" in text
        assert "| 0.25000000 |" in text

    def test_idempotent(self, binary_records):
        assert render_table(2, binary_records) == render_table(2, binary_records)
