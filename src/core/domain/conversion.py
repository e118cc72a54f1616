"""
Conversion — Модели конфигурации и результатов конверсии

Immutable Pydantic модели:
- ConverterConfig: параметры конвертера (precision cap)
- FormatterConfig: параметры отображения (разделитель, префикс, ширина колонок)
- ConversionRecord: исходное значение и его цифры в целевом основании
- RejectedInput: отклонённое значение пакета с причиной
- ConversionBatch: результат обработки пакета значений

Совместимость с JSON Schema (src/core/contracts/schema/conversion_report.json).
"""

from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.numerical_safeguards import to_decimal
from src.core.math.radix import (
    DEFAULT_MAX_DIGITS,
    MIN_BASE,
    FractionalInput,
    convert_detailed,
)

# =============================================================================
# ПАРАМЕТРЫ ОТОБРАЖЕНИЯ
# =============================================================================

# Разделитель цифр (пишется после каждой цифры, включая последнюю)
DEFAULT_SEPARATOR: Final[str] = ";"

# Префикс дробного значения
DEFAULT_PREFIX: Final[str] = "0."


# =============================================================================
# CONFIG MODELS
# =============================================================================


class ConverterConfig(BaseModel):
    """Параметры конвертера."""

    max_digits: int = Field(
        DEFAULT_MAX_DIGITS, ge=1, description="Максимум дробных цифр (precision cap)"
    )

    model_config = {"frozen": True}


class FormatterConfig(BaseModel):
    """
    Параметры табличного и JSON отображения.

    value_precision=None → значение выводится как введено (0.25),
    иначе с фиксированным числом знаков (0.25000000 при 8).
    """

    separator: str = Field(DEFAULT_SEPARATOR, description="Разделитель между цифрами")
    prefix: str = Field(DEFAULT_PREFIX, description="Префикс дробного значения")
    value_precision: int | None = Field(
        None, ge=0, description="Число знаков колонки Base 10 (None = как введено)"
    )
    value_min_width: int = Field(10, ge=0, description="Минимальная ширина колонки Base 10")
    digits_min_width: int = Field(22, ge=0, description="Минимальная ширина колонки Base N")

    model_config = {"frozen": True}


# =============================================================================
# RECORD MODELS
# =============================================================================


class ConversionRecord(BaseModel):
    """
    Пара (исходное значение, цифры в целевом основании).

    Создаётся на каждое значение, не изменяется, отбрасывается после вывода.
    """

    value: Decimal = Field(..., ge=0, lt=1, description="Исходное значение (base 10)")
    base: int = Field(..., ge=MIN_BASE, description="Целевое основание")
    digits: tuple[int, ...] = Field(..., min_length=1, description="Дробные цифры, старшая первой")
    truncated: bool = Field(False, description="Сработал ли precision cap")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_digits_in_base(self) -> "ConversionRecord":
        """Проверка, что каждая цифра в [0, base)"""
        for digit in self.digits:
            if not 0 <= digit < self.base:
                raise ValueError(f"digit {digit} out of range for base {self.base}")
        return self

    @classmethod
    def from_value(
        cls,
        value: FractionalInput,
        base: int,
        config: ConverterConfig | None = None,
    ) -> "ConversionRecord":
        """
        Конверсия значения и упаковка результата в запись.

        Raises:
            InvalidBase: Если base < 2
            InvalidInput: Если value вне [0, 1)
        """
        config = config or ConverterConfig()
        result = convert_detailed(value, base, config.max_digits)
        return cls(
            value=to_decimal(value).copy_abs(),
            base=base,
            digits=tuple(result.digits),
            truncated=result.truncated,
        )


class RejectedInput(BaseModel):
    """Значение пакета, отклонённое при разборе или проверке диапазона."""

    raw: str = Field(..., description="Исходный текст значения")
    reason: str = Field(..., min_length=1, description="Причина отклонения")

    model_config = {"frozen": True}


class ConversionBatch(BaseModel):
    """
    Результат обработки пакета значений.

    records сохраняют порядок ввода; rejected — отклонённые значения (политика skip).
    """

    base: int = Field(..., ge=MIN_BASE, description="Целевое основание")
    max_digits: int = Field(DEFAULT_MAX_DIGITS, ge=1, description="Precision cap")
    records: tuple[ConversionRecord, ...] = Field(default_factory=tuple)
    rejected: tuple[RejectedInput, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("records")
    @classmethod
    def validate_records_base(cls, v: tuple[ConversionRecord, ...], info) -> tuple:
        """Проверка, что все записи пакета в одном основании"""
        if "base" in info.data:
            base = info.data["base"]
            for record in v:
                if record.base != base:
                    raise ValueError(f"record base {record.base} differs from batch base {base}")
        return v

    @property
    def has_rejections(self) -> bool:
        return bool(self.rejected)
