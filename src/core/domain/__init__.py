"""
Domain models and value objects.

Contains conversion configs and records: ConverterConfig, FormatterConfig,
ConversionRecord, RejectedInput, ConversionBatch.
"""

from src.core.domain.conversion import (
    DEFAULT_PREFIX,
    DEFAULT_SEPARATOR,
    ConversionBatch,
    ConversionRecord,
    ConverterConfig,
    FormatterConfig,
    RejectedInput,
)

__all__ = [
    # Display defaults
    "DEFAULT_PREFIX",
    "DEFAULT_SEPARATOR",
    # Config models
    "ConverterConfig",
    "FormatterConfig",
    # Record models
    "ConversionRecord",
    "RejectedInput",
    "ConversionBatch",
]
