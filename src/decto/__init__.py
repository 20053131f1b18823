"""
decto — конверсия десятичных чисел в произвольное основание.

Число разбирается из десятичной записи (parse) и переводится в основание
≥ 2 (Number.to_base). Цифры больше 9 хранятся и выводятся как десятичные
числа, разделённые ";".
"""

from src.decto.domain import DECIMAL_BASE, Base, Number, Sign, parse
from src.decto.errors import DectoError, DigitOverflowError, ParseError
from src.decto.math import (
    DEFAULT_CONVERSION_CONFIG,
    MAX_FRACTION_DIGITS,
    WORKING_PRECISION,
    ConversionConfig,
)

__all__ = [
    "Base",
    "DECIMAL_BASE",
    "Number",
    "Sign",
    "parse",
    "ConversionConfig",
    "DEFAULT_CONVERSION_CONFIG",
    "MAX_FRACTION_DIGITS",
    "WORKING_PRECISION",
    "DectoError",
    "DigitOverflowError",
    "ParseError",
]
