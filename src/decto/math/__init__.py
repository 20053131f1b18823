"""
Math modules для decto

Decimal-примитивы рабочей точности и алгоритм смены основания.
"""

# Precision
from src.decto.math.precision import (
    MAX_FRACTION_DIGITS,
    PRECISION_HEADROOM,
    WORKING_PRECISION,
    extract_digit,
    fract,
    round_to_precision,
    trunc,
    working_context,
)

# Conversion
from src.decto.math.conversion import (
    DEFAULT_CONVERSION_CONFIG,
    ConversionConfig,
    convert_fractional,
    convert_integral,
)

__all__ = [
    # Precision — Constants
    "MAX_FRACTION_DIGITS",
    "PRECISION_HEADROOM",
    "WORKING_PRECISION",
    # Precision — Functions
    "extract_digit",
    "fract",
    "round_to_precision",
    "trunc",
    "working_context",
    # Conversion — Config
    "DEFAULT_CONVERSION_CONFIG",
    "ConversionConfig",
    # Conversion — Functions
    "convert_fractional",
    "convert_integral",
]
