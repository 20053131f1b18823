"""
Domain models and value objects.

Base (основание системы счисления) и Number (число в этом основании).
"""

from src.decto.domain.base import DECIMAL_BASE, DECIMAL_RADIX, Base
from src.decto.domain.number import DIGIT_SEPARATOR, PARSE_FRACTION_PLACES, Number, Sign, parse

__all__ = [
    # Base
    "Base",
    "DECIMAL_BASE",
    "DECIMAL_RADIX",
    # Number
    "Number",
    "Sign",
    "parse",
    "DIGIT_SEPARATOR",
    "PARSE_FRACTION_PLACES",
]
