"""
Conversion — разложение десятичной величины по произвольному основанию

Модуль реализует алгоритм смены основания:
- Целая часть: последовательный divmod на основание (цифры от младшей к старшей)
- Дробная часть: последовательное умножение на основание с усечением
- Детекция цикла по множеству уже встреченных остатков
- Жёсткий лимит количества дробных цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не пуст (минимум одна цифра 0)
2. Каждая цифра в диапазоне [0, base)
3. Дробная часть ≤ max_fraction_digits цифр
4. Результат — усечение, а не округление; бесконечные разложения обрезаются

ИЗВЕСТНОЕ ОГРАНИЧЕНИЕ:
Дробный буфер хранится с конечной рабочей точностью. Для оснований, в которых
разложение бесконечно, хвост результата может отличаться от точного
разложения. Это принятое поведение, а не ошибка.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from src.decto.math.precision import (
    MAX_FRACTION_DIGITS,
    WORKING_PRECISION,
    extract_digit,
    fract,
    round_to_precision,
    trunc,
    working_context,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """Параметры конверсии.

    max_fraction_digits: лимит цифр дробной части (≥ 1)
    working_precision: значащие цифры дробного буфера (≥ 1)
    """

    max_fraction_digits: int = MAX_FRACTION_DIGITS
    working_precision: int = WORKING_PRECISION

    def __post_init__(self) -> None:
        if self.max_fraction_digits < 1:
            raise ValueError(
                f"max_fraction_digits must be >= 1, got {self.max_fraction_digits}"
            )
        if self.working_precision < 1:
            raise ValueError(
                f"working_precision must be >= 1, got {self.working_precision}"
            )


DEFAULT_CONVERSION_CONFIG: Final[ConversionConfig] = ConversionConfig()


# =============================================================================
# ЦЕЛАЯ ЧАСТЬ
# =============================================================================


def convert_integral(
    magnitude: Decimal,
    base: int,
    config: ConversionConfig = DEFAULT_CONVERSION_CONFIG,
) -> tuple[int, ...]:
    """
    Цифры целой части magnitude в основании base (старшая первой).

    Args:
        magnitude: Неотрицательная величина (дробная часть игнорируется)
        base: Целевое основание (≥ 2)
        config: Параметры конверсии

    Returns:
        Кортеж цифр; (0,) если целая часть равна нулю

    Raises:
        DigitOverflowError: Если остаток не является цифрой основания

    Examples:
        >>> convert_integral(Decimal("5"), 2)
        (1, 0, 1)
        >>> convert_integral(Decimal("0.75"), 2)
        (0,)
    """
    digits: list[int] = []
    integer = trunc(magnitude.copy_abs())

    # Частное divmod должно помещаться в точность контекста
    precision = max(config.working_precision, integer.adjusted() + 1)

    with working_context(precision):
        while integer >= 1:
            integer, remainder = divmod(integer, base)
            digits.append(extract_digit(remainder, base))

    if not digits:
        return (0,)

    # Цифры получены от младшей к старшей
    digits.reverse()
    return tuple(digits)


# =============================================================================
# ДРОБНАЯ ЧАСТЬ
# =============================================================================


def convert_fractional(
    magnitude: Decimal,
    base: int,
    config: ConversionConfig = DEFAULT_CONVERSION_CONFIG,
) -> tuple[int, ...]:
    """
    Цифры дробной части magnitude в основании base (ближайшая к точке первой).

    Алгоритм:
        buffer = fract(magnitude) * base
        повторять не более max_fraction_digits раз:
            если buffer уже встречался как остаток → цикл, стоп
            digit = trunc(buffer); remainder = buffer - digit
            запомнить remainder; buffer = remainder * base

    Конечное разложение завершается остатком 0: следующий буфер (0)
    совпадает с запомненным остатком, и цикл останавливается.

    Args:
        magnitude: Неотрицательная величина (целая часть игнорируется)
        base: Целевое основание (≥ 2)
        config: Параметры конверсии

    Returns:
        Кортеж цифр (минимум одна цифра)

    Raises:
        DigitOverflowError: Если усечённый буфер не является цифрой основания

    Examples:
        >>> convert_fractional(Decimal("0.2"), 2)
        (0, 0, 1, 1)
        >>> convert_fractional(Decimal("0.5"), 60)
        (30,)
    """
    digits: list[int] = []
    seen: set[Decimal] = set()

    with working_context(config.working_precision):
        remainder = round_to_precision(fract(magnitude.copy_abs()), config.working_precision)
        buffer = remainder * base

        for _ in range(config.max_fraction_digits):
            logger.debug("fraction buffer: %s", buffer)

            if buffer in seen:
                logger.debug("repeating remainder %s, stopping after %d digits", buffer, len(digits))
                break

            integral = trunc(buffer)
            remainder = buffer - integral
            seen.add(remainder)

            digits.append(extract_digit(integral, base))
            buffer = remainder * base
        else:
            logger.debug("fraction digit cap %d reached", config.max_fraction_digits)

    if not digits:
        return (0,)

    return tuple(digits)
