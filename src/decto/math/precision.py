"""
Precision — Decimal-примитивы с фиксированной рабочей точностью

Модуль изолирует всю работу с decimal.Context:
- Константы рабочей точности и лимита дробных цифр
- Локальный контекст (глобальный контекст decimal не изменяется)
- trunc / fract для Decimal
- Извлечение цифры с защитой от переполнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все вычисления идут в localcontext с точностью 2 * WORKING_PRECISION
2. Цифра всегда в диапазоне [0, base), иначе DigitOverflowError
3. Все операции детерминированы и воспроизводимы
"""

from decimal import ROUND_DOWN, Context, Decimal, localcontext
from typing import Final

from src.decto.errors import DigitOverflowError

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Максимальное количество цифр дробной части результата конверсии
MAX_FRACTION_DIGITS: Final[int] = 8

# Рабочая точность (значащие цифры) дробного буфера
# Внутренние вычисления ведутся с удвоенной точностью
WORKING_PRECISION: Final[int] = 128

# Множитель точности для внутреннего контекста
PRECISION_HEADROOM: Final[int] = 2


# =============================================================================
# КОНТЕКСТ
# =============================================================================


def working_context(precision: int = WORKING_PRECISION):
    """
    Локальный decimal-контекст для конверсии.

    Точность = precision * PRECISION_HEADROOM значащих цифр.
    Округление вниз: результат — усечение, а не округление.

    Args:
        precision: Рабочая точность (default: WORKING_PRECISION)

    Returns:
        Context manager (decimal.localcontext)

    Raises:
        ValueError: Если precision < 1
    """
    if precision < 1:
        raise ValueError(f"precision must be positive, got {precision}")

    ctx = Context(prec=precision * PRECISION_HEADROOM, rounding=ROUND_DOWN)
    return localcontext(ctx)


# =============================================================================
# TRUNC / FRACT
# =============================================================================


def trunc(value: Decimal) -> Decimal:
    """
    Целая часть (усечение к нулю).

    Examples:
        >>> trunc(Decimal("12.75"))
        Decimal('12')
        >>> trunc(Decimal("-0.5"))
        Decimal('-0')
    """
    return value.to_integral_value(rounding=ROUND_DOWN)


def fract(value: Decimal) -> Decimal:
    """
    Дробная часть: value - trunc(value).

    Examples:
        >>> fract(Decimal("12.75"))
        Decimal('0.75')
    """
    return value - trunc(value)


def round_to_precision(value: Decimal, precision: int = WORKING_PRECISION) -> Decimal:
    """
    Усечение до precision значащих цифр.

    Используется для дробного буфера перед разложением: ограничивает
    накопление цифр при многократном умножении на основание.
    """
    if precision < 1:
        raise ValueError(f"precision must be positive, got {precision}")

    return Context(prec=precision, rounding=ROUND_DOWN).plus(value)


# =============================================================================
# ИЗВЛЕЧЕНИЕ ЦИФРЫ
# =============================================================================


def extract_digit(value: Decimal, base: int) -> int:
    """
    Преобразование усечённого Decimal в цифру основания base.

    Args:
        value: Значение с нулевой дробной частью (результат trunc)
        base: Основание системы счисления

    Returns:
        Цифра как int в диапазоне [0, base)

    Raises:
        DigitOverflowError: Если value не является цифрой основания base
    """
    if not value.is_finite() or value != trunc(value):
        raise DigitOverflowError(value, base)

    digit = int(value)
    if digit < 0 or digit >= base:
        raise DigitOverflowError(digit, base)

    return digit
