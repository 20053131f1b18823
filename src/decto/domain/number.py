"""
Number — знаковое число произвольной точности в заданном основании

Immutable Pydantic модель: основание, знак и две последовательности цифр
(целая часть — старшая цифра первой, дробная — ближайшая к точке первой).

Создание:
- parse(text): разбор десятичной записи → Number в основании 10
- Number.to_base(target): конверсия → новый Number (исходный не меняется)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. int_digits и dec_digits никогда не пусты (минимум одна цифра 0)
2. Каждая цифра в диапазоне [0, base)
3. Ноль всегда положителен
4. Конверсия не мутирует исходный Number
"""

import re
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Final, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.decto.domain.base import DECIMAL_BASE, Base
from src.decto.errors import ParseError
from src.decto.math.conversion import (
    DEFAULT_CONVERSION_CONFIG,
    ConversionConfig,
    convert_fractional,
    convert_integral,
)
from src.decto.math.precision import PRECISION_HEADROOM, WORKING_PRECISION, working_context

# =============================================================================
# ПАРАМЕТРЫ РАЗБОРА
# =============================================================================

# Количество знаков после точки при разложении дробей и экспонент ("1/7", "1e-3")
PARSE_FRACTION_PLACES: Final[int] = WORKING_PRECISION * PRECISION_HEADROOM

# Разделитель цифр в отображаемой форме
DIGIT_SEPARATOR: Final[str] = ";"

# Простая десятичная запись: знак, целые цифры, точка, дробные цифры
_PLAIN_DECIMAL = re.compile(r"\s*(?P<sign>[+-]?)(?P<int>[0-9]*)(?:\.(?P<dec>[0-9]*))?\s*")


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак числа"""

    POSITIVE = "+"
    NEGATIVE = "-"

    @property
    def prefix(self) -> str:
        """Префикс при выводе: положительные числа выводятся без знака."""
        return "-" if self is Sign.NEGATIVE else ""


# =============================================================================
# NUMBER MODEL
# =============================================================================


class Number(BaseModel):
    """
    Число в позиционной системе с основанием base.

    Immutable модель (frozen=True). Все преобразования создают новый экземпляр.
    """

    base: Base = Field(default_factory=Base.default, description="Основание цифр")
    sign: Sign = Field(default=Sign.POSITIVE, description="Знак")
    int_digits: tuple[int, ...] = Field(
        default=(0,), min_length=1, description="Цифры целой части, старшая первой"
    )
    dec_digits: tuple[int, ...] = Field(
        default=(0,), min_length=1, description="Цифры дробной части, ближайшая к точке первой"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_digits(self) -> "Number":
        """Каждая цифра должна быть в диапазоне [0, base)."""
        radix = self.base.value
        for name, digits in (("int_digits", self.int_digits), ("dec_digits", self.dec_digits)):
            for digit in digits:
                if digit < 0 or digit >= radix:
                    raise ValueError(f"{name} digit {digit} out of range for base {radix}")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, base: Union[int, Base] = DECIMAL_BASE) -> "Number":
        """Ноль в заданном основании."""
        return cls(base=Base.of(base))

    @classmethod
    def parse(cls, text: str) -> "Number":
        """Разбор десятичной записи. См. parse()."""
        return parse(text)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return not any(self.int_digits) and not any(self.dec_digits)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_base(
        self,
        target: Union[int, Base],
        config: Optional[ConversionConfig] = None,
    ) -> Optional["Number"]:
        """
        Представление того же значения в основании target.

        Дробная часть ограничена config.max_fraction_digits цифрами и
        усекается (не округляется). Если остаток повторяется, разложение
        останавливается раньше: повторяющаяся часть не помечается.

        Args:
            target: Целевое основание (int ≥ 2 или Base)
            config: Параметры конверсии (default: DEFAULT_CONVERSION_CONFIG)

        Returns:
            None если число уже в основании target, иначе новый Number
            с тем же знаком

        Raises:
            DigitOverflowError: Если рабочей точности не хватило для цифры
        """
        target = Base.of(target)
        if target == self.base:
            return None

        config = config or DEFAULT_CONVERSION_CONFIG
        magnitude = self._magnitude(config)

        return Number(
            base=target,
            sign=self.sign,
            int_digits=convert_integral(magnitude, target.value, config),
            dec_digits=convert_fractional(magnitude, target.value, config),
        )

    def to_decimal(self) -> Decimal:
        """
        Значение десятичного Number как Decimal (точно, без контекста).

        Raises:
            ValueError: Если основание не 10
        """
        if not self.base.is_decimal:
            raise ValueError(f"decimal value requires base 10, number is in base {self.base}")

        return Decimal(self.to_dec_string())

    def _magnitude(self, config: ConversionConfig) -> Decimal:
        """Абсолютное значение как Decimal."""
        if self.base.is_decimal:
            return self.to_decimal().copy_abs()

        # Позиционное вычисление: дробная часть точна только для оснований,
        # делящих степень 10; иначе — с рабочей точностью
        radix = self.base.value
        with working_context(config.working_precision):
            integral = Decimal(0)
            for digit in self.int_digits:
                integral = integral * radix + digit
            fractional = Decimal(0)
            for digit in reversed(self.dec_digits):
                fractional = (fractional + digit) / radix
            return integral + fractional

    # -------------------------------------------------------------------------
    # Строковые формы
    # -------------------------------------------------------------------------

    def to_dec_string(self) -> str:
        """
        Каноническая десятичная форма: "-12.34".

        Цифры склеиваются без разделителя в любом основании. Для оснований
        больше 10 результат неоднозначен (цифра 15 и цифры 1, 5 совпадают);
        для них используется to_display_string.
        """
        int_part = "".join(str(digit) for digit in self.int_digits)
        dec_part = "".join(str(digit) for digit in self.dec_digits)
        return f"{self.sign.prefix}{int_part}.{dec_part}"

    def to_display_string(self) -> str:
        """
        Форма для любого основания: цифры разделены ";".

        Examples:
            "12.34" (base 10) → "1;2.3;4"
            "0.25" (base 60)  → "0.15"
        """
        int_part = DIGIT_SEPARATOR.join(str(digit) for digit in self.int_digits)
        dec_part = DIGIT_SEPARATOR.join(str(digit) for digit in self.dec_digits)
        return f"{self.sign.prefix}{int_part}.{dec_part}"

    def __str__(self) -> str:
        return self.to_display_string()


# =============================================================================
# РАЗБОР
# =============================================================================


def _digits(text: str) -> tuple[int, ...]:
    """Строка десятичных цифр → кортеж цифр; пустая строка → (0,)."""
    return tuple(int(char) for char in text) or (0,)


def _make_decimal(negative: bool, int_text: str, dec_text: str) -> Number:
    int_digits = _digits(int_text)
    dec_digits = _digits(dec_text.rstrip("0"))

    is_zero = not any(int_digits) and not any(dec_digits)
    sign = Sign.NEGATIVE if negative and not is_zero else Sign.POSITIVE

    return Number(base=DECIMAL_BASE, sign=sign, int_digits=int_digits, dec_digits=dec_digits)


def parse(text: str) -> Number:
    """
    Разбор десятичной записи числа в Number с основанием 10.

    Поддерживаемые формы:
        "12.34", "-0.5", "69.", ".5", "034.69"  — простая запись
        "1/7", "-3/4"                            — дробь
        "1e-3", "2.5E2"                          — экспонента

    Простая запись разбирается посимвольно: ведущие нули целой части
    сохраняются ("034.69" → (0, 3, 4)), конечные нули дробной части
    отбрасываются ("69.00" → (0,)). Дроби и экспоненты вычисляются точно и
    раскладываются с PARSE_FRACTION_PLACES знаками после точки (усечение).

    Args:
        text: Десятичная запись

    Returns:
        Number с основанием 10

    Raises:
        ParseError: Если text не является корректной записью числа
    """
    match = _PLAIN_DECIMAL.fullmatch(text)
    if match and (match["int"] or match["dec"]):
        return _make_decimal(match["sign"] == "-", match["int"], match["dec"] or "")

    try:
        value = Fraction(text)
    except (ValueError, ZeroDivisionError) as exc:
        raise ParseError(text, str(exc)) from exc

    magnitude = abs(value)
    integral = int(magnitude)
    scaled = int((magnitude - integral) * 10**PARSE_FRACTION_PLACES)
    dec_text = str(scaled).zfill(PARSE_FRACTION_PLACES)

    return _make_decimal(value < 0, str(integral), dec_text)
