"""
Exceptions — таксономия ошибок decto

Единственная ожидаемая ошибка пользовательского ввода — ParseError.
Конверсия валидного Number в валидную Base не падает; DigitOverflowError
означает нарушение инварианта рабочей точности и не должна перехватываться.
"""


class DectoError(Exception):
    """Базовое исключение пакета."""


class ParseError(DectoError, ValueError):
    """
    Строка не является корректной десятичной записью числа.

    Допустимы: необязательный знак, целая часть, необязательная точка и
    дробная часть, экспонента, дробь вида "p/q".
    """

    def __init__(self, text: str, reason: str | None = None):
        message = f"invalid decimal numeral: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.text = text


class DigitOverflowError(DectoError, ArithmeticError):
    """
    Извлечённая цифра вне диапазона [0, base).

    Критическая ошибка: рабочая точность недостаточна для значения, и
    продолжение дало бы испорченную цифру. Конверсия прерывается.
    """

    def __init__(self, digit: object, base: int):
        super().__init__(f"digit {digit} out of range for base {base}")
        self.digit = digit
        self.base = base
