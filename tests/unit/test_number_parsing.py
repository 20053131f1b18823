"""
Тесты для разбора десятичной записи (parse)

Проверяет:
1. Простую запись: целая и дробная части, ведущие и конечные нули
2. Знак и нормализацию отрицательного нуля
3. Дроби "p/q" и экспоненты
4. ParseError на некорректном вводе
"""

import pytest

from src.decto import DECIMAL_BASE, Number, ParseError, Sign, parse
from src.decto.domain import PARSE_FRACTION_PLACES


class TestParsePlainDecimal:
    """Тесты разбора простой десятичной записи"""

    @pytest.mark.parametrize(
        ("text", "int_digits", "dec_digits"),
        [
            ("6.9", (6,), (9,)),
            ("0.69", (0,), (6, 9)),
            ("034.69", (0, 3, 4), (6, 9)),
            ("69", (6, 9), (0,)),
            ("69.", (6, 9), (0,)),
            ("69.0", (6, 9), (0,)),
            ("69.00", (6, 9), (0,)),
            (".5", (0,), (5,)),
            ("1.50", (1,), (5,)),
            ("12.34", (1, 2), (3, 4)),
        ],
    )
    def test_digits(self, text: str, int_digits: tuple, dec_digits: tuple) -> None:
        n = parse(text)
        assert n.int_digits == int_digits
        assert n.dec_digits == dec_digits

    def test_result_is_base_ten(self) -> None:
        assert parse("6.9").base == DECIMAL_BASE

    def test_surrounding_whitespace_ignored(self) -> None:
        n = parse("  12.5 ")
        assert n.int_digits == (1, 2)
        assert n.dec_digits == (5,)

    def test_classmethod_matches_function(self) -> None:
        assert Number.parse("034.69") == parse("034.69")


class TestParseSign:
    """Тесты знака"""

    def test_positive_by_default(self) -> None:
        assert parse("6.9").sign is Sign.POSITIVE

    def test_explicit_plus(self) -> None:
        assert parse("+6.9").sign is Sign.POSITIVE

    def test_negative(self) -> None:
        n = parse("-6.9")
        assert n.sign is Sign.NEGATIVE
        assert n.int_digits == (6,)
        assert n.dec_digits == (9,)

    @pytest.mark.parametrize("text", ["-0", "-0.0", "-0/5", "-0e3"])
    def test_negative_zero_is_positive(self, text: str) -> None:
        n = parse(text)
        assert n.sign is Sign.POSITIVE
        assert n.is_zero


class TestParseRatioAndExponent:
    """Тесты дробей и экспонент"""

    def test_ratio(self) -> None:
        n = parse("1/4")
        assert n.int_digits == (0,)
        assert n.dec_digits == (2, 5)

    def test_negative_improper_ratio(self) -> None:
        n = parse("-7/4")
        assert n.sign is Sign.NEGATIVE
        assert n.int_digits == (1,)
        assert n.dec_digits == (7, 5)

    def test_repeating_ratio_truncated(self) -> None:
        """1/7 раскладывается с фиксированным числом знаков (усечение)"""
        n = parse("1/7")
        assert n.int_digits == (0,)
        assert n.dec_digits[:6] == (1, 4, 2, 8, 5, 7)
        assert len(n.dec_digits) == PARSE_FRACTION_PLACES

    def test_exponent(self) -> None:
        n = parse("1e3")
        assert n.int_digits == (1, 0, 0, 0)
        assert n.dec_digits == (0,)

    def test_negative_exponent(self) -> None:
        n = parse("2.5E-1")
        assert n.int_digits == (0,)
        assert n.dec_digits == (2, 5)


class TestParseErrors:
    """Тесты некорректного ввода"""

    @pytest.mark.parametrize(
        "text",
        [
            "Hello, Prof. Kennedy!",
            "",
            ".",
            "-",
            "1.2.3",
            "--1",
            "1-",
            "1,5",
            "0x1F",
            "1/0",
            "inf",
            "nan",
        ],
    )
    def test_invalid_input_raises(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse(text)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="invalid decimal numeral"):
            parse("abc")

    def test_parse_error_keeps_text_and_cause(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("abc")
        assert exc_info.value.text == "abc"
        assert exc_info.value.__cause__ is not None
