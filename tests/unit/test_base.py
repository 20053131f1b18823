"""
Тесты для модели Base

Проверяет:
1. Создание и валидацию (основание ≥ 2)
2. Приведение int → Base
3. Immutability и сравнение по значению
"""

import pytest
from pydantic import ValidationError

from src.decto.domain import DECIMAL_BASE, DECIMAL_RADIX, Base


class TestBase:
    """Тесты для модели Base"""

    def test_default_is_decimal(self) -> None:
        assert Base.default().value == DECIMAL_RADIX == 10
        assert Base.default() == DECIMAL_BASE
        assert DECIMAL_BASE.is_decimal

    def test_of_int(self) -> None:
        base = Base.of(60)
        assert base.value == 60
        assert not base.is_decimal

    def test_of_base_returns_same_instance(self) -> None:
        base = Base.of(2)
        assert Base.of(base) is base

    def test_equality_and_hash_by_value(self) -> None:
        assert Base.of(16) == Base(value=16)
        assert hash(Base.of(16)) == hash(Base(value=16))
        assert len({Base.of(2), Base.of(2), Base.of(8)}) == 2

    def test_int_and_str(self) -> None:
        assert int(Base.of(16)) == 16
        assert str(Base.of(16)) == "16"

    @pytest.mark.parametrize("value", [1, 0, -2])
    def test_base_below_two_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError):
            Base(value=value)

    @pytest.mark.parametrize("value", ["10", 10.0, True])
    def test_non_int_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError):
            Base(value=value)

    def test_immutable(self) -> None:
        base = Base.of(2)
        with pytest.raises(ValidationError):
            base.value = 3  # type: ignore[misc]
