"""
Base — основание позиционной системы счисления

Immutable Pydantic модель. Основание — целое число ≥ 2, по умолчанию 10.
Смена основания числа всегда создаёт новый Number; Base не несёт состояния,
кроме своего значения.
"""

from typing import Final, Union

from pydantic import BaseModel, Field

# Основание по умолчанию (десятичная система)
DECIMAL_RADIX: Final[int] = 10


class Base(BaseModel):
    """
    Основание системы счисления.

    Сравнение и хеширование — по значению, поэтому Base пригоден как ключ
    и для проверки "уже в этом основании" в Number.to_base.
    """

    value: int = Field(..., ge=2, strict=True, description="Основание (≥ 2)")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def default(cls) -> "Base":
        """Десятичное основание."""
        return cls(value=DECIMAL_RADIX)

    @classmethod
    def of(cls, value: Union[int, "Base"]) -> "Base":
        """
        Приведение int или Base к Base.

        Examples:
            >>> Base.of(2)
            Base(value=2)
            >>> Base.of(Base.default()).value
            10
        """
        if isinstance(value, cls):
            return value
        return cls(value=value)

    @property
    def is_decimal(self) -> bool:
        return self.value == DECIMAL_RADIX

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


DECIMAL_BASE: Final[Base] = Base.default()
