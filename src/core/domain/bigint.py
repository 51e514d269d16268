"""
BigInt — Модель большого целого числа со знаком

Immutable Pydantic модель: разряды по основанию 10^9 (младший первым) и знак.
Все операции возвращают новый экземпляр, операнды не изменяются.

Инварианты проверяются при создании модели:
1. digits не пуст; ноль — ровно (0,)
2. Нет лишних старших нулевых разрядов
3. Нет отрицательного нуля
4. Каждый разряд в [0, 10^9)

Деление усекается к нулю (C-style), как у decimal.Decimal:
знак остатка совпадает со знаком делимого.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.config import ArithmeticConfig
from src.core.limbs import LIMB_BASE, SignedLimbs, SignedValue
from src.core.math import additive, comparator, conversion, division, multiplication
from src.core.math.comparator import Ordering


class BigInt(BaseModel):
    """
    Большое целое число со знаком.

    Immutable модель (frozen=True). Создаётся через from_int / from_string
    или из результата math-слоя (from_signed).
    """

    digits: tuple[int, ...] = Field(
        ..., min_length=1, description="Разряды по основанию 10^9, младший первым"
    )
    is_negative: bool = Field(default=False, description="Знак (только для ненулевых)")

    model_config = {"frozen": True, "strict": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Диапазон разрядов и отсутствие старших нулей."""
        for idx, limb in enumerate(v):
            if not 0 <= limb < LIMB_BASE:
                raise ValueError(f"limb {idx} = {limb} outside [0, {LIMB_BASE})")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("digits must not contain leading zero limbs")
        return v

    @model_validator(mode="after")
    def validate_no_negative_zero(self) -> "BigInt":
        if self.is_negative and self.digits == (0,):
            raise ValueError("negative zero is not allowed")
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_signed(cls, value: SignedValue) -> "BigInt":
        """Обёртка над нормализованной величиной math-слоя."""
        return cls(digits=tuple(value.digits), is_negative=value.is_negative)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Создание из native int (signed 64-bit).

        Raises:
            InvalidFormatError: Не int или вне диапазона
        """
        return cls.from_signed(conversion.parse_int(value))

    @classmethod
    def from_string(cls, text: str, config: Optional[ArithmeticConfig] = None) -> "BigInt":
        """
        Создание из десятичной строки.

        Raises:
            InvalidFormatError: Некорректная строка
            OperandTooLargeError: Превышен config.max_limbs
        """
        return cls.from_signed(conversion.parse_decimal(text, config))

    @classmethod
    def zero(cls) -> "BigInt":
        return cls(digits=(0,))

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def sign(self) -> int:
        """-1, 0 или 1."""
        if self.is_zero:
            return 0
        return -1 if self.is_negative else 1

    @property
    def limb_count(self) -> int:
        return len(self.digits)

    def to_string(self) -> str:
        return conversion.render_decimal(self)

    def clone(self) -> "BigInt":
        return BigInt(digits=self.digits, is_negative=self.is_negative)

    def negate(self) -> "BigInt":
        return BigInt.from_signed(additive.negate(self))

    def as_signed(self) -> SignedLimbs:
        return SignedLimbs(self.digits, self.is_negative)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def compare(self, other: "BigInt") -> Ordering:
        return comparator.compare(self, other)

    def compare_magnitude(self, other: "BigInt") -> Ordering:
        return comparator.compare_magnitude(self.digits, other.digits)

    def add(self, other: "BigInt") -> "BigInt":
        return BigInt.from_signed(additive.add(self, other))

    def sub(self, other: "BigInt") -> "BigInt":
        return BigInt.from_signed(additive.sub(self, other))

    def multiply(self, other: "BigInt", config: Optional[ArithmeticConfig] = None) -> "BigInt":
        """
        Произведение (Karatsuba для операндов длиннее порога).

        Raises:
            OperandTooLargeError: Превышен config.max_limbs
        """
        return BigInt.from_signed(multiplication.multiply(self, other, config))

    def divmod(
        self, other: "BigInt", config: Optional[ArithmeticConfig] = None
    ) -> tuple["BigInt", "BigInt"]:
        """
        Деление с остатком, усечение к нулю.

        Returns:
            (quotient, remainder), знак remainder совпадает со знаком self

        Raises:
            DivisionByZeroError: Если other == 0
        """
        quotient, remainder = division.divmod_signed(self, other, config)
        return BigInt.from_signed(quotient), BigInt.from_signed(remainder)

    def mod(self, other: "BigInt", config: Optional[ArithmeticConfig] = None) -> "BigInt":
        return BigInt.from_signed(division.mod(self, other, config))

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"

    def __bool__(self) -> bool:
        return not self.is_zero

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        return self.negate() if self.is_negative else self

    def __add__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.multiply(other)

    def __divmod__(self, other: object) -> tuple["BigInt", "BigInt"]:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.divmod(other)

    def __floordiv__(self, other: object) -> "BigInt":
        # Усечение к нулю, как Decimal.__floordiv__
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.divmod(other)[0]

    def __mod__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.mod(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) is Ordering.LT

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) is not Ordering.GT

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) is Ordering.GT

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) is not Ordering.LT
