"""
Comparator — сравнение больших чисел

Используется всеми остальными слоями для выбора знака и порядка операндов.
Опирается на нормализованную форму: больше разрядов ⇒ больше модуль.
"""

from enum import IntEnum
from typing import Sequence

from src.core.limbs import SignedValue


class Ordering(IntEnum):
    """Результат сравнения (-1 / 0 / 1)."""

    LT = -1
    EQ = 0
    GT = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


def compare_magnitude(x: Sequence[int], y: Sequence[int]) -> Ordering:
    """
    Сравнение модулей.

    Сначала по количеству разрядов, затем лексикографически
    от старшего разряда к младшему.

    Args:
        x: Нормализованные разряды (младший первым)
        y: Нормализованные разряды (младший первым)

    Returns:
        Ordering.LT / EQ / GT

    Examples:
        >>> compare_magnitude((5,), (0, 1))
        <Ordering.LT: -1>
        >>> compare_magnitude((7, 3), (7, 3))
        <Ordering.EQ: 0>
    """
    if len(x) != len(y):
        return Ordering.GT if len(x) > len(y) else Ordering.LT

    for idx in range(len(x) - 1, -1, -1):
        if x[idx] != y[idx]:
            return Ordering.GT if x[idx] > y[idx] else Ordering.LT

    return Ordering.EQ


def compare(x: SignedValue, y: SignedValue) -> Ordering:
    """
    Знаковое сравнение.

    Разные знаки решают сразу (отрицательное < положительного).
    При одинаковых знаках результат сравнения модулей,
    инвертированный для двух отрицательных чисел.
    """
    if x.is_negative != y.is_negative:
        return Ordering.LT if x.is_negative else Ordering.GT

    ordering = compare_magnitude(x.digits, y.digits)
    if x.is_negative:
        return ordering.reverse()
    return ordering
