"""
Normalization — каноническая форма большого числа

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. digits не пуст; ноль представлен ровно одним разрядом 0
2. Нет лишних старших нулевых разрядов
3. Нет отрицательного нуля
4. Каждый разряд в [0, LIMB_BASE)
"""

from typing import Sequence

from src.core.limbs import LimbVector, SignedLimbs


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """True если нормализованная величина равна нулю."""
    return len(digits) == 1 and digits[0] == 0


def trim_leading_zeros(vector: LimbVector) -> LimbVector:
    """
    Удаление старших нулевых разрядов (на месте).

    Останавливается, когда старший разряд ненулевой или остался один разряд.
    Пустой вектор получает единственный разряд 0.

    Args:
        vector: Рабочий вектор разрядов (изменяется)

    Returns:
        Тот же вектор
    """
    if len(vector) == 0:
        vector.append(0)
        return vector

    while len(vector) > 1 and vector.get(len(vector) - 1) == 0:
        vector.pop()

    return vector


def trim_digits(digits: Sequence[int]) -> tuple[int, ...]:
    """Нормализованная копия последовательности разрядов."""
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return (0,)
    return tuple(digits[:end])


def canonical_sign(digits: Sequence[int], is_negative: bool) -> bool:
    """Знак с учётом запрета отрицательного нуля."""
    return is_negative and not is_zero_magnitude(digits)


def normalize(vector: LimbVector, is_negative: bool = False) -> SignedLimbs:
    """
    Нормализация рабочего вектора в SignedLimbs.

    Args:
        vector: Рабочий вектор разрядов (младший первым), изменяется
        is_negative: Желаемый знак

    Returns:
        SignedLimbs в канонической форме
    """
    digits = trim_leading_zeros(vector).to_tuple()
    return SignedLimbs(digits, canonical_sign(digits, is_negative))
