"""
Multiplication — умножение больших чисел

Два алгоритма:
- schoolbook_multiply: квадратичное умножение «в столбик», O(n^2)
  (базовый случай рекурсии)
- karatsuba: рекурсивный алгоритм, O(n^log2(3)) ≈ O(n^1.585)

ФОРМУЛЫ:
    x = x_high * B^p + x_low,  y = y_high * B^p + y_low,  p = max(len) // 2

    z0 = x_low * y_low
    z2 = x_high * y_high
    z1 = (x_low + x_high) * (y_low + y_high) - z0 - z2

    x * y = z2 * B^(2p) + z1 * B^p + z0

Рекурсия работает с модулями; знак произведения (XOR знаков) выставляет multiply.
Все промежуточные величины — локальные значения кадра рекурсии.
"""

import logging
from typing import Optional, Sequence

from src.core.config import DEFAULT_CONFIG, ArithmeticConfig
from src.core.errors import OperandTooLargeError
from src.core.limbs import LIMB_BASE, LimbVector, SignedLimbs, SignedValue
from src.core.math.additive import add_magnitude, sub_magnitude
from src.core.math.normalization import (
    is_zero_magnitude,
    normalize,
    trim_digits,
    trim_leading_zeros,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ОПЕРАЦИИ
# =============================================================================


def split(num: Sequence[int], pivot: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Разбиение числа на старшую и младшую части.

    low содержит разряды [0, pivot), high — разряды [pivot, end).
    Каждая часть нормализуется; пустая часть становится нулём (0,).

    Args:
        num: Разряды (младший первым)
        pivot: Позиция разбиения (в разрядах)

    Returns:
        (high, low)

    Examples:
        >>> split((1, 2, 3), 1)
        ((2, 3), (1,))
        >>> split((1, 2), 5)
        ((0,), (1, 2))
    """
    if pivot < 0:
        raise ValueError(f"pivot must be non-negative, got {pivot}")

    low = trim_digits(num[:pivot])
    high = trim_digits(num[pivot:])
    return high, low


def shift_left(num: Sequence[int], n: int) -> tuple[int, ...]:
    """
    Умножение на B^n: n нулевых разрядов дописываются в младшую позицию.

    Сдвиг на 0 эквивалентен копированию; ноль остаётся (0,).
    """
    if n < 0:
        raise ValueError(f"shift must be non-negative, got {n}")

    if n == 0 or is_zero_magnitude(num):
        return tuple(num)

    return (0,) * n + tuple(num)


def _magnitude(vector: LimbVector) -> tuple[int, ...]:
    return trim_leading_zeros(vector).to_tuple()


# =============================================================================
# SCHOOLBOOK
# =============================================================================


def schoolbook_multiply(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """
    Квадратичное умножение модулей.

    Для каждой пары (i, j) к аккумулятору в позиции i + j добавляется
    x[i] * y[j] + carry; перенос распространяется дальше позиции i + j,
    аккумулятор растёт по мере появления новых позиций.

    Args:
        x: Разряды первого множителя
        y: Разряды второго множителя

    Returns:
        Нормализованные разряды произведения
    """
    with LimbVector(len(x) + len(y)) as product:
        product.append(0)

        for i, x_limb in enumerate(x):
            carry = 0
            j = 0
            while j < len(y) or carry:
                partial = carry
                if i + j < len(product):
                    partial += product.get(i + j)
                if j < len(y):
                    partial += x_limb * y[j]

                carry, limb = divmod(partial, LIMB_BASE)

                if i + j < len(product):
                    product.set(i + j, limb)
                else:
                    product.append(limb)
                j += 1

        return _magnitude(product)


# =============================================================================
# KARATSUBA
# =============================================================================


def karatsuba(
    x: Sequence[int],
    y: Sequence[int],
    threshold: int = DEFAULT_CONFIG.karatsuba_threshold,
) -> tuple[int, ...]:
    """
    Рекурсивное умножение модулей по Karatsuba.

    Базовый случай: хотя бы один операнд содержит <= threshold разрядов.

    Args:
        x: Нормализованные разряды первого множителя
        y: Нормализованные разряды второго множителя
        threshold: Порог перехода на schoolbook_multiply (>= 1)

    Returns:
        Нормализованные разряды произведения
    """
    if len(x) <= threshold or len(y) <= threshold:
        return schoolbook_multiply(x, y)

    pivot = max(len(x), len(y)) // 2
    logger.debug("karatsuba split: %d x %d limbs at pivot %d", len(x), len(y), pivot)

    x_high, x_low = split(x, pivot)
    y_high, y_low = split(y, pivot)

    z0 = karatsuba(x_low, y_low, threshold)
    z2 = karatsuba(x_high, y_high, threshold)

    x_sum = _magnitude(add_magnitude(x_low, x_high))
    y_sum = _magnitude(add_magnitude(y_low, y_high))
    z1_raw = karatsuba(x_sum, y_sum, threshold)

    # z1_raw >= z0 + z2, поэтому вычитание модулей корректно
    z1 = _magnitude(sub_magnitude(_magnitude(sub_magnitude(z1_raw, z0)), z2))

    z2_shift = shift_left(z2, 2 * pivot)
    z1_shift = shift_left(z1, pivot)

    partial_sum = _magnitude(add_magnitude(z2_shift, z1_shift))
    return _magnitude(add_magnitude(partial_sum, z0))


def multiply(
    x: SignedValue,
    y: SignedValue,
    config: Optional[ArithmeticConfig] = None,
) -> SignedLimbs:
    """
    Знаковое умножение.

    Args:
        x: Первый множитель
        y: Второй множитель
        config: Порог Karatsuba и потолок размера (default: DEFAULT_CONFIG)

    Returns:
        Нормализованное произведение; знак — XOR знаков операндов

    Raises:
        OperandTooLargeError: Если len(x) + len(y) > config.max_limbs

    Examples:
        >>> multiply(SignedLimbs((1234,), False), SignedLimbs((56789,), False))
        SignedLimbs(digits=(70077626,), is_negative=False)
    """
    config = config or DEFAULT_CONFIG

    if config.max_limbs is not None and len(x.digits) + len(y.digits) > config.max_limbs:
        raise OperandTooLargeError(
            f"Product of {len(x.digits)} and {len(y.digits)} limbs "
            f"exceeds max_limbs={config.max_limbs}"
        )

    digits = karatsuba(x.digits, y.digits, config.karatsuba_threshold)
    return normalize(
        LimbVector.from_iterable(digits, len(digits)),
        x.is_negative != y.is_negative,
    )
