"""
Additive — сложение и вычитание больших чисел

Два уровня:
- add_magnitude / sub_magnitude: поразрядные операции над модулями
  с переносом (carry) и заёмом (borrow ∈ {0, 1})
- add / sub / negate: знаковые операции поверх модульных

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды только читаются; результат — всегда новая величина
2. sub(x, y) = add(x, negate(y)), где negate создаёт новую величину
3. Результат нормализован (нет отрицательного нуля)
"""

from typing import Sequence

from src.core.limbs import LIMB_BASE, LimbVector, SignedLimbs, SignedValue, ZERO
from src.core.math.comparator import Ordering, compare_magnitude
from src.core.math.normalization import canonical_sign, normalize


# =============================================================================
# МОДУЛЬНЫЕ ОПЕРАЦИИ
# =============================================================================


def add_magnitude(x: Sequence[int], y: Sequence[int]) -> LimbVector:
    """
    Сложение модулей «в столбик».

    Результат содержит max(len(x), len(y)) + 1 разрядов до нормализации
    (старший — итоговый перенос, возможно нулевой).

    Args:
        x: Разряды первого слагаемого (младший первым)
        y: Разряды второго слагаемого (младший первым)

    Returns:
        Новый LimbVector (не нормализован)
    """
    size = max(len(x), len(y))
    result = LimbVector(size + 1)

    carry = 0
    for idx in range(size):
        acc = carry
        if idx < len(x):
            acc += x[idx]
        if idx < len(y):
            acc += y[idx]
        carry, limb = divmod(acc, LIMB_BASE)
        result.append(limb)

    result.append(carry)
    return result


def sub_magnitude(x: Sequence[int], y: Sequence[int]) -> LimbVector:
    """
    Вычитание модулей с заёмом.

    Предусловие: |x| >= |y|. Результат неотрицателен по построению.

    Args:
        x: Разряды уменьшаемого (нормализованы)
        y: Разряды вычитаемого (нормализованы)

    Returns:
        Новый LimbVector (не нормализован, нормализует вызывающий)

    Raises:
        ValueError: Если |x| < |y| (нарушено предусловие)
    """
    if len(y) > len(x):
        raise ValueError(
            f"Minuend magnitude is smaller than subtrahend ({len(x)} < {len(y)} limbs)"
        )

    result = LimbVector(len(x))

    borrow = 0
    for idx in range(len(x)):
        diff = x[idx] - borrow
        if idx < len(y):
            diff -= y[idx]

        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    if borrow:
        raise ValueError("Minuend magnitude is smaller than subtrahend")

    return result


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def negate(x: SignedValue) -> SignedLimbs:
    """Новая величина с противоположным знаком (ноль остаётся неотрицательным)."""
    return SignedLimbs(tuple(x.digits), canonical_sign(x.digits, not x.is_negative))


def add(x: SignedValue, y: SignedValue) -> SignedLimbs:
    """
    Знаковое сложение.

    - Одинаковые знаки: сумма модулей с этим знаком
    - Разные знаки: из большего модуля вычитается меньший,
      знак берётся у операнда с большим модулем; равные модули дают ноль

    Examples:
        >>> add(SignedLimbs((123,), False), SignedLimbs((456,), False))
        SignedLimbs(digits=(579,), is_negative=False)
        >>> add(SignedLimbs((123,), False), SignedLimbs((456,), True))
        SignedLimbs(digits=(333,), is_negative=True)
    """
    if x.is_negative == y.is_negative:
        return normalize(add_magnitude(x.digits, y.digits), x.is_negative)

    ordering = compare_magnitude(x.digits, y.digits)
    if ordering is Ordering.EQ:
        return ZERO

    if ordering is Ordering.GT:
        return normalize(sub_magnitude(x.digits, y.digits), x.is_negative)

    return normalize(sub_magnitude(y.digits, x.digits), y.is_negative)


def sub(x: SignedValue, y: SignedValue) -> SignedLimbs:
    """Знаковое вычитание: add(x, negate(y))."""
    return add(x, negate(y))
