"""
Division — длинное деление больших чисел (C-style truncation)

Деление «уголком» по разрядам основания B = 10^9:
    для каждого разряда x от старшего к младшему:
        remainder = remainder * B + x[i]
        count = max{c : c * |y| <= remainder},  0 <= count < B
        remainder -= count * |y|
        quotient.append(count)
    quotient разворачивается (младший первым) и нормализуется

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. |y| == 0 → DivisionByZeroError
2. Частное округляется к нулю; знак частного — XOR знаков
3. Знак остатка совпадает со знаком делимого; |remainder| < |y|
4. x == y * quotient + remainder
"""

import logging
from typing import Optional, Sequence

from src.core.config import DEFAULT_CONFIG, QUOTIENT_SEARCH_SUBTRACT, ArithmeticConfig
from src.core.errors import DivisionByZeroError
from src.core.limbs import LIMB_BASE, LimbVector, SignedLimbs, SignedValue, ZERO
from src.core.math.additive import sub_magnitude
from src.core.math.comparator import Ordering, compare_magnitude
from src.core.math.normalization import is_zero_magnitude, normalize, trim_leading_zeros

logger = logging.getLogger(__name__)


# =============================================================================
# ПОДБОР ЦИФРЫ ЧАСТНОГО
# =============================================================================


def _scale(num: Sequence[int], factor: int) -> tuple[int, ...]:
    """Умножение модуля на один разряд (0 <= factor < B)."""
    if factor == 0:
        return (0,)

    result = LimbVector(len(num) + 1)
    carry = 0
    for limb in num:
        carry, low = divmod(limb * factor + carry, LIMB_BASE)
        result.append(low)
    result.append(carry)
    return trim_leading_zeros(result).to_tuple()


def _quotient_digit_subtract(
    remainder: tuple[int, ...], divisor: Sequence[int]
) -> tuple[int, tuple[int, ...]]:
    count = 0
    while compare_magnitude(remainder, divisor) is not Ordering.LT:
        remainder = trim_leading_zeros(sub_magnitude(remainder, divisor)).to_tuple()
        count += 1
    return count, remainder


def _quotient_digit_bisect(
    remainder: tuple[int, ...], divisor: Sequence[int]
) -> tuple[int, tuple[int, ...]]:
    if compare_magnitude(remainder, divisor) is Ordering.LT:
        return 0, remainder

    # Инвариант: lo * |y| <= remainder < (hi + 1) * |y|
    lo, hi = 1, LIMB_BASE - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if compare_magnitude(_scale(divisor, mid), remainder) is Ordering.GT:
            hi = mid - 1
        else:
            lo = mid

    rest = trim_leading_zeros(sub_magnitude(remainder, _scale(divisor, lo))).to_tuple()
    return lo, rest


# =============================================================================
# ДЕЛЕНИЕ МОДУЛЕЙ
# =============================================================================


def divmod_magnitude(
    x: Sequence[int],
    y: Sequence[int],
    config: Optional[ArithmeticConfig] = None,
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Длинное деление модулей.

    Args:
        x: Нормализованные разряды делимого
        y: Нормализованные разряды делителя (ненулевого)
        config: Стратегия подбора цифры частного (default: DEFAULT_CONFIG)

    Returns:
        (quotient, remainder) — нормализованные разряды

    Raises:
        DivisionByZeroError: Если y == 0
    """
    config = config or DEFAULT_CONFIG

    if is_zero_magnitude(y):
        raise DivisionByZeroError("Division by zero")

    if compare_magnitude(x, y) is Ordering.LT:
        return (0,), tuple(x)

    if config.quotient_digit_search == QUOTIENT_SEARCH_SUBTRACT:
        next_digit = _quotient_digit_subtract
    else:
        next_digit = _quotient_digit_bisect

    logger.debug(
        "long division: %d / %d limbs (%s)", len(x), len(y), config.quotient_digit_search
    )

    quotient = LimbVector(len(x))
    remainder = LimbVector(len(y) + 1)
    remainder.append(0)

    try:
        for idx in range(len(x) - 1, -1, -1):
            # remainder = remainder * B + x[idx]
            shifted = LimbVector(len(remainder) + 1)
            shifted.append(x[idx])
            if not is_zero_magnitude(remainder.to_tuple()):
                for limb in remainder:
                    shifted.append(limb)
            remainder.release()
            remainder = trim_leading_zeros(shifted)

            count, rest = next_digit(remainder.to_tuple(), y)
            remainder.release()
            remainder = LimbVector.from_iterable(rest, len(rest) + 1)

            quotient.append(count)

        # Цифры собраны от старшей к младшей
        with LimbVector(len(quotient)) as digits:
            for idx in range(len(quotient) - 1, -1, -1):
                digits.append(quotient.get(idx))

            return trim_leading_zeros(digits).to_tuple(), trim_leading_zeros(remainder).to_tuple()
    finally:
        quotient.release()
        remainder.release()


# =============================================================================
# ЗНАКОВОЕ ДЕЛЕНИЕ
# =============================================================================


def divmod_signed(
    x: SignedValue,
    y: SignedValue,
    config: Optional[ArithmeticConfig] = None,
) -> tuple[SignedLimbs, SignedLimbs]:
    """
    Деление с остатком в стиле C (усечение к нулю).

    Args:
        x: Делимое
        y: Делитель
        config: Стратегия подбора цифры частного (default: DEFAULT_CONFIG)

    Returns:
        (quotient, remainder):
            - знак quotient: XOR знаков операндов
            - знак remainder: знак делимого

    Raises:
        DivisionByZeroError: Если y == 0

    Examples:
        >>> q, r = divmod_signed(SignedLimbs((100,), True), SignedLimbs((3,), False))
        >>> q, r
        (SignedLimbs(digits=(33,), is_negative=True), SignedLimbs(digits=(1,), is_negative=True))
    """
    if is_zero_magnitude(y.digits):
        raise DivisionByZeroError("Division by zero")

    if compare_magnitude(x.digits, y.digits) is Ordering.LT:
        return ZERO, SignedLimbs(tuple(x.digits), x.is_negative)

    q_digits, r_digits = divmod_magnitude(x.digits, y.digits, config)

    quotient = normalize(LimbVector.from_iterable(q_digits), x.is_negative != y.is_negative)
    remainder = normalize(LimbVector.from_iterable(r_digits), x.is_negative)
    return quotient, remainder


def mod(
    x: SignedValue,
    y: SignedValue,
    config: Optional[ArithmeticConfig] = None,
) -> SignedLimbs:
    """Остаток от деления (знак делимого). Те же ошибки, что у divmod_signed."""
    _, remainder = divmod_signed(x, y, config)
    return remainder
