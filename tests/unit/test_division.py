"""
Тесты для длинного деления

Проверяет:
1. Усечение к нулю: знак частного — XOR, знак остатка — знак делимого
2. Деление на ноль
3. |x| < |y| → (0, x)
4. Совпадение стратегий подбора цифры частного
5. Многоразрядные операнды против native int
6. Освобождение рабочих векторов при ошибке
"""

import logging
import random

import pytest

from src.core.config import QUOTIENT_SEARCH_SUBTRACT, ArithmeticConfig
from src.core.errors import DivisionByZeroError
from src.core.limbs import LIMB_BASE, LimbVector, SignedLimbs
from src.core.math import division
from src.core.math.division import divmod_magnitude, divmod_signed, mod


def signed(value: int) -> SignedLimbs:
    magnitude = abs(value)
    digits = []
    while True:
        magnitude, limb = divmod(magnitude, LIMB_BASE)
        digits.append(limb)
        if magnitude == 0:
            break
    return SignedLimbs(tuple(digits), value < 0)


def native(value: SignedLimbs) -> int:
    magnitude = sum(limb * LIMB_BASE**idx for idx, limb in enumerate(value.digits))
    return -magnitude if value.is_negative else magnitude


def truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """divmod с усечением к нулю."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


# =============================================================================
# ЗНАКИ
# =============================================================================


class TestDivmodSigns:
    """Тесты знаков частного и остатка"""

    def test_negative_dividend(self) -> None:
        """-100 / 3 → (-33, -1)"""
        quotient, remainder = divmod_signed(signed(-100), signed(3))
        assert quotient == signed(-33)
        assert remainder == signed(-1)

    def test_negative_divisor(self) -> None:
        """13 / -4 → (-3, 1)"""
        quotient, remainder = divmod_signed(signed(13), signed(-4))
        assert quotient == signed(-3)
        assert remainder == signed(1)

    def test_both_negative(self) -> None:
        """-100 / -3 → (33, -1)"""
        quotient, remainder = divmod_signed(signed(-100), signed(-3))
        assert quotient == signed(33)
        assert remainder == signed(-1)

    def test_exact_division(self) -> None:
        """100 / 2 → (50, 0)"""
        quotient, remainder = divmod_signed(signed(100), signed(2))
        assert quotient == signed(50)
        assert remainder == SignedLimbs((0,), False)

    def test_exact_negative_has_positive_zero_remainder(self) -> None:
        """Нулевой остаток не бывает отрицательным"""
        _, remainder = divmod_signed(signed(-100), signed(5))
        assert remainder == SignedLimbs((0,), False)

    def test_small_native_grid(self) -> None:
        values = [-101, -100, -7, -3, -1, 1, 2, 3, 7, 100, 999_999_999]
        for a in values + [0]:
            for b in values:
                quotient, remainder = divmod_signed(signed(a), signed(b))
                assert (native(quotient), native(remainder)) == truncated_divmod(a, b)


# =============================================================================
# ГРАНИЧНЫЕ СЛУЧАИ
# =============================================================================


class TestDivmodEdgeCases:
    """Тесты граничных случаев"""

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            divmod_signed(signed(5), signed(0))

    def test_zero_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            divmod_signed(signed(0), signed(0))

    def test_magnitude_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            divmod_magnitude((1, 2), (0,))

    def test_division_by_zero_is_zero_division_error(self) -> None:
        """Совместимость с ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            mod(signed(5), signed(0))

    def test_dividend_smaller_than_divisor(self) -> None:
        """|x| < |y| → частное 0, остаток — копия x"""
        quotient, remainder = divmod_signed(signed(-5), signed(7))
        assert quotient == SignedLimbs((0,), False)
        assert remainder == signed(-5)

    def test_zero_dividend(self) -> None:
        quotient, remainder = divmod_signed(signed(0), signed(-9))
        assert quotient == SignedLimbs((0,), False)
        assert remainder == SignedLimbs((0,), False)

    def test_magnitude_smaller(self) -> None:
        assert divmod_magnitude((5,), (0, 1)) == ((0,), (5,))

    def test_divide_by_one(self) -> None:
        x = signed(-(10**40) - 17)
        quotient, remainder = divmod_signed(x, signed(1))
        assert quotient == x
        assert remainder == SignedLimbs((0,), False)

    def test_mod(self) -> None:
        assert mod(signed(-100), signed(3)) == signed(-1)
        assert mod(signed(100), signed(-3)) == signed(1)


# =============================================================================
# МНОГОРАЗРЯДНОЕ ДЕЛЕНИЕ
# =============================================================================


class TestLongDivision:
    """Тесты длинного деления"""

    def test_quotient_digit_at_base_boundary(self) -> None:
        """Цифра частного B - 1"""
        x = (LIMB_BASE - 1) * 10**9 + 5
        quotient, remainder = divmod_signed(signed(x), signed(10**9))
        assert native(quotient) == LIMB_BASE - 1
        assert native(remainder) == 5

    def test_multi_limb_against_native(self) -> None:
        rng = random.Random(23)
        for _ in range(20):
            a = rng.randrange(-(10**120), 10**120)
            b = rng.randrange(1, 10**50) * rng.choice([-1, 1])
            quotient, remainder = divmod_signed(signed(a), signed(b))
            assert (native(quotient), native(remainder)) == truncated_divmod(a, b)

    def test_divisor_with_many_limbs(self) -> None:
        """Делитель и делимое одной длины"""
        a = 987654321 * LIMB_BASE**4 + 123
        b = 123456789 * LIMB_BASE**4 + 999_999_999
        quotient, remainder = divmod_signed(signed(a), signed(b))
        assert (native(quotient), native(remainder)) == truncated_divmod(a, b)

    def test_remainder_bound(self) -> None:
        rng = random.Random(29)
        a = rng.randrange(10**80, 10**90)
        b = rng.randrange(10**30, 10**40)
        _, remainder = divmod_signed(signed(a), signed(b))
        assert 0 <= native(remainder) < b


class TestQuotientDigitSearch:
    """Тесты стратегий подбора цифры частного"""

    def test_strategies_agree(self) -> None:
        """subtract и bisect дают одинаковый результат (малые цифры частного)"""
        rng = random.Random(31)
        subtract = ArithmeticConfig(quotient_digit_search=QUOTIENT_SEARCH_SUBTRACT)
        for multiplier in (0, 1, 7, 250):
            b = rng.randrange(LIMB_BASE**4, LIMB_BASE**5)
            a = b * multiplier + rng.randrange(b)
            x = signed(-a)
            y = signed(b)
            quotient, remainder = divmod_signed(x, y, subtract)
            assert (quotient, remainder) == divmod_signed(x, y)
            assert (native(quotient), native(remainder)) == truncated_divmod(-a, b)

    def test_subtract_small_values(self) -> None:
        subtract = ArithmeticConfig(quotient_digit_search=QUOTIENT_SEARCH_SUBTRACT)
        quotient, remainder = divmod_signed(signed(-100), signed(3), subtract)
        assert quotient == signed(-33)
        assert remainder == signed(-1)

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="src.core.math.division")
        divmod_signed(signed(10**20), signed(7))
        assert "long division" in caplog.text
        assert "bisect" in caplog.text


class TestWorkspaceRelease:
    """Тесты освобождения рабочих векторов"""

    def test_vectors_released_on_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Ошибка посреди деления не оставляет неосвобождённых векторов"""
        released: list[LimbVector] = []
        original_release = LimbVector.release

        def spy(self: LimbVector) -> None:
            released.append(self)
            original_release(self)

        def boom(num, factor):
            raise MemoryError("no memory for partial product")

        monkeypatch.setattr(LimbVector, "release", spy)
        monkeypatch.setattr(division, "_scale", boom)

        with pytest.raises(MemoryError):
            divmod_signed(signed(100), signed(3))

        assert len(released) >= 2
        assert all(vector.released for vector in released)
