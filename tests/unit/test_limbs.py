"""
Тесты для LimbVector — хранилища разрядов

Проверяет:
1. append / get / set / pop / len
2. Ошибки выхода за границы (LimbIndexError, LimbUnderflowError)
3. Рост ёмкости
4. release и context manager
"""

import pytest

from src.core.errors import ErrorKind, LimbIndexError, LimbUnderflowError
from src.core.limbs import LIMB_BASE, LIMB_DIGITS, LimbVector, SignedLimbs, ZERO


class TestLimbConstants:
    """Тесты параметров представления"""

    def test_base_matches_digit_count(self) -> None:
        """LIMB_BASE = 10^LIMB_DIGITS"""
        assert LIMB_BASE == 10**LIMB_DIGITS == 1_000_000_000

    def test_zero_is_canonical(self) -> None:
        """ZERO — единственный разряд 0 без знака"""
        assert ZERO == SignedLimbs((0,), False)


class TestLimbVectorAccess:
    """Тесты чтения и записи"""

    @pytest.fixture
    def vector(self) -> LimbVector:
        return LimbVector.from_iterable([7, 8, 9])

    def test_append_and_len(self) -> None:
        """append увеличивает длину"""
        vector = LimbVector()
        assert len(vector) == 0
        vector.append(42)
        vector.append(43)
        assert len(vector) == 2
        assert vector.to_tuple() == (42, 43)

    def test_get(self, vector: LimbVector) -> None:
        """get возвращает разряд по индексу"""
        assert vector.get(0) == 7
        assert vector.get(2) == 9

    def test_set(self, vector: LimbVector) -> None:
        """set перезаписывает разряд"""
        vector.set(1, 100)
        assert vector.to_tuple() == (7, 100, 9)

    def test_pop_returns_most_significant(self, vector: LimbVector) -> None:
        """pop удаляет последний (старший) разряд"""
        assert vector.pop() == 9
        assert vector.to_tuple() == (7, 8)

    def test_iteration_order(self, vector: LimbVector) -> None:
        """Итерация от младшего разряда к старшему"""
        assert list(vector) == [7, 8, 9]

    def test_get_out_of_range(self, vector: LimbVector) -> None:
        """get за границей → LimbIndexError"""
        with pytest.raises(LimbIndexError, match="out of range"):
            vector.get(3)

        with pytest.raises(LimbIndexError):
            vector.get(-1)

    def test_set_out_of_range(self, vector: LimbVector) -> None:
        """set за границей → LimbIndexError"""
        with pytest.raises(LimbIndexError):
            vector.set(3, 1)

    def test_pop_empty(self) -> None:
        """pop из пустого вектора → LimbUnderflowError"""
        vector = LimbVector()
        with pytest.raises(LimbUnderflowError, match="empty"):
            vector.pop()

    def test_errors_are_index_errors(self) -> None:
        """Ошибки хранилища совместимы с IndexError и несут INDEX_OUT_OF_RANGE"""
        assert issubclass(LimbIndexError, IndexError)
        assert issubclass(LimbUnderflowError, LimbIndexError)
        assert LimbUnderflowError.kind is ErrorKind.INDEX_OUT_OF_RANGE


class TestLimbVectorCapacity:
    """Тесты ёмкости"""

    def test_initial_capacity(self) -> None:
        assert LimbVector(10).capacity == 10

    def test_capacity_doubles(self) -> None:
        """Ёмкость удваивается при заполнении"""
        vector = LimbVector(2)
        for limb in range(3):
            vector.append(limb)
        assert vector.capacity == 4

    def test_zero_capacity_grows(self) -> None:
        """Нулевая ёмкость растёт до 1"""
        vector = LimbVector(0)
        vector.append(5)
        assert vector.capacity == 1
        assert len(vector) == 1

    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="capacity must be non-negative"):
            LimbVector(-1)


class TestLimbVectorRelease:
    """Тесты освобождения"""

    def test_release_clears_storage(self) -> None:
        vector = LimbVector.from_iterable([1, 2, 3])
        vector.release()
        assert vector.released
        assert len(vector) == 0
        assert vector.capacity == 0

    def test_release_twice_is_safe(self) -> None:
        vector = LimbVector.from_iterable([1])
        vector.release()
        vector.release()
        assert vector.released

    def test_context_manager_releases(self) -> None:
        """Выход из with освобождает хранилище"""
        with LimbVector.from_iterable([1, 2]) as vector:
            snapshot = vector.to_tuple()
            assert not vector.released

        assert snapshot == (1, 2)
        assert vector.released

    def test_context_manager_releases_on_error(self) -> None:
        """Хранилище освобождается и при исключении"""
        vector = LimbVector.from_iterable([1, 2])
        with pytest.raises(RuntimeError):
            with vector:
                raise RuntimeError("boom")

        assert vector.released
