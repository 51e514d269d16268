"""
Limbs — хранилище разрядов (limbs) большого числа

Разряд (limb) — целое в диапазоне [0, LIMB_BASE), LIMB_BASE = 10^9.
Порядок хранения: младший разряд по индексу 0.

Содержит:
- LimbVector: динамический массив разрядов (new/append/get/set/pop/len/release)
- SignedLimbs: знаковая величина (digits, is_negative), которую возвращает math-слой
- SignedValue: протокол для всего, что имеет digits и is_negative (BigInt, SignedLimbs)
"""

from typing import Final, Iterable, Iterator, NamedTuple, Protocol

from src.core.errors import LimbIndexError, LimbUnderflowError

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления разрядов
LIMB_BASE: Final[int] = 1_000_000_000

# Количество десятичных цифр в одном разряде
LIMB_DIGITS: Final[int] = 9

# Ёмкость LimbVector по умолчанию
DEFAULT_CAPACITY: Final[int] = 4


# =============================================================================
# ЗНАКОВАЯ ВЕЛИЧИНА
# =============================================================================


class SignedValue(Protocol):
    """Всё, что math-слой может прочитать как знаковое число."""

    @property
    def digits(self) -> tuple[int, ...]: ...

    @property
    def is_negative(self) -> bool: ...


class SignedLimbs(NamedTuple):
    """
    Нормализованная знаковая величина.

    Результат операций math-слоя; BigInt строится из неё без пересчёта.
    """

    digits: tuple[int, ...]
    is_negative: bool


ZERO: Final[SignedLimbs] = SignedLimbs((0,), False)


# =============================================================================
# LIMB VECTOR
# =============================================================================


class LimbVector:
    """
    Динамический массив разрядов.

    Рабочее хранилище для аккумуляторов в сложении, умножении и делении.
    Операнды только читаются, результат копируется в tuple через to_tuple().

    При заполнении ёмкость удваивается. Используется как context manager:
    по выходу из блока хранилище освобождается (release).
    """

    __slots__ = ("_items", "_capacity", "_released")

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Args:
            capacity: Начальная ёмкость (>= 0)

        Raises:
            ValueError: Если capacity отрицательная
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

        self._items: list[int] = []
        self._capacity = capacity
        self._released = False

    @classmethod
    def from_iterable(cls, limbs: Iterable[int], capacity: int = DEFAULT_CAPACITY) -> "LimbVector":
        """Создание вектора из последовательности разрядов (младший первым)."""
        vector = cls(capacity)
        for limb in limbs:
            vector.append(limb)
        return vector

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def released(self) -> bool:
        return self._released

    def append(self, limb: int) -> None:
        if len(self._items) >= self._capacity:
            self._capacity = self._capacity * 2 if self._capacity > 0 else 1
        self._items.append(limb)

    def get(self, index: int) -> int:
        """
        Чтение разряда.

        Raises:
            LimbIndexError: Если index вне [0, len)
        """
        if not 0 <= index < len(self._items):
            raise LimbIndexError(f"Index {index} out of range for {len(self._items)} limbs")
        return self._items[index]

    def set(self, index: int, limb: int) -> None:
        """
        Запись разряда.

        Raises:
            LimbIndexError: Если index вне [0, len)
        """
        if not 0 <= index < len(self._items):
            raise LimbIndexError(f"Index {index} out of range for {len(self._items)} limbs")
        self._items[index] = limb

    def pop(self) -> int:
        """
        Удаление и возврат старшего разряда.

        Raises:
            LimbUnderflowError: Если вектор пуст
        """
        if not self._items:
            raise LimbUnderflowError("Cannot pop from an empty limb vector")
        return self._items.pop()

    def release(self) -> None:
        """Освобождение хранилища. Повторный вызов безопасен."""
        self._items = []
        self._capacity = 0
        self._released = True

    def to_tuple(self) -> tuple[int, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __enter__(self) -> "LimbVector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"LimbVector({self._items!r})"
