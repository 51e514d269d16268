"""
Errors — типизированные ошибки арифметики больших чисел

Каждое исключение несёт ErrorKind, по которому слой src.ops строит
OperationResult без разбора текста сообщения.

Иерархия:
- BigIntError              — базовый класс
- InvalidFormatError       — некорректная строка / входное значение
- DivisionByZeroError      — делитель равен нулю
- LimbIndexError           — выход за границы хранилища limbs (programming error)
- LimbUnderflowError       — pop из пустого хранилища (programming error)
- OperandTooLargeError     — превышен ArithmeticConfig.max_limbs
"""

from enum import Enum
from typing import ClassVar


# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки операции над BigInt"""

    OUT_OF_MEMORY = "OUT_OF_MEMORY"
    INVALID_FORMAT = "INVALID_FORMAT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    OPERAND_TOO_LARGE = "OPERAND_TOO_LARGE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntError(Exception):
    """Базовая ошибка арифметики больших чисел."""

    kind: ClassVar[ErrorKind]


class InvalidFormatError(BigIntError, ValueError):
    """
    Некорректный вход конструктора.

    Возникает для пустой строки, одиночного знака без цифр, нецифровых
    символов, None, а также int вне диапазона signed 64-bit.
    """

    kind = ErrorKind.INVALID_FORMAT


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """Модуль делителя равен нулю."""

    kind = ErrorKind.DIVISION_BY_ZERO


class LimbIndexError(BigIntError, IndexError):
    """
    Индекс за пределами LimbVector.

    При соблюдении инвариантов нормализации возникать не должна:
    сигнализирует об ошибке программиста.
    """

    kind = ErrorKind.INDEX_OUT_OF_RANGE


class LimbUnderflowError(LimbIndexError):
    """pop() из пустого LimbVector."""


class OperandTooLargeError(BigIntError, OverflowError):
    """Размер операнда или результата превышает ArithmeticConfig.max_limbs."""

    kind = ErrorKind.OPERAND_TOO_LARGE


# Обратное отображение ErrorKind → исключение (для OperationResult.unwrap)
EXCEPTION_BY_KIND: dict[ErrorKind, type[Exception]] = {
    ErrorKind.OUT_OF_MEMORY: MemoryError,
    ErrorKind.INVALID_FORMAT: InvalidFormatError,
    ErrorKind.DIVISION_BY_ZERO: DivisionByZeroError,
    ErrorKind.INDEX_OUT_OF_RANGE: LimbIndexError,
    ErrorKind.OPERAND_TOO_LARGE: OperandTooLargeError,
}
