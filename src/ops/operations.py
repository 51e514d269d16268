"""Публичные операции над BigInt без исключений.

Каждая функция возвращает OperationResult. Ошибки внутренних слоёв
(BigIntError) и нехватка памяти (MemoryError) переводятся в ErrorKind.

Порядок преобразования ошибок:
1. BigIntError → его kind
2. MemoryError → ErrorKind.OUT_OF_MEMORY
3. Остальные исключения не перехватываются (ошибка программиста)
"""

import functools
import logging
from typing import Callable, Optional, TypeVar

from src.core.config import ArithmeticConfig
from src.core.domain.bigint import BigInt
from src.core.errors import BigIntError, ErrorKind, InvalidFormatError
from src.core.math.comparator import Ordering
from src.ops.results import DivisionResult, OperationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _guarded(func: Callable[..., T]) -> Callable[..., OperationResult[T]]:
    """Перевод исключений операции в OperationResult."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> OperationResult[T]:
        try:
            return OperationResult.success(func(*args, **kwargs))
        except BigIntError as e:
            logger.debug("%s failed: %s (%s)", func.__name__, e.kind.value, e)
            return OperationResult.failure(e.kind)
        except MemoryError:
            logger.debug("%s failed: %s", func.__name__, ErrorKind.OUT_OF_MEMORY.value)
            return OperationResult.failure(ErrorKind.OUT_OF_MEMORY)

    return wrapper


def _require(number: Optional[BigInt], name: str) -> BigInt:
    if not isinstance(number, BigInt):
        raise InvalidFormatError(f"{name} must be a BigInt, got {type(number).__name__}")
    return number


# =============================================================================
# КОНСТРУКТОРЫ И ПРЕОБРАЗОВАНИЯ
# =============================================================================


@_guarded
def from_int(value: int) -> BigInt:
    """BigInt из native int (signed 64-bit)."""
    return BigInt.from_int(value)


@_guarded
def from_string(text: Optional[str], config: Optional[ArithmeticConfig] = None) -> BigInt:
    """BigInt из десятичной строки ('+'/'-' и цифры 0-9)."""
    return BigInt.from_string(text, config)


@_guarded
def to_string(number: Optional[BigInt]) -> str:
    return _require(number, "number").to_string()


@_guarded
def clone(number: Optional[BigInt]) -> BigInt:
    return _require(number, "number").clone()


@_guarded
def release(number: Optional[BigInt]) -> None:
    """
    Завершение использования значения.

    Память освобождается сборщиком мусора, когда исчезает последняя ссылка;
    release только проверяет аргумент (None → INVALID_FORMAT).
    """
    _require(number, "number")
    return None


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


@_guarded
def compare(x: Optional[BigInt], y: Optional[BigInt]) -> Ordering:
    return _require(x, "x").compare(_require(y, "y"))


@_guarded
def add(x: Optional[BigInt], y: Optional[BigInt]) -> BigInt:
    return _require(x, "x").add(_require(y, "y"))


@_guarded
def sub(x: Optional[BigInt], y: Optional[BigInt]) -> BigInt:
    return _require(x, "x").sub(_require(y, "y"))


@_guarded
def multiply(
    x: Optional[BigInt], y: Optional[BigInt], config: Optional[ArithmeticConfig] = None
) -> BigInt:
    return _require(x, "x").multiply(_require(y, "y"), config)


@_guarded
def divmod(
    x: Optional[BigInt], y: Optional[BigInt], config: Optional[ArithmeticConfig] = None
) -> DivisionResult:
    """Деление с остатком (C-style). y == 0 → DIVISION_BY_ZERO."""
    quotient, remainder = _require(x, "x").divmod(_require(y, "y"), config)
    return DivisionResult(quotient=quotient, remainder=remainder)


@_guarded
def mod(
    x: Optional[BigInt], y: Optional[BigInt], config: Optional[ArithmeticConfig] = None
) -> BigInt:
    """Остаток от деления (знак делимого). y == 0 → DIVISION_BY_ZERO."""
    return _require(x, "x").mod(_require(y, "y"), config)


__all__ = [
    "add",
    "clone",
    "compare",
    "divmod",
    "from_int",
    "from_string",
    "mod",
    "multiply",
    "release",
    "sub",
    "to_string",
]
