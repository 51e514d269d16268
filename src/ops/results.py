"""Результаты публичных операций над BigInt.

Каждая операция src.ops возвращает OperationResult: либо value, либо error
(ErrorKind). Текст ошибки не хранится — его формирует слой представления
по ErrorKind.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from src.core.domain.bigint import BigInt
from src.core.errors import EXCEPTION_BY_KIND, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class DivisionResult:
    """Частное и остаток (знак остатка — знак делимого)."""

    quotient: BigInt
    remainder: BigInt


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Результат операции: value при успехе, error при ошибке."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> "OperationResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """
        Значение успешной операции.

        Raises:
            BigIntError / MemoryError: Исключение, соответствующее error
        """
        if self.error is not None:
            raise EXCEPTION_BY_KIND[self.error](f"Operation failed: {self.error.value}")
        return self.value  # type: ignore[return-value]
