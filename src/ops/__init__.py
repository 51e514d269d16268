"""Ops — публичные операции над BigInt, возвращающие OperationResult.

Для вызывающих, которым нужен результат без исключений: каждая операция
возвращает либо значение, либо ErrorKind.
"""

from .operations import (
    add,
    clone,
    compare,
    divmod,
    from_int,
    from_string,
    mod,
    multiply,
    release,
    sub,
    to_string,
)
from .results import DivisionResult, OperationResult

__all__ = [
    # Results
    "OperationResult",
    "DivisionResult",
    # Operations
    "from_int",
    "from_string",
    "to_string",
    "clone",
    "compare",
    "add",
    "sub",
    "multiply",
    "divmod",
    "mod",
    "release",
]
