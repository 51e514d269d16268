"""
Conversion — построение больших чисел и десятичное представление

- parse_int: native int (signed 64-bit) → разряды
- parse_decimal: десятичная строка → разряды (чанками по 9 цифр с младшего конца)
- render_decimal: разряды → десятичная строка
"""

from typing import Final, Optional

from src.core.config import DEFAULT_CONFIG, ArithmeticConfig
from src.core.errors import InvalidFormatError, OperandTooLargeError
from src.core.limbs import LIMB_BASE, LIMB_DIGITS, LimbVector, SignedLimbs, SignedValue
from src.core.math.normalization import normalize

# Диапазон native integer (signed 64-bit)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# NATIVE INT
# =============================================================================


def parse_int(value: int) -> SignedLimbs:
    """
    Разложение native int по основанию B.

    Модуль INT64_MIN не помещается в signed 64-bit, но вычисляется
    точно, так как int в Python не ограничен.

    Args:
        value: Целое в [INT64_MIN, INT64_MAX]

    Returns:
        Нормализованная величина

    Raises:
        InvalidFormatError: Если value не int (bool тоже отвергается)
            или вне диапазона signed 64-bit

    Examples:
        >>> parse_int(-12345678900)
        SignedLimbs(digits=(345678900, 12), is_negative=True)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormatError(f"Expected int, got {type(value).__name__}")

    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidFormatError(f"Integer {value} is outside the signed 64-bit range")

    magnitude = -value if value < 0 else value

    limbs = LimbVector()
    if magnitude == 0:
        limbs.append(0)

    while magnitude:
        magnitude, limb = divmod(magnitude, LIMB_BASE)
        limbs.append(limb)

    return normalize(limbs, value < 0)


# =============================================================================
# ДЕСЯТИЧНЫЕ СТРОКИ
# =============================================================================


def parse_decimal(text: Optional[str], config: Optional[ArithmeticConfig] = None) -> SignedLimbs:
    """
    Разбор десятичной строки.

    Формат: необязательный знак '+' или '-', затем одна или больше цифр 0-9.
    Ведущие нули пропускаются (но не последняя цифра: "0" → ноль).

    Args:
        text: Десятичная строка
        config: Потолок размера max_limbs (default: DEFAULT_CONFIG)

    Returns:
        Нормализованная величина ("-0" → неотрицательный ноль)

    Raises:
        InvalidFormatError: None, пустая строка, знак без цифр, нецифровой символ
        OperandTooLargeError: Если число не помещается в config.max_limbs

    Examples:
        >>> parse_decimal("00000123")
        SignedLimbs(digits=(123,), is_negative=False)
        >>> parse_decimal("-1000000000")
        SignedLimbs(digits=(0, 1), is_negative=True)
    """
    config = config or DEFAULT_CONFIG

    if text is None or not isinstance(text, str) or text == "":
        raise InvalidFormatError("Invalid string")

    is_negative = False
    body = text
    if body[0] == "-":
        is_negative = True
        body = body[1:]
    elif body[0] == "+":
        body = body[1:]

    if body == "":
        raise InvalidFormatError(f"Invalid integer: {text!r}")

    for ch in body:
        if ch not in _DECIMAL_DIGITS:
            raise InvalidFormatError(f"Invalid integer: {text!r}")

    start = 0
    while start < len(body) - 1 and body[start] == "0":
        start += 1
    body = body[start:]

    limb_count = -(-len(body) // LIMB_DIGITS)
    if config.max_limbs is not None and limb_count > config.max_limbs:
        raise OperandTooLargeError(
            f"Integer of {len(body)} digits needs {limb_count} limbs, "
            f"exceeds max_limbs={config.max_limbs}"
        )

    limbs = LimbVector(limb_count)
    end = len(body)
    while end > 0:
        begin = max(end - LIMB_DIGITS, 0)
        limb = 0
        for ch in body[begin:end]:
            limb = limb * 10 + (ord(ch) - ord("0"))
        limbs.append(limb)
        end = begin

    return normalize(limbs, is_negative)


def render_decimal(number: SignedValue) -> str:
    """
    Десятичное представление.

    Старший разряд без дополнения нулями, каждый следующий — ровно 9 цифр.

    Examples:
        >>> render_decimal(SignedLimbs((5, 1), True))
        '-1000000005'
    """
    digits = number.digits
    parts = ["-"] if number.is_negative else []

    parts.append(str(digits[-1]))
    for idx in range(len(digits) - 2, -1, -1):
        parts.append(f"{digits[idx]:0{LIMB_DIGITS}d}")

    return "".join(parts)
