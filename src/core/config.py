"""Конфигурация арифметики больших чисел.

- karatsuba_threshold — размер (в limbs), начиная с которого умножение
  переходит с квадратичного алгоритма на рекурсию Karatsuba
- max_limbs — явный потолок размера операндов (ограничивает глубину
  рекурсии и память для входов неограниченного размера)
- quotient_digit_search — способ подбора цифры частного в длинном делении
"""

from dataclasses import dataclass
from typing import Final, Optional

# Порог базового случая Karatsuba (в limbs)
KARATSUBA_THRESHOLD_DEFAULT: Final[int] = 32

# Подбор цифры частного: бинарный поиск по [0, LIMB_BASE)
QUOTIENT_SEARCH_BISECT: Final[str] = "bisect"

# Подбор цифры частного: повторное вычитание делителя
QUOTIENT_SEARCH_SUBTRACT: Final[str] = "subtract"

QUOTIENT_SEARCH_MODES: Final[frozenset[str]] = frozenset(
    {QUOTIENT_SEARCH_BISECT, QUOTIENT_SEARCH_SUBTRACT}
)


@dataclass(frozen=True)
class ArithmeticConfig:
    """Параметры алгоритмов умножения и деления.

    Обе стратегии подбора цифры частного дают одинаковый результат:
    "subtract" выполняет до LIMB_BASE - 1 вычитаний на цифру,
    "bisect" находит ту же цифру за O(log LIMB_BASE) умножений на разряд.
    """

    karatsuba_threshold: int = KARATSUBA_THRESHOLD_DEFAULT
    max_limbs: Optional[int] = None
    quotient_digit_search: str = QUOTIENT_SEARCH_BISECT

    def __post_init__(self) -> None:
        if self.karatsuba_threshold < 1:
            raise ValueError(
                f"karatsuba_threshold must be >= 1, got {self.karatsuba_threshold}"
            )
        if self.max_limbs is not None and self.max_limbs < 1:
            raise ValueError(f"max_limbs must be >= 1, got {self.max_limbs}")
        if self.quotient_digit_search not in QUOTIENT_SEARCH_MODES:
            raise ValueError(
                f"quotient_digit_search must be one of {sorted(QUOTIENT_SEARCH_MODES)}, "
                f"got {self.quotient_digit_search!r}"
            )


DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()
