"""
Core math modules для больших чисел

Слои (зависимости только снизу вверх):
normalization → comparator → additive → multiplication → division, conversion
"""

# Normalization
from src.core.math.normalization import (
    canonical_sign,
    is_zero_magnitude,
    normalize,
    trim_digits,
    trim_leading_zeros,
)

# Comparator
from src.core.math.comparator import (
    Ordering,
    compare,
    compare_magnitude,
)

# Additive
from src.core.math.additive import (
    add,
    add_magnitude,
    negate,
    sub,
    sub_magnitude,
)

# Multiplicative
from src.core.math.multiplication import (
    karatsuba,
    multiply,
    schoolbook_multiply,
    shift_left,
    split,
)

# Division
from src.core.math.division import (
    divmod_magnitude,
    divmod_signed,
    mod,
)

# Conversion
from src.core.math.conversion import (
    INT64_MAX,
    INT64_MIN,
    parse_decimal,
    parse_int,
    render_decimal,
)

__all__ = [
    # Normalization
    "canonical_sign",
    "is_zero_magnitude",
    "normalize",
    "trim_digits",
    "trim_leading_zeros",
    # Comparator
    "Ordering",
    "compare",
    "compare_magnitude",
    # Additive
    "add",
    "add_magnitude",
    "negate",
    "sub",
    "sub_magnitude",
    # Multiplicative
    "karatsuba",
    "multiply",
    "schoolbook_multiply",
    "shift_left",
    "split",
    # Division
    "divmod_magnitude",
    "divmod_signed",
    "mod",
    # Conversion
    "INT64_MAX",
    "INT64_MIN",
    "parse_decimal",
    "parse_int",
    "render_decimal",
]
