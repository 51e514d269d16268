"""
Core: представление больших чисел, арифметические алгоритмы и инварианты.

- core.limbs   — хранилище разрядов (LimbVector) и SignedLimbs
- core.errors  — ErrorKind и иерархия исключений
- core.config  — ArithmeticConfig
- core.math    — нормализация, сравнение, сложение, умножение, деление, конверсия
- core.domain  — модель BigInt
"""
