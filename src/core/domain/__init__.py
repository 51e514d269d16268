"""
Domain models and value objects.

Содержит BigInt — immutable модель большого целого числа со знаком.
"""

from src.core.domain.bigint import BigInt

__all__ = [
    "BigInt",
]
