"""
Core math modules

Разбор операндов и свёртка (сумма, последовательное вычитание) с порогом.
"""

from src.core.math.reducers import (
    OPERAND_THRESHOLD,
    ignored_operands,
    is_within_threshold,
    parse_operand,
    subtract_operands,
    sum_operands,
)

__all__ = [
    # Constants
    "OPERAND_THRESHOLD",
    # Parsing
    "parse_operand",
    "is_within_threshold",
    # Reducers
    "sum_operands",
    "subtract_operands",
    "ignored_operands",
]
