"""
Domain models and value objects.

Contains delimiter specifications, parsed input, and the calculator error hierarchy.
"""

from src.core.domain.delimiters import (
    DEFAULT_DELIMITERS,
    DelimiterKind,
    DelimiterSpec,
    ParsedInput,
)
from src.core.domain.errors import (
    CalculatorError,
    MalformedDeclaration,
    NegativeOperand,
    NonNumericOperand,
    format_error,
)

__all__ = [
    # Delimiters
    "DEFAULT_DELIMITERS",
    "DelimiterKind",
    "DelimiterSpec",
    "ParsedInput",
    # Errors
    "CalculatorError",
    "MalformedDeclaration",
    "NegativeOperand",
    "NonNumericOperand",
    "format_error",
]
