"""
Calculator — конвейер вычисления строки с разделителями.

Resolver → Tokenizer → Validator → Reducer:
- resolver: декларация "//..." → DelimiterSpec + body
- tokenizer: литеральное разбиение body
- validator: пакетная проверка токенов
- string_calculator: публичный API (add, subtract, evaluate)
"""

from src.calculator.resolver import parse_bracket_groups, resolve
from src.calculator.string_calculator import (
    CalculatorConfig,
    EvaluationResult,
    Operation,
    StringCalculator,
    add,
    evaluate,
    subtract,
)
from src.calculator.tokenizer import tokenize
from src.calculator.validator import ValidationReport, classify_tokens, validate

__all__ = [
    # Classes
    "StringCalculator",
    "CalculatorConfig",
    "EvaluationResult",
    "Operation",
    "ValidationReport",
    # Pipeline stages
    "resolve",
    "parse_bracket_groups",
    "tokenize",
    "classify_tokens",
    "validate",
    # Functions
    "add",
    "subtract",
    "evaluate",
]
