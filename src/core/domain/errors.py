"""
Errors — Иерархия ошибок калькулятора

Закрытый набор вариантов ошибок со структурированными данными:
- NonNumericOperand: токены, которые не являются целыми числами
- NegativeOperand: отрицательные числа
- MalformedDeclaration: некорректная декларация разделителей

Ошибки хранят только данные (списки значений в порядке появления).
Текст сообщения формируется отдельно в format_error().
"""

from typing import Final


# =============================================================================
# MESSAGE LABELS
# =============================================================================

NON_NUMERIC_LABEL: Final[str] = "Non-numeric values are not allowed"
NEGATIVE_LABEL: Final[str] = "Negative numbers are not allowed"
MALFORMED_DECLARATION_LABEL: Final[str] = "Malformed delimiter declaration"

VALUE_SEPARATOR: Final[str] = ", "


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculatorError(ValueError):
    """
    Базовая ошибка калькулятора.

    Любая ошибка терминальна для вызова: частичный результат не возвращается.
    """

    def __str__(self) -> str:
        return format_error(self)


class NonNumericOperand(CalculatorError):
    """Один или несколько токенов не распознаны как целые числа."""

    def __init__(self, values: list[str] | tuple[str, ...]):
        self.values: tuple[str, ...] = tuple(values)
        super().__init__(self.values)


class NegativeOperand(CalculatorError):
    """Во входе есть отрицательные числа (и нет нечисловых токенов)."""

    def __init__(self, values: list[int] | tuple[int, ...]):
        self.values: tuple[int, ...] = tuple(values)
        super().__init__(self.values)


class MalformedDeclaration(CalculatorError):
    """
    Декларация разделителей после "//" некорректна.

    Attributes:
        declaration: часть входа после "//" (до перевода строки, если он есть)
        reason: короткое описание проблемы
    """

    def __init__(self, declaration: str, reason: str):
        self.declaration = declaration
        self.reason = reason
        super().__init__(declaration, reason)


# =============================================================================
# FORMATTING
# =============================================================================


def format_error(error: CalculatorError) -> str:
    """
    Человекочитаемое сообщение для ошибки калькулятора.

    Формат: "<категория>: <значение1>, <значение2>, ..." в порядке появления.

    Args:
        error: ошибка калькулятора

    Returns:
        Сообщение об ошибке

    Examples:
        >>> format_error(NegativeOperand([-2, -5]))
        'Negative numbers are not allowed: -2, -5'
        >>> format_error(NonNumericOperand(["a"]))
        'Non-numeric values are not allowed: a'
    """
    if isinstance(error, NonNumericOperand):
        return f"{NON_NUMERIC_LABEL}: {_join(error.values)}"
    if isinstance(error, NegativeOperand):
        return f"{NEGATIVE_LABEL}: {_join(error.values)}"
    if isinstance(error, MalformedDeclaration):
        return f"{MALFORMED_DECLARATION_LABEL}: {error.reason} ({error.declaration!r})"
    return ValueError.__str__(error)


def _join(values: tuple) -> str:
    return VALUE_SEPARATOR.join(str(value) for value in values)
