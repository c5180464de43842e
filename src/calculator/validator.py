"""Validator — пакетная проверка токенов

Проверяются ВСЕ токены, затем выбрасывается одна агрегированная ошибка:
1. Нечисловые токены → NonNumericOperand (приоритет)
2. Иначе отрицательные числа → NegativeOperand
3. Иначе OK

Проверка не прерывается на первом плохом токене: в ошибке перечислены
все проблемные значения в порядке появления.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from src.core.domain.errors import NegativeOperand, NonNumericOperand
from src.core.math.reducers import parse_operand


logger = logging.getLogger(__name__)


# =============================================================================
# REPORT
# =============================================================================


@dataclass(frozen=True)
class ValidationReport:
    """Результат классификации токенов."""

    # Все разобранные целые значения (в порядке появления)
    operands: tuple[int, ...]

    # Токены, не являющиеся целыми числами (после strip)
    invalid_values: tuple[str, ...]

    # Отрицательные числа
    negative_numbers: tuple[int, ...]

    @property
    def is_valid(self) -> bool:
        return not self.invalid_values and not self.negative_numbers


# =============================================================================
# VALIDATION
# =============================================================================


def classify_tokens(tokens: Iterable[str]) -> ValidationReport:
    """Классификация токенов без выбрасывания ошибок.

    Args:
        tokens: сырые токены

    Returns:
        ValidationReport
    """
    operands: list[int] = []
    invalid_values: list[str] = []
    negative_numbers: list[int] = []

    for token in tokens:
        try:
            value = parse_operand(token)
        except ValueError:
            invalid_values.append(token.strip())
            continue

        operands.append(value)
        if value < 0:
            negative_numbers.append(value)

    return ValidationReport(
        operands=tuple(operands),
        invalid_values=tuple(invalid_values),
        negative_numbers=tuple(negative_numbers),
    )


def validate(tokens: Iterable[str]) -> None:
    """Пакетная валидация токенов.

    Args:
        tokens: сырые токены

    Raises:
        NonNumericOperand: если есть нечисловые токены (проверяется первым)
        NegativeOperand: если есть отрицательные числа
    """
    report = classify_tokens(tokens)

    if report.invalid_values:
        logger.debug("Validation failed: invalid values %r", list(report.invalid_values))
        raise NonNumericOperand(report.invalid_values)

    if report.negative_numbers:
        logger.debug("Validation failed: negative numbers %r", list(report.negative_numbers))
        raise NegativeOperand(report.negative_numbers)
