"""String Calculator — вычисление суммы/разности чисел из строки

Конвейер (строго последовательный, без возвратов):
    Resolver → Tokenizer → Validator → Reducer[operation]

Семантика:
- Пустой вход или None → 0 (ни один этап не вызывается)
- ADD: сумма операндов <= operand_threshold
- SUBTRACT: первый операнд минус последующие операнды <= operand_threshold
  (первый операнд порогом не фильтруется)
- Первая ошибка любого этапа пробрасывается вызывающему

Вызов является чистой функцией от (operation, input): состояние между вызовами
не сохраняется, экземпляр хранит только frozen конфигурацию.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from src.calculator.resolver import resolve
from src.calculator.tokenizer import tokenize
from src.calculator.validator import classify_tokens, validate
from src.core.domain.delimiters import DelimiterSpec
from src.core.math.reducers import (
    OPERAND_THRESHOLD,
    ignored_operands,
    subtract_operands,
    sum_operands,
)


logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Операция свёртки"""

    ADD = "add"
    SUBTRACT = "subtract"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления с диагностикой."""

    operation: Operation
    result: int

    # Сырые токены после разбиения
    tokens: tuple[str, ...]

    # Разобранные операнды (в порядке появления)
    operands: tuple[int, ...]

    # Операнды, пропущенные из-за порога
    ignored_operands: tuple[int, ...]

    # None для пустого входа
    spec: DelimiterSpec | None


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора."""

    # Операнды строго больше порога не участвуют в арифметике
    operand_threshold: int = OPERAND_THRESHOLD

    def __post_init__(self) -> None:
        if isinstance(self.operand_threshold, bool) or not isinstance(self.operand_threshold, int):
            raise ValueError(
                f"operand_threshold must be an int, got {type(self.operand_threshold).__name__}"
            )
        if self.operand_threshold < 0:
            raise ValueError(f"operand_threshold must be >= 0, got {self.operand_threshold}")


# =============================================================================
# CALCULATOR
# =============================================================================


class StringCalculator:
    """Калькулятор строк с разделителями.

    Поддерживает:
    1. Разделители по умолчанию (запятая, перевод строки)
    2. Один произвольный разделитель: "//;\\n1;2"
    3. Несколько разделителей в скобках: "//[*][%]\\n1*2%3"
    """

    def __init__(self, config: CalculatorConfig | None = None):
        """Инициализация калькулятора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CalculatorConfig()

    def add(self, raw_input: str | None) -> int:
        """Сумма чисел из строки (операнды > порога игнорируются)."""
        return self.evaluate(Operation.ADD, raw_input)

    def subtract(self, raw_input: str | None) -> int:
        """Первое число минус остальные (вычитаемые > порога игнорируются)."""
        return self.evaluate(Operation.SUBTRACT, raw_input)

    def evaluate(self, operation: Operation | str, raw_input: str | None) -> int:
        """Вычисление операции над входной строкой.

        Args:
            operation: Operation или её строковое значение ("add", "subtract")
            raw_input: входная строка (может быть пустой или None)

        Returns:
            Целочисленный результат

        Raises:
            ValueError: неизвестная операция
            MalformedDeclaration: некорректная декларация разделителей
            NonNumericOperand: нечисловые токены
            NegativeOperand: отрицательные числа
        """
        operation = _coerce_operation(operation)
        if not raw_input:
            return 0

        parsed = resolve(raw_input)
        tokens = tokenize(parsed.body, parsed.spec)
        validate(tokens)

        threshold = self.config.operand_threshold
        if operation == Operation.ADD:
            result = sum_operands(tokens, threshold)
        else:
            result = subtract_operands(tokens, threshold)

        logger.debug(
            "Evaluation complete: operation=%s tokens=%d result=%d",
            operation.value,
            len(tokens),
            result,
        )
        return result

    def evaluate_detailed(
        self,
        operation: Operation | str,
        raw_input: str | None,
    ) -> EvaluationResult:
        """Вычисление с диагностикой (токены, операнды, пропущенные операнды).

        Ошибки те же, что у evaluate().
        """
        operation = _coerce_operation(operation)
        if not raw_input:
            return EvaluationResult(
                operation=operation,
                result=0,
                tokens=(),
                operands=(),
                ignored_operands=(),
                spec=None,
            )

        parsed = resolve(raw_input)
        tokens = tokenize(parsed.body, parsed.spec)
        validate(tokens)

        operands = classify_tokens(tokens).operands
        threshold = self.config.operand_threshold
        if operation == Operation.ADD:
            result = sum_operands(tokens, threshold)
            skipped = ignored_operands(operands, threshold)
        else:
            result = subtract_operands(tokens, threshold)
            skipped = ignored_operands(operands, threshold, keep_first=True)

        return EvaluationResult(
            operation=operation,
            result=result,
            tokens=tuple(tokens),
            operands=operands,
            ignored_operands=skipped,
            spec=parsed.spec,
        )


def _coerce_operation(operation: Operation | str) -> Operation:
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        raise ValueError(f"Unknown operation: {operation!r}") from None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def add(raw_input: str | None) -> int:
    """Сумма чисел из строки с конфигурацией по умолчанию."""
    return StringCalculator().add(raw_input)


def subtract(raw_input: str | None) -> int:
    """Вычитание чисел из строки с конфигурацией по умолчанию."""
    return StringCalculator().subtract(raw_input)


def evaluate(operation: Operation | str, raw_input: str | None) -> int:
    """Вычисление операции с конфигурацией по умолчанию."""
    return StringCalculator().evaluate(operation, raw_input)
