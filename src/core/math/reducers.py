"""
Reducers — Свёртка операндов (сумма и последовательное вычитание)

Модуль вычисляет результат по уже провалидированным токенам:
- sum_operands: сумма всех операндов <= threshold
- subtract_operands: первый операнд минус каждый последующий операнд <= threshold

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды > threshold не являются ошибкой, они просто не участвуют в арифметике
2. Сумма фильтрует ВСЕ операнды, включая первый
3. Вычитание НИКОГДА не фильтрует первый операнд (уменьшаемое), даже если он > threshold
4. Токены должны пройти валидацию до вызова (иначе ValueError от parse_operand)

Асимметрия (3) воспроизводится намеренно: subtract("1001,1") == 1000.
"""

import re
from typing import Final, Iterable

# =============================================================================
# CONSTANTS
# =============================================================================

# Операнды строго больше порога игнорируются при вычислениях
OPERAND_THRESHOLD: Final[int] = 1000

# Целое число: необязательный знак и ASCII-цифры
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# PARSING
# =============================================================================


def parse_operand(token: str) -> int:
    """
    Строгий разбор токена в целое число.

    Удаляются только пробельные символы по краям. Подчёркивания,
    внутренние пробелы, не-ASCII цифры и дробные числа не допускаются.

    Args:
        token: сырой токен

    Returns:
        Целое значение

    Raises:
        ValueError: если токен не является целым числом

    Examples:
        >>> parse_operand(" 42 ")
        42
        >>> parse_operand("-7")
        -7
    """
    stripped = token.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise ValueError(f"Not an integer: {stripped!r}")
    return int(stripped)


def is_within_threshold(value: int, threshold: int = OPERAND_THRESHOLD) -> bool:
    """Операнд участвует в арифметике, только если value <= threshold."""
    return value <= threshold


# =============================================================================
# REDUCERS
# =============================================================================


def sum_operands(tokens: Iterable[str], threshold: int = OPERAND_THRESHOLD) -> int:
    """
    Сумма операндов с фильтрацией по порогу.

    Args:
        tokens: провалидированные токены
        threshold: верхняя граница (включительно) для участвующих операндов

    Returns:
        Сумма операндов <= threshold

    Raises:
        ValueError: если токенов нет или токен не является целым числом

    Examples:
        >>> sum_operands(["1", "2", "3"])
        6
        >>> sum_operands(["2", "1001"])
        2
    """
    values = [parse_operand(token) for token in tokens]
    if not values:
        raise ValueError("At least one operand is required")

    total = 0
    for value in values:
        if is_within_threshold(value, threshold):
            total += value
    return total


def subtract_operands(tokens: Iterable[str], threshold: int = OPERAND_THRESHOLD) -> int:
    """
    Последовательное вычитание слева направо.

    Первый операнд берётся как есть (без фильтра по порогу), затем из него
    вычитается каждый последующий операнд <= threshold.

    Args:
        tokens: провалидированные токены
        threshold: верхняя граница (включительно) для вычитаемых операндов

    Returns:
        first - sum(rest <= threshold)

    Raises:
        ValueError: если токенов нет или токен не является целым числом

    Examples:
        >>> subtract_operands(["10", "3", "2"])
        5
        >>> subtract_operands(["1001", "1"])
        1000
        >>> subtract_operands(["10", "1001", "3"])
        7
    """
    values = [parse_operand(token) for token in tokens]
    if not values:
        raise ValueError("At least one operand is required")

    result = values[0]
    for value in values[1:]:
        if is_within_threshold(value, threshold):
            result -= value
    return result


def ignored_operands(
    values: Iterable[int],
    threshold: int = OPERAND_THRESHOLD,
    keep_first: bool = False,
) -> tuple[int, ...]:
    """
    Операнды, которые свёртка пропустит из-за порога (в порядке появления).

    Args:
        values: целые операнды
        threshold: верхняя граница (включительно)
        keep_first: True для вычитания (первый операнд никогда не пропускается)

    Returns:
        Кортеж пропущенных операндов
    """
    skipped = []
    for index, value in enumerate(values):
        if keep_first and index == 0:
            continue
        if not is_within_threshold(value, threshold):
            skipped.append(value)
    return tuple(skipped)
