"""
Delimiters — Модель спецификации разделителей

Immutable Pydantic модели, описывающие, как разбивать числовую часть входной строки:
- DEFAULT: пара разделителей по умолчанию (запятая, перевод строки)
- SINGLE: один произвольный литеральный разделитель ("//;\\n1;2")
- MULTIPLE: несколько литеральных разделителей в скобках ("//[*][%]\\n1*2%3")

Каждый разделитель является точной строкой, а не regex-паттерном.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# CONSTANTS
# =============================================================================

# Разделители по умолчанию
DEFAULT_DELIMITERS: Final[tuple[str, ...]] = (",", "\n")


# =============================================================================
# ENUMS
# =============================================================================


class DelimiterKind(str, Enum):
    """Способ, которым был задан набор разделителей"""

    DEFAULT = "DEFAULT"
    SINGLE = "SINGLE"
    MULTIPLE = "MULTIPLE"


# =============================================================================
# DELIMITER SPEC
# =============================================================================


class DelimiterSpec(BaseModel):
    """
    Спецификация разделителей для одного вызова.

    Порядок delimiters сохраняется (как в декларации), но на результат
    разбиения не влияет.
    """

    kind: DelimiterKind = Field(..., description="Источник разделителей")
    delimiters: tuple[str, ...] = Field(
        ..., min_length=1, description="Литеральные разделители"
    )

    model_config = {"frozen": True}

    @field_validator("delimiters")
    @classmethod
    def validate_delimiters_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Пустая строка не может быть разделителем"""
        for delimiter in v:
            if not delimiter:
                raise ValueError("delimiter must be a non-empty string")
        return v

    @classmethod
    def default(cls) -> "DelimiterSpec":
        return cls(kind=DelimiterKind.DEFAULT, delimiters=DEFAULT_DELIMITERS)

    @classmethod
    def single(cls, literal: str) -> "DelimiterSpec":
        return cls(kind=DelimiterKind.SINGLE, delimiters=(literal,))

    @classmethod
    def multiple(cls, literals: list[str] | tuple[str, ...]) -> "DelimiterSpec":
        return cls(kind=DelimiterKind.MULTIPLE, delimiters=tuple(literals))


# =============================================================================
# PARSED INPUT
# =============================================================================


class ParsedInput(BaseModel):
    """
    Результат разбора декларации: спецификация разделителей + числовая часть.

    Создаётся один раз на вызов и не переживает его.
    """

    spec: DelimiterSpec = Field(..., description="Разделители для body")
    body: str = Field(..., description="Числовая часть входа (без декларации)")

    model_config = {"frozen": True}
