"""Delimiter Resolver — разбор декларации разделителей

Формы входа:
- "1,2\\n3"            → DEFAULT (запятая или перевод строки), body = весь вход
- "//;\\n1;2;3"        → SINGLE (";"), body = "1;2;3"
- "//[*][%%]\\n1*2%%3" → MULTIPLE ("*", "%%"), body = "1*2%%3"

Декларация: текст между "//" и первым переводом строки. Если она начинается
с "[", извлекается содержимое каждой группы "[...]" слева направо (дубликаты
сохраняются). Все разделители являются литералами, "*" делит по символу "*".

Политика ошибок (MalformedDeclaration):
- "//" без последующего перевода строки
- пустая декларация ("//\\n1")
- скобочная декларация без непустых групп ("//[]\\n1")
"""

import logging
import re
from typing import Final

from src.core.domain.delimiters import DelimiterSpec, ParsedInput
from src.core.domain.errors import MalformedDeclaration


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DECLARATION_MARKER: Final[str] = "//"
DECLARATION_TERMINATOR: Final[str] = "\n"
BRACKET_OPEN: Final[str] = "["

# Содержимое группы "[...]": минимум один символ кроме "\n", нежадно до первой "]"
_BRACKET_GROUP_PATTERN: Final[re.Pattern[str]] = re.compile(r"\[(.+?)\]")


# =============================================================================
# RESOLVER
# =============================================================================


def resolve(raw_input: str) -> ParsedInput:
    """Определение разделителей и выделение числовой части.

    Args:
        raw_input: непустая входная строка

    Returns:
        ParsedInput(spec, body)

    Raises:
        MalformedDeclaration: если декларация после "//" некорректна
    """
    if not raw_input.startswith(DECLARATION_MARKER):
        parsed = ParsedInput(spec=DelimiterSpec.default(), body=raw_input)
        logger.debug("Delimiters resolved: kind=%s", parsed.spec.kind.value)
        return parsed

    newline_index = raw_input.find(DECLARATION_TERMINATOR, len(DECLARATION_MARKER))
    if newline_index < 0:
        raise MalformedDeclaration(
            declaration=raw_input[len(DECLARATION_MARKER):],
            reason="missing newline after '//'",
        )

    declaration = raw_input[len(DECLARATION_MARKER):newline_index]
    body = raw_input[newline_index + 1:]

    spec = _parse_declaration(declaration)
    logger.debug(
        "Delimiters resolved: kind=%s delimiters=%r",
        spec.kind.value,
        list(spec.delimiters),
    )
    return ParsedInput(spec=spec, body=body)


def _parse_declaration(declaration: str) -> DelimiterSpec:
    """Декларация → DelimiterSpec (SINGLE или MULTIPLE)."""
    if not declaration:
        raise MalformedDeclaration(declaration=declaration, reason="empty delimiter")

    if declaration.startswith(BRACKET_OPEN):
        literals = parse_bracket_groups(declaration)
        if not literals:
            raise MalformedDeclaration(
                declaration=declaration,
                reason="no non-empty bracketed delimiter",
            )
        return DelimiterSpec.multiple(literals)

    return DelimiterSpec.single(declaration)


def parse_bracket_groups(declaration: str) -> list[str]:
    """Извлечение литералов из групп "[...]" слева направо.

    Examples:
        >>> parse_bracket_groups("[*][%%]")
        ['*', '%%']
        >>> parse_bracket_groups("[***]")
        ['***']
    """
    return _BRACKET_GROUP_PATTERN.findall(declaration)
