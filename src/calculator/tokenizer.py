"""Tokenizer — разбиение числовой части по литеральным разделителям

Разбиение выполняется явным поиском подстрок, без построения regex:
разделитель "*" или "." совпадает только с самим собой.

Правила:
- Пустые поля сохраняются ("1,,2" → ["1", "", "2"]), их отклоняет Validator
- Без вхождений разделителей результат: [body]
- Если на одной позиции совпадают несколько разделителей, выигрывает самый
  длинный (результат не зависит от порядка разделителей)
"""

import logging

from src.core.domain.delimiters import DelimiterSpec


logger = logging.getLogger(__name__)


def tokenize(body: str, spec: DelimiterSpec) -> list[str]:
    """Разбиение body на сырые токены.

    Args:
        body: числовая часть входа
        spec: спецификация разделителей

    Returns:
        Непустой список токенов (пустые строки допустимы)

    Examples:
        >>> tokenize("1\\n2,3", DelimiterSpec.default())
        ['1', '2', '3']
        >>> tokenize("1*2%3", DelimiterSpec.multiple(["*", "%"]))
        ['1', '2', '3']
    """
    delimiters = sorted(set(spec.delimiters), key=len, reverse=True)

    # Следующее вхождение каждого разделителя; порядок ключей: по убыванию длины
    next_positions: dict[str, int] = {}
    for delimiter in delimiters:
        position = body.find(delimiter)
        if position >= 0:
            next_positions[delimiter] = position

    tokens: list[str] = []
    start = 0
    while True:
        position, delimiter = _next_delimiter(body, next_positions, start)
        if delimiter is None:
            tokens.append(body[start:])
            break
        tokens.append(body[start:position])
        start = position + len(delimiter)

    logger.debug("Body tokenized: %d tokens", len(tokens))
    return tokens


def _next_delimiter(
    body: str,
    next_positions: dict[str, int],
    start: int,
) -> tuple[int, str | None]:
    """Ближайшее вхождение любого разделителя начиная с start.

    Позиция разделителя ищется заново, только если курсор её уже прошёл;
    разделитель без дальнейших вхождений удаляется из next_positions.
    При равной позиции побеждает первый ключ (самый длинный).
    """
    best_position = -1
    best_delimiter: str | None = None
    for delimiter in list(next_positions):
        position = next_positions[delimiter]
        if position < start:
            position = body.find(delimiter, start)
            if position < 0:
                del next_positions[delimiter]
                continue
            next_positions[delimiter] = position
        if best_delimiter is None or position < best_position:
            best_position = position
            best_delimiter = delimiter
    return best_position, best_delimiter
