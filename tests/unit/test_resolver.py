"""Тесты для Delimiter Resolver

Покрытие:
- Разделители по умолчанию
- Один произвольный разделитель
- Несколько разделителей в скобках
- Спецсимволы regex в разделителях
- Некорректные декларации (MalformedDeclaration)
"""

import pytest

from src.calculator.resolver import parse_bracket_groups, resolve
from src.core.domain import DelimiterKind, MalformedDeclaration


# =============================================================================
# DEFAULT
# =============================================================================


class TestDefaultDelimiters:
    """Вход без декларации."""

    def test_no_declaration(self):
        parsed = resolve("1,2\n3")
        assert parsed.spec.kind == DelimiterKind.DEFAULT
        assert parsed.spec.delimiters == (",", "\n")
        assert parsed.body == "1,2\n3"

    def test_single_slash_is_not_declaration(self):
        """Маркер: ровно два символа '//'."""
        parsed = resolve("/1,2")
        assert parsed.spec.kind == DelimiterKind.DEFAULT
        assert parsed.body == "/1,2"


# =============================================================================
# SINGLE
# =============================================================================


class TestSingleDelimiter:
    """Декларация '//<delim>\\n'."""

    def test_semicolon(self):
        parsed = resolve("//;\n1;2;3")
        assert parsed.spec.kind == DelimiterKind.SINGLE
        assert parsed.spec.delimiters == (";",)
        assert parsed.body == "1;2;3"

    def test_multi_character_delimiter(self):
        parsed = resolve("//ab\n1ab2")
        assert parsed.spec.delimiters == ("ab",)
        assert parsed.body == "1ab2"

    def test_slash_delimiter(self):
        parsed = resolve("///\n1/2")
        assert parsed.spec.delimiters == ("/",)
        assert parsed.body == "1/2"

    def test_regex_special_delimiter_kept_literal(self):
        parsed = resolve("//.\n1.2")
        assert parsed.spec.delimiters == (".",)

    def test_empty_body(self):
        """Пустое тело допустимо на этапе разбора."""
        parsed = resolve("//;\n")
        assert parsed.body == ""

    def test_only_first_newline_terminates_declaration(self):
        parsed = resolve("//;\n1\n2")
        assert parsed.spec.delimiters == (";",)
        assert parsed.body == "1\n2"


# =============================================================================
# MULTIPLE
# =============================================================================


class TestBracketedDelimiters:
    """Декларация '//[d1][d2]...\\n'."""

    def test_two_delimiters(self):
        parsed = resolve("//[*][%]\n1*2%3")
        assert parsed.spec.kind == DelimiterKind.MULTIPLE
        assert parsed.spec.delimiters == ("*", "%")
        assert parsed.body == "1*2%3"

    def test_long_delimiters(self):
        parsed = resolve("//[***][%%%]\n1***2%%%3")
        assert parsed.spec.delimiters == ("***", "%%%")

    def test_single_bracketed_delimiter(self):
        parsed = resolve("//[***]\n1***2***3")
        assert parsed.spec.kind == DelimiterKind.MULTIPLE
        assert parsed.spec.delimiters == ("***",)

    def test_duplicates_preserved(self):
        parsed = resolve("//[*][*]\n1*2")
        assert parsed.spec.delimiters == ("*", "*")

    def test_closing_bracket_as_delimiter(self):
        """Нежадный захват: '[]]' → ']'."""
        assert parse_bracket_groups("[]]") == ["]"]

    def test_parse_bracket_groups(self):
        assert parse_bracket_groups("[*][%%]") == ["*", "%%"]
        assert parse_bracket_groups("[.][|][+]") == [".", "|", "+"]

    def test_carriage_return_delimiter(self):
        """'\\r' внутри скобок: обычный литеральный разделитель."""
        parsed = resolve("//[\r]\n1\r2")
        assert parsed.spec.delimiters == ("\r",)
        assert parsed.body == "1\r2"

    def test_group_does_not_span_newline(self):
        assert parse_bracket_groups("[\r]") == ["\r"]
        assert parse_bracket_groups("[\n]") == []


# =============================================================================
# MALFORMED
# =============================================================================


class TestMalformedDeclaration:
    """Некорректные декларации → MalformedDeclaration."""

    def test_missing_newline(self):
        with pytest.raises(MalformedDeclaration, match="missing newline") as exc_info:
            resolve("//;1;2")
        assert exc_info.value.declaration == ";1;2"

    def test_marker_only(self):
        with pytest.raises(MalformedDeclaration, match="missing newline"):
            resolve("//")

    def test_empty_declaration(self):
        with pytest.raises(MalformedDeclaration, match="empty delimiter"):
            resolve("//\n1,2")

    def test_empty_brackets(self):
        with pytest.raises(MalformedDeclaration, match="no non-empty bracketed delimiter"):
            resolve("//[]\n1")

    def test_unclosed_bracket(self):
        with pytest.raises(MalformedDeclaration):
            resolve("//[*\n1*2")
