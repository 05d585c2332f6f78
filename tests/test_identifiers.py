"""Test identifier and keyword scanning, and the classification helpers."""

import pytest

from loxscan.tokens import KEYWORDS, TokenType, is_alpha, is_alphanumeric, is_digit

from .conftest import assert_lexemes, assert_types


class TestClassification:
    def test_digits(self):
        for ch in "0123456789":
            assert is_digit(ch)
        assert not is_digit("a")

    def test_alpha(self):
        assert is_alpha("a")
        assert is_alpha("Z")
        assert is_alpha("_")
        assert not is_alpha("1")

    def test_alphanumeric(self):
        assert is_alphanumeric("a")
        assert is_alphanumeric("7")
        assert is_alphanumeric("_")
        assert not is_alphanumeric("-")

    def test_end_of_input_sentinel(self):
        assert not is_digit("")
        assert not is_alpha("")
        assert not is_alphanumeric("")

    def test_ascii_only(self):
        assert not is_alpha("é")
        assert not is_digit("٣")


class TestKeywords:
    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_keyword(self, lex, word):
        tokens = lex(word)
        assert_types(tokens, [KEYWORDS[word]])
        assert tokens[0].lexeme == word
        assert tokens[0].literal is None

    def test_keyword_set_is_closed(self):
        assert set(KEYWORDS) == {
            "and", "class", "else", "false", "for", "fun", "if", "nil",
            "or", "print", "return", "super", "this", "true", "var", "while",
        }

    def test_case_sensitive(self, lex):
        assert_types(lex("If"), [TokenType.IDENTIFIER])
        assert_types(lex("NIL"), [TokenType.IDENTIFIER])


class TestIdentifiers:
    def test_simple(self, lex):
        tokens = lex("hello")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert tokens[0].literal is None

    def test_keyword_prefix(self, lex):
        tokens = lex("forest")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["forest"])

    def test_keyword_suffix_digit(self, lex):
        assert_types(lex("or2"), [TokenType.IDENTIFIER])

    def test_underscores_and_digits(self, lex):
        tokens = lex("_tmp_1")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["_tmp_1"])

    def test_stops_at_punctuation(self, lex):
        tokens = lex("foo(bar)")
        assert_lexemes(tokens, ["foo", "(", "bar", ")"])

    def test_mixed_keywords_and_identifiers(self, lex):
        tokens = lex("fun add(a, b) { return a + b; }")
        assert tokens[0].type == TokenType.FUN
        assert tokens[1].type == TokenType.IDENTIFIER
        assert tokens[8].type == TokenType.RETURN
