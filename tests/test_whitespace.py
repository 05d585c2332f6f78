"""Test whitespace, comments, and line tracking."""

from loxscan.tokens import TokenType

from .conftest import assert_lexemes, assert_types


class TestWhitespace:
    def test_empty_source(self, scan_source):
        result = scan_source("")
        assert_types(result.tokens, [TokenType.EOF])
        assert result.tokens[0].lexeme == ""
        assert result.tokens[0].line == 1

    def test_blanks_produce_no_tokens(self, lex):
        assert lex(" \t\r ") == []

    def test_separates_tokens(self, lex):
        tokens = lex("a\tb\r\nc")
        assert_lexemes(tokens, ["a", "b", "c"])


class TestLines:
    def test_newline_increments_line(self, lex):
        tokens = lex("a\nb\n\nc")
        assert [t.line for t in tokens] == [1, 2, 4]

    def test_eof_carries_final_line(self, scan_source):
        result = scan_source("a\n\n")
        assert result.tokens[-1].type == TokenType.EOF
        assert result.tokens[-1].line == 3

    def test_crlf_counts_once(self, scan_source):
        result = scan_source("a\r\nb\r\n")
        assert [t.line for t in result.tokens] == [1, 2, 3]


class TestComments:
    def test_comment_then_number(self, scan_source):
        result = scan_source("// hello\n1")
        assert_types(result.tokens, [TokenType.NUMBER, TokenType.EOF])
        assert result.tokens[0].lexeme == "1"
        assert result.tokens[0].line == 2

    def test_comment_at_end_of_input(self, lex):
        assert lex("// only a comment") == []

    def test_trailing_comment(self, lex):
        tokens = lex("x = 1; // set x")
        assert_lexemes(tokens, ["x", "=", "1", ";"])

    def test_comment_swallows_operators(self, lex):
        assert lex("// ( ) != @ #") == []

    def test_slash_is_not_comment(self, lex):
        tokens = lex("a / b")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.SLASH, TokenType.IDENTIFIER])

    def test_triple_slash(self, lex):
        assert lex("/// doc") == []

    def test_comment_does_not_change_line_before_newline(self, lex):
        tokens = lex("a // c\nb")
        assert [t.line for t in tokens] == [1, 2]
