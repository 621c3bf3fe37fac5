import pytest

from dragon.errors import LexError
from dragon.lexer import INT_MAX, Lexer, tokenize
from dragon.token import TokenType


def kinds(expression):
    return [token.kind for token in tokenize(expression)]


def test_entry_point_expression():
    assert kinds("1+2*(4+3);") == [
        TokenType.Number,
        TokenType.Plus,
        TokenType.Number,
        TokenType.Star,
        TokenType.LParen,
        TokenType.Number,
        TokenType.Plus,
        TokenType.Number,
        TokenType.RParen,
        TokenType.Semicolon,
        TokenType.EOF,
    ]


def test_number_is_scanned_greedily():
    tokens = tokenize("  1234 ;")
    assert tokens[0].kind == TokenType.Number
    assert tokens[0].value == 1234
    assert tokens[0].location == 2
    assert tokens[0].length == 4
    assert tokens[0].expression == "1234"


def test_whitespace_is_skipped():
    tokens = tokenize(" \t1\n+\r\n 2 ;\n")
    assert [token.expression for token in tokens] == ["1", "+", "2", ";", ""]
    assert [token.location for token in tokens] == [2, 4, 8, 10, 12]


def test_punctuators_carry_no_value():
    for token in tokenize("+*();"):
        assert token.value is None


def test_invalid_character():
    lexer = Lexer("1+a;")
    lexer.next_token()
    lexer.next_token()
    token = lexer.next_token()
    assert token.kind == TokenType.Invalid
    assert token.expression == "a"
    assert token.location == 2
    # the scanner moves past the bad character but does not skip ahead further
    assert lexer.next_token().kind == TokenType.Semicolon


def test_minus_is_not_part_of_a_number():
    assert kinds("-1;")[:2] == [TokenType.Invalid, TokenType.Number]


def test_eof_is_idempotent():
    lexer = Lexer("7")
    assert lexer.next_token().kind == TokenType.Number
    first = lexer.next_token()
    assert first.kind == TokenType.EOF
    for _ in range(3):
        token = lexer.next_token()
        assert token.kind == TokenType.EOF
        assert token.location == first.location


def test_empty_source():
    assert kinds("") == [TokenType.EOF]
    assert kinds("   \n") == [TokenType.EOF]


def test_iteration_stops_after_eof():
    lexer = Lexer("1;")
    assert len(list(lexer)) == 3
    assert lexer.next_token().kind == TokenType.EOF


def test_largest_literal():
    assert tokenize(f"{INT_MAX};")[0].value == INT_MAX


def test_literal_overflow():
    with pytest.raises(LexError) as e:
        tokenize(f"1+{INT_MAX + 1};")
    assert e.value.location == 2
    assert "number literal out of range" in str(e.value)
