from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Number = 1
    Plus = 2
    Star = 3
    LParen = 4
    RParen = 5
    Semicolon = 6
    EOF = 7
    Invalid = 8


PUNCTUATORS = {
    "+": TokenType.Plus,
    "*": TokenType.Star,
    "(": TokenType.LParen,
    ")": TokenType.RParen,
    ";": TokenType.Semicolon,
}


@dataclass
class Token:
    kind: Optional[TokenType] = None
    value: Optional[int] = None
    location: Optional[int] = None
    length: Optional[int] = None
    expression: Optional[str] = None
    original_expression: Optional[str] = None


def new_token(
    token_type: TokenType, expression: str, start: int = 0, end: int = 0
) -> Token:
    return Token(
        token_type, None, start, end - start, expression[start:end], expression
    )


def describe(token: Token) -> str:
    if token.kind == TokenType.EOF:
        return "end of input"
    return f"'{token.expression}'"
