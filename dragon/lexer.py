import string
from typing import Iterator, Optional

from dragon.errors import LexError
from dragon.token import PUNCTUATORS, Token, TokenType, new_token

INT_MAX = 9223372036854775807

WHITESPACE = " \t\n\r"


class Lexer:
    expression: str
    index: int

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.index = 0
        self._eof: Optional[Token] = None

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenType.EOF:
                return

    def next_token(self) -> Token:
        if self._eof is not None:
            return self._eof
        expression = self.expression
        while self.index < len(expression) and expression[self.index] in WHITESPACE:
            self.index += 1
        if self.index >= len(expression):
            self._eof = new_token(TokenType.EOF, expression, self.index, self.index)
            return self._eof
        if expression[self.index] in string.digits:
            return self.read_number()
        start = self.index
        self.index += 1
        token_type = PUNCTUATORS.get(expression[start], TokenType.Invalid)
        return new_token(token_type, expression, start, self.index)

    def read_number(self) -> Token:
        start = self.index
        while (
            self.index < len(self.expression)
            and self.expression[self.index] in string.digits
        ):
            self.index += 1
        token = new_token(TokenType.Number, self.expression, start, self.index)
        token.value = int(token.expression)
        if token.value > INT_MAX:
            raise LexError(self.expression, start, "number literal out of range")
        return token


def tokenize(expression: str) -> list[Token]:
    return list(Lexer(expression))
