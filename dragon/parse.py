from typing import NoReturn, Optional

from dragon.errors import LexError, ParseError, UnexpectedEndOfInput
from dragon.lexer import Lexer
from dragon.token import Token, TokenType, describe

MAX_DEPTH = 200


class AttributeParser:
    lexer: Lexer
    lookahead: Optional[Token]
    depth: int

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.lookahead = None
        self.depth = 0

    def parse(self) -> int:
        self.advance()
        if self.lookahead.kind == TokenType.Semicolon:
            self.error("expected an expression before ';'")
        value = self.parse_expr()
        self.expect(TokenType.Semicolon, "';'")
        if self.lookahead.kind != TokenType.EOF:
            self.error(f"unexpected token {describe(self.lookahead)} after ';'")
        return value

    def parse_expr(self) -> int:
        value = self.parse_term()
        while self.lookahead.kind == TokenType.Plus:
            self.consume()
            value += self.parse_term()
        return value

    def parse_term(self) -> int:
        value = self.parse_factor()
        while self.lookahead.kind == TokenType.Star:
            self.consume()
            value *= self.parse_factor()
        return value

    def parse_factor(self) -> int:
        if self.lookahead.kind == TokenType.LParen:
            if self.depth >= MAX_DEPTH:
                self.error("expression nested too deeply")
            self.depth += 1
            self.consume()
            value = self.parse_expr()
            self.expect(TokenType.RParen, "')'")
            self.depth -= 1
            return value
        return self.expect(TokenType.Number, "a number or '('").value

    def advance(self) -> None:
        token = self.lexer.next_token()
        if token.kind == TokenType.Invalid:
            raise LexError(
                token.original_expression,
                token.location,
                f"invalid token {describe(token)}",
            )
        self.lookahead = token

    def consume(self) -> Token:
        token = self.lookahead
        self.advance()
        return token

    def expect(self, kind: TokenType, what: str) -> Token:
        if self.lookahead.kind != kind:
            self.error(f"expected {what}")
        return self.consume()

    def error(self, message: str) -> NoReturn:
        token = self.lookahead
        if token.kind == TokenType.EOF:
            raise UnexpectedEndOfInput(
                token.original_expression,
                token.location,
                f"unexpected end of input, {message}",
            )
        if not message.startswith("unexpected"):
            message = f"unexpected token {describe(token)}, {message}"
        raise ParseError(token.original_expression, token.location, message)


def evaluate(expression: str) -> int:
    return AttributeParser(Lexer(expression)).parse()
