from dragon.helper import error_message


class DragonError(Exception):
    def __init__(self, expression: str, location: int, message: str) -> None:
        super().__init__(message)
        self.expression = expression
        self.location = location
        self.message = message

    def __str__(self) -> str:
        return error_message(self.expression, self.location, self.message)


class LexError(DragonError):
    pass


class ParseError(DragonError):
    pass


class UnexpectedEndOfInput(ParseError):
    pass
