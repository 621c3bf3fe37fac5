import sys
from typing import Optional, TextIO

import click

from dragon.errors import DragonError
from dragon.lexer import tokenize
from dragon.parse import evaluate


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option(
    "-e", "--expression", help="Evaluate EXPRESSION instead of reading FILENAME."
)
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--tokens", is_flag=True, help="Print the token stream and exit.")
def main(filename: TextIO, expression: Optional[str], output: TextIO, tokens: bool):
    if expression is None:
        expression = filename.read()
    try:
        if tokens:
            for token in tokenize(expression):
                output.write(
                    f"{token.kind.name} {token.location} {token.expression!r}\n"
                )
            return
        result = evaluate(expression)
    except DragonError as e:
        click.echo(str(e), err=True, nl=False)
        sys.exit(1)
    output.write(f"{result}\n")


if __name__ == "__main__":
    main()
