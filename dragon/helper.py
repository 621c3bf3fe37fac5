def error_message(expression: str, location: int, message: str) -> str:
    line_start = expression.rfind("\n", 0, location) + 1
    line_end = expression.find("\n", location)
    if line_end == -1:
        line_end = len(expression)
    line = expression[line_start:line_end]
    column = location - line_start
    messages = [f"{line}\n", f"{' ' * column}^ {message}\n"]
    return "".join(messages)
