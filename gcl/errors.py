from typing import Optional


class GclError(Exception):
    """Base exception for every fatal error raised while running a program."""
    name = 'Error'

    def __init__(self, message: str):
        super().__init__(f"{self.name}: {message}")
        self.message = message


class LexError(GclError):
    """No token pattern matches at the current position of the source."""
    name = 'LexError'

    def __init__(self, text: str, line: int, column: int):
        super().__init__(f"no valid token starting with {text!r} at {line}:{column}")
        self.text = text
        self.line = line
        self.column = column


class ParseError(GclError):
    """An expected token was not found.

    Raised with the expected token kind, the token actually found and its
    index in the token sequence.
    """
    name = 'ParseError'

    def __init__(self, message: str, expected: Optional[str] = None,
                 found: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.found = found
        self.index = index


class UndefinedVariableError(GclError):
    name = 'UndefinedVariableError'

    def __init__(self, variable: str):
        super().__init__(f"variable {variable} is used before definition")
        self.variable = variable


class InvalidIntegerInputError(GclError):
    name = 'InvalidIntegerInputError'

    def __init__(self, value: str):
        super().__init__(f"input value {value!r} is not a valid integer")
        self.value = value


class GclArithmeticError(GclError):
    name = 'ArithmeticError'
