"""Exceptions raised by the addition tool."""


class AdderError(Exception):
    """Base error for mcp-add-numbers."""


class InvalidInputError(AdderError):
    """An operand does not satisfy the operation's input contract."""


class ArithmeticOverflowError(AdderError):
    """The sum of two operands does not fit the supported integer width."""

    def __init__(self, number1: int, number2: int, message: str | None = None):
        super().__init__(message or f"Integer overflow: {number1} + {number2} does not fit in 64 bits")
        self.number1 = number1
        self.number2 = number2
