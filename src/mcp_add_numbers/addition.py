"""The addition operation and its result record."""

from __future__ import annotations as _annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mcp_add_numbers.exceptions import ArithmeticOverflowError, InvalidInputError
from mcp_add_numbers.utilities.logging import get_logger

logger = get_logger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class AdditionResult(BaseModel):
    """Inputs and outcome of a single addition."""

    model_config = ConfigDict(frozen=True)

    number1: int = Field(description="The first number that was added")
    number2: int = Field(description="The second number that was added")
    result: int = Field(description="The sum of number1 and number2")
    operation: str = Field(description="The addition written out, e.g. '2 + 3 = 5'")

    @model_validator(mode="after")
    def _check_consistency(self) -> AdditionResult:
        if self.result != self.number1 + self.number2:
            raise ValueError(f"result {self.result} is not {self.number1} + {self.number2}")
        if self.operation != format_operation(self.number1, self.number2, self.result):
            raise ValueError(f"operation {self.operation!r} does not describe the addition")
        return self


def format_operation(number1: int, number2: int, result: int) -> str:
    return f"{number1} + {number2} = {result}"


def _check_operand(name: str, value: object) -> int:
    # bool is an int subclass, but True + 1 is not a meaningful request
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {type(value).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidInputError(f"{name} is outside the 64-bit integer range: {value}")
    return value


def add(
    number1: Annotated[int, Field(description="The first number to add", strict=True, ge=INT64_MIN, le=INT64_MAX)],
    number2: Annotated[int, Field(description="The second number to add", strict=True, ge=INT64_MIN, le=INT64_MAX)],
) -> AdditionResult:
    """Add two numbers together and return the result.

    Raises:
        InvalidInputError: an operand is not an integer or lies outside the
            signed 64-bit range.
        ArithmeticOverflowError: the sum lies outside the signed 64-bit range.
    """
    number1 = _check_operand("number1", number1)
    number2 = _check_operand("number2", number2)

    result = number1 + number2
    if not INT64_MIN <= result <= INT64_MAX:
        logger.warning(f"Rejecting overflowing addition: {number1} + {number2}")
        raise ArithmeticOverflowError(number1, number2)

    logger.debug(f"Computed {number1} + {number2} = {result}")
    return AdditionResult(
        number1=number1,
        number2=number2,
        result=result,
        operation=format_operation(number1, number2, result),
    )
