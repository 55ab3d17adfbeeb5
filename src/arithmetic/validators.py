"""Operand validation and domain checks."""

import math

from arithmetic.exceptions import DivisionByZeroError, InvalidArgumentError, OperandTypeError


def _require_real(value: float) -> None:
    if not isinstance(value, (int, float)):
        raise OperandTypeError(value)


def validate_number(value: float) -> float:
    """
    Validate that a value is a real number and return it as a float.

    NaN and infinities are accepted; IEEE 754 semantics are left to the
    operations themselves.

    Args:
        value: The value to validate

    Returns:
        The value converted to float

    Raises:
        OperandTypeError: If value is not an int or float
        InvalidArgumentError: If value is an int outside the float range
    """
    _require_real(value)

    try:
        return float(value)
    except OverflowError as e:
        raise InvalidArgumentError(value, "Integer too large to convert to float") from e


def validate_divisor(numerator: float, divisor: float) -> float:
    """
    Validate that a divisor is non-zero.

    The zero check runs before the numerator is converted, so any real
    numerator, however large, divided by zero is a division by zero.

    Args:
        numerator: The dividend, reported in the error
        divisor: The value to validate

    Returns:
        The divisor as a float

    Raises:
        OperandTypeError: If either operand is not a number
        InvalidArgumentError: If divisor is an int outside the float range
        DivisionByZeroError: If divisor is +0.0 or -0.0
    """
    _require_real(numerator)
    divisor = validate_number(divisor)

    if divisor == 0:
        raise DivisionByZeroError(numerator)

    return divisor


def validate_sqrt_domain(value: float) -> float:
    """
    Validate that a value has a real square root.

    Args:
        value: The radicand

    Returns:
        The radicand as a float

    Raises:
        OperandTypeError: If value is not a number
        InvalidArgumentError: If value is NaN, negative (including -inf) or
            an int outside the float range
    """
    value = validate_number(value)

    if math.isnan(value):
        raise InvalidArgumentError(value, "NaN has no square root")
    if value < 0:
        raise InvalidArgumentError(value, "Negative value has no real square root")

    return value
