"""Core arithmetic operations on IEEE 754 doubles."""

import logging
import math

from arithmetic.exceptions import DivisionByZeroError, InvalidArgumentError
from arithmetic.validators import validate_divisor, validate_number, validate_sqrt_domain

logger = logging.getLogger(__name__)


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Exact: add(a, b) == a + b under IEEE 754 rounding
        - Identity: add(a, 0) == a

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b; overflow yields an infinity and NaN propagates

    Raises:
        OperandTypeError: If an operand is not a number
        InvalidArgumentError: If an int operand is outside the float range
    """
    return validate_number(a) + validate_number(b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0 (for finite a)
    """
    return validate_number(a) - validate_number(b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0 (for finite a)
    """
    return validate_number(a) * validate_number(b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    A zero divisor is a failure regardless of its sign or of the dividend,
    rather than IEEE's signed-infinity or NaN result.

    Properties:
        - Inverse of multiply: multiply(divide(a, b), b) ~= a (for b != 0)
        - Identity: divide(a, 1) == a

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        OperandTypeError: If an operand is not a number
        InvalidArgumentError: If an int operand is outside the float range
        DivisionByZeroError: If b is zero
    """
    b = validate_divisor(a, b)
    a = validate_number(a)

    return a / b


def sqrt(a: float) -> float:
    """
    Non-negative real square root of a.

    ``sqrt(0) == 0`` and ``sqrt(inf) == inf``; every other infinite or
    negative input, and NaN, is outside the domain.

    Args:
        a: Radicand

    Returns:
        The square root of a

    Raises:
        OperandTypeError: If a is not a number
        InvalidArgumentError: If a is negative, -inf or NaN, or an int outside the float range
    """
    return math.sqrt(validate_sqrt_domain(a))


def safe_divide(a: float, b: float, default: float = 0.0) -> float:
    """
    Divide a by b, returning default if b is zero.

    This is a non-throwing variant of divide for callers that prefer the
    placeholder result over an exception.

    Args:
        a: Dividend
        b: Divisor
        default: Value to return if b is zero

    Returns:
        Quotient of a and b, or default if b is zero
    """
    default = validate_number(default)

    try:
        return divide(a, b)
    except DivisionByZeroError as e:
        logger.debug("safe_divide substituted %r: %s", default, e)
        return default


def safe_sqrt(a: float, default: float = 0.0) -> float:
    """Square root of a, or default when a has no real square root."""
    default = validate_number(default)

    try:
        return sqrt(a)
    except InvalidArgumentError as e:
        logger.debug("safe_sqrt substituted %r: %s", default, e)
        return default
