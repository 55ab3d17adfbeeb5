"""
Arithmetic on IEEE 754 doubles.

Four binary operations and a square root, exposed as pure functions:
- IEEE 754 results (NaN, signed infinities) flow through unchanged
- Division by zero and square roots outside the real domain raise
- Non-raising ``safe_*`` variants return a placeholder instead
"""

import logging

from arithmetic.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidArgumentError,
    OperandTypeError,
)
from arithmetic.operations import (
    add,
    divide,
    multiply,
    safe_divide,
    safe_sqrt,
    sqrt,
    subtract,
)
from arithmetic.validators import (
    validate_divisor,
    validate_number,
    validate_sqrt_domain,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalculatorError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "OperandTypeError",
    "add",
    "divide",
    "multiply",
    "safe_divide",
    "safe_sqrt",
    "sqrt",
    "subtract",
    "validate_divisor",
    "validate_number",
    "validate_sqrt_domain",
]

__version__ = "0.1.0"
