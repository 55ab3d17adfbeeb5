"""Custom exceptions for the arithmetic package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all arithmetic errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        # Placeholder a failed operation stands in for; callers must not trust it.
        self.result = 0.0
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when the divisor is zero (either sign)."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidArgumentError(CalculatorError):
    """Raised when an operand lies outside an operation's domain."""

    def __init__(self, value: Any, reason: str = "invalid argument") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OperandTypeError(CalculatorError, TypeError):
    """Raised when an operand is not a real number."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Expected number, got {type(value).__name__}", value)
