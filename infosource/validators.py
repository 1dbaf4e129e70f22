"""
validators.py

Shared codes for input validation in infosource.
"""


from collections import abc
from typing import Any, Sized

from .errors import LengthMismatchError

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_non_negative_int(variable: Any, name: str) -> None:
    """Validate that variable is an int (not a bool) and is not negative."""
    if isinstance(variable, bool) or not isinstance(variable, int):
        raise ValueError(f"{name} must be of type int")
    if variable < 0:
        raise ValueError(f"{name} must not be negative, got {variable}")


def validate_length(items: Sized, name: str, expected: int) -> None:
    """Validate that a table has exactly the expected number of entries."""
    if not isinstance(items, abc.Sized):
        raise ValueError(f"{name} must be a sequence, got {type(items).__name__}")
    if len(items) != expected:
        raise LengthMismatchError(name, expected, len(items))
