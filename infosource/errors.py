"""
errors.py

Validation errors raised when a table of an InformationSource is rejected.

Every error subclasses ValueError so callers may handle them the same way as
any other bad argument, or catch the specific class to recover.
"""


from typing import Iterable, List


class ValidationError(ValueError):
    """Base class for rejected mutations of an information source."""
    pass


class ProbabilitySumError(ValidationError):
    def __init__(self, total: float, tolerance: float) -> None:
        self.total = total
        self.tolerance = tolerance
        super().__init__(
            f"sum of probabilities must be 1.0 (+/- {tolerance}); sum: {total}")


class ProbabilityRangeError(ValidationError):
    def __init__(self, index: int, value: float) -> None:
        self.index = index
        self.value = value
        super().__init__(f"probability at index {index} must lie in [0, 1]; got {value}")


class DuplicateCodeError(ValidationError):
    def __init__(self, duplicates: Iterable[str]) -> None:
        self.duplicates: List[str] = sorted(duplicates)
        super().__init__(f"codewords must be unique; duplicated: {self.duplicates}")


class DuplicateLabelError(ValidationError):
    def __init__(self, duplicates: Iterable[str]) -> None:
        self.duplicates: List[str] = sorted(duplicates)
        super().__init__(f"source symbols must be unique; duplicated: {self.duplicates}")


class EncodingRangeError(ValidationError):
    """
    Raised for a codeword byte that has no single decimal digit rendering.
    """
    def __init__(self, value: int, position: int) -> None:
        self.value = value
        self.position = position
        super().__init__(
            f"codeword byte {value} at position {position} has no digit rendering (expected 0-9)")


class LengthMismatchError(ValidationError):
    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} must have {expected} entries; got {actual}")
