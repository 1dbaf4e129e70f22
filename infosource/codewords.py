"""
codewords.py

Canonical codewords and their digit-string rendering.

A codeword is a sequence of bytes. Its rendering maps every byte to one
decimal digit, so only bytes 0-9 can be rendered: b"\\x01\\x00" renders as "10".
"""


from collections import abc
from typing import Any, Sequence, Union

import numpy as np

from .errors import EncodingRangeError
from .settings import MAX_DIGIT
from .validators import validate_non_negative_int

Codeword = Union[bytes, bytearray, Sequence[int]]


def canonical_code(index: int) -> bytes:
    """
    Build the canonical codeword of a symbol index.

    Args:
        index (int): The symbol index.

    Returns:
        bytes: Minimal big-endian base-256 representation (b"\\x00" for 0).
    """
    validate_non_negative_int(index, "index")
    num_bytes = max(1, (index.bit_length() + 7) // 8)
    return index.to_bytes(num_bytes, 'big')


def normalize_code(code: Any) -> bytes:
    """
    Convert a codeword given as bytes, bytearray or a sequence of ints to bytes.

    Raises:
        ValueError: If code is not a byte sequence.
        EncodingRangeError: If an int is outside 0-255.
    """
    if isinstance(code, bytes):
        return code
    if isinstance(code, bytearray):
        return bytes(code)
    if isinstance(code, np.ndarray):
        if code.ndim != 1 or not np.issubdtype(code.dtype, np.integer):
            raise ValueError("Codeword arrays must be one-dimensional with an integer dtype")
        code = code.tolist()
    if isinstance(code, str) or not isinstance(code, abc.Sequence):
        raise ValueError(f"Codeword must be a byte sequence, got {type(code).__name__}")
    for position, value in enumerate(code):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Codeword entries must be ints, got {type(value).__name__}")
        if not 0 <= value <= 255:
            raise EncodingRangeError(value, position)
    return bytes(int(value) for value in code)


def render_code(code: Codeword) -> str:
    """
    Render a codeword as a string of decimal digits, one per byte.

    Args:
        code (Codeword): The codeword.

    Returns:
        str: The digit string.

    Raises:
        EncodingRangeError: If a byte is greater than 9.
    """
    data = normalize_code(code)
    digits = []
    for position, value in enumerate(data):
        if value > MAX_DIGIT:
            raise EncodingRangeError(value, position)
        digits.append(str(value))
    return "".join(digits)
