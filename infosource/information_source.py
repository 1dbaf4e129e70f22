"""
information_source.py

The InformationSource: a finite alphabet whose symbols each carry a
probability, a label (source symbol) and a codeword, with lookups from labels
and codewords back to symbol indices.

Each setter validates the whole candidate table before touching any state, so
a rejected call leaves the source exactly as it was.
"""


import numbers
from collections import Counter, abc
from typing import Any, Dict, Iterator, List, Optional, Sequence

import numpy as np

from .codewords import Codeword, canonical_code, normalize_code, render_code
from .errors import (
    ValidationError,
    ProbabilitySumError,
    ProbabilityRangeError,
    DuplicateCodeError,
    DuplicateLabelError,
)
from .logger import (
    Logger,
    Log,
    SourceCreationLog,
    ProbabilityAssignmentLog,
    CodeAssignmentLog,
    SourceAssignmentLog,
    ValidationFailureLog,
)
from .models import SymbolEntry
from .settings import PROBABILITY_TOLERANCE
from .validators import validate_type, validate_non_negative_int, validate_length


def random_probabilities(length: int, rng: np.random.Generator) -> List[float]:
    """
    Randomly partition the unit interval into length non-negative parts.

    Each part is drawn uniformly from [0, remaining mass); the last part takes
    whatever mass is left so the parts sum to 1.0.

    Args:
        length (int): Number of parts.
        rng (np.random.Generator): Source of the uniform draws.

    Returns:
        List[float]: The probabilities.
    """
    probs = []
    remaining = 1.0
    for i in range(length):
        if i == length - 1:
            value = remaining
        else:
            value = float(rng.uniform(0.0, remaining))
        probs.append(value)
        remaining -= value
    return probs


class InformationSource:
    """
    A discrete information source over a fixed-size alphabet.

    Instances are not synchronised; a single owner should call the setters.
    Accessors return copies of the internal tables.
    """

    def __init__(self, length: int,
                 rng: Optional[np.random.Generator] = None,
                 logger: Optional[Logger] = None) -> None:
        """
        Create a source with random probabilities and canonical codes and labels.

        Args:
            length (int): Alphabet size.
            rng (Optional[np.random.Generator]): Random generator for the probability draws.
            logger (Optional[Logger]): Logger for assignment and failure records.

        Raises:
            ValueError: If length is not a non-negative int.
            EncodingRangeError: If length exceeds 10, as canonical codewords of
                indices 10 and up contain bytes without a digit rendering.
        """
        validate_non_negative_int(length, "length")
        if rng is None:
            rng = np.random.default_rng()
        validate_type(rng, "rng", np.random.Generator)
        if logger is not None:
            validate_type(logger, "logger", Logger)

        self._length: int = length
        self.logger: Optional[Logger] = logger

        code_array = [canonical_code(i) for i in range(length)]
        renderings = [render_code(code) for code in code_array]

        self._prob_array: List[float] = random_probabilities(length, rng)
        self._code_array: List[bytes] = code_array
        self._source_array: List[str] = renderings
        self._encoder: Dict[str, int] = {label: i for i, label in enumerate(renderings)}
        self._decoder: Dict[str, int] = {rendering: i for i, rendering in enumerate(renderings)}

        self._log(SourceCreationLog(length))

    @property
    def length(self) -> int:
        return self._length

    @property
    def prob_array(self) -> List[float]:
        return list(self._prob_array)

    @property
    def code_array(self) -> List[bytes]:
        return list(self._code_array)

    @property
    def source_array(self) -> List[str]:
        return list(self._source_array)

    @property
    def encoder(self) -> Dict[str, int]:
        return dict(self._encoder)

    @property
    def decoder(self) -> Dict[str, int]:
        return dict(self._decoder)

    def set_probs(self, prob_array: Sequence[float]) -> None:
        """
        Replace the probability table.

        Args:
            prob_array (Sequence[float]): One probability per symbol.

        Raises:
            LengthMismatchError: If the table size differs from length.
            ProbabilityRangeError: If a probability lies outside [0, 1].
            ProbabilitySumError: If the sum is not within the tolerance of 1.0.
        """
        try:
            probs = self._validate_probs(prob_array)
        except ValidationError as e:
            self._log(ValidationFailureLog("set_probs", e))
            raise
        self._prob_array = probs
        self._log(ProbabilityAssignmentLog(sum(probs)))

    def set_codes(self, code_array: Sequence[Codeword]) -> None:
        """
        Replace the codeword table and rebuild the decoder.

        Args:
            code_array (Sequence[Codeword]): One codeword per symbol.

        Raises:
            LengthMismatchError: If the table size differs from length.
            EncodingRangeError: If a codeword holds a byte greater than 9.
            DuplicateCodeError: If two codewords render identically.
        """
        try:
            codes, renderings = self._validate_codes(code_array)
        except ValidationError as e:
            self._log(ValidationFailureLog("set_codes", e))
            raise
        self._code_array = codes
        self._decoder = {rendering: i for i, rendering in enumerate(renderings)}
        self._log(CodeAssignmentLog(renderings))

    def set_source(self, src_array: Sequence[str]) -> None:
        """
        Replace the source symbol (label) table and rebuild the encoder.

        Args:
            src_array (Sequence[str]): One label per symbol.

        Raises:
            LengthMismatchError: If the table size differs from length.
            DuplicateLabelError: If a label appears more than once.
        """
        try:
            labels = self._validate_source(src_array)
        except ValidationError as e:
            self._log(ValidationFailureLog("set_source", e))
            raise
        self._source_array = labels
        self._encoder = {label: i for i, label in enumerate(labels)}
        self._log(SourceAssignmentLog(labels))

    def _validate_probs(self, prob_array: Any) -> List[float]:
        if prob_array is None:
            raise ValueError("prob_array must not be None")
        if isinstance(prob_array, str) or not isinstance(prob_array, (abc.Sequence, np.ndarray)):
            raise ValueError("prob_array must be a sequence of floats")
        if isinstance(prob_array, np.ndarray) and prob_array.ndim != 1:
            raise ValueError("prob_array must be one-dimensional")
        for value in prob_array:
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
                raise ValueError(f"Probabilities must be real numbers, got {type(value).__name__}")
        try:
            probs = np.asarray(prob_array, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError("Invalid probability values provided: " + str(e))
        if probs.ndim != 1:
            raise ValueError("prob_array must be one-dimensional")
        validate_length(probs, "prob_array", self._length)

        for i, value in enumerate(probs):
            if not 0.0 <= value <= 1.0:
                raise ProbabilityRangeError(i, float(value))

        total = float(np.sum(probs))
        if not (1.0 - PROBABILITY_TOLERANCE <= total <= 1.0 + PROBABILITY_TOLERANCE):
            raise ProbabilitySumError(total, PROBABILITY_TOLERANCE)
        return [float(p) for p in probs]

    def _validate_codes(self, code_array: Any):
        if code_array is None:
            raise ValueError("code_array must not be None")
        validate_length(code_array, "code_array", self._length)

        codes = [normalize_code(code) for code in code_array]
        renderings = [render_code(code) for code in codes]
        duplicates = [r for r, count in Counter(renderings).items() if count > 1]
        if duplicates:
            raise DuplicateCodeError(duplicates)
        return codes, renderings

    def _validate_source(self, src_array: Any) -> List[str]:
        if src_array is None or isinstance(src_array, str):
            raise ValueError("src_array must be a sequence of str")
        validate_length(src_array, "src_array", self._length)

        labels = list(src_array)
        for label in labels:
            validate_type(label, "source symbol", str)
        duplicates = [label for label, count in Counter(labels).items() if count > 1]
        if duplicates:
            raise DuplicateLabelError(duplicates)
        return labels

    def encode_label(self, label: str) -> int:
        """Return the index of the symbol with the given label (KeyError if unknown)."""
        return self._encoder[label]

    def decode_code(self, code: Any) -> int:
        """
        Return the index of the symbol with the given codeword.

        Args:
            code: The codeword as bytes or ints, or its digit rendering as str.

        Raises:
            KeyError: If no symbol has this codeword.
        """
        key = code if isinstance(code, str) else render_code(code)
        return self._decoder[key]

    def get_entry(self, index: int) -> SymbolEntry:
        return SymbolEntry(index,
                           self._source_array[index],
                           self._code_array[index],
                           self._prob_array[index])

    def entries(self) -> List[SymbolEntry]:
        return [self.get_entry(i) for i in range(self._length)]

    def entropy(self) -> float:
        """
        Shannon entropy of the source in bits.

        Zero-probability symbols contribute nothing.
        """
        probs = np.array(self._prob_array, dtype=np.float64)
        probs = probs[probs > 0]
        return float(-np.sum(probs * np.log2(probs)))

    def average_code_length(self) -> float:
        """Expected codeword length in bytes under the current probabilities."""
        probs = np.array(self._prob_array, dtype=np.float64)
        lengths = np.array([len(code) for code in self._code_array], dtype=np.float64)
        return float(np.dot(probs, lengths))

    def _log(self, log: Log) -> None:
        if self.logger is not None:
            self.logger.log(log)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self.entries())

    def __str__(self) -> str:
        lines = [f"InformationSource(length={self._length})"]
        for entry in self.entries():
            lines.append(f"  {entry.index}: source={entry.label!r} "
                         f"code={list(entry.code)} prob={entry.probability}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"InformationSource(length={self._length}, "
                f"source_array={self._source_array}, "
                f"code_array={[list(code) for code in self._code_array]}, "
                f"prob_array={self._prob_array})")
