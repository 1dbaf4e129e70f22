"""
infosource: A Python library for modelling discrete information sources.
"""

from .information_source import (
    InformationSource,
    random_probabilities,
)

from .codewords import (
    Codeword,
    canonical_code,
    normalize_code,
    render_code,
)

from .models import SymbolEntry

from .errors import (
    ValidationError,
    ProbabilitySumError,
    ProbabilityRangeError,
    DuplicateCodeError,
    DuplicateLabelError,
    EncodingRangeError,
    LengthMismatchError,
)

from .settings import SEED, PROBABILITY_TOLERANCE

from .logger import (
    Logger,
    Log,
    LogLevel,
    SourceCreationLog,
    ProbabilityAssignmentLog,
    CodeAssignmentLog,
    SourceAssignmentLog,
    ValidationFailureLog,
)

# Validators
from .validators import *

__all__ = [

    "InformationSource",
    "random_probabilities",

    "Codeword",
    "canonical_code",
    "normalize_code",
    "render_code",

    "SymbolEntry",

    "ValidationError",
    "ProbabilitySumError",
    "ProbabilityRangeError",
    "DuplicateCodeError",
    "DuplicateLabelError",
    "EncodingRangeError",
    "LengthMismatchError",

    "SEED",
    "PROBABILITY_TOLERANCE",

    "Logger",
    "Log",
    "LogLevel",
    "SourceCreationLog",
    "ProbabilityAssignmentLog",
    "CodeAssignmentLog",
    "SourceAssignmentLog",
    "ValidationFailureLog",
]
