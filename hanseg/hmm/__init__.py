"""
Boundary HMM Package

Four-state (B/M/E/S) Hidden Markov Model used to recognise words in runs of
characters a dictionary cannot cover.

Key modules:
- states: The State enumeration
- prob: Fixed start/transition tables and the MIN_FLOAT floor
- model_loader: Emission table readers
- core: Viterbi decoding, word extraction and HMM-only cutting
- validation: Emission table and segmentation checks
"""

from .states import State, TERMINAL_STATES

from .prob import (
    MIN_FLOAT,
    PROB_START,
    PROB_TRANS,
    PREV_STATES,
    EmissionTable
)

from .model_loader import (
    EmissionFormatError,
    load_emission_model,
    emission_from_mapping
)

from .core import (
    viterbi,
    extract_words,
    cut
)

from .validation import (
    validate_emission_model,
    validate_segmentation
)

__all__ = [
    # States and tables
    "State",
    "TERMINAL_STATES",
    "MIN_FLOAT",
    "PROB_START",
    "PROB_TRANS",
    "PREV_STATES",
    "EmissionTable",

    # Model loading
    "EmissionFormatError",
    "load_emission_model",
    "emission_from_mapping",

    # Decoding
    "viterbi",
    "extract_words",
    "cut",

    # Validation
    "validate_emission_model",
    "validate_segmentation"
]
