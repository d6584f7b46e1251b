"""
Validation functions for HMM emission tables and segmentation output.
"""

import math
from typing import Dict, Iterable, Union

from .prob import EmissionTable
from .states import State


def validate_emission_model(emit_p: EmissionTable) -> Dict[str, Union[int, float]]:
    """
    Check that an emission table is usable by the decoder.

    Every state must have a row, and every entry must be a finite
    log-probability (<= 0).

    Returns:
        Dictionary with emission table statistics

    Raises:
        ValueError: If the table is incomplete or holds invalid values
    """
    missing = [s.value for s in State if s not in emit_p]
    if missing:
        raise ValueError(f"Emission table missing states: {missing}")

    characters = set()
    entries = 0
    for state in State:
        for char, logp in emit_p[state].items():
            if not isinstance(logp, (int, float)):
                raise ValueError(f"Invalid log-probability type for {state.value}/{char!r}: {type(logp)}")
            if not math.isfinite(logp):
                raise ValueError(f"Invalid log-probability {logp} for {state.value}/{char!r} - must be finite")
            if logp > 0:
                raise ValueError(f"Invalid log-probability {logp} for {state.value}/{char!r} - must be <= 0")
            characters.add(char)
            entries += 1

    return {
        "states": len(State),
        "characters": len(characters),
        "entries": entries
    }


def validate_segmentation(sentence: str, words: Iterable[str]) -> None:
    """
    Check that words partition the sentence exactly.

    Raises:
        ValueError: If a word is empty or the words do not rebuild the sentence
    """
    words = list(words)
    for i, word in enumerate(words):
        if not word:
            raise ValueError(f"Empty word at position {i}")
    reconstructed = "".join(words)
    if reconstructed != sentence:
        raise ValueError(f"Segmentation failed to reconstruct input: '{sentence}' != '{reconstructed}'")
