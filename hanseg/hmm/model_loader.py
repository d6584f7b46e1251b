"""
Emission model reader.

Reads the line-oriented HMM model text used by jieba ports (``hmm_model.utf8``).
The file carries start and transition tables too, but those are fixed
constants here; only the per-state emission blocks are taken:

    #B
    耀:-10.460283,涉:-8.766406,...
    #E
    ...

A ``#B``/``#E``/``#M``/``#S`` header line opens the block for that state;
every following line containing ``char:logprob`` items belongs to it.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Union

from .prob import EmissionTable
from .states import State

# Module-level logger
logger = logging.getLogger(__name__)

ModelSource = Union[str, Path, Iterable[str]]

_STATE_HEADERS = {f"#{s.value}": s for s in State}


class EmissionFormatError(ValueError):
    """Raised when an emission model cannot be parsed."""


def _freeze(table: Mapping[State, Dict[str, float]]) -> EmissionTable:
    return MappingProxyType({s: MappingProxyType(dict(table.get(s, {}))) for s in State})


def _iter_lines(source: ModelSource) -> Iterator[str]:
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"HMM model not found: {path}")
        logger.info(f"Reading HMM emission model: {path}")
        with path.open("r", encoding="utf-8") as f:
            yield from f
    else:
        yield from source


def _parse_item(item: str, lineno: int) -> tuple:
    char, sep, value = item.rpartition(":")
    if not sep or not char:
        raise EmissionFormatError(f"line {lineno}: malformed emission item {item!r}")
    if len(char) != 1:
        char = char.strip()
        if len(char) != 1:
            raise EmissionFormatError(f"line {lineno}: expected a single character, got {char!r}")
    try:
        return char, float(value)
    except ValueError:
        raise EmissionFormatError(f"line {lineno}: invalid log-probability {value!r} for {char!r}")


def load_emission_model(source: ModelSource) -> EmissionTable:
    """
    Parse per-state emission log-probabilities.

    Args:
        source: Model file path or iterable of lines

    Returns:
        Read-only mapping State -> {character: log-probability}

    Raises:
        EmissionFormatError: On malformed items or when no emission block is found
    """
    table: Dict[State, Dict[str, float]] = {s: {} for s in State}
    current = None

    for lineno, raw in enumerate(_iter_lines(source), 1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            # Any other comment closes the current block.
            current = _STATE_HEADERS.get(line)
            continue
        if current is None or ":" not in line:
            continue
        for item in line.split(","):
            if not item:
                continue
            char, value = _parse_item(item, lineno)
            table[current][char] = value

    if not any(table.values()):
        raise EmissionFormatError("no emission blocks found in model")

    for state in State:
        logger.debug(f"Emission block {state.value}: {len(table[state]):,} characters")
    return _freeze(table)


def emission_from_mapping(mapping: Mapping) -> EmissionTable:
    """
    Build an emission table from a plain mapping keyed by state letter.

    >>> emit = emission_from_mapping({"S": {"我": -3.2}})
    >>> emit[State.S]["我"]
    -3.2
    """
    table: Dict[State, Dict[str, float]] = {}
    for key, row in mapping.items():
        try:
            state = key if isinstance(key, State) else State(key)
        except ValueError:
            raise EmissionFormatError(f"unknown state {key!r}")
        row_table = {}
        for char, value in row.items():
            try:
                row_table[char] = float(value)
            except (TypeError, ValueError):
                raise EmissionFormatError(f"invalid log-probability {value!r} for {state.value}/{char!r}")
        table[state] = row_table
    return _freeze(table)
