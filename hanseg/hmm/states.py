from enum import Enum


class State(str, Enum):
    """Word-boundary tags of the four-state segmentation model."""
    B = "B"  # word begin
    E = "E"  # word end
    M = "M"  # word middle
    S = "S"  # single-character word


# A sequence may only legally end on one of these.
TERMINAL_STATES = (State.E, State.S)
