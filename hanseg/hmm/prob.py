"""
Fixed parameters of the four-state boundary HMM.

All values are natural-log probabilities. The start and transition tables
are pre-trained constants; per-character emission tables are supplied by the
caller (see ``model_loader``).
"""

from types import MappingProxyType
from typing import Mapping

from .states import State

# Log-probability floor for impossible events.
MIN_FLOAT = -3.14e100

EmissionTable = Mapping[State, Mapping[str, float]]

PROB_START: Mapping[State, float] = MappingProxyType({
    State.B: -0.26268660809250016,
    State.E: MIN_FLOAT,
    State.M: MIN_FLOAT,
    State.S: -1.4652633398537678,
})

PROB_TRANS: Mapping[State, Mapping[State, float]] = MappingProxyType({
    State.B: MappingProxyType({State.E: -0.510825623765990, State.M: -0.916290731874155}),
    State.E: MappingProxyType({State.B: -0.5897149736854513, State.S: -0.8085250474669937}),
    State.M: MappingProxyType({State.E: -0.33344856811948514, State.M: -1.2603623820268226}),
    State.S: MappingProxyType({State.B: -0.7211965654669841, State.S: -0.6658631448798212}),
})

# States allowed to precede each state.
PREV_STATES: Mapping[State, tuple] = MappingProxyType({
    State.B: (State.E, State.S),
    State.M: (State.M, State.B),
    State.S: (State.S, State.E),
    State.E: (State.B, State.M),
})
