"""
Viterbi decoding and word extraction for the boundary HMM.

Runs of characters a dictionary-based segmenter cannot cover are tagged
with B/M/E/S states by ``viterbi``; ``extract_words`` turns the tags back
into words and ``cut`` wraps both for arbitrary sentences.
"""

import re
import logging
from typing import Collection, Iterator, List, Mapping, Sequence, Tuple

from .prob import MIN_FLOAT, PROB_START, PROB_TRANS, PREV_STATES, EmissionTable
from .states import State, TERMINAL_STATES

# Module-level logger
logger = logging.getLogger(__name__)

RE_HAN = re.compile("([\u4E00-\u9FD5]+)")
RE_SKIP = re.compile(r"([a-zA-Z0-9]+(?:\.\d+)?%?)")


def viterbi(
    obs: Sequence[str],
    emit_p: EmissionTable,
    start_p: Mapping[State, float] = PROB_START,
    trans_p: Mapping[State, Mapping[State, float]] = PROB_TRANS,
    prev_states: Mapping[State, Sequence[State]] = PREV_STATES
) -> Tuple[float, List[State]]:
    """
    Most probable state sequence for a character sequence.

    Scores are summed in log space. Characters missing from a state's
    emission row score MIN_FLOAT. Ties between predecessors, and between the
    two terminal states, go to the larger state letter.

    Args:
        obs: Characters to tag (non-empty)
        emit_p: Per-state emission log-probabilities
        start_p: Initial-state log-probabilities
        trans_p: Transition log-probabilities
        prev_states: Allowed predecessors of each state

    Returns:
        (best log-probability, state per character)

    Raises:
        ValueError: If obs is empty
    """
    if len(obs) == 0:
        raise ValueError("Cannot decode an empty sequence")

    states = list(State)
    V = [{y: start_p[y] + emit_p.get(y, {}).get(obs[0], MIN_FLOAT) for y in states}]
    back = [{}]

    for t in range(1, len(obs)):
        prev_col = V[t - 1]
        col, ptr = {}, {}
        for y in states:
            em_p = emit_p.get(y, {}).get(obs[t], MIN_FLOAT)
            prob, state = max(
                (prev_col[y0] + trans_p[y0].get(y, MIN_FLOAT) + em_p, y0.value)
                for y0 in prev_states[y]
            )
            col[y] = prob
            ptr[y] = State(state)
        V.append(col)
        back.append(ptr)

    prob, last = max((V[-1][y], y.value) for y in TERMINAL_STATES)
    path = [State(last)]
    for t in range(len(obs) - 1, 0, -1):
        path.append(back[t][path[-1]])
    path.reverse()

    logger.debug(f"Decoded {len(obs)} characters, score={prob:.4f}")
    return prob, path


def extract_words(obs: Sequence[str], states: Sequence[State]) -> List[str]:
    """
    Group characters into words according to their boundary tags.

    B opens a word, M continues it, E closes it and S is a word on its own.
    A run left open by a new B, an S or the end of input is emitted as it
    stands, so the words always cover the input exactly.

    Raises:
        ValueError: If obs and states differ in length
    """
    if len(obs) != len(states):
        raise ValueError(f"Length mismatch: {len(obs)} characters, {len(states)} states")

    words = []
    start = 0
    for i, pos in enumerate(states):
        if pos == State.B:
            if start < i:
                words.append("".join(obs[start:i]))
            start = i
        elif pos == State.E:
            words.append("".join(obs[start:i + 1]))
            start = i + 1
        elif pos == State.S:
            if start < i:
                words.append("".join(obs[start:i]))
            words.append(obs[i])
            start = i + 1
    if start < len(obs):
        words.append("".join(obs[start:]))
    return words


def _cut_han(block: str, emit_p: EmissionTable, force_split: Collection[str]) -> Iterator[str]:
    _, path = viterbi(block, emit_p)
    for word in extract_words(block, path):
        if word in force_split:
            yield from word
        else:
            yield word


def cut(sentence: str, emit_p: EmissionTable, force_split: Collection[str] = ()) -> Iterator[str]:
    """
    Segment a sentence with the HMM alone.

    Han runs are decoded; alphanumeric and decimal runs in the remaining
    text are kept whole; everything else is passed through in order.

    Args:
        sentence: Text to segment
        emit_p: Per-state emission log-probabilities
        force_split: Words that must always be split into single characters

    Yields:
        Words, whose concatenation equals the input
    """
    for blk in RE_HAN.split(sentence):
        if not blk:
            continue
        if RE_HAN.match(blk):
            yield from _cut_han(blk, emit_p, force_split)
        else:
            for x in RE_SKIP.split(blk):
                if x:
                    yield x
