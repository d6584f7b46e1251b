"""
Thread-safe frequency lexicon.

The lexicon maps every known word to its raw frequency and keeps two
derived scalars alongside the mapping: ``total`` (the running sum of all
inserted frequencies) and ``log_total`` (its natural logarithm). Both are
read by DAG-style segmenters that score a word as
``log(freq) - log_total``.

Every prefix of an inserted word is stored too, with frequency 0, so that a
caller walking a sentence can stop extending a fragment as soon as it falls
out of the lexicon.
"""

import math
import logging
from typing import Dict, Iterable, Optional, Tuple

from hanseg.schema.token import Token
from hanseg.schema.lexicon_stats import LexiconStats
from .rwlock import ReadWriteLock

# Module-level logger
logger = logging.getLogger(__name__)

DEFAULT_LOAD_BATCH_SIZE = 20000


def _log_of(total: float) -> float:
    """Natural log of a frequency total; -inf for an empty lexicon."""
    if total <= 0:
        return float('-inf')
    return math.log(total)


class Lexicon:
    """
    Frequency lexicon guarded by a reader/writer lock.

    Readers (``frequency``, ``totals`` and friends) run concurrently. Writers
    (``add_token``, ``load_tokens``) hold the lock exclusively while they
    touch the mapping, and always leave ``log_total`` matching ``total``
    before releasing it.
    """

    def __init__(self) -> None:
        self._freq: Dict[str, float] = {}
        self._total = 0.0
        self._log_total = _log_of(0.0)
        self._lock = ReadWriteLock()

    def _insert(self, token: Token) -> None:
        # Caller holds the write lock.
        text = token.text
        self._freq[text] = token.frequency
        self._total += token.frequency
        for end in range(1, len(text)):
            frag = text[:end]
            if frag not in self._freq:
                self._freq[frag] = 0.0

    def add_token(self, token: Token) -> None:
        """Insert or overwrite one word and register its prefixes."""
        with self._lock.write_locked():
            try:
                self._insert(token)
            finally:
                self._log_total = _log_of(self._total)

    def load_tokens(self, tokens: Iterable[Token], batch_size: Optional[int] = None) -> int:
        """
        Insert tokens from a (possibly lazy) iterable.

        Tokens are pulled and applied in batches so the exclusive lock is
        never held across the whole stream; ``log_total`` is recomputed once
        per batch. If the iterable raises, everything already pulled from it
        is committed before the exception propagates.

        Args:
            tokens: Iterable of tokens, consumed once
            batch_size: Tokens per lock acquisition (default 20000)

        Returns:
            Number of tokens applied
        """
        if batch_size is None:
            batch_size = DEFAULT_LOAD_BATCH_SIZE
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        applied = 0
        batch = []
        try:
            for token in tokens:
                batch.append(token)
                if len(batch) >= batch_size:
                    pending, batch = batch, []
                    applied += self._apply_batch(pending)
        finally:
            if batch:
                applied += self._apply_batch(batch)

        total, log_total = self.totals()
        logger.info(f"Loaded {applied:,} tokens (total={total:,.0f}, log_total={log_total:.6f})")
        return applied

    def _apply_batch(self, batch) -> int:
        with self._lock.write_locked():
            try:
                for token in batch:
                    self._insert(token)
            finally:
                self._log_total = _log_of(self._total)
        logger.debug(f"Applied batch of {len(batch):,} tokens")
        return len(batch)

    def frequency(self, word: str) -> Tuple[float, bool]:
        """
        Look up a word.

        Returns:
            (frequency, found). Unknown words give (0.0, False); auto-inserted
            prefixes give (0.0, True).
        """
        with self._lock.read_locked():
            if word in self._freq:
                return self._freq[word], True
        return 0.0, False

    def totals(self) -> Tuple[float, float]:
        """Return (total, log_total) as one consistent pair."""
        with self._lock.read_locked():
            return self._total, self._log_total

    @property
    def total(self) -> float:
        with self._lock.read_locked():
            return self._total

    @property
    def log_total(self) -> float:
        with self._lock.read_locked():
            return self._log_total

    def stats(self) -> LexiconStats:
        """
        Snapshot of the lexicon size and totals.

        ``words`` counts keys with a positive frequency; a word added with
        frequency 0 is counted under ``prefixes`` with the auto-inserted ones.
        """
        with self._lock.read_locked():
            words = sum(1 for v in self._freq.values() if v > 0)
            return LexiconStats(
                entries=len(self._freq),
                words=words,
                prefixes=len(self._freq) - words,
                total=self._total,
                log_total=self._log_total
            )

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._freq)

    def __contains__(self, word: object) -> bool:
        with self._lock.read_locked():
            return word in self._freq

    def __repr__(self) -> str:
        total, _ = self.totals()
        return f"<Lexicon entries={len(self)} total={total:.0f}>"
