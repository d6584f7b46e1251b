"""
Lexicon Statistics Schema

Snapshot of the aggregate numbers a frequency lexicon exposes, with
formatting helpers for display.
"""

from typing import Dict, Any
from dataclasses import dataclass
import math


@dataclass
class LexiconStats:
    """
    Schema for lexicon statistics.

    Attributes:
        entries: Number of keys in the lexicon
        words: Number of keys with a positive frequency
        prefixes: Number of keys with zero frequency. This includes both
            auto-inserted prefixes and real words loaded without a frequency,
            since the lexicon stores no flag telling them apart.
        total: Sum of all inserted frequencies
        log_total: Natural logarithm of total (-inf when total is 0)
    """
    entries: int
    words: int
    prefixes: int
    total: float
    log_total: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LexiconStats':
        """Create LexiconStats from dictionary."""
        return cls(
            entries=data['entries'],
            words=data['words'],
            prefixes=data.get('prefixes', data['entries'] - data['words']),
            total=data['total'],
            log_total=data.get('log_total', math.log(data['total']) if data['total'] > 0 else float('-inf'))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'entries': self.entries,
            'words': self.words,
            'prefixes': self.prefixes,
            'total': self.total,
            'log_total': self.log_total
        }

    def format_log_total(self) -> str:
        if not math.isfinite(self.log_total):
            return "-∞"
        return f"{self.log_total:.6f}"

    def is_empty(self) -> bool:
        return self.entries == 0

    def summary(self) -> str:
        """Generate a human-readable summary of lexicon statistics."""
        lines = []
        lines.append("LEXICON SUMMARY")
        lines.append("=" * 40)
        lines.append(f"Entries: {self.entries:,}")
        lines.append(f"  Positive frequency: {self.words:,}")
        lines.append(f"  Zero frequency (prefixes and unweighted words): {self.prefixes:,}")
        lines.append(f"Total frequency: {self.total:,.2f}")
        lines.append(f"Log total: {self.format_log_total()}")
        return "\n".join(lines)
