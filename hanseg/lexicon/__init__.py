"""
Frequency lexicon package.

Key modules:
- core: The thread-safe Lexicon
- rwlock: Shared-read / exclusive-write lock used by the lexicon
- loader: Dictionary record parsing and streaming loads
"""

from .core import Lexicon, DEFAULT_LOAD_BATCH_SIZE
from .rwlock import ReadWriteLock
from .loader import (
    DictionaryFormatError,
    parse_token_line,
    iter_dictionary,
    load_dictionary
)

__all__ = [
    "Lexicon",
    "DEFAULT_LOAD_BATCH_SIZE",
    "ReadWriteLock",
    "DictionaryFormatError",
    "parse_token_line",
    "iter_dictionary",
    "load_dictionary"
]
