"""
hanseg: HMM word-boundary recognition and a thread-safe frequency lexicon
for unsegmented Chinese text.
"""

from hanseg.schema import Token, LexiconStats
from hanseg.lexicon import Lexicon, load_dictionary, iter_dictionary, DictionaryFormatError
from hanseg.hmm import State, viterbi, extract_words, cut, load_emission_model
from hanseg.resources import SegmenterResources, build_resources

__version__ = "0.1.0"

__all__ = [
    "Token",
    "LexiconStats",
    "Lexicon",
    "load_dictionary",
    "iter_dictionary",
    "DictionaryFormatError",
    "State",
    "viterbi",
    "extract_words",
    "cut",
    "load_emission_model",
    "SegmenterResources",
    "build_resources"
]
