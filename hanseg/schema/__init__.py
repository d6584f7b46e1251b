# hanseg/schema/__init__.py
from .token import Token
from .lexicon_stats import LexiconStats
