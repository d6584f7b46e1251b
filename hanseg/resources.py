"""
Build segmenter resources from configuration.

Loads the main dictionary and any user dictionaries into one Lexicon, and
reads the HMM emission model, as named by a config dict shaped like
``config/hanseg.yaml``.
"""

from typing import Dict, Any, NamedTuple, Optional, FrozenSet

from hanseg.lexicon import Lexicon, load_dictionary
from hanseg.hmm import EmissionTable, load_emission_model
from hanseg.config_loader import load_segmenter_config
from hanseg.seg_logging import get_segmenter_logger


class SegmenterResources(NamedTuple):
    lexicon: Lexicon
    emission: Optional[EmissionTable]
    force_split: FrozenSet[str]


def build_resources(cfg: Optional[Dict[str, Any]] = None) -> SegmenterResources:
    """
    Populate a lexicon and load the emission model named in cfg.

    Without cfg the packaged hanseg.yaml is used.

    Missing entries leave the lexicon empty or the emission table None.
    Loader errors propagate unchanged.
    """
    logger = get_segmenter_logger()
    if cfg is None:
        cfg = load_segmenter_config(quiet=True)
    lex_cfg = cfg.get("lexicon") or {}
    hmm_cfg = cfg.get("hmm") or {}
    batch_size = lex_cfg.get("load_batch_size")

    lexicon = Lexicon()
    sources = []
    if lex_cfg.get("dictionary"):
        sources.append(lex_cfg["dictionary"])
    sources.extend(lex_cfg.get("user_dictionaries") or [])

    for source in sources:
        count = load_dictionary(lexicon, source, batch_size=batch_size)
        logger.info(f"Loaded {count:,} records from {source}")

    emission = None
    if hmm_cfg.get("model"):
        emission = load_emission_model(hmm_cfg["model"])

    stats = lexicon.stats()
    logger.info(f"Lexicon ready: {stats.entries:,} entries, {stats.words:,} words")
    return SegmenterResources(
        lexicon=lexicon,
        emission=emission,
        force_split=frozenset(hmm_cfg.get("force_split") or [])
    )
