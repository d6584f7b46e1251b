"""
Test suite for hanseg.resources module.
"""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from hanseg.hmm import State, cut
from hanseg.lexicon import DictionaryFormatError
from hanseg.resources import build_resources


@pytest.fixture
def resource_files(tmp_path):
    main = tmp_path / "dict.txt"
    main.write_text("北京 3 ns\n大学 2 n\n", encoding="utf-8")
    user = tmp_path / "user.txt"
    user.write_text("北京 10 ns\n清华大学 4 nt\n", encoding="utf-8")
    model = tmp_path / "hmm_model.utf8"
    model.write_text("#B\n北:-1.0,大:-1.0\n#E\n京:-1.0,学:-1.0\n#M\n#S\n的:-1.0\n", encoding="utf-8")
    return main, user, model


class TestBuildResources:
    """Test assembling a lexicon and emission table from config."""

    def test_full_config(self, resource_files):
        main, user, model = resource_files
        cfg = {
            "lexicon": {"dictionary": str(main), "user_dictionaries": [str(user)], "load_batch_size": 1},
            "hmm": {"model": str(model), "force_split": ["大学"]},
        }
        resources = build_resources(cfg)

        lexicon = resources.lexicon
        assert lexicon.frequency("北京") == (10.0, True)
        assert lexicon.frequency("清华大") == (0.0, True)
        assert lexicon.total == 19.0
        assert math.isclose(lexicon.log_total, math.log(19.0))

        assert resources.emission[State.B]["北"] == -1.0
        assert resources.force_split == frozenset({"大学"})
        assert list(cut("北京大学", resources.emission, resources.force_split)) == ["北京", "大", "学"]

    def test_empty_config(self):
        resources = build_resources({})

        assert len(resources.lexicon) == 0
        assert resources.emission is None
        assert resources.force_split == frozenset()

    def test_packaged_defaults(self):
        from unittest.mock import patch
        from hanseg.config_loader import load_segmenter_config

        with patch("hanseg.config_loader.c"):
            cfg = load_segmenter_config(quiet=True)
        resources = build_resources(cfg)

        assert resources.lexicon.totals() == (0.0, float('-inf'))

    def test_defaults_without_config(self):
        """Test that build_resources falls back to the packaged config."""
        from unittest.mock import patch

        with patch("hanseg.config_loader.c"):
            resources = build_resources()

        assert len(resources.lexicon) == 0
        assert resources.emission is None
        assert resources.force_split == frozenset()

    def test_exported_from_package(self):
        import hanseg

        assert hanseg.build_resources is build_resources
        assert "SegmenterResources" in hanseg.__all__

    def test_loader_errors_propagate(self, tmp_path):
        bad = tmp_path / "bad.txt"
        bad.write_text("北京 x\n", encoding="utf-8")

        with pytest.raises(DictionaryFormatError):
            build_resources({"lexicon": {"dictionary": str(bad)}})
