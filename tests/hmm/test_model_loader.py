"""
Test suite for hanseg.hmm.model_loader and hanseg.hmm.validation.
"""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from hanseg.hmm import (
    State,
    EmissionFormatError,
    load_emission_model,
    emission_from_mapping,
    validate_emission_model,
    validate_segmentation,
    viterbi,
    extract_words
)

MODEL_TEXT = """\
#prob_start
-0.26268660809250016 -3.14e+100 -3.14e+100 -1.4652633398537678
#prob_trans 4x4 matrix
-3.14e+100 -0.510825623765990 -0.916290731874155 -3.14e+100
-0.5897149736854513 -3.14e+100 -3.14e+100 -0.8085250474669937
-3.14e+100 -0.33344856811948514 -1.2603623820268226 -3.14e+100
-0.7211965654669841 -3.14e+100 -3.14e+100 -0.6658631448798212
#prob_emit 4 lines
#B
北:-5.5,大:-4.25,清:-7.0
#E
京:-6.0,学:-5.0
华:-6.5
#M
#S
的:-3.0,我:-3.5
"""


class TestLoadEmissionModel:
    """Test reading the line-oriented model format."""

    def test_parse_lines(self):
        emit = load_emission_model(MODEL_TEXT.splitlines(keepends=True))

        assert dict(emit[State.B]) == {"北": -5.5, "大": -4.25, "清": -7.0}
        assert emit[State.E]["华"] == -6.5
        assert len(emit[State.E]) == 3
        assert dict(emit[State.M]) == {}
        assert emit[State.S]["的"] == -3.0

    def test_parse_file(self, tmp_path):
        model_file = tmp_path / "hmm_model.utf8"
        model_file.write_text(MODEL_TEXT, encoding="utf-8")

        emit = load_emission_model(model_file)
        assert emit[State.B]["北"] == -5.5

    def test_table_is_read_only(self):
        emit = load_emission_model(MODEL_TEXT.splitlines())
        with pytest.raises(TypeError):
            emit[State.B]["北"] = 0.0

    def test_loaded_model_decodes(self):
        emit = load_emission_model(MODEL_TEXT.splitlines())
        _, path = viterbi("北京大学", emit)
        assert extract_words("北京大学", path) == ["北京", "大学"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="HMM model not found"):
            load_emission_model(tmp_path / "missing.utf8")

    def test_no_emission_blocks(self):
        with pytest.raises(EmissionFormatError, match="no emission blocks"):
            load_emission_model(["#prob_start", "-0.26 -3.14e+100 -3.14e+100 -1.46"])

    def test_malformed_value(self):
        with pytest.raises(EmissionFormatError, match="invalid log-probability"):
            load_emission_model(["#B", "北:abc"])

    def test_malformed_item(self):
        with pytest.raises(EmissionFormatError, match="line 2"):
            load_emission_model(["#B", "北:-1.0,京-2.0"])

    def test_multi_character_key(self):
        with pytest.raises(EmissionFormatError, match="single character"):
            load_emission_model(["#S", "北京:-1.0"])


class TestEmissionFromMapping:
    """Test building tables from plain mappings."""

    def test_state_letters(self):
        emit = emission_from_mapping({"S": {"我": -3}})
        assert emit[State.S]["我"] == -3.0
        assert isinstance(emit[State.S]["我"], float)
        assert set(emit) == set(State)

    def test_unknown_state(self):
        with pytest.raises(EmissionFormatError, match="unknown state"):
            emission_from_mapping({"X": {"我": -3.0}})

    def test_non_numeric_value(self):
        with pytest.raises(EmissionFormatError, match="invalid log-probability"):
            emission_from_mapping({"B": {"北": "x"}})
        with pytest.raises(EmissionFormatError, match="invalid log-probability"):
            emission_from_mapping({"S": {"的": None}})


class TestValidation:
    """Test emission and segmentation validators."""

    def test_valid_model(self):
        stats = validate_emission_model(load_emission_model(MODEL_TEXT.splitlines()))
        assert stats == {"states": 4, "characters": 8, "entries": 8}

    def test_missing_state(self):
        with pytest.raises(ValueError, match="missing states"):
            validate_emission_model({State.B: {"北": -1.0}})

    def test_positive_log_probability(self):
        with pytest.raises(ValueError, match="must be <= 0"):
            validate_emission_model(emission_from_mapping({"B": {"北": 0.5}}))

    def test_non_finite_log_probability(self):
        with pytest.raises(ValueError, match="must be finite"):
            validate_emission_model(emission_from_mapping({"B": {"北": -math.inf}}))

    def test_segmentation_ok(self):
        validate_segmentation("北京大学", ["北京", "大学"])

    def test_segmentation_gap(self):
        with pytest.raises(ValueError, match="reconstruct"):
            validate_segmentation("北京大学", ["北京", "学"])

    def test_segmentation_empty_word(self):
        with pytest.raises(ValueError, match="Empty word"):
            validate_segmentation("北京", ["北京", ""])
