"""
Tests for game/highscore.py - the JSON high score file.
"""

import json
import logging

import pytest

from game.highscore import HighScoreStore


class TestHighScoreStore:
    """Tests for loading and saving the best score."""

    def test_missing_file_loads_zero(self, tmp_path):
        assert HighScoreStore(str(tmp_path / "missing.json")).load() == 0

    def test_save_then_load(self, tmp_path):
        store = HighScoreStore(str(tmp_path / "hs.json"))
        assert store.save(120) is True
        assert store.load() == 120
        assert json.loads((tmp_path / "hs.json").read_text()) == {"highscore": 120}

    def test_corrupt_file_loads_zero(self, tmp_path, caplog):
        path = tmp_path / "hs.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="game.highscore"):
            assert HighScoreStore(str(path)).load() == 0
        assert "unreadable" in caplog.text

    def test_non_integer_value_loads_zero(self, tmp_path):
        path = tmp_path / "hs.json"
        path.write_text(json.dumps({"highscore": "lots"}))
        assert HighScoreStore(str(path)).load() == 0

    def test_wrong_shape_loads_zero(self, tmp_path):
        path = tmp_path / "hs.json"
        path.write_text(json.dumps([1, 2, 3]))
        assert HighScoreStore(str(path)).load() == 0

    def test_negative_value_loads_zero(self, tmp_path):
        path = tmp_path / "hs.json"
        path.write_text(json.dumps({"highscore": -40}))
        assert HighScoreStore(str(path)).load() == 0

    def test_missing_key_loads_zero(self, tmp_path):
        path = tmp_path / "hs.json"
        path.write_text(json.dumps({}))
        assert HighScoreStore(str(path)).load() == 0

    def test_save_failure_is_logged(self, tmp_path, caplog):
        store = HighScoreStore(str(tmp_path / "no" / "such" / "dir" / "hs.json"))
        with caplog.at_level(logging.ERROR, logger="game.highscore"):
            assert store.save(10) is False
        assert "Could not save" in caplog.text

    @pytest.mark.parametrize("raw", ['{"highscore": 1e999}', '{"highscore": Infinity}',
                                     '{"highscore": NaN}'])
    def test_non_finite_value_loads_zero(self, tmp_path, raw):
        """Infinite or NaN scores cannot become integers and fall back to 0."""
        path = tmp_path / "hs.json"
        path.write_text(raw)
        assert HighScoreStore(str(path)).load() == 0
