"""
Tests for core.config module.

These tests verify ScoreConfig validation and predefined configurations.
"""

import pytest

from core.config import DEFAULT_CONFIG, MIDI_TEMPO, PPQ_480_CONFIG, ScoreConfig


class TestScoreConfigValidation:
    """Test ScoreConfig parameter validation."""

    def test_default_values(self) -> None:
        config = ScoreConfig()
        assert config.ticks_per_whole_note == 3840

    def test_custom_values(self) -> None:
        config = ScoreConfig(ticks_per_whole_note=1536)
        assert config.ticks_per_whole_note == 1536

    def test_zero_ticks_raises(self) -> None:
        with pytest.raises(ValueError, match="ticks_per_whole_note must be positive"):
            ScoreConfig(ticks_per_whole_note=0)

    def test_negative_ticks_raises(self) -> None:
        with pytest.raises(ValueError, match="ticks_per_whole_note must be positive"):
            ScoreConfig(ticks_per_whole_note=-3840)

    def test_ticks_per_quarter_note(self) -> None:
        assert ScoreConfig().ticks_per_quarter_note == 960


class TestScoreConfigImmutability:
    """Test that ScoreConfig is immutable."""

    def test_cannot_modify_ticks(self) -> None:
        config = ScoreConfig()
        with pytest.raises(AttributeError):
            config.ticks_per_whole_note = 100  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert {ScoreConfig(), ScoreConfig()} == {DEFAULT_CONFIG}


class TestPredefinedConfigs:
    """Test predefined configuration constants."""

    def test_default_config(self) -> None:
        assert DEFAULT_CONFIG.ticks_per_whole_note == MIDI_TEMPO == 3840

    def test_ppq_480_config(self) -> None:
        assert PPQ_480_CONFIG.ticks_per_whole_note == 1920
        assert PPQ_480_CONFIG.ticks_per_quarter_note == 480
