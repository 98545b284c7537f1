"""Tests for config.py parsing helpers."""

import pytest

from emoji_snake.config import parse_interval, parse_volume


class TestParseInterval:
    @pytest.mark.parametrize("raw, expected", [
        (120, 120),
        ("120", 120),
        ("  80ms", 80),
        (99.7, 99),
        ("-5", -5),
    ])
    def test_accepts_leading_integer(self, raw, expected):
        """Ints and strings with a leading integer parse like a number field."""
        assert parse_interval(raw) == expected

    @pytest.mark.parametrize("raw", ["", "fast", None, True, float("nan"), float("inf"), [100]])
    def test_rejects_garbage(self, raw):
        """Non-numeric input gives None."""
        assert parse_interval(raw) is None


class TestParseVolume:
    @pytest.mark.parametrize("raw, expected", [(0, 0.0), ("0.25", 0.25), (1.0, 1.0)])
    def test_in_range(self, raw, expected):
        assert parse_volume(raw) == expected

    @pytest.mark.parametrize("raw", [-0.1, 1.5, "loud", None, False, float("nan")])
    def test_out_of_range(self, raw):
        """Anything outside [0, 1] or non-numeric is rejected."""
        assert parse_volume(raw) is None
