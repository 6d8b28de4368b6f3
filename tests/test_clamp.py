"""Tests for the clamping helpers."""

import pytest

from volume_lockr.core import clamp, fraction_to_volume


class TestClamp:
    """Tests for clamp()."""

    @pytest.mark.parametrize("candidate", [-100, -1, 0, 3, 5, 7, 10, 11, 1000])
    def test_result_is_within_bounds(self, candidate):
        """Test that the result always lies in [lower, upper]."""
        assert 2 <= clamp(candidate, 2, 7) <= 7

    @pytest.mark.parametrize("candidate", [2, 3, 4, 5, 6, 7])
    def test_in_range_value_is_unchanged(self, candidate):
        """Test that a value already in range is returned as is."""
        assert clamp(candidate, 2, 7) == candidate

    @pytest.mark.parametrize("candidate", [-5, 0, 4, 9, 100])
    def test_pinned_point(self, candidate):
        """Test that lower == upper always yields that single value."""
        assert clamp(candidate, 4, 4) == 4

    def test_media_scenario(self):
        """Test the media stream locked to [5, 10]."""
        assert clamp(15, 5, 10) == 10
        assert clamp(0, 5, 10) == 5

    def test_idempotent(self):
        """Test that clamping twice equals clamping once."""
        once = clamp(42, 5, 10)
        assert clamp(once, 5, 10) == once


class TestFractionToVolume:
    """Tests for fraction_to_volume()."""

    def test_bounds(self):
        """Test the ends of the slider."""
        assert fraction_to_volume(0.0, 15) == 0
        assert fraction_to_volume(1.0, 15) == 15

    def test_truncates(self):
        """Test that the conversion truncates instead of rounding."""
        assert fraction_to_volume(0.5, 15) == 7
        assert fraction_to_volume(0.99, 7) == 6
