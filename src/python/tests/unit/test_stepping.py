"""Unit tests for step rounding and clamping."""

import pytest

from webcam_config.device import CameraDevice
from webcam_config.errors import ArgumentError
from webcam_config.stepping import clamp, effective_step, stepped_value


class TestEffectiveStep:
    def test_defaults_to_increment_size(self):
        assert effective_step(5) == 5

    def test_multiple_is_kept(self):
        assert effective_step(5, 15) == 15

    @pytest.mark.parametrize(
        "size, requested, expected",
        [(5, 7, 10), (5, 1, 5), (5, 11, 15), (3, 4, 6), (10, 99, 100)],
    )
    def test_rounds_up_to_next_multiple(self, size, requested, expected):
        assert effective_step(size, requested) == expected

    def test_zero_increment_size_uses_request(self):
        assert effective_step(0, 7) == 7

    @pytest.mark.parametrize("requested", [0, -5])
    def test_non_positive_request(self, requested):
        with pytest.raises(ArgumentError):
            effective_step(5, requested)


class TestClamp:
    def test_within_range(self):
        assert clamp(5, 0, 10) == 5

    def test_above_max(self):
        assert clamp(11, 0, 10) == 10

    def test_below_min(self):
        assert clamp(-1, 0, 10) == 0


class TestSteppedValue:
    @pytest.fixture
    def focus(self, bound_factory):
        return CameraDevice("A", bound_factory()).get_property_by_name("Focus")

    def test_up_by_increment(self, focus):
        assert stepped_value(focus, 1) == 105

    def test_down_with_rounded_request(self, focus):
        assert stepped_value(focus, -1, 12) == 85

    def test_clamped_at_max(self, focus):
        assert stepped_value(focus, 1, 500) == 250

    def test_clamped_at_min(self, focus):
        assert stepped_value(focus, -1, 500) == 0
