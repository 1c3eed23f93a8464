"""Tests for the drone limits profile."""

import dataclasses

import pytest

from drone_advisor.core.limits import DJI_MINI_2, LimitsProfile


def _profile(**overrides):
    values = dict(
        name="Test", wind_max=29, gust_max=38, temp_min=0, temp_max=40,
        rain_max=20, cloud_max=70, visibility_min=3, kp_max=4,
    )
    values.update(overrides)
    return LimitsProfile(**values)


class TestDjiMini2:
    def test_limits(self):
        assert DJI_MINI_2.name == "DJI Mini 2"
        assert DJI_MINI_2.wind_max == 29
        assert DJI_MINI_2.gust_max == 38
        assert (DJI_MINI_2.temp_min, DJI_MINI_2.temp_max) == (0, 40)
        assert DJI_MINI_2.rain_max == 20
        assert DJI_MINI_2.cloud_max == 70
        assert DJI_MINI_2.visibility_min == 3
        assert DJI_MINI_2.kp_max == 4

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DJI_MINI_2.wind_max = 50


class TestValidation:
    def test_valid_profile(self):
        assert _profile().wind_max == 29

    def test_temperature_range_must_be_ordered(self):
        with pytest.raises(ValueError, match="temp_min"):
            _profile(temp_min=40, temp_max=40)

    def test_negative_minimum_temperature_allowed(self):
        assert _profile(temp_min=-10).temp_min == -10

    @pytest.mark.parametrize("field", ["wind_max", "gust_max", "rain_max",
                                       "cloud_max", "visibility_min", "kp_max"])
    def test_thresholds_must_be_positive(self, field):
        with pytest.raises(ValueError, match=field):
            _profile(**{field: 0})
