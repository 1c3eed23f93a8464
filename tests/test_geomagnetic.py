"""Tests for Kp index aggregation and retrieval."""

from unittest.mock import patch

import pytest
import requests

from drone_advisor.config import AdvisorConfig
from drone_advisor.weather.geomagnetic import (
    GeomagneticService,
    NoDataError,
    aggregate_geomagnetic,
    normalize_kp_rows,
)
from drone_advisor.weather.models import (
    FALLBACK_READING,
    GeomagneticReading,
    KpStatus,
)

NOAA_TABLE = [
    ["time_tag", "Kp", "a_running", "station_count"],
    ["2024-05-10 12:00:00.000", "5.33", "56", "8"],
    ["2024-05-10 15:00:00.000", "7.00", "111", "8"],
    ["2024-05-10 18:00:00.000", "8.67", "300", "8"],
    ["2024-05-10 21:00:00.000", "9.00", "400", "8"],
]


class TestAggregate:
    def test_mean_of_three(self):
        reading = aggregate_geomagnetic([["t0", "2"], ["t1", "4"], ["t2", "6"]])
        assert reading.value == pytest.approx(4.0)
        assert reading.status is KpStatus.MODERATE
        assert reading.status.value == "moderado"

    def test_uses_last_three_only(self):
        series = [[f"t{i}", str(v)] for i, v in enumerate([9, 9, 1, 2, 3])]
        assert aggregate_geomagnetic(series).value == pytest.approx(2.0)

    def test_shorter_series(self):
        assert aggregate_geomagnetic([["t0", "5"]]).value == pytest.approx(5.0)
        assert aggregate_geomagnetic([["t0", 1], ["t1", 2]]).value == pytest.approx(1.5)

    def test_skips_invalid_entries(self):
        series = [["a", "1"], ["b", "bad"], ["c", "8"], ["d", None], ["e", "-2"], ["f", "9"]]
        reading = aggregate_geomagnetic(series)
        assert reading.value == pytest.approx(6.0)
        assert reading.status is KpStatus.HIGH

    def test_skips_malformed_rows(self):
        series = [["t0"], "3", None, ("t1", "3")]
        assert aggregate_geomagnetic(series).value == pytest.approx(3.0)

    def test_all_non_numeric_raises(self):
        with pytest.raises(NoDataError):
            aggregate_geomagnetic([["t0", "x"], ["t1", ""], ["t2", "nan"]])

    def test_empty_raises(self):
        with pytest.raises(NoDataError):
            aggregate_geomagnetic([])

    def test_no_data_is_value_error(self):
        assert issubclass(NoDataError, ValueError)


class TestStatus:
    @pytest.mark.parametrize("value,status", [
        (0.0, KpStatus.LOW),
        (3.0, KpStatus.LOW),
        (3.01, KpStatus.MODERATE),
        (5.0, KpStatus.MODERATE),
        (7.0, KpStatus.HIGH),
        (7.01, KpStatus.STORM),
        (12.0, KpStatus.STORM),
    ])
    def test_breakpoints(self, value, status):
        assert GeomagneticReading.from_value(value).status is status

    def test_fallback(self):
        assert FALLBACK_READING.value == 2.0
        assert FALLBACK_READING.status is KpStatus.LOW


class TestNormalizeRows:
    def test_table_skips_header(self):
        rows = normalize_kp_rows(NOAA_TABLE)
        assert rows[0] == ("2024-05-10 12:00:00.000", "5.33")
        assert len(rows) == 4

    def test_object_rows(self):
        rows = normalize_kp_rows([
            {"time_tag": "2024-05-10T12:00:00", "Kp": 5.33},
            {"time_tag": "2024-05-10T15:00:00", "Kp": 7.0},
        ])
        assert rows == [("2024-05-10T12:00:00", 5.33), ("2024-05-10T15:00:00", 7.0)]

    @pytest.mark.parametrize("payload", [None, [], {}, "text"])
    def test_unusable_payload(self, payload):
        assert normalize_kp_rows(payload) == []


class TestGeomagneticService:
    def test_direct_url(self, config):
        assert GeomagneticService(config).feed_url == config.kp_url

    def test_proxy_url(self):
        proxy = "https://api.allorigins.win/raw?url="
        service = GeomagneticService(AdvisorConfig(kp_proxy_url=proxy))
        assert service.feed_url.startswith(proxy)
        assert "https%3A%2F%2Fservices.swpc.noaa.gov" in service.feed_url

    def test_reading_from_feed(self, config, make_response):
        with patch("drone_advisor.weather.geomagnetic.requests.get",
                   return_value=make_response(NOAA_TABLE)) as get:
            reading = GeomagneticService(config).get_reading()
        get.assert_called_once()
        assert reading.value == pytest.approx((7.0 + 8.67 + 9.0) / 3)
        assert reading.status is KpStatus.STORM

    def test_http_error_falls_back(self, config, make_response):
        with patch("drone_advisor.weather.geomagnetic.requests.get",
                   return_value=make_response(None, status_code=503)):
            assert GeomagneticService(config).get_reading() == FALLBACK_READING

    def test_network_error_falls_back(self, config):
        with patch("drone_advisor.weather.geomagnetic.requests.get",
                   side_effect=requests.ConnectionError("offline")):
            assert GeomagneticService(config).get_reading() == FALLBACK_READING

    def test_invalid_json_falls_back(self, config, make_response):
        response = make_response()
        response.json.side_effect = ValueError("not json")
        with patch("drone_advisor.weather.geomagnetic.requests.get", return_value=response):
            assert GeomagneticService(config).get_reading() == FALLBACK_READING

    def test_empty_feed_falls_back(self, config, make_response):
        with patch("drone_advisor.weather.geomagnetic.requests.get",
                   return_value=make_response([["time_tag", "Kp"]])):
            assert GeomagneticService(config).get_reading() == FALLBACK_READING
