"""
Unit tests for the sequential multi-country fan-out.
"""

import pytest

from core.aggregator import Aggregator
from core.errors import ConfigurationError, ProviderError, TransportError
from core.holiday_client import HolidayClient
from conftest import FakeCalendarific, calendarific_payload, holiday_record, http_error


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def test_failed_country_is_excluded_from_count(client: HolidayClient, fake_api: FakeCalendarific):
    """One of five countries failing leaves four searched and the loop intact."""
    fake_api.failing["GB"] = http_error(503, b"unavailable")
    aggregator = Aggregator(client, delay=0)

    result = aggregator.fan_out(["US", "GB", "NG", "KE", "GH"], year=2025)

    assert result.countries_searched == 4
    assert len(fake_api.calls) == 5
    assert [r.code for r in result.failures] == ["GB"]
    assert isinstance(result.failures[0].error, TransportError)
    assert {h.country_code for h in result.holidays} == {"US", "NG"}


def test_requests_are_sequential_with_a_pause_between_them(client: HolidayClient, fake_api: FakeCalendarific):
    sleep = RecordingSleep()
    aggregator = Aggregator(client, delay=0.25, sleep=sleep)

    aggregator.fan_out(["US", "GB", "NG", "KE", "GH"], year=2025)

    assert sleep.calls == [0.25] * 4
    assert [fake_api.params(i)["country"] for i in range(5)] == ["US", "GB", "NG", "KE", "GH"]


def test_zero_delay_never_sleeps(client: HolidayClient):
    sleep = RecordingSleep()

    Aggregator(client, delay=0, sleep=sleep).fan_out(["US", "NG"], year=2025)

    assert sleep.calls == []


def test_filters_are_passed_to_every_request(client: HolidayClient, fake_api: FakeCalendarific):
    result = Aggregator(client, delay=0).fan_out(["US", "GB", "NG"], year=2025, month=12, day=25)

    assert all(fake_api.params(i)["month"] == "12" for i in range(3))
    assert [h.name for h in result.holidays] == ["Christmas Day"] * 3


def test_all_countries_failing_gives_empty_result(client: HolidayClient, fake_api: FakeCalendarific):
    fake_api.failing["US"] = http_error()
    fake_api.failing["NG"] = http_error()

    result = Aggregator(client, delay=0).fan_out(["US", "NG"], year=2025)

    assert result.countries_searched == 0
    assert result.holidays == []
    assert len(result.failures) == 2


def test_malformed_country_response_is_skipped(client: HolidayClient, fake_api: FakeCalendarific):
    record = holiday_record("Boxing Day", "2025-12-26", "GB")
    record["country"] = "GB"
    fake_api.raw["GB"] = calendarific_payload([record])

    result = Aggregator(client, delay=0).fan_out(["US", "GB", "NG"], year=2025)

    assert result.countries_searched == 2
    assert [r.code for r in result.failures] == ["GB"]
    assert isinstance(result.failures[0].error, ProviderError)
    assert {h.country_code for h in result.holidays} == {"US", "NG"}


def test_missing_api_key_aborts_the_fan_out(fake_api: FakeCalendarific):
    aggregator = Aggregator(HolidayClient(None, opener=fake_api), delay=0)

    with pytest.raises(ConfigurationError):
        aggregator.fan_out(["US", "NG"], year=2025)

    assert fake_api.calls == []
