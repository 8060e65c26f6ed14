"""
Pytest configuration and fixtures.

Provides an in-process stand-in for the Calendarific endpoint (plugged into
HolidayClient as its ``opener``), a controllable clock, and a HolidayService
wired to both.  No test touches the network.
"""

import io
import json
import urllib.error
from datetime import date
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qsl, urlsplit

import pytest

from core.aggregator import Aggregator
from core.cache import ResponseCache
from core.holiday_client import HolidayClient
from core.queries import HolidayService

TODAY = date(2025, 12, 25)

COUNTRY_NAMES = {
    "NG": "Nigeria",
    "US": "United States",
    "GB": "United Kingdom",
}


def holiday_record(
    name: str,
    iso: str,
    code: str,
    description: str = "",
    types: tuple = ("National holiday",),
) -> Dict[str, Any]:
    """One element of ``response.holidays`` as Calendarific sends it."""
    year, month, day = (int(p) for p in iso[:10].split("-"))
    return {
        "name": name,
        "description": description,
        "country": {"id": code.lower(), "name": COUNTRY_NAMES.get(code, code)},
        "date": {
            "iso": iso,
            "datetime": {"year": year, "month": month, "day": day},
        },
        "type": list(types),
        "locations": "All",
        "states": "All",
    }


def calendarific_payload(holidays: List[Dict[str, Any]], code: int = 200) -> Dict[str, Any]:
    if code != 200:
        return {"meta": {"code": code, "error_type": "auth failed", "error_detail": "Missing or invalid api credentials."}, "response": []}
    # empty result sets come back as a list, not an object
    return {"meta": {"code": code}, "response": {"holidays": holidays} if holidays else []}


HOLIDAYS = {
    "NG": [
        holiday_record("New Year's Day", "2025-01-01", "NG", "New Year's Day is the first day of the year."),
        holiday_record("Independence Day", "2025-10-01", "NG", "Nigeria's National Day."),
        holiday_record("Christmas Day", "2025-12-25", "NG", "Christmas Day is a Christian holiday.", ("National holiday", "Christian")),
    ],
    "US": [
        holiday_record("New Year's Day", "2025-01-01", "US"),
        holiday_record("Mother's Day", "2025-05-11", "US", "Mother's Day honors mothers.", ("Observance",)),
        holiday_record("Independence Day", "2025-07-04", "US", "Independence Day is the national day of the United States."),
        holiday_record("Christmas Day", "2025-12-25", "US", "Christmas Day celebrates the birth of Jesus."),
    ],
    "GB": [
        holiday_record("Mother's Day", "2025-03-30", "GB", "Mothering Sunday.", ("Observance",)),
        holiday_record("Christmas Day", "2025-12-25", "GB"),
        holiday_record("Boxing Day", "2025-12-26", "GB"),
    ],
}


class FakeResponse:
    def __init__(self, body: str):
        self._body = body.encode("utf-8")

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeCalendarific:
    """Answers holiday requests from an in-memory table.

    Countries not in the table return an empty (successful) response.
    ``failing`` maps a country code to the exception its requests raise,
    ``raw`` maps it to a literal body (or payload dict) to send back.
    """

    def __init__(self, holidays: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.holidays = HOLIDAYS if holidays is None else holidays
        self.failing: Dict[str, Exception] = {}
        self.raw: Dict[str, Any] = {}
        self.calls: List[str] = []

    def params(self, index: int = -1) -> Dict[str, str]:
        return dict(parse_qsl(urlsplit(self.calls[index]).query))

    def __call__(self, request, timeout=None):
        url = request.full_url
        self.calls.append(url)
        params = dict(parse_qsl(urlsplit(url).query))
        code = params.get("country", "")

        if code in self.failing:
            raise self.failing[code]
        if code in self.raw:
            body = self.raw[code]
            return FakeResponse(body if isinstance(body, str) else json.dumps(body))

        records = [
            r for r in self.holidays.get(code, [])
            if r["date"]["datetime"]["year"] == int(params["year"])
            and ("month" not in params or r["date"]["datetime"]["month"] == int(params["month"]))
            and ("day" not in params or r["date"]["datetime"]["day"] == int(params["day"]))
        ]
        return FakeResponse(json.dumps(calendarific_payload(records)))


def http_error(status: int = 500, body: bytes = b"boom") -> urllib.error.HTTPError:
    return urllib.error.HTTPError(
        "https://calendarific.com/api/v2/holidays", status, "Server Error", None, io.BytesIO(body)
    )


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_api() -> FakeCalendarific:
    """Provide the in-memory Calendarific endpoint."""
    return FakeCalendarific()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def client(fake_api: FakeCalendarific) -> HolidayClient:
    """Provide a HolidayClient with a key, a fresh cache and the fake endpoint."""
    return HolidayClient("test-key", cache=ResponseCache(), opener=fake_api)


@pytest.fixture
def service(client: HolidayClient) -> HolidayService:
    """Provide a HolidayService with no fan-out delay and a fixed 'today'."""
    return HolidayService(
        client,
        aggregator=Aggregator(client, delay=0),
        today=lambda: TODAY,
    )
