"""
Tests for greeting text: date formatting and the fallback chain.
"""

import asyncio
from datetime import date
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from a2a_server.greeting import generate_holiday_greeting
from core.greeting import (
    fallback_greeting,
    greeting_prompt,
    holidays_greeting,
    long_date,
    ordinal,
    short_date,
)
from core.holiday_client import HolidayClient
from core.models import TodayHoliday, TodayResult
from core.queries import HolidayService
from conftest import TODAY, FakeCalendarific


@pytest.mark.parametrize("n, expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"),
    (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st"),
    (101, "101st"), (111, "111th"),
])
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_date_formats():
    assert short_date(date(2025, 12, 25)) == "25th December, 2025"
    assert long_date(date(2025, 12, 25)) == "Thursday, December 25, 2025"


def test_prompt_mentions_the_date():
    assert greeting_prompt(TODAY).startswith("Today is Thursday, December 25, 2025.")


def _today(holidays):
    return TodayResult(
        date="2025-12-25",
        is_holiday=bool(holidays),
        holidays=holidays,
        total_holidays=len(holidays),
        countries_searched=12,
    )


def test_holidays_greeting_lists_at_most_five():
    holidays = [TodayHoliday(name=f"Holiday {i}", description="", country="Nigeria", types=[]) for i in range(7)]

    text = holidays_greeting(_today(holidays), TODAY)

    assert "Holiday 4" in text
    assert "Holiday 5" not in text
    assert text.endswith("...and more!")


def test_holidays_greeting_without_holidays():
    text = holidays_greeting(_today([]), TODAY)

    assert "25th December, 2025" in text
    assert "There don't seem to be any major holidays today." in text


def test_fallback_greeting_is_a_help_message():
    text = fallback_greeting(TODAY)

    assert "Today is **25th December, 2025**" in text
    assert "How can I help you today?" in text


class TestGreetingChain:
    def test_agent_answer_is_wrapped(self, service: HolidayService, fake_api: FakeCalendarific):
        agent = SimpleNamespace(generate=AsyncMock(return_value=SimpleNamespace(text="Merry Christmas!", tool_results=[])))

        text = asyncio.run(generate_holiday_greeting(agent, service, TODAY))

        assert text.startswith("Hi there! 👋\n\nToday is **25th December, 2025**.")
        assert "Merry Christmas!" in text
        agent.generate.assert_awaited_once_with(greeting_prompt(TODAY))
        assert fake_api.calls == []

    def test_agent_failure_falls_back_to_today_data(self, service: HolidayService):
        agent = SimpleNamespace(generate=AsyncMock(side_effect=RuntimeError("model unavailable")))

        text = asyncio.run(generate_holiday_greeting(agent, service, TODAY))

        assert "**Christmas Day** (Nigeria)" in text

    def test_empty_agent_answer_falls_back_to_today_data(self, service: HolidayService):
        agent = SimpleNamespace(generate=AsyncMock(return_value=SimpleNamespace(text="  ", tool_results=[])))

        text = asyncio.run(generate_holiday_greeting(agent, service, TODAY))

        assert "Christmas Day" in text

    def test_everything_failing_gives_static_greeting(self, fake_api: FakeCalendarific):
        agent = SimpleNamespace(generate=AsyncMock(side_effect=RuntimeError("model unavailable")))
        service = HolidayService(HolidayClient(None, opener=fake_api), today=lambda: TODAY)

        text = asyncio.run(generate_holiday_greeting(agent, service, TODAY))

        assert text == fallback_greeting(TODAY)

    def test_no_service_gives_static_greeting(self):
        agent = SimpleNamespace(generate=AsyncMock(side_effect=RuntimeError("model unavailable")))

        assert asyncio.run(generate_holiday_greeting(agent, None, TODAY)) == fallback_greeting(TODAY)
