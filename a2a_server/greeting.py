"""Proactive greeting for conversations that open without a question."""

import asyncio
import logging
from datetime import date
from typing import Optional

from core.errors import HolidayServiceError
from core.greeting import fallback_greeting, greeting_prompt, holidays_greeting, wrap_greeting
from core.queries import HolidayService

logger = logging.getLogger(__name__)


async def generate_holiday_greeting(agent, service: Optional[HolidayService], today: date) -> str:
    """Greet the user with today's holidays.

    Tries, in order: the agent's own answer to the greeting prompt, a
    greeting built from ``check_today_holidays``, and the static help text.
    """
    try:
        reply = await agent.generate(greeting_prompt(today))
        if reply.text.strip():
            return wrap_greeting(today, reply.text)
        logger.warning("Agent returned an empty greeting")
    except Exception as exc:
        logger.error("Error generating holiday greeting: %s", exc)

    if service is not None:
        try:
            result = await asyncio.to_thread(service.check_today_holidays)
            return holidays_greeting(result, today)
        except HolidayServiceError as exc:
            logger.error("Error checking today's holidays for greeting: %s", exc)

    return fallback_greeting(today)
