# =============================================================================
# core/greeting.py  —  Greeting text for new conversations
# =============================================================================
#
# When a client opens a conversation without asking anything, the A2A server
# answers with a greeting instead of routing to the agent.  This module holds
# the pieces that don't need an LLM:
#
#   - date formatting ("18th October, 2026")
#   - the prompt sent to the agent to produce a holiday-aware greeting
#   - a data-driven greeting built straight from check_today_holidays
#   - the static help text used when nothing else works
# =============================================================================

from datetime import date
from typing import Optional

from core.models import TodayResult

MAX_GREETING_HOLIDAYS = 5


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def short_date(day: date) -> str:
    """e.g. ``25th December, 2025``."""
    return f"{ordinal(day.day)} {day.strftime('%B')}, {day.year}"


def long_date(day: date) -> str:
    """e.g. ``Thursday, December 25, 2025``."""
    return f"{day.strftime('%A, %B')} {day.day}, {day.year}"


def greeting_prompt(day: date) -> str:
    return (
        f"Today is {long_date(day)}. What holidays are being celebrated today worldwide?\n"
        "Include major holidays from different countries (US, UK, Canada, India, Nigeria, etc.)\n"
        "and also mention any international observances like World Health Day, Mother's Day, etc.\n\n"
        "Format your response in a warm, conversational tone suitable as a greeting message.\n"
        "Start with acknowledging today's date, then list the holidays with brief descriptions.\n"
        "Keep it concise but informative - aim for 3-5 major holidays."
    )


def wrap_greeting(day: date, body: str) -> str:
    return (
        f"Hi there! 👋\n\nToday is **{short_date(day)}**.\n\n{body}\n\n"
        "Feel free to ask me about holidays in any country or on any specific date! 🌍"
    )


def holidays_greeting(today: TodayResult, day: date) -> str:
    """Greeting listing up to five of today's holidays from a TodayResult."""
    if today.holidays:
        lines = [
            f"🎉 **{h.name}** ({h.country}) — {h.description}".rstrip(" —")
            for h in today.holidays[:MAX_GREETING_HOLIDAYS]
        ]
        text = "\n".join(lines)
        if len(today.holidays) > MAX_GREETING_HOLIDAYS:
            text += "\n...and more!"
    else:
        text = "There don't seem to be any major holidays today."
    return f"Hi there! 👋 Today is {short_date(day)}.\n\n{text}"


def fallback_greeting(day: Optional[date] = None) -> str:
    day = day or date.today()
    return (
        f"Hi there! 👋\n\nToday is **{short_date(day)}**.\n\n"
        "I'm your Global Holiday Assistant! I can help you discover holidays and "
        "observances from over 230 countries worldwide.\n\n"
        "Feel free to ask me:\n"
        '• "What holidays does Nigeria have in 2025?"\n'
        '• "When is Mother\'s Day celebrated?"\n'
        '• "Is today a holiday in the US?"\n'
        '• "Tell me about Independence Days worldwide"\n\n'
        "How can I help you today? 🌍"
    )
