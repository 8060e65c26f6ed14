# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool the holiday agent can call.  Each tool is a thin
#   wrapper around one HolidayService operation (core/queries.py): it logs
#   the call, runs the operation, converts the result dataclass to a dict
#   and returns it.
#
# HOW IT WORKS (the flow):
#   1. The ADK agent decides it needs data (e.g., "holidays in Nigeria")
#   2. It calls a tool by name via MCP (e.g., "get_holidays_by_country")
#   3. FastMCP routes the call to the matching function below
#   4. The function calls core/, formats the result, and returns it
#
# FAILURES:
#   Tools never raise.  Invalid input or a failed provider call comes back
#   as {"error": "...", "operation": "..."} so the agent can tell the user
#   or retry with corrected arguments.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server      (stdio transport, spawned by the agent)
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Optional

from fastmcp import FastMCP

from core.config import load_settings
from core.errors import HolidayServiceError, OperationError
from core.queries import HolidayService

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON stream, and anything else
# written there would corrupt it.
#
#   CYAN   incoming tool calls with their parameters
#   YELLOW intermediate status
#   GREEN  the response JSON
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("tools.mcp_server")


def _log_request(tool_name: str, **params) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


def _error(tool_name: str, exc: HolidayServiceError) -> dict:
    operation = exc.operation if isinstance(exc, OperationError) else tool_name
    _log_status(f"Failed: {exc}")
    return _log_response(tool_name, {"error": str(exc), "operation": operation})


# =============================================================================
# Shared service
# =============================================================================
# One HolidayService per process, so every tool shares the same response
# cache.  Built on first use: a missing API key is reported by the first
# tool call that needs the network, not at import time.
# =============================================================================
_service: Optional[HolidayService] = None


def get_service() -> HolidayService:
    global _service
    if _service is None:
        _service = HolidayService.from_settings(load_settings())
    return _service


mcp = FastMCP("global-holiday-agent")


# =============================================================================
# TOOL 1: get_holidays_by_country
# =============================================================================
def get_holidays_by_country(
    country: str,
    year: int,
    month: Optional[int] = None,
    day: Optional[int] = None,
    type: Optional[str] = None,
) -> dict:
    """Fetch all holidays and observances for one country.

    WHEN TO CALL THIS: The user asks about holidays in a specific country
    ("holidays in Nigeria", "US holidays in 2025"), a specific date in one
    country (pass month and day), or one type of holiday in a country.

    Args:
        country: Two-letter ISO 3166-1 alpha-2 code (US, GB, NG, IN, ...).
                 Use validate_country_code first if you only have a name.
        year: Four-digit year (2000-2100).
        month: Optional month number (1-12).
        day: Optional day of month (1-31).
        type: Optional filter: national, local, religious or observance.

    Returns:
        A dict with:
          - holidays: list of {name, description, date, types, country}
          - count: number of holidays
          - query: the parameters used
    """
    _log_request("get_holidays_by_country", country=country, year=year,
                 month=month, day=day, type=type)
    try:
        result = get_service().get_holidays_by_country(
            country=country, year=year, month=month, day=day, type=type
        )
    except HolidayServiceError as exc:
        return _error("get_holidays_by_country", exc)
    _log_status(f"Found {result.count} holidays")
    return _log_response("get_holidays_by_country", asdict(result))


# =============================================================================
# TOOL 2: get_holidays_for_date
# =============================================================================
def get_holidays_for_date(
    month: int,
    day: int,
    year: Optional[int] = None,
    country: Optional[str] = None,
) -> dict:
    """Get all holidays on a specific date, across major countries or in one.

    WHEN TO CALL THIS: "What holidays are on December 25th?", "Is June 12th
    a holiday anywhere?", "What's celebrated on my birthday, March 15th?"

    Without a country this checks about 45 major countries one by one, so
    it is slower than a single-country lookup.

    Args:
        month: Month (1-12).
        day: Day of month (1-31).
        year: Optional year (2000-2100); defaults to the current year.
        country: Optional ISO code to check only one country.

    Returns:
        A dict with:
          - date: the queried date (YYYY-MM-DD)
          - holidays: list of {name, description, country, country_code, types},
            sorted by country name
          - total_holidays: number of holidays found
          - countries_searched: countries that answered successfully
    """
    _log_request("get_holidays_for_date", month=month, day=day, year=year, country=country)
    try:
        result = get_service().get_holidays_for_date(month=month, day=day, year=year, country=country)
    except HolidayServiceError as exc:
        return _error("get_holidays_for_date", exc)
    _log_status(f"{result.total_holidays} holidays across {result.countries_searched} countries")
    return _log_response("get_holidays_for_date", asdict(result))


# =============================================================================
# TOOL 3: search_holidays_by_name
# =============================================================================
def search_holidays_by_name(
    search_term: str,
    country: Optional[str] = None,
    year: Optional[int] = None,
    type: Optional[str] = None,
) -> dict:
    """Search holidays by name or keyword across major countries or in one.

    WHEN TO CALL THIS: "When is Mother's Day?", "Which countries celebrate
    Independence Day?", "Tell me about Christmas around the world".

    Args:
        search_term: Holiday name or keyword (at least 2 characters).
        country: Optional ISO code to limit the search to one country.
        year: Optional year (2001-2049); defaults to the current year.
        type: Optional filter: national, local, religious or observance.

    Returns:
        A dict with:
          - results: list of {name, description, country, country_code, date, types}
          - search_term, year: what was searched
          - total_found: number of matches
          - countries_searched: countries that answered successfully
    """
    _log_request("search_holidays_by_name", search_term=search_term,
                 country=country, year=year, type=type)
    try:
        result = get_service().search_holidays_by_name(
            search_term=search_term, country=country, year=year, type=type
        )
    except HolidayServiceError as exc:
        return _error("search_holidays_by_name", exc)
    _log_status(f"{result.total_found} matches for {result.search_term!r}")
    return _log_response("search_holidays_by_name", asdict(result))


# =============================================================================
# TOOL 4: check_today_holidays
# =============================================================================
def check_today_holidays(country: Optional[str] = None) -> dict:
    """Check whether today is a holiday in one country or in major countries.

    WHEN TO CALL THIS: "Is today a holiday?", "Is today a holiday in the
    US?", "What are we celebrating today?"

    Args:
        country: Optional ISO code.  Without it, 12 major countries are checked.

    Returns:
        A dict with:
          - date: today's date (YYYY-MM-DD)
          - is_holiday: True if any holiday was found
          - holidays: list of {name, description, country, types}
          - total_holidays, countries_searched
    """
    _log_request("check_today_holidays", country=country)
    try:
        result = get_service().check_today_holidays(country=country)
    except HolidayServiceError as exc:
        return _error("check_today_holidays", exc)
    return _log_response("check_today_holidays", asdict(result))


# =============================================================================
# TOOL 5: validate_country_code
# =============================================================================
def validate_country_code(input: str) -> dict:
    """Validate a country name or ISO code and convert between the two.

    WHEN TO CALL THIS: Before any holiday tool when the user gave a country
    name ("Nigeria") or a code you are unsure about.  No network call.

    Args:
        input: Country name or ISO code, e.g. "Nigeria", "NG", "united states".

    Returns:
        A dict with:
          - is_valid: whether the input resolved to a supported country
          - country_name, country_code: the resolved country (or null)
          - suggestions: up to 5 {name, code} close matches when invalid
    """
    _log_request("validate_country_code", input=input)
    try:
        result = get_service().validate_country(input)
    except HolidayServiceError as exc:
        return _error("validate_country_code", exc)
    return _log_response("validate_country_code", asdict(result))


# =============================================================================
# TOOL 6: get_supported_countries
# =============================================================================
def get_supported_countries(search_query: Optional[str] = None) -> dict:
    """List the countries Calendarific supports, optionally filtered.

    WHEN TO CALL THIS: "What countries are supported?", "Can you get
    holidays for Kenya?", or to find a code from a partial name ("United",
    "Island").  No network call.

    Args:
        search_query: Optional partial name or code to filter by.

    Returns:
        A dict with:
          - countries: list of {name, code}, sorted by name
          - total_countries: number of countries returned
          - search_query: the filter used, if any
    """
    _log_request("get_supported_countries", search_query=search_query)
    try:
        result = get_service().get_supported_countries(search_query)
    except HolidayServiceError as exc:
        return _error("get_supported_countries", exc)
    _log_status(f"{result.total_countries} countries")
    data: dict[str, Any] = asdict(result)
    # the full list is long; keep the log line short
    logger.info(f"{_GREEN}  ← get_supported_countries response: {result.total_countries} countries{_RESET}")
    return data


TOOLS = (
    get_holidays_by_country,
    get_holidays_for_date,
    search_holidays_by_name,
    check_today_holidays,
    validate_country_code,
    get_supported_countries,
)

for _tool in TOOLS:
    mcp.tool()(_tool)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    logging.basicConfig(
        level=load_settings().log_level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    mcp.run()
