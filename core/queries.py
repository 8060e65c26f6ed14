# =============================================================================
# core/queries.py  —  Query operations behind the agent's tools
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the six questions the agent can ask the holiday core:
#
#     get_holidays_by_country   all holidays for one country/year (+filters)
#     get_holidays_for_date     what's celebrated on a month/day
#     search_holidays_by_name   which countries have a holiday called X
#     check_today_holidays      is today a holiday (here / anywhere)
#     validate_country          name <-> code resolution with suggestions
#     get_supported_countries   directory listing / search, no network
#
#   Each operation validates its input first (core/schemas.py), then calls
#   the client directly (one country) or the aggregator (several countries),
#   and shapes the output into the dataclasses in core/models.py.
#
# ERRORS:
#   ValidationError passes through untouched.  Any other core error that
#   reaches an operation is wrapped exactly once in OperationError.
#   Per-country failures inside a fan-out never get this far.
# =============================================================================

import functools
import logging
from datetime import date
from typing import Callable, Optional

from core.aggregator import Aggregator
from core.config import Settings
from core.countries import (
    DATE_PRIORITY_CODES,
    SEARCH_PRIORITY_CODES,
    TODAY_PRIORITY_CODES,
    CountryDirectory,
)
from core.errors import HolidayServiceError, OperationError, ValidationError
from core.holiday_client import HolidayClient
from core.models import (
    AggregateResult,
    CountryHoliday,
    CountryHolidaysResult,
    CountryResult,
    CountryValidation,
    DateHoliday,
    DateHolidaysResult,
    HolidayQuery,
    SearchMatch,
    SearchResult,
    SupportedCountries,
    TodayHoliday,
    TodayResult,
)
from core.schemas import (
    HolidaysByCountryInput,
    HolidaysForDateInput,
    SearchHolidaysInput,
    TodayHolidaysInput,
    ValidateCountryInput,
    validate_input,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5


def operation(name: str):
    """Wrap core failures raised inside an operation in OperationError."""

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except (ValidationError, OperationError):
                raise
            except HolidayServiceError as exc:
                logger.error("Error in %s: %s", name, exc)
                raise OperationError(name, exc) from exc

        return wrapper

    return decorator


class HolidayService:
    """The query operations, bound to one client, aggregator and directory."""

    def __init__(
        self,
        client: HolidayClient,
        *,
        aggregator: Optional[Aggregator] = None,
        directory: Optional[CountryDirectory] = None,
        today: Callable[[], date] = date.today,
    ):
        self.client = client
        self.aggregator = aggregator or Aggregator(client)
        self.directory = directory or CountryDirectory()
        self._today = today

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "HolidayService":
        client = HolidayClient.from_settings(settings)
        aggregator = Aggregator(client, delay=settings.fanout_delay_seconds)
        return cls(client, aggregator=aggregator, **kwargs)

    # ------------------------------------------------------------------
    def _collect(self, country: Optional[str], fallback: tuple[str, ...], **params) -> AggregateResult:
        """Fetch one explicit country, or fan out over a priority list.

        An explicit country is a single-country query, so its failure is
        raised instead of being absorbed like a fan-out miss.
        """
        if country:
            response = self.client.fetch(HolidayQuery(country=country, **params))
            return AggregateResult([CountryResult(code=country, holidays=response.holidays)])

        codes = self.directory.supported_codes(fallback)
        logger.info("Searching across %d countries", len(codes))
        return self.aggregator.fan_out(codes, **params)

    # ------------------------------------------------------------------
    @operation("fetch holidays")
    def get_holidays_by_country(
        self,
        country: str,
        year: int,
        month: Optional[int] = None,
        day: Optional[int] = None,
        type: Optional[str] = None,
    ) -> CountryHolidaysResult:
        args = validate_input(
            HolidaysByCountryInput, country=country, year=year, month=month, day=day, type=type
        )
        query = HolidayQuery(
            year=args.year, country=args.country, month=args.month, day=args.day, type=args.type
        )
        response = self.client.fetch(query)

        holidays = [
            CountryHoliday(
                name=h.name,
                description=h.description,
                date=h.date,
                types=list(h.types),
                country=h.country_name,
            )
            for h in response.holidays
        ]
        return CountryHolidaysResult(
            holidays=holidays,
            count=len(holidays),
            query=query.present_fields(),
        )

    @operation("get holidays for date")
    def get_holidays_for_date(
        self,
        month: int,
        day: int,
        year: Optional[int] = None,
        country: Optional[str] = None,
    ) -> DateHolidaysResult:
        args = validate_input(HolidaysForDateInput, month=month, day=day, year=year, country=country)
        search_year = args.year or self._today().year

        found = self._collect(
            args.country, DATE_PRIORITY_CODES, year=search_year, month=args.month, day=args.day
        )
        holidays = [
            DateHoliday(
                name=h.name,
                description=h.description,
                country=h.country_name,
                country_code=h.country_code,
                types=list(h.types),
            )
            for h in found.holidays
        ]
        holidays.sort(key=lambda h: h.country.casefold())

        return DateHolidaysResult(
            date=f"{search_year:04d}-{args.month:02d}-{args.day:02d}",
            holidays=holidays,
            total_holidays=len(holidays),
            countries_searched=found.countries_searched,
        )

    @operation("search holidays")
    def search_holidays_by_name(
        self,
        search_term: str,
        country: Optional[str] = None,
        year: Optional[int] = None,
        type: Optional[str] = None,
    ) -> SearchResult:
        args = validate_input(
            SearchHolidaysInput, search_term=search_term, country=country, year=year, type=type
        )
        search_year = args.year or self._today().year
        needle = args.search_term.lower()

        found = self._collect(args.country, SEARCH_PRIORITY_CODES, year=search_year, type=args.type)
        matches = [
            SearchMatch(
                name=h.name,
                description=h.description,
                country=h.country_name,
                country_code=h.country_code,
                date=h.date,
                types=list(h.types),
            )
            for h in found.holidays
            if needle in h.name.lower() or needle in h.description.lower()
        ]
        return SearchResult(
            results=matches,
            search_term=args.search_term,
            total_found=len(matches),
            year=search_year,
            countries_searched=found.countries_searched,
        )

    @operation("check today's holidays")
    def check_today_holidays(self, country: Optional[str] = None) -> TodayResult:
        args = validate_input(TodayHolidaysInput, country=country)
        today = self._today()

        found = self._collect(
            args.country, TODAY_PRIORITY_CODES, year=today.year, month=today.month, day=today.day
        )
        holidays = [
            TodayHoliday(
                name=h.name,
                description=h.description,
                country=h.country_name,
                types=list(h.types),
            )
            for h in found.holidays
        ]
        return TodayResult(
            date=today.isoformat(),
            is_holiday=bool(holidays),
            holidays=holidays,
            total_holidays=len(holidays),
            countries_searched=found.countries_searched,
        )

    @operation("validate country code")
    def validate_country(self, input: str) -> CountryValidation:
        args = validate_input(ValidateCountryInput, input=input)
        text = args.input.strip()

        if len(text) == 2:
            name = self.directory.name_for_code(text)
            if name:
                return CountryValidation(is_valid=True, country_name=name, country_code=text.upper())

        code = self.directory.code_for_name(text)
        if code:
            return CountryValidation(
                is_valid=True,
                country_name=self.directory.canonical_name(text),
                country_code=code,
            )

        suggestions = self.directory.search(text)[:MAX_SUGGESTIONS] if text else []
        return CountryValidation(is_valid=False, suggestions=suggestions)

    @operation("get supported countries")
    def get_supported_countries(self, search_query: Optional[str] = None) -> SupportedCountries:
        query = (search_query or "").strip()
        countries = self.directory.search(query) if query else self.directory.all_entries()
        countries.sort(key=lambda c: c.name.casefold())
        return SupportedCountries(
            countries=countries,
            total_countries=len(countries),
            search_query=search_query or None,
        )
