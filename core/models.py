# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the holiday core: what Calendarific sends us, what we ask it for,
# and what the query operations hand back to the tools layer.
#
# Provider payloads are converted into these types at the ingestion boundary
# (Holiday.from_api / HolidayResponse.from_api).  Everything past that point
# works with plain attributes, never with raw JSON.
#
# Output dataclasses are converted with dataclasses.asdict() in tools/, so
# their field names are the field names the agent sees.
# =============================================================================

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from core.errors import ProviderError

logger = logging.getLogger(__name__)

# Category tags Calendarific documents.  The provider may send others; those
# are kept as opaque strings on Holiday.types.
HOLIDAY_TYPES = ("national", "local", "religious", "observance")

# Calendarific's logical success code (independent of the HTTP status).
PROVIDER_OK = 200


# -----------------------------------------------------------------------------
# CountryEntry — one row of the country directory
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CountryEntry:
    """A supported country: display name and ISO 3166-1 alpha-2 code."""

    name: str
    code: str


# -----------------------------------------------------------------------------
# HolidayQuery — the parameters of one Calendarific request
# -----------------------------------------------------------------------------
# The cache key is derived from these fields.  Optional fields left as None
# are dropped before serialization, so HolidayQuery(year=2025) and
# HolidayQuery(year=2025, month=None) produce the same key.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class HolidayQuery:
    """Request parameters for the holidays endpoint."""

    year: int
    country: Optional[str] = None
    month: Optional[int] = None
    day: Optional[int] = None
    type: Optional[str] = None

    def present_fields(self) -> dict[str, Any]:
        """Return only the fields that carry a value."""
        fields = {
            "country": self.country,
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "type": self.type,
        }
        return {k: v for k, v in fields.items() if v is not None}

    def cache_key(self) -> str:
        return json.dumps(self.present_fields(), sort_keys=True, separators=(",", ":"))


def _object_field(raw: dict[str, Any], name: str) -> dict[str, Any]:
    """Return ``raw[name]`` as a dict; absent or empty means ``{}``."""
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ProviderError(f"Calendarific field {name!r} is not an object")
    return value


# -----------------------------------------------------------------------------
# Holiday — a single holiday record from the provider
# -----------------------------------------------------------------------------
@dataclass
class Holiday:
    """A holiday as returned by Calendarific, flattened.

    ``date`` is the ISO calendar date (``YYYY-MM-DD``); ``year``, ``month`` and
    ``day`` always agree with it.
    """

    name: str
    description: str
    country_code: str
    country_name: str
    date: str
    year: int
    month: int
    day: int
    types: list[str] = field(default_factory=list)
    locations: Optional[str] = None
    states: Any = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Holiday":
        """Build a Holiday from one element of ``response.holidays``.

        Raises:
            ProviderError: if the record has the wrong shape or no usable date.
        """
        if not isinstance(raw, dict):
            raise ProviderError("Holiday record is not an object")

        country = _object_field(raw, "country")
        date_info = _object_field(raw, "date")
        # Observances with a time component arrive as e.g.
        # "2025-03-09T02:00:00-08:00"; the calendar date is the prefix.
        iso = str(date_info.get("iso") or "")[:10]
        parts = _object_field(date_info, "datetime")

        try:
            year, month, day = (int(p) for p in iso.split("-"))
        except ValueError:
            try:
                year, month, day = int(parts["year"]), int(parts["month"]), int(parts["day"])
            except (KeyError, TypeError, ValueError) as exc:
                raise ProviderError(f"Holiday {raw.get('name')!r} has no usable date") from exc
            iso = f"{year:04d}-{month:02d}-{day:02d}"
        else:
            if parts and (parts.get("year"), parts.get("month"), parts.get("day")) != (year, month, day):
                logger.debug("Date parts disagree with ISO date %s for %r; using ISO", iso, raw.get("name"))

        types = raw.get("type") or []
        if not isinstance(types, list):
            types = [types]

        return cls(
            name=str(raw.get("name") or ""),
            description=str(raw.get("description") or ""),
            country_code=str(country.get("id") or "").upper(),
            country_name=str(country.get("name") or ""),
            date=iso,
            year=year,
            month=month,
            day=day,
            types=[str(t) for t in types],
            locations=raw.get("locations"),
            states=raw.get("states"),
        )


@dataclass
class HolidayResponse:
    """Parsed ``{meta: {code}, response: {holidays: [...]}}`` body."""

    status_code: int
    holidays: list[Holiday] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status_code == PROVIDER_OK

    @classmethod
    def from_api(cls, payload: Any) -> "HolidayResponse":
        if not isinstance(payload, dict):
            raise ProviderError("Calendarific response payload is not an object")
        meta = _object_field(payload, "meta")
        try:
            code = int(meta.get("code"))
        except (TypeError, ValueError) as exc:
            raise ProviderError("Calendarific response has no meta.code") from exc
        if code != PROVIDER_OK:
            return cls(status_code=code)

        body = payload.get("response") or {}
        # Calendarific returns an empty list (not an object) when nothing matches.
        raw_holidays = (body.get("holidays") if isinstance(body, dict) else None) or []
        if not isinstance(raw_holidays, list):
            raise ProviderError("Calendarific response.holidays is not a list")
        return cls(status_code=code, holidays=[Holiday.from_api(h) for h in raw_holidays])


# -----------------------------------------------------------------------------
# CountryResult / AggregateResult — output of the multi-country fan-out
# -----------------------------------------------------------------------------
# A tagged variant: exactly one of ``holidays`` (success) or ``error``
# (failure) is meaningful.  Keeping failures as values instead of swallowing
# them lets callers and tests count them.
# -----------------------------------------------------------------------------
@dataclass
class CountryResult:
    code: str
    holidays: list[Holiday] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AggregateResult:
    results: list[CountryResult] = field(default_factory=list)

    @property
    def holidays(self) -> list[Holiday]:
        return [h for r in self.results if r.ok for h in r.holidays]

    @property
    def countries_searched(self) -> int:
        """Number of countries fetched successfully (failures excluded)."""
        return sum(1 for r in self.results if r.ok)

    @property
    def failures(self) -> list[CountryResult]:
        return [r for r in self.results if not r.ok]


# -----------------------------------------------------------------------------
# Query operation outputs — what each tool returns (via asdict)
# -----------------------------------------------------------------------------
@dataclass
class CountryHoliday:
    name: str
    description: str
    date: str
    types: list[str]
    country: str


@dataclass
class CountryHolidaysResult:
    holidays: list[CountryHoliday]
    count: int
    query: dict[str, Any]


@dataclass
class DateHoliday:
    name: str
    description: str
    country: str
    country_code: str
    types: list[str]


@dataclass
class DateHolidaysResult:
    date: str
    holidays: list[DateHoliday]
    total_holidays: int
    countries_searched: int


@dataclass
class SearchMatch:
    name: str
    description: str
    country: str
    country_code: str
    date: str
    types: list[str]


@dataclass
class SearchResult:
    results: list[SearchMatch]
    search_term: str
    total_found: int
    year: int
    countries_searched: int


@dataclass
class TodayHoliday:
    name: str
    description: str
    country: str
    types: list[str]


@dataclass
class TodayResult:
    date: str
    is_holiday: bool
    holidays: list[TodayHoliday]
    total_holidays: int
    countries_searched: int


@dataclass
class CountryValidation:
    is_valid: bool
    country_name: Optional[str] = None
    country_code: Optional[str] = None
    suggestions: list[CountryEntry] = field(default_factory=list)


@dataclass
class SupportedCountries:
    countries: list[CountryEntry]
    total_countries: int
    search_query: Optional[str] = None
