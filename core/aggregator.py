# =============================================================================
# core/aggregator.py  —  Multi-country fan-out
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers cross-country questions ("who celebrates Christmas?") by asking
#   Calendarific about one country at a time and collecting the results.
#
#   - strictly sequential: one request in flight, in list order
#   - a fixed pause between consecutive requests (coarse rate limiting)
#   - a failing country never aborts the loop; it becomes a CountryResult
#     carrying the error, and is excluded from countries_searched
#   - a missing API key is not a per-country problem and is re-raised
#
#   Filtering, sorting and output shaping belong to the caller
#   (core/queries.py).  The aggregator only fetches and tags.
# =============================================================================

import logging
import time
from typing import Callable, Iterable, Optional

from core.errors import ConfigurationError, HolidayServiceError
from core.holiday_client import HolidayClient
from core.models import AggregateResult, CountryResult, HolidayQuery

logger = logging.getLogger(__name__)


class Aggregator:
    """Sequential per-country fetches tolerant of partial failure."""

    def __init__(
        self,
        client: HolidayClient,
        *,
        delay: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.delay = delay
        self._sleep = sleep

    def fan_out(
        self,
        codes: Iterable[str],
        *,
        year: int,
        month: Optional[int] = None,
        day: Optional[int] = None,
        type: Optional[str] = None,
    ) -> AggregateResult:
        codes = list(codes)
        result = AggregateResult()

        for index, code in enumerate(codes):
            if index and self.delay > 0:
                self._sleep(self.delay)

            query = HolidayQuery(year=year, country=code, month=month, day=day, type=type)
            try:
                response = self.client.fetch(query)
            except ConfigurationError:
                raise
            except HolidayServiceError as exc:
                logger.info("No data or error for %s: %s", code, exc)
                result.results.append(CountryResult(code=code, error=exc))
                continue

            if response.holidays:
                logger.debug("Found %d holiday(s) in %s", len(response.holidays), code)
            result.results.append(CountryResult(code=code, holidays=response.holidays))

        failed = len(result.failures)
        logger.info(
            "Search complete: %d holidays found across %d countries%s",
            len(result.holidays),
            result.countries_searched,
            f" ({failed} failed)" if failed else "",
        )
        return result
