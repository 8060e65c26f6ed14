# =============================================================================
# core/holiday_client.py  —  Calendarific API client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps every outbound call to the Calendarific holidays endpoint:
#
#     1. cache lookup by the normalized query key (hit -> no network call)
#     2. credential check (ConfigurationError before any request)
#     3. GET with api_key, year and only the optional params that are set
#     4. HTTP failure        -> TransportError(status, body)
#        non-JSON / bad shape -> ProviderError
#        meta.code != 200    -> ProviderError(code)
#     5. successful responses are cached and returned
#
#   Only responses with a verified success code are cached, so a transient
#   provider error is never replayed from the cache.
#
# HTTP:
#   Plain urllib.request.  The opener is injectable so tests can hand back
#   canned responses without touching the network.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Optional

from core.cache import ResponseCache
from core.config import DEFAULT_BASE_URL, Settings
from core.errors import ConfigurationError, ProviderError, TransportError
from core.models import HolidayQuery, HolidayResponse

logger = logging.getLogger(__name__)

Opener = Callable[..., Any]


def redact_url(url: str) -> str:
    """Replace the api_key query value so URLs are safe to log."""
    parts = urllib.parse.urlsplit(url)
    query = [
        (k, "***" if k == "api_key" else v)
        for k, v in urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(query, safe="*")))


class HolidayClient:
    """Cache-backed client for the Calendarific holidays endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        cache: Optional[ResponseCache] = None,
        timeout: float = 10.0,
        opener: Opener = urllib.request.urlopen,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.cache = cache if cache is not None else ResponseCache()
        self.timeout = timeout
        self._opener = opener

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "HolidayClient":
        cache = kwargs.pop("cache", None) or ResponseCache(
            maxsize=settings.cache_max_entries,
            ttl=settings.cache_ttl_seconds,
        )
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            cache=cache,
            timeout=settings.http_timeout,
            **kwargs,
        )

    # ------------------------------------------------------------------
    def build_url(self, query: HolidayQuery) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "CALENDARIFIC_API_KEY is not set. Please add it to your .env file"
            )
        params: list[tuple[str, Any]] = [("api_key", self.api_key)]
        if query.country:
            params.append(("country", query.country))
        params.append(("year", query.year))
        for name in ("month", "day", "type"):
            value = getattr(query, name)
            if value is not None:
                params.append((name, value))
        return f"{self.base_url}?{urllib.parse.urlencode(params)}"

    def fetch(self, query: HolidayQuery) -> HolidayResponse:
        """Return the provider response for ``query``, from cache when fresh.

        Raises:
            ConfigurationError: no API key is configured.
            TransportError: the HTTP request failed.
            ProviderError: the body is not a valid success response.
        """
        key = query.cache_key()
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        url = self.build_url(query)
        logger.info("Calling Calendarific API: %s", redact_url(url))

        body = self._get(url)
        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise ProviderError("Calendarific response is not JSON") from exc

        response = HolidayResponse.from_api(payload)
        if not response.ok:
            raise ProviderError(
                f"Calendarific returned error code: {response.status_code}",
                code=response.status_code,
            )

        self.cache.set(key, response)
        return response

    def _get(self, url: str) -> str:
        request = urllib.request.Request(url, headers={"Accept": "application/json"})
        try:
            with self._opener(request, timeout=self.timeout) as resp:
                return resp.read().decode("utf-8")
        except urllib.error.HTTPError as exc:
            try:
                detail = exc.read().decode("utf-8", errors="replace")
            except Exception:  # pragma: no cover - body already consumed
                detail = ""
            raise TransportError(exc.code, detail or str(exc.reason)) from exc
        except (urllib.error.URLError, OSError) as exc:
            reason = getattr(exc, "reason", exc)
            raise TransportError(None, str(reason)) from exc
