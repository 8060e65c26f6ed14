# =============================================================================
# core/config.py  —  Runtime settings
# =============================================================================
#
# All settings come from the environment (optionally seeded from a .env file
# via python-dotenv).  Nothing is validated at startup: a missing
# CALENDARIFIC_API_KEY only becomes an error when the first request that
# actually needs the network is made.
#
#   CALENDARIFIC_API_KEY          provider credential (required for fetches)
#   CALENDARIFIC_BASE_URL         holidays endpoint
#   HOLIDAY_HTTP_TIMEOUT          seconds per request
#   HOLIDAY_CACHE_MAX_ENTRIES     LRU capacity
#   HOLIDAY_CACHE_TTL_SECONDS     entry lifetime
#   HOLIDAY_FANOUT_DELAY_SECONDS  pause between multi-country requests
#   HOLIDAY_AGENT_MODEL           LiteLlm model string for the agent
#   A2A_HOST / A2A_PORT           bind address of the A2A server
#   LOG_LEVEL                     stdlib logging level name
# =============================================================================

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://calendarific.com/api/v2/holidays"
DEFAULT_MODEL = "openrouter/google/gemini-2.5-flash"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    http_timeout: float = 10.0
    cache_max_entries: int = 500
    cache_ttl_seconds: float = 60 * 60 * 24
    fanout_delay_seconds: float = 0.1
    agent_model: str = DEFAULT_MODEL
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.environ[key])
    except (KeyError, ValueError):
        return default


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.environ[key])
    except (KeyError, ValueError):
        return default


def load_settings() -> Settings:
    """Read settings from the environment, loading .env first if present."""
    load_dotenv(override=False)

    defaults = Settings()
    api_key = (os.getenv("CALENDARIFIC_API_KEY") or "").strip() or None

    return Settings(
        api_key=api_key,
        base_url=os.getenv("CALENDARIFIC_BASE_URL") or defaults.base_url,
        http_timeout=_env_float("HOLIDAY_HTTP_TIMEOUT", defaults.http_timeout),
        cache_max_entries=_env_int("HOLIDAY_CACHE_MAX_ENTRIES", defaults.cache_max_entries),
        cache_ttl_seconds=_env_float("HOLIDAY_CACHE_TTL_SECONDS", defaults.cache_ttl_seconds),
        fanout_delay_seconds=_env_float("HOLIDAY_FANOUT_DELAY_SECONDS", defaults.fanout_delay_seconds),
        agent_model=os.getenv("HOLIDAY_AGENT_MODEL") or defaults.agent_model,
        host=os.getenv("A2A_HOST") or defaults.host,
        port=_env_int("A2A_PORT", defaults.port),
        log_level=(os.getenv("LOG_LEVEL") or defaults.log_level).upper(),
    )
