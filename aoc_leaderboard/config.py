from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_EVENT_YEAR = 2025
DEFAULT_BASE_URL = "https://adventofcode.com"
DEFAULT_USER_AGENT = "aoc-leaderboard/0.1.0"
DEFAULT_RATE_LIMIT_REQUESTS = 10
DEFAULT_RATE_LIMIT_WINDOW = 60

_TRUTHY = ("true", "1", "yes")


class Settings(BaseModel):
    """Process-wide configuration, read once and passed to every handler."""

    model_config = ConfigDict(frozen=True)

    leaderboard_code: str = ""
    join_code: str = ""
    session_cookie: str = Field(default="", repr=False)
    event_year: int = DEFAULT_EVENT_YEAR
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: Optional[float] = None
    cookie_secure: bool = False
    rate_limit_enabled: bool = True
    rate_limit_requests: int = DEFAULT_RATE_LIMIT_REQUESTS
    rate_limit_window_seconds: int = DEFAULT_RATE_LIMIT_WINDOW

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            leaderboard_code=env.get("AOC_LEADERBOARD_CODE", "").strip(),
            join_code=env.get("AOC_JOIN_CODE", "").strip(),
            session_cookie=env.get("AOC_SESSION_COOKIE", "").strip(),
            event_year=_parse_positive_int(
                env, "AOC_EVENT_YEAR", DEFAULT_EVENT_YEAR, maximum=9999
            ),
            base_url=(env.get("AOC_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            user_agent=env.get("AOC_USER_AGENT") or DEFAULT_USER_AGENT,
            request_timeout=_parse_timeout(env),
            cookie_secure=env.get("COOKIE_SECURE", "").lower() in _TRUTHY,
            rate_limit_enabled=env.get("DISABLE_RATE_LIMIT", "").lower() not in _TRUTHY,
            rate_limit_requests=_parse_positive_int(
                env, "RATE_LIMIT_REQUESTS", DEFAULT_RATE_LIMIT_REQUESTS, maximum=10000
            ),
            rate_limit_window_seconds=_parse_positive_int(
                env, "RATE_LIMIT_WINDOW_SECONDS", DEFAULT_RATE_LIMIT_WINDOW, maximum=3600
            ),
        )

    @property
    def join_hint(self) -> str:
        return f" Join using code: {self.join_code}" if self.join_code else ""


def _parse_positive_int(
    env: Mapping[str, str], name: str, default: int, *, maximum: int
) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid {name} value: {raw}. Error: {e}. Using default: {default}")
        return default
    if value <= 0:
        logger.warning(f"Invalid {name} value: {raw}. Must be positive. Using default: {default}")
        return default
    if value > maximum:
        logger.warning(
            f"{name} value {value} exceeds maximum ({maximum}). Using default: {default}"
        )
        return default
    return value


def _parse_timeout(env: Mapping[str, str]) -> Optional[float]:
    raw = env.get("AOC_REQUEST_TIMEOUT")
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid AOC_REQUEST_TIMEOUT value: {raw}. Requests will not time out")
        return None
    if value <= 0:
        logger.warning(f"Invalid AOC_REQUEST_TIMEOUT value: {raw}. Must be positive")
        return None
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    settings = Settings.from_env()
    if not settings.leaderboard_code:
        logger.warning("AOC_LEADERBOARD_CODE is not set; the leaderboard page will report a config error")
    return settings
