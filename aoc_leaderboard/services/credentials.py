from __future__ import annotations

from typing import Mapping

from ..config import Settings

SESSION_COOKIE_NAME = "aoc_session"
SESSION_COOKIE_MAX_AGE = 60 * 60 * 24 * 30  # 30 days


def resolve_session_credential(cookies: Mapping[str, str], settings: Settings) -> str:
    """Return the visitor's own session cookie, else the configured fallback."""
    return cookies.get(SESSION_COOKIE_NAME) or settings.session_cookie or ""
