from __future__ import annotations

import logging
from typing import Mapping

from ..config import Settings
from ..schemas import ErrorInfo, PageData
from .credentials import resolve_session_credential
from .leaderboard_client import Fetcher, FetchOutcome, FetchResult, fetch_leaderboard
from .ranking import rank_members

logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = "AOC_LEADERBOARD_CODE environment variable is not set."
FETCH_ERROR_MESSAGE = "Failed to fetch leaderboard. Please check your session cookie."
NETWORK_ERROR_MESSAGE = "Could not reach Advent of Code. Please try again later."


def load_page(
    cookies: Mapping[str, str],
    settings: Settings,
    fetcher: Fetcher = fetch_leaderboard,
) -> PageData:
    """Build the data for the leaderboard page.

    Failures never raise; they come back as ``PageData.error`` with the
    credential form shown again.
    """
    base = {
        "leaderboard_code": settings.leaderboard_code,
        "join_code": settings.join_code,
    }

    if not settings.leaderboard_code:
        return PageData(
            **base,
            show_cookie_input=True,
            error=ErrorInfo(type="config", message=CONFIG_ERROR_MESSAGE),
        )

    session_credential = resolve_session_credential(cookies, settings)
    if not session_credential:
        return PageData(**base, show_cookie_input=True)

    result = fetcher(settings.leaderboard_code, session_credential, settings)
    if result.ok:
        return PageData(
            **base,
            leaderboard_data=result.leaderboard,
            members=rank_members(result.leaderboard),
            show_cookie_input=False,
        )

    return PageData(**base, show_cookie_input=True, error=error_for(result, settings))


def error_for(result: FetchResult, settings: Settings) -> ErrorInfo:
    if result.outcome is FetchOutcome.PERMISSION_DENIED:
        return ErrorInfo(
            type="auth",
            message="You don't have permission to view this private leaderboard."
            + settings.join_hint,
        )
    if result.outcome is FetchOutcome.UNREACHABLE:
        return ErrorInfo(type="network", message=NETWORK_ERROR_MESSAGE)
    return ErrorInfo(type="auth", message=FETCH_ERROR_MESSAGE)
