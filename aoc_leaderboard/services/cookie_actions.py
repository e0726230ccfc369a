from __future__ import annotations

import logging

from starlette.responses import Response

from ..config import Settings
from ..schemas import ActionResult
from .credentials import SESSION_COOKIE_MAX_AGE, SESSION_COOKIE_NAME
from .leaderboard_client import Fetcher, FetchOutcome, fetch_leaderboard

logger = logging.getLogger(__name__)

EMPTY_CREDENTIAL_ERROR = "Please enter a session cookie"
MISSING_CODE_ERROR = "AOC_LEADERBOARD_CODE is not configured"
INVALID_CREDENTIAL_ERROR = "Invalid session cookie or unable to fetch leaderboard"


def _failure(status_code: int, error: str, settings: Settings) -> ActionResult:
    return ActionResult(
        success=False,
        status_code=status_code,
        error=error,
        leaderboard_code=settings.leaderboard_code,
        join_code=settings.join_code,
    )


def set_cookie(
    response: Response,
    submitted: str,
    settings: Settings,
    fetcher: Fetcher = fetch_leaderboard,
) -> ActionResult:
    """Validate a submitted session against the leaderboard, then store it.

    The cookie is only written to ``response`` when the validation fetch succeeds.
    """
    session_credential = (submitted or "").strip()
    if not session_credential:
        return _failure(400, EMPTY_CREDENTIAL_ERROR, settings)

    if not settings.leaderboard_code:
        return _failure(400, MISSING_CODE_ERROR, settings)

    result = fetcher(settings.leaderboard_code, session_credential, settings)

    if result.outcome is FetchOutcome.PERMISSION_DENIED:
        return _failure(
            403,
            "You don't have permission to view this leaderboard." + settings.join_hint,
            settings,
        )
    if not result.ok:
        logger.info(f"Rejected submitted session cookie ({result.outcome.value})")
        return _failure(401, INVALID_CREDENTIAL_ERROR, settings)

    response.set_cookie(
        SESSION_COOKIE_NAME,
        session_credential,
        max_age=SESSION_COOKIE_MAX_AGE,
        path="/",
        secure=settings.cookie_secure,
        httponly=True,
        samesite="lax",
    )
    logger.info("Stored validated session cookie")
    return ActionResult(success=True)


def clear_cookie(response: Response) -> ActionResult:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return ActionResult(success=True)
