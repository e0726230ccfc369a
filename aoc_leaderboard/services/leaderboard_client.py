"""
Client for the Advent of Code private leaderboard JSON endpoint.

Every call makes exactly one outbound request and reports the result as a
``FetchResult`` rather than raising, so callers pick the user-facing message
from ``FetchResult.outcome``:

    result = fetch_leaderboard(code, session, settings)
    if result.ok:
        render(result.leaderboard)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import requests
from pydantic import ValidationError

from ..config import Settings
from ..schemas import LeaderboardResponse

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MARKER = "You don't have permission"


class FetchOutcome(str, Enum):
    SUCCESS = "success"
    PERMISSION_DENIED = "permission_denied"
    REJECTED = "rejected"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class FetchResult:
    outcome: FetchOutcome
    leaderboard: Optional[LeaderboardResponse] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is FetchOutcome.SUCCESS


Fetcher = Callable[[str, str, Settings], FetchResult]


def leaderboard_url(leaderboard_code: str, settings: Settings) -> str:
    return (
        f"{settings.base_url}/{settings.event_year}"
        f"/leaderboard/private/view/{leaderboard_code}.json"
    )


def is_permission_denied(text: str) -> bool:
    """True when the body is the HTML page shown to non-members.

    Advent of Code answers with a 200 and an HTML page instead of an error
    status, so this has to look at the text.
    """
    return PERMISSION_DENIED_MARKER in text


def fetch_leaderboard(
    leaderboard_code: str, session_credential: str, settings: Settings
) -> FetchResult:
    url = leaderboard_url(leaderboard_code, settings)
    headers = {
        "Cookie": f"session={session_credential}",
        "User-Agent": settings.user_agent,
    }

    try:
        response = requests.get(url, headers=headers, timeout=settings.request_timeout)
    except requests.exceptions.RequestException as e:
        logger.warning(f"Leaderboard request to {url} failed: {e}")
        return FetchResult(FetchOutcome.UNREACHABLE, detail=str(e))

    if not response.ok:
        logger.warning(f"Leaderboard request to {url} returned HTTP {response.status_code}")
        return FetchResult(FetchOutcome.REJECTED, detail=f"HTTP {response.status_code}")

    text = response.text
    if is_permission_denied(text):
        logger.info(f"Session has no permission to view leaderboard {leaderboard_code}")
        return FetchResult(FetchOutcome.PERMISSION_DENIED, detail="permission denied")

    try:
        leaderboard = LeaderboardResponse.model_validate_json(text)
    except ValidationError as e:
        # Expired sessions get redirected to the login page, which is HTML.
        logger.warning(
            f"Leaderboard {leaderboard_code} returned an unreadable body "
            f"({e.error_count()} validation errors)"
        )
        return FetchResult(FetchOutcome.REJECTED, detail="invalid leaderboard document")

    logger.info(
        f"Fetched leaderboard {leaderboard_code} for event {leaderboard.event} "
        f"with {len(leaderboard.members)} members"
    )
    return FetchResult(FetchOutcome.SUCCESS, leaderboard=leaderboard)
