"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Register pytest-asyncio plugin explicitly
pytest_plugins = ["pytest_asyncio"]

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from aoc_leaderboard.config import Settings  # noqa: E402
from aoc_leaderboard.schemas import LeaderboardResponse  # noqa: E402
from aoc_leaderboard.services.leaderboard_client import FetchOutcome, FetchResult  # noqa: E402

from tests.constants import LEADERBOARD_CODE, JOIN_CODE, SAMPLE_LEADERBOARD  # noqa: E402


@pytest.fixture
def settings():
    """Settings with a leaderboard and join code but no fallback session"""
    return Settings(
        leaderboard_code=LEADERBOARD_CODE,
        join_code=JOIN_CODE,
        rate_limit_enabled=False,
    )


@pytest.fixture
def leaderboard():
    return LeaderboardResponse.model_validate(SAMPLE_LEADERBOARD)


class RecordingFetcher:
    """Stands in for fetch_leaderboard and remembers what it was asked for"""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def __call__(self, leaderboard_code, session_credential, settings):
        self.calls.append((leaderboard_code, session_credential))
        return self.result


@pytest.fixture
def make_fetcher(leaderboard):
    def _make(outcome=FetchOutcome.SUCCESS):
        if outcome is FetchOutcome.SUCCESS:
            return RecordingFetcher(FetchResult(outcome, leaderboard=leaderboard))
        return RecordingFetcher(FetchResult(outcome, detail=outcome.value))

    return _make
