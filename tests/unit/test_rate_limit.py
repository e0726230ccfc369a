"""
Unit tests for the form-action rate limiter
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from aoc_leaderboard.config import Settings
from aoc_leaderboard.entrypoint import create_app
from aoc_leaderboard.middleware.rate_limit import RateLimitMiddleware
from aoc_leaderboard.routes.frontend import get_fetcher
from tests.constants import LEADERBOARD_CODE


@pytest.fixture
def limited_client(make_fetcher):
    settings = Settings(
        leaderboard_code=LEADERBOARD_CODE,
        rate_limit_requests=2,
        rate_limit_window_seconds=60,
    )
    app = create_app(settings)
    app.dependency_overrides[get_fetcher] = lambda: make_fetcher()
    return TestClient(app, follow_redirects=False)


class TestRateLimitMiddleware:
    def test_form_actions_throttled(self, limited_client):
        assert limited_client.post("/clear-cookie").status_code == 303
        assert limited_client.post("/clear-cookie").status_code == 303

        response = limited_client.post("/clear-cookie")

        assert response.status_code == 429
        assert response.headers["retry-after"] == "60"
        assert "Too many cookie submissions" in response.json()["detail"]

    def test_actions_share_one_budget(self, limited_client):
        limited_client.post("/clear-cookie")
        limited_client.post("/set-cookie", data={"sessionCookie": "abc"})

        response = limited_client.post("/set-cookie", data={"sessionCookie": "abc"})

        assert response.status_code == 429

    def test_page_loads_not_counted(self, limited_client):
        for _ in range(5):
            assert limited_client.get("/").status_code == 200
        assert limited_client.post("/clear-cookie").status_code == 303

    def test_disabled(self, make_fetcher):
        settings = Settings(leaderboard_code=LEADERBOARD_CODE, rate_limit_enabled=False,
                            rate_limit_requests=1)
        client = TestClient(create_app(settings), follow_redirects=False)

        for _ in range(3):
            assert client.post("/clear-cookie").status_code == 303


class TestSlotAccounting:
    @pytest.mark.asyncio
    async def test_window_expiry_and_idle_sweep(self):
        middleware = RateLimitMiddleware(MagicMock(), requests=1, window_seconds=10)
        clock = [1000.0]
        middleware._last_sweep = clock[0]

        with patch("aoc_leaderboard.middleware.rate_limit.time.monotonic", lambda: clock[0]):
            assert await middleware._take_slot("1.2.3.4") is True
            assert await middleware._take_slot("1.2.3.4") is False

            clock[0] += 10
            assert await middleware._take_slot("1.2.3.4") is True

            clock[0] += 100
            assert await middleware._take_slot("5.6.7.8") is True

        assert set(middleware._submissions) == {"5.6.7.8"}
