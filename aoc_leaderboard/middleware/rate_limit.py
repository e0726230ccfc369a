from __future__ import annotations

import asyncio
import time
from collections import defaultdict, deque
from typing import Callable, Collection, Deque, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

FORM_ACTION_PATHS = ("/set-cookie", "/clear-cookie")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Caps session-cookie submissions per visitor.

    A submission to ``/set-cookie`` costs one request to Advent of Code, so a
    visitor guessing session values would otherwise turn this app into a
    relay against adventofcode.com. Page loads pass straight through; only
    ``paths`` draw from a visitor's budget of ``requests`` per
    ``window_seconds``.
    """

    def __init__(
        self,
        app,
        *,
        requests: int = 10,
        window_seconds: int = 60,
        paths: Collection[str] = FORM_ACTION_PATHS,
        key_func: Callable[[Request], str] | None = None,
    ):
        super().__init__(app)
        self.requests = max(1, requests)
        self.window = max(1, window_seconds)
        self.paths = frozenset(paths)
        self.key_func = key_func or self._client_ip
        self._submissions: Dict[str, Deque[float]] = defaultdict(deque)
        self._visitor_locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._registry_lock = asyncio.Lock()
        self._last_sweep = time.monotonic()

    @staticmethod
    def _client_ip(request: Request) -> str:
        client = request.client
        return client.host if client else "unknown"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path not in self.paths:
            return await call_next(request)

        if not await self._take_slot(self.key_func(request)):
            return JSONResponse(
                {"detail": "Too many cookie submissions. Wait a minute and try again."},
                status_code=429,
                headers={"Retry-After": str(self.window)},
            )
        return await call_next(request)

    async def _take_slot(self, visitor: str) -> bool:
        now = time.monotonic()

        async with self._registry_lock:
            self._sweep_idle_visitors(now)
            submissions = self._submissions[visitor]
            lock = self._visitor_locks[visitor]

        async with lock:
            while submissions and submissions[0] <= now - self.window:
                submissions.popleft()
            if len(submissions) >= self.requests:
                return False
            submissions.append(now)
            return True

    def _sweep_idle_visitors(self, now: float) -> None:
        """Forget visitors with no submission in the last two windows."""
        if now - self._last_sweep < self.window:
            return

        cutoff = now - self.window * 2
        for visitor in [v for v, times in self._submissions.items() if not times or times[-1] < cutoff]:
            del self._submissions[visitor]
            self._visitor_locks.pop(visitor, None)
        self._last_sweep = now
