from __future__ import annotations

import asyncio
import logging

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    """Answer 504 when a request runs longer than ``timeout_seconds`` (0 disables).

    Plain ASGI so the downstream app is cancelled on timeout instead of being
    left to finish in a background task group. Writes are not timed: a sync
    handler keeps running in its worker thread after cancellation and may still
    commit, so a 504 would misreport the outcome.
    """

    UNTIMED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

    def __init__(self, app, *, timeout_seconds: int) -> None:
        self.app = app
        self._timeout = timeout_seconds

    async def __call__(self, scope, receive, send):
        if (
            scope["type"] != "http"
            or self._timeout <= 0
            or scope.get("method") in self.UNTIMED_METHODS
        ):
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("Request %s %s timed out after %ss", scope.get("method"), scope.get("path"), self._timeout)
            if response_started:
                return
            response = JSONResponse({"error": "Request timed out"}, status_code=504)
            await response(scope, receive, send)
