"""Ordered middleware chain wrapping a terminal render step.

Steps have the same shape as aiohttp middlewares: they receive the request
and the rest of the chain as ``handler``. A step either awaits ``handler``
to continue or returns its own response to short-circuit. The innermost
handler is the terminal render step supplied per request.
"""

import logging
import time
from collections.abc import Awaitable, Callable, Sequence

from aiohttp import web

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]
MiddlewareStep = Callable[[web.Request, Handler], Awaitable[web.StreamResponse]]

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "same-origin",
}


class MiddlewareChain:
    """Runs steps in declaration order, then the terminal step.

    The chain knows nothing about rendering. It only guarantees ordering,
    single invocation of each step, and that every request ends with a
    response: unexpected exceptions become a 500.
    """

    __slots__ = ("_steps",)

    def __init__(self, steps: Sequence[MiddlewareStep] = ()) -> None:
        self._steps = tuple(steps)

    @property
    def steps(self) -> tuple[MiddlewareStep, ...]:
        """Steps in execution order."""
        return self._steps

    async def __call__(self, request: web.Request, terminal: Handler) -> web.StreamResponse:
        """Run the chain for one request.

        Args:
            request: Incoming request
            terminal: Final step producing the response body

        Returns:
            Response from the terminal step, a short-circuiting step,
            or a 500 response if anything raised
        """
        handler = terminal
        for step in reversed(self._steps):
            handler = _bind(step, handler)

        try:
            return await handler(request)
        except web.HTTPException:
            raise
        except Exception:
            logger.exception(f"Unhandled error while serving {request.method} {request.path}")
            return web.Response(status=500, text="Internal Server Error")


def _bind(step: MiddlewareStep, handler: Handler) -> Handler:
    async def bound(request: web.Request) -> web.StreamResponse:
        return await step(request, handler)

    return bound


async def request_logger(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Log method, path, status and elapsed time."""
    started = time.perf_counter()
    response = await handler(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.path} {response.status} {elapsed_ms:.1f}ms")
    return response


async def security_headers(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Add conservative security headers to the response."""
    response = await handler(request)
    if not response.prepared:
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
    return response


def default_chain() -> MiddlewareChain:
    """Build the chain used for page routes."""
    return MiddlewareChain([request_logger, security_headers])
