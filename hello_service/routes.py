"""
Route table for EC2 Hello Service

Each route maps an exact path (and its allowed methods) to a pure handler.
Anything not listed here falls through to the framework's not-found response.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Tuple


ROOT_GREETING = "Hello from EC2 instance! Server is running."
HEALTH_BODY = "ok"


async def read_root() -> str:
    """Root endpoint"""
    return ROOT_GREETING


async def health_check() -> str:
    """Health check endpoint"""
    return HEALTH_BODY


@dataclass(frozen=True)
class Route:
    path: str
    handler: Callable[[], Awaitable[str]]
    methods: Tuple[str, ...] = ("GET", "HEAD")
    status_code: int = 200


ROUTES: Tuple[Route, ...] = (
    Route("/", read_root),
    Route("/health", health_check),
)
