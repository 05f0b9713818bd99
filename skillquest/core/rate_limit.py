"""
Simple in-memory fixed-window rate limiter, keyed by client address.
"""
import logging
import time
from typing import Callable, Dict, Iterable, Tuple
from fastapi import Request

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"


def get_client_ip(request: Request, trusted_proxies: Iterable[str] = ()) -> str:
    """
    Extract the client address used as the rate-limit key.

    ``X-Forwarded-For`` is honoured only when the socket peer is one of
    ``trusted_proxies``.
    """
    peer = request.client.host if request.client else "unknown"
    if peer in set(trusted_proxies):
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take the first IP in the chain
            return forwarded.split(",")[0].strip()
    return peer


class FixedWindowRateLimiter:
    """
    Allows ``max_requests`` per ``window_seconds`` for each key.

    Windows are fixed: a key's window starts with its first request and
    the count resets once the window has elapsed.
    """

    def __init__(self, max_requests: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        # {key: (window_start, count)}
        self._windows: Dict[str, Tuple[float, int]] = {}

    def hit(self, key: str) -> bool:
        """Record a request for ``key``; return False when it is over the limit."""
        now = self._clock()
        start, count = self._windows.get(key, (now, 0))
        if now - start >= self.window_seconds:
            start, count = now, 0

        if count >= self.max_requests:
            self._windows[key] = (start, count)
            logger.warning(f"Rate limit exceeded for IP: {key} ({count} requests in {self.window_seconds}s)")
            return False

        self._windows[key] = (start, count + 1)
        self._evict(now)
        return True

    def reset(self) -> None:
        self._windows.clear()

    def _evict(self, now: float) -> None:
        # keep the table bounded by dropping expired windows once it grows
        if len(self._windows) < 10_000:
            return
        expired = [k for k, (start, _) in self._windows.items() if now - start >= self.window_seconds]
        for k in expired:
            del self._windows[k]
