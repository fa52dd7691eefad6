# gen_router/engine/selector.py
"""
Round-robin provider selection with rate-limit skipping.

Selection algorithm
-------------------
  1. One cursor is shared by every request and every task category.
  2. Offer enabled[cursor % len(enabled)], advance the cursor, and return
     the candidate unless it is over its requests-per-minute budget or was
     already tried by the current call. Repeat at most len(enabled) times.
  3. If every remaining candidate is rate-limited, return the one with the
     lowest priority value anyway. The backend will most likely answer
     with a 429, which the router treats as a recoverable failure.

The cursor and the rate window are the router's only shared mutable state.
Both are guarded by a single threading.Lock, which is never held across an
await, so one selector can be shared by coroutines and threads alike.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Collection, Sequence

import structlog

from ..models import ProviderConfig
from ..state.window import RateWindow

logger = structlog.get_logger(__name__)


class RoundRobinSelector:
    """
    Parameters
    ----------
    window:
        Sliding window holding per-provider attempt timestamps.
    clock:
        Monotonic time source. Tests inject a synthetic clock.
    """

    def __init__(
        self,
        window: RateWindow | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._window = window or RateWindow()
        self._clock = clock
        self._cursor = 0
        self._lock = threading.Lock()

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._cursor

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def select(
        self,
        enabled: Sequence[ProviderConfig],
        exclude: Collection[str] = (),
    ) -> ProviderConfig:
        """Pick the next candidate without recording an attempt."""
        with self._lock:
            return self._select(enabled, exclude, self._clock())

    def acquire(
        self,
        enabled: Sequence[ProviderConfig],
        exclude: Collection[str] = (),
    ) -> ProviderConfig:
        """Pick the next candidate and record an attempt for it atomically."""
        with self._lock:
            now = self._clock()
            provider = self._select(enabled, exclude, now)
            self._window.record(provider.name, now)
            return provider

    def record_attempt(self, provider: str) -> None:
        with self._lock:
            self._window.record(provider, self._clock())

    def is_rate_limited(self, provider: ProviderConfig) -> bool:
        with self._lock:
            return self._window.is_limited(provider.name, provider.rpm_limit, self._clock())

    def request_counts(self, providers: Sequence[ProviderConfig]) -> dict[str, int]:
        """Attempts in the trailing window per provider. Does not purge."""
        with self._lock:
            now = self._clock()
            return {p.name: self._window.count(p.name, now) for p in providers}

    # ------------------------------------------------------------------
    # Internal helpers (caller holds self._lock)
    # ------------------------------------------------------------------

    def _select(
        self,
        enabled: Sequence[ProviderConfig],
        exclude: Collection[str],
        now: float,
    ) -> ProviderConfig:
        remaining = [p for p in enabled if p.name not in exclude]
        if not remaining:
            raise ValueError("select() needs at least one enabled, untried provider")

        for _ in range(len(enabled)):
            candidate = enabled[self._cursor % len(enabled)]
            self._cursor += 1
            if candidate.name in exclude:
                continue
            if not self._window.is_limited(candidate.name, candidate.rpm_limit, now):
                return candidate

        # min() keeps declaration order on priority ties
        fallback = min(remaining, key=lambda p: p.priority)
        logger.warning(
            "all_providers_rate_limited",
            fallback=fallback.name,
            candidates=[p.name for p in remaining],
        )
        return fallback
