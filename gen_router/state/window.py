# gen_router/state/window.py
"""
In-process, in-memory sliding window of attempt timestamps.

Architecture note
-----------------
Each provider maintains a deque of monotonic timestamps, one entry per
attempted call (successful or not). An attempt is recorded *before* the
outbound call so concurrent in-flight calls count toward the budget
immediately.

On every limit check the deque is purged of entries older than
window_seconds, so the attempt count is simply len(deque).

The window does no locking of its own. The selector owns the only lock
and calls into the window while holding it.

All state is lost when the process exits; the budget is a per-process
estimate, not a billing ledger.
"""

from __future__ import annotations

from collections import defaultdict, deque

from ..constants import WINDOW_SECONDS


class RateWindow:
    """Per-provider sliding window of attempt timestamps."""

    def __init__(self, window_seconds: int = WINDOW_SECONDS) -> None:
        self.window_seconds = window_seconds
        # provider → deque of monotonic timestamps, oldest first
        self._windows: dict[str, deque[float]] = defaultdict(deque)

    def record(self, provider: str, now: float) -> None:
        """Append one attempt for *provider* at *now*."""
        self._windows[provider].append(now)

    def is_limited(self, provider: str, limit: int, now: float) -> bool:
        """
        Purge stale entries, then report whether *provider* is over budget.

        A provider is limited iff its attempt count in the window is >= limit,
        so a limit of 0 is permanently limited.
        """
        self._purge(provider, now)
        return len(self._windows[provider]) >= limit

    def count(self, provider: str, now: float) -> int:
        """Return the attempt count in the window without purging."""
        window = self._windows.get(provider)
        if not window:
            return 0
        cutoff = now - self.window_seconds
        return sum(1 for stamp in window if stamp >= cutoff)

    def clear(self) -> None:
        self._windows.clear()

    def _purge(self, provider: str, now: float) -> None:
        """Remove entries older than window_seconds from provider's window."""
        cutoff = now - self.window_seconds
        window = self._windows[provider]
        while window and window[0] < cutoff:
            window.popleft()
