# tests/test_state_window.py
"""
Tests for RateWindow.

Verifies:
  - Sliding window accuracy.
  - Isolation between providers.
  - Lazy purge on limit checks; count() never purges.
"""

from __future__ import annotations

from gen_router.state.window import RateWindow


class TestRateWindow:
    def test_initial_count_is_zero(self):
        window = RateWindow()
        assert window.count("gemini", now=0.0) == 0
        assert not window.is_limited("gemini", limit=1, now=0.0)

    def test_record_increments_count(self):
        window = RateWindow()
        window.record("gemini", now=100.0)
        assert window.count("gemini", now=100.0) == 1

    def test_isolation_between_providers(self):
        window = RateWindow()
        window.record("gemini", now=100.0)
        assert window.count("claude", now=100.0) == 0

    def test_limited_at_budget(self):
        window = RateWindow()
        window.record("p", now=100.0)
        window.record("p", now=101.0)
        assert not window.is_limited("p", limit=3, now=102.0)
        assert window.is_limited("p", limit=2, now=102.0)

    def test_old_entries_are_purged(self):
        """Entries older than window_seconds should not be counted."""
        window = RateWindow(window_seconds=60)
        window.record("p", now=0.0)
        window.record("p", now=90.0)
        assert not window.is_limited("p", limit=2, now=100.0)
        # purge happened in place
        assert len(window._windows["p"]) == 1

    def test_entry_exactly_at_window_edge_still_counts(self):
        window = RateWindow(window_seconds=60)
        window.record("p", now=40.0)
        assert window.is_limited("p", limit=1, now=100.0)
        assert not window.is_limited("p", limit=1, now=100.5)

    def test_count_does_not_purge(self):
        window = RateWindow(window_seconds=60)
        window.record("p", now=0.0)
        window.record("p", now=90.0)
        assert window.count("p", now=100.0) == 1
        assert len(window._windows["p"]) == 2

    def test_clear(self):
        window = RateWindow()
        window.record("p", now=1.0)
        window.clear()
        assert window.count("p", now=1.0) == 0
