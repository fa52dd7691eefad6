# tests/test_selector.py
"""
Unit tests for RoundRobinSelector.

Verifies:
  - Round-robin order over the enabled list.
  - Rate-limited providers are skipped until their attempts age out.
  - Lowest priority value wins when every provider is limited.
  - Limit checks are idempotent.
  - A zero budget is permanently limited.
"""

from __future__ import annotations

import pytest

from gen_router.engine.selector import RoundRobinSelector
from gen_router.state.window import RateWindow


class TestRoundRobinSelector:
    def test_rotates_in_declaration_order(self, provider_factory, clock):
        providers = [provider_factory(n) for n in ("a", "b", "c")]
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        picked = [selector.acquire(providers).name for _ in range(6)]
        assert picked == ["a", "b", "c", "a", "b", "c"]
        assert selector.cursor == 6

    def test_select_does_not_record(self, provider_factory, clock):
        a = provider_factory("a", rpm_limit=1)
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        selector.select([a])
        selector.select([a])
        assert not selector.is_rate_limited(a)

    def test_skips_exhausted_provider_until_window_expires(self, provider_factory, clock):
        a = provider_factory("a", rpm_limit=2)
        b = provider_factory("b", rpm_limit=100)
        selector = RoundRobinSelector(RateWindow(window_seconds=60), clock=clock)
        selector.record_attempt("a")
        clock.advance(10)
        selector.record_attempt("a")

        for _ in range(5):
            assert selector.acquire([a, b]).name == "b"

        # oldest timestamp ages out after 60s
        clock.advance(51)
        assert not selector.is_rate_limited(a)
        assert "a" in {selector.acquire([a, b]).name for _ in range(2)}

    def test_all_limited_returns_lowest_priority(self, provider_factory, clock):
        providers = [
            provider_factory("a", rpm_limit=0, priority=3),
            provider_factory("b", rpm_limit=0, priority=1),
            provider_factory("c", rpm_limit=0, priority=2),
        ]
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        assert selector.select(providers).name == "b"
        assert selector.select(providers).name == "b"

    def test_priority_ties_keep_declaration_order(self, provider_factory, clock):
        providers = [
            provider_factory("first", rpm_limit=0, priority=1),
            provider_factory("second", rpm_limit=0, priority=1),
        ]
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        assert selector.select(providers).name == "first"

    def test_exclude_skips_tried_providers(self, provider_factory, clock):
        providers = [provider_factory(n) for n in ("a", "b", "c")]
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        assert selector.select(providers, exclude={"a"}).name == "b"
        assert selector.select(providers, exclude={"b", "c"}).name == "a"

    def test_exclude_limits_priority_fallback(self, provider_factory, clock):
        providers = [
            provider_factory("top", rpm_limit=0, priority=1),
            provider_factory("next", rpm_limit=0, priority=2),
        ]
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        assert selector.select(providers, exclude={"top"}).name == "next"

    def test_nothing_left_raises(self, provider_factory, clock):
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        with pytest.raises(ValueError):
            selector.select([])
        with pytest.raises(ValueError):
            selector.select([provider_factory("a")], exclude={"a"})

    def test_limit_check_is_idempotent(self, provider_factory, clock):
        a = provider_factory("a", rpm_limit=1)
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        assert selector.is_rate_limited(a) is selector.is_rate_limited(a) is False
        selector.record_attempt("a")
        assert selector.is_rate_limited(a) is selector.is_rate_limited(a) is True

    def test_zero_budget_is_always_limited(self, provider_factory, clock):
        a = provider_factory("a", rpm_limit=0)
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        assert selector.is_rate_limited(a)
        clock.advance(3_600)
        assert selector.is_rate_limited(a)

    def test_request_counts_do_not_move_cursor(self, provider_factory, clock):
        providers = [provider_factory(n) for n in ("a", "b")]
        selector = RoundRobinSelector(RateWindow(), clock=clock)
        selector.acquire(providers)
        assert selector.request_counts(providers) == {"a": 1, "b": 0}
        assert selector.cursor == 1
