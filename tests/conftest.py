# tests/conftest.py
"""
Shared pytest fixtures for gen-router tests.
"""

from __future__ import annotations

import pytest
import structlog

from gen_router.config import RouterConfig
from gen_router.constants import KNOWN_PROVIDERS
from gen_router.models import ProviderConfig


class FakeClock:
    """Synthetic monotonic clock for sliding-window tests."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_provider(
    name: str,
    rpm_limit: int = 100,
    priority: int = 1,
    api_key: str | None = None,
    **kwargs,
) -> ProviderConfig:
    return ProviderConfig(
        name=name,
        api_key=f"key-{name}" if api_key is None else api_key,
        rpm_limit=rpm_limit,
        priority=priority,
        logic_model=f"{name}-logic",
        content_model=f"{name}-content",
        **kwargs,
    )


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def clear_provider_env(monkeypatch):
    """Remove every provider credential and router override from the environment."""
    for env_var, *_ in KNOWN_PROVIDERS:
        monkeypatch.delenv(env_var, raising=False)
    for env_var in (
        "GEN_ROUTER_DISABLED_PROVIDERS",
        "GEN_ROUTER_WINDOW_SECONDS",
        "GEN_ROUTER_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(env_var, raising=False)
    return monkeypatch


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def gemini_config():
    return make_provider("gemini", rpm_limit=2, priority=1)


@pytest.fixture
def claude_config():
    return make_provider("claude", rpm_limit=5, priority=2)


@pytest.fixture
def router_config(gemini_config, claude_config):
    return RouterConfig(providers=[gemini_config, claude_config])


@pytest.fixture
def provider_factory():
    return make_provider
