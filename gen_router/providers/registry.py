# gen_router/providers/registry.py
"""
ProviderRegistry — static, process-wide list of candidate backends.

The registry is the single source of truth for which providers exist and
which are enabled. It is built once at startup and never mutated, so it
needs no locking and performs no I/O: list_enabled() cannot fail.

Misconfiguration (e.g. a malformed credential) is not detected here; it
surfaces at call time as a provider-specific error.
"""

from __future__ import annotations

from collections.abc import Iterable

from .anthropic import AnthropicAdapter
from .base import BaseAdapter
from .gemini import GeminiAdapter
from .groq import GroqAdapter
from .openai import DeepSeekAdapter, OpenRouterAdapter
from ..constants import (
    CLAUDE,
    DEEPSEEK,
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT,
    GEMINI,
    GROQ,
    OPENROUTER,
)
from ..models import ProviderConfig


# Map provider name → adapter class
_ADAPTER_MAP: dict[str, type[BaseAdapter]] = {
    GEMINI: GeminiAdapter,
    CLAUDE: AnthropicAdapter,
    DEEPSEEK: DeepSeekAdapter,
    GROQ: GroqAdapter,
    OPENROUTER: OpenRouterAdapter,
}


def adapter_class_for(name: str) -> type[BaseAdapter]:
    adapter_cls = _ADAPTER_MAP.get(name)
    if adapter_cls is None:
        raise ValueError(
            f"Unknown provider '{name}'. "
            f"Supported built-in providers: {list(_ADAPTER_MAP)}. "
            "For custom backends, pass adapters= to GenerationRouter directly."
        )
    return adapter_cls


class ProviderRegistry:
    """Holds every configured provider in declaration order."""

    def __init__(self, providers: Iterable[ProviderConfig] = ()) -> None:
        self._providers: list[ProviderConfig] = list(providers)
        seen: set[str] = set()
        for provider in self._providers:
            if provider.name in seen:
                raise ValueError(f"Duplicate provider name '{provider.name}'")
            seen.add(provider.name)

    @classmethod
    def from_env(cls) -> "ProviderRegistry":
        """Registry of the built-in providers, enabled by credential presence."""
        from ..config import RouterConfig

        return cls(RouterConfig.from_env().providers)

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    def list_enabled(self) -> list[ProviderConfig]:
        """Return enabled providers in stable declaration order. May be empty."""
        return [p for p in self._providers if p.enabled]

    def all(self) -> list[ProviderConfig]:
        """Return every provider, enabled or not."""
        return list(self._providers)

    def get(self, name: str) -> ProviderConfig | None:
        """Return provider by name, or None if not found."""
        for provider in self._providers:
            if provider.name == name:
                return provider
        return None

    def names(self) -> list[str]:
        return [p.name for p in self._providers]

    # ------------------------------------------------------------------
    # Adapters
    # ------------------------------------------------------------------

    def build_adapters(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        default_max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> dict[str, BaseAdapter]:
        """Create one adapter (and one SDK client) per enabled provider."""
        return {
            provider.name: adapter_class_for(provider.name)(
                provider,
                timeout=timeout,
                default_max_tokens=default_max_tokens,
            )
            for provider in self.list_enabled()
        }

    def __len__(self) -> int:
        return len(self._providers)
