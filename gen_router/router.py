# gen_router/router.py
"""
GenerationRouter — the primary class the surrounding application uses.

Orchestrates the full routing pipeline for one generate() call:
  1. List enabled providers; fail fast if there are none.
  2. Pick a candidate (round-robin, skipping rate-limited providers) and
     record an attempt for it before the outbound call.
  3. Resolve the model for the request's task category.
  4. Call the provider's adapter.
  5. On success, return the normalized GenerationResponse.
  6. On a classified provider error, move on to the next candidate until
     every enabled provider has been tried once for this call.

There is no backoff and no same-provider retry: failover always moves to
a different backend. Cancellation is the caller's decision and propagates
immediately without trying further providers.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

import structlog

from .config import RouterConfig
from .engine.selector import RoundRobinSelector
from .exceptions import AllProvidersFailed, NoProvidersConfigured, ProviderAuthError, ProviderError
from .models import GenerationRequest, GenerationResponse, RouterSnapshot
from .providers.base import BaseAdapter
from .providers.registry import ProviderRegistry
from .state.window import RateWindow

logger = structlog.get_logger(__name__)


class GenerationRouter:
    """
    Round-robin, rate-limit-aware generation router with failover.

    Parameters
    ----------
    config:
        Router configuration. Use one of the factory class methods
        (from_dict, from_yaml, from_env) for convenient construction.
    registry:
        Overrides the registry built from config.providers.
    adapters:
        Name → adapter map. When omitted, one adapter per enabled provider
        is built from the registry.
    clock:
        Monotonic time source for the rate window.
    """

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        registry: ProviderRegistry | None = None,
        adapters: dict[str, BaseAdapter] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or RouterConfig()
        self._registry = (
            registry if registry is not None else ProviderRegistry(self._config.providers)
        )
        self._selector = RoundRobinSelector(
            RateWindow(window_seconds=self._config.window_seconds),
            clock=clock,
        )
        if adapters is None:
            adapters = self._registry.build_adapters(
                timeout=self._config.request_timeout,
                default_max_tokens=self._config.default_max_tokens,
            )
        self._adapters = adapters

        missing = [p.name for p in self._registry.list_enabled() if p.name not in self._adapters]
        if missing:
            raise ValueError(f"No adapter registered for enabled provider(s): {missing}")

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> "GenerationRouter":
        """Construct from a plain Python dictionary."""
        return cls(RouterConfig.from_dict(data), **kwargs)

    @classmethod
    def from_yaml(cls, path: str, **kwargs: Any) -> "GenerationRouter":
        """Construct from a YAML config file."""
        return cls(RouterConfig.from_yaml(path), **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "GenerationRouter":
        """Construct from environment variables."""
        return cls(RouterConfig.from_env(), **kwargs)

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    @property
    def selector(self) -> RoundRobinSelector:
        return self._selector

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        """
        Generate text for *request* on the first provider that succeeds.

        Each enabled provider is tried at most once per call.

        Raises
        ------
        NoProvidersConfigured
            No provider is enabled. No network call is made.
        AllProvidersFailed
            Every enabled provider was tried and failed. Chained from the
            last provider error.
        """
        enabled = self._registry.list_enabled()
        if not enabled:
            logger.error("no_providers_configured", known=self._registry.names())
            raise NoProvidersConfigured(
                "No providers are enabled. Set at least one provider API key."
            )

        errors: list[ProviderError] = []
        tried: set[str] = set()
        last_provider = ""
        for attempt_number in range(1, len(enabled) + 1):
            provider = self._selector.acquire(enabled, exclude=tried)
            tried.add(provider.name)
            model = provider.model_for(request.category)
            last_provider = provider.name
            log = logger.bind(
                provider=provider.name,
                model=model,
                category=request.category.value,
                attempt=attempt_number,
            )
            log.debug("provider_attempt")

            t0 = time.monotonic()
            try:
                response = await self._adapters[provider.name].generate(model, request)
            except ProviderAuthError as exc:
                log.error("provider_auth_failed", status_code=exc.status_code)
                errors.append(exc)
                continue
            except ProviderError as exc:
                log.warning(
                    "provider_failed",
                    error_type=type(exc).__name__,
                    status_code=exc.status_code,
                )
                errors.append(exc)
                continue

            latency_ms = (time.monotonic() - t0) * 1000
            log.info("provider_success", latency_ms=round(latency_ms, 1), tokens=response.tokens_used)
            return response.model_copy(
                update={"attempts": attempt_number, "latency_ms": latency_ms}
            )

        logger.error(
            "all_providers_failed",
            attempts=len(errors),
            last_provider=last_provider,
            error_types=[type(e).__name__ for e in errors],
        )
        raise AllProvidersFailed(
            f"All {len(errors)} provider(s) failed; last tried '{last_provider}'.",
            provider=last_provider,
            attempts=len(errors),
            errors=errors,
        ) from errors[-1]

    def snapshot(self) -> RouterSnapshot:
        """
        Return enabled providers, the cursor and per-provider attempt counts.

        Read-only: neither the cursor nor the rate window is modified.
        """
        enabled = self._registry.list_enabled()
        return RouterSnapshot(
            enabled_providers=[p.name for p in enabled],
            cursor=self._selector.cursor,
            request_counts=self._selector.request_counts(enabled),
        )

    async def close(self) -> None:
        """Release all adapter HTTP clients."""
        for adapter in self._adapters.values():
            await adapter.close()

    async def __aenter__(self) -> "GenerationRouter":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()
