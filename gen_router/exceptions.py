# gen_router/exceptions.py
"""
Custom exceptions for gen-router.

All public exceptions inherit from GenRouterError so callers can catch
the whole family with a single except clause if preferred.

Provider-level failures (ProviderError and subclasses) are raised by the
adapters and caught by the router's failover loop. Callers only ever see
NoProvidersConfigured or AllProvidersFailed.
"""

from __future__ import annotations

from .constants import GENERIC_USER_MESSAGE


class GenRouterError(Exception):
    """Base exception for all router errors."""

    user_message: str = GENERIC_USER_MESSAGE
    """Text that is safe to show to end users. Never contains backend output."""


class NoProvidersConfigured(GenRouterError):
    """Raised when router.generate() is called with no enabled providers."""


class ProviderError(GenRouterError):
    """
    A single provider failed to serve a request.

    Attributes
    ----------
    provider:
        Name of the provider that failed.
    status_code:
        HTTP status reported by the backend, if any.
    """

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"[{provider}] {message}")


class ProviderRateLimited(ProviderError):
    """The backend rejected the call for rate or quota reasons."""


class ProviderTransportError(ProviderError):
    """Network failure, timeout, server error or malformed response."""


class ProviderAuthError(ProviderError):
    """Invalid or expired credential. Failover masks it, so it is logged distinctly."""


class AllProvidersFailed(GenRouterError):
    """
    Raised when every enabled provider has been tried once and failed.

    Attributes
    ----------
    provider:
        Name of the last provider tried.
    attempts:
        Number of providers that were attempted.
    errors:
        Errors raised by each provider attempt, in order.
    """

    def __init__(
        self,
        message: str,
        provider: str,
        attempts: int,
        errors: list[ProviderError],
    ) -> None:
        self.provider = provider
        self.attempts = attempts
        self.errors = errors
        super().__init__(message)

    @property
    def last_error(self) -> ProviderError | None:
        return self.errors[-1] if self.errors else None

    def __str__(self) -> str:  # pragma: no cover
        base = super().__str__()
        details = "; ".join(f"[{i+1}] {type(e).__name__}: {e}" for i, e in enumerate(self.errors))
        return f"{base} | Errors: {details}"
