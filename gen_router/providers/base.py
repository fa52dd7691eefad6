# gen_router/providers/base.py
"""
BaseAdapter — abstract contract every backend adapter must implement.

An adapter wraps one backend's SDK client and exposes a uniform interface
to the router. The router never calls provider SDKs directly; it always
goes through an adapter.

This design means:
  - Request translation (role vocabulary, system instruction placement,
    structured-output flags) is contained inside each adapter.
  - The router doesn't need to know about 429 vs ConnectionError vs
    provider-specific exception types: classify_error() maps them into
    the closed ProviderError taxonomy.
  - Adding a new backend requires only implementing _generate().

Cancellation (asyncio.CancelledError) is never classified. It propagates
straight through the adapter and the router.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import httpx

from ..constants import (
    AUTH_STATUSES,
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT,
    RATE_LIMIT_MARKERS,
    RATE_LIMIT_STATUS,
)
from ..exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderRateLimited,
    ProviderTransportError,
)
from ..models import GenerationRequest, GenerationResponse, Message, ProviderConfig


def _status_of(exc: BaseException) -> int | None:
    # openai / anthropic / groq expose status_code; google-genai exposes code
    for attr in ("status_code", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return int(value)
    return None


def classify_error(provider: str, exc: BaseException) -> ProviderError:
    """
    Map a backend-specific exception onto the router's error taxonomy.

      429, or a rate/quota message   → ProviderRateLimited
      401 / 403                      → ProviderAuthError
      anything else                  → ProviderTransportError
    """
    if isinstance(exc, ProviderError):
        return exc

    status = _status_of(exc)
    message = str(exc) or type(exc).__name__
    lowered = message.lower()

    if status == RATE_LIMIT_STATUS or any(marker in lowered for marker in RATE_LIMIT_MARKERS):
        return ProviderRateLimited(provider, message, status_code=status)
    if status in AUTH_STATUSES:
        return ProviderAuthError(provider, message, status_code=status)
    return ProviderTransportError(provider, message, status_code=status)


def fold_system_turns(request: GenerationRequest) -> tuple[str | None, list[Message]]:
    """
    Split *request* into (system text, conversational turns).

    The system instruction and every "system" turn are joined with blank
    lines. Backends that take the system prompt apart from the messages
    reject an empty conversation, so a history made only of system turns
    is sent as a single user turn instead.
    """
    system_parts: list[str] = []
    if request.system_instruction:
        system_parts.append(request.system_instruction)
    system_turns = [m.content for m in request.messages if m.role == "system"]
    conversation = [m for m in request.messages if m.role != "system"]

    if conversation:
        system_parts.extend(system_turns)
    else:
        conversation = [Message(role="user", content="\n\n".join(system_turns))]

    system = "\n\n".join(system_parts) if system_parts else None
    return system, conversation


class BaseAdapter(ABC):
    """
    Abstract base class for all backend adapters.

    Attributes
    ----------
    config:
        The static ProviderConfig this adapter serves.
    error_types:
        Exception classes raised by the SDK for well-formed backend errors
        and transport failures. Only these are classified; anything else is
        a programming error and propagates unchanged.
    """

    error_types: ClassVar[tuple[type[BaseException], ...]] = (httpx.HTTPError,)

    def __init__(
        self,
        config: ProviderConfig,
        *,
        client: Any = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        default_max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self.config = config
        self._timeout = timeout
        self._default_max_tokens = default_max_tokens
        self._client = client if client is not None else self._create_client()

    @property
    def name(self) -> str:
        return self.config.name

    async def generate(self, model: str, request: GenerationRequest) -> GenerationResponse:
        """
        Send one non-streaming generation request to the backend.

        Raises
        ------
        ProviderError
            A classified backend failure. The router fails over on it.
        """
        try:
            return await self._generate(model, request)
        except self.error_types as exc:
            raise classify_error(self.name, exc) from exc

    @abstractmethod
    def _create_client(self) -> Any:
        """Build the SDK client used when none is injected."""

    @abstractmethod
    async def _generate(self, model: str, request: GenerationRequest) -> GenerationResponse:
        """Translate, call, and normalize. SDK exceptions may escape."""

    async def close(self) -> None:
        """Release any resources held by this adapter (HTTP clients, etc.)."""
        close = getattr(self._client, "close", None)
        if close is not None:
            result = close()
            if hasattr(result, "__await__"):
                await result

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"{self.__class__.__name__}("
            f"name={self.name!r}, rpm_limit={self.config.rpm_limit}, "
            f"priority={self.config.priority}, enabled={self.config.enabled})"
        )
