# gen_router/__init__.py
"""
gen-router — round-robin, rate-limit-aware text generation across LLM providers.

Public API surface:
  GenerationRouter       — main class; call generate() / snapshot()
  RouterConfig           — top-level configuration model
  ProviderConfig         — static per-provider descriptor
  GenerationRequest      — uniform request passed to generate()
  GenerationResponse     — uniform response returned by generate()
  Message                — one conversational turn
  TaskCategory           — logic | content
  ResponseFormat         — text | json
  RouterSnapshot         — read-only router state for health checks
  NoProvidersConfigured  — raised when no provider is enabled
  AllProvidersFailed     — raised when every enabled provider failed
"""

from .router import GenerationRouter
from .config import RouterConfig
from .models import (
    GenerationRequest,
    GenerationResponse,
    Message,
    ProviderConfig,
    ResponseFormat,
    RouterSnapshot,
    TaskCategory,
)
from .exceptions import (
    AllProvidersFailed,
    GenRouterError,
    NoProvidersConfigured,
    ProviderAuthError,
    ProviderError,
    ProviderRateLimited,
    ProviderTransportError,
)

__all__ = [
    "GenerationRouter",
    "RouterConfig",
    "GenerationRequest",
    "GenerationResponse",
    "Message",
    "ProviderConfig",
    "ResponseFormat",
    "RouterSnapshot",
    "TaskCategory",
    "GenRouterError",
    "NoProvidersConfigured",
    "AllProvidersFailed",
    "ProviderError",
    "ProviderRateLimited",
    "ProviderTransportError",
    "ProviderAuthError",
]

__version__ = "0.1.0"
