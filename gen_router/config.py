# gen_router/config.py
"""
RouterConfig.

Supports construction from:
  - Python dict   → RouterConfig.from_dict(data)
  - YAML file     → RouterConfig.from_yaml("router.yaml")
  - Environment   → RouterConfig.from_env()
"""

from __future__ import annotations

import os
import re
from typing import Any

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT,
    DEEPSEEK,
    DEEPSEEK_BASE_URL,
    ENV_DISABLED_PROVIDERS,
    ENV_REQUEST_TIMEOUT,
    ENV_WINDOW_SECONDS,
    KNOWN_PROVIDERS,
    OPENROUTER,
    OPENROUTER_BASE_URL,
    WINDOW_SECONDS,
)
from .models import ProviderConfig

_DEFAULT_BASE_URLS = {
    DEEPSEEK: DEEPSEEK_BASE_URL,
    OPENROUTER: OPENROUTER_BASE_URL,
}


class RouterConfig(BaseModel):
    """
    Top-level configuration for the generation router.

    Instantiate directly or use one of the factory class methods:
      RouterConfig.from_dict(data)
      RouterConfig.from_yaml(path)
      RouterConfig.from_env()
    """

    providers: list[ProviderConfig] = Field(
        default_factory=list,
        description="Candidate backends in declaration order. Disabled entries are kept.",
    )
    window_seconds: int = Field(
        default=WINDOW_SECONDS,
        gt=0,
        description="Sliding window duration in seconds.",
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Timeout for each outbound call, in seconds.",
    )
    default_max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        gt=0,
        description="Completion budget for backends that require one when the request has none.",
    )

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> "RouterConfig":
        """Build config from a plain Python dictionary."""
        merged = {**data, **kwargs}
        return cls.model_validate(merged)

    @classmethod
    def from_yaml(cls, path: str, **kwargs: Any) -> "RouterConfig":
        """
        Build config from a YAML file.

        Environment variable interpolation is supported:
          api_key: "${GEMINI_API_KEY}"
        """
        import yaml

        with open(path) as f:
            raw = f.read()

        def _replace(match: re.Match) -> str:  # type: ignore[type-arg]
            var = match.group(1)
            value = os.environ.get(var)
            if value is None:
                raise EnvironmentError(
                    f"Environment variable '{var}' referenced in '{path}' is not set."
                )
            return value

        raw = re.sub(r"\$\{([^}]+)\}", _replace, raw)
        data = yaml.safe_load(raw) or {}
        return cls.from_dict(data, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "RouterConfig":
        """
        Build the built-in provider list from environment variables.

        Every known provider is listed; the ones whose credential variable is
        set are enabled:
          GEMINI_API_KEY     → gemini
          ANTHROPIC_API_KEY  → claude
          DEEPSEEK_API_KEY   → deepseek
          GROQ_API_KEY       → groq
          OPENROUTER_API_KEY → openrouter

        Optional overrides:
          GEN_ROUTER_DISABLED_PROVIDERS → comma-separated names to disable
          GEN_ROUTER_WINDOW_SECONDS     → window_seconds
          GEN_ROUTER_REQUEST_TIMEOUT    → request_timeout
        """
        disabled = {
            name.strip()
            for name in os.environ.get(ENV_DISABLED_PROVIDERS, "").split(",")
            if name.strip()
        }

        providers: list[dict[str, Any]] = []
        for env_var, name, rpm, priority, logic_model, content_model in KNOWN_PROVIDERS:
            providers.append(
                {
                    "name": name,
                    "api_key": os.environ.get(env_var, ""),
                    "disabled": name in disabled,
                    "rpm_limit": rpm,
                    "priority": priority,
                    "logic_model": logic_model,
                    "content_model": content_model,
                    "base_url": _DEFAULT_BASE_URLS.get(name),
                }
            )

        data: dict[str, Any] = {"providers": providers}

        window = os.environ.get(ENV_WINDOW_SECONDS)
        if window:
            data["window_seconds"] = int(window)

        timeout = os.environ.get(ENV_REQUEST_TIMEOUT)
        if timeout:
            data["request_timeout"] = float(timeout)

        data.update(kwargs)
        return cls.from_dict(data)
