# gen_router/providers/openai.py
"""
OpenAI-compatible backend adapters.

DeepSeek and OpenRouter both speak the OpenAI chat-completions protocol,
so they share one adapter built on openai.AsyncOpenAI with a different
base_url. Supports BYOC (pass an existing client).

Message format
--------------
The system instruction becomes a leading "system" message; the role
vocabulary is unchanged. A JSON hint maps to response_format=json_object.
"""

from __future__ import annotations

from typing import Any, ClassVar

import httpx
import openai

from .base import BaseAdapter
from ..constants import DEEPSEEK_BASE_URL, OPENROUTER_BASE_URL
from ..exceptions import ProviderTransportError
from ..models import GenerationRequest, GenerationResponse


def build_chat_messages(request: GenerationRequest) -> list[dict[str, str]]:
    """Uniform messages → chat-completions messages, system instruction first."""
    messages: list[dict[str, str]] = []
    if request.system_instruction:
        messages.append({"role": "system", "content": request.system_instruction})
    messages.extend({"role": m.role, "content": m.content} for m in request.messages)
    return messages


def build_chat_kwargs(model: str, request: GenerationRequest) -> dict[str, Any]:
    """Keyword arguments for chat.completions.create(); unset parameters are omitted."""
    call_kwargs: dict[str, Any] = {
        "model": model,
        "messages": build_chat_messages(request),
    }
    if request.temperature is not None:
        call_kwargs["temperature"] = request.temperature
    if request.max_tokens is not None:
        call_kwargs["max_tokens"] = request.max_tokens
    if request.wants_json:
        call_kwargs["response_format"] = {"type": "json_object"}
    return call_kwargs


def parse_chat_completion(provider: str, model: str, response: Any) -> GenerationResponse:
    """Normalize a chat-completions response object."""
    if not response.choices:
        raise ProviderTransportError(provider, "response contained no choices")
    content = response.choices[0].message.content or ""
    usage = getattr(response, "usage", None)
    return GenerationResponse(
        text=content,
        provider=provider,
        model=model,
        tokens_used=usage.total_tokens if usage is not None else None,
    )


class OpenAICompatibleAdapter(BaseAdapter):
    """Adapter wrapping openai.AsyncOpenAI against any compatible endpoint."""

    error_types: ClassVar[tuple[type[BaseException], ...]] = (openai.OpenAIError, httpx.HTTPError)
    default_base_url: ClassVar[str | None] = None

    def _create_client(self) -> Any:
        return openai.AsyncOpenAI(
            api_key=self.config.api_key,
            base_url=self.config.base_url or self.default_base_url,
            timeout=self._timeout,
            max_retries=0,  # failover replaces same-backend retries
            http_client=httpx.AsyncClient(
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20)
            ),
        )

    async def _generate(self, model: str, request: GenerationRequest) -> GenerationResponse:
        response = await self._client.chat.completions.create(**build_chat_kwargs(model, request))
        return parse_chat_completion(self.name, model, response)


class DeepSeekAdapter(OpenAICompatibleAdapter):
    default_base_url = DEEPSEEK_BASE_URL


class OpenRouterAdapter(OpenAICompatibleAdapter):
    default_base_url = OPENROUTER_BASE_URL
