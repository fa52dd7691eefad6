# gen_router/providers/anthropic.py
"""
Anthropic (Claude) backend adapter.

Wraps an AsyncAnthropic client. Supports BYOC (pass an existing client)
or creates its own client from the provider's api_key. The SDK builds
and pools its own HTTP transport.

Notes on message format
-----------------------
Anthropic's API separates the system prompt from the messages list.
The request's system_instruction and any "system" turns are joined into
the top-level ``system`` field. max_tokens is mandatory for this API.
There is no structured-output flag, so a JSON hint is dropped.
"""

from __future__ import annotations

from typing import Any, ClassVar

import anthropic
import httpx

from .base import BaseAdapter, fold_system_turns
from ..models import GenerationRequest, GenerationResponse


class AnthropicAdapter(BaseAdapter):
    """Adapter wrapping anthropic.AsyncAnthropic."""

    error_types: ClassVar[tuple[type[BaseException], ...]] = (
        anthropic.AnthropicError,
        httpx.HTTPError,
    )

    def _create_client(self) -> Any:
        return anthropic.AsyncAnthropic(
            api_key=self.config.api_key,
            timeout=self._timeout,
            max_retries=0,
        )

    async def _generate(self, model: str, request: GenerationRequest) -> GenerationResponse:
        system, conversation = fold_system_turns(request)
        call_kwargs: dict[str, Any] = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in conversation],
            "max_tokens": request.max_tokens or self._default_max_tokens,
        }
        if system:
            call_kwargs["system"] = system
        if request.temperature is not None:
            call_kwargs["temperature"] = request.temperature

        response = await self._client.messages.create(**call_kwargs)
        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        usage = getattr(response, "usage", None)
        tokens_used = usage.input_tokens + usage.output_tokens if usage is not None else None
        return GenerationResponse(
            text=text,
            provider=self.name,
            model=model,
            tokens_used=tokens_used,
        )
