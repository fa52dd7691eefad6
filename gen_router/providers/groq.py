# gen_router/providers/groq.py
"""
Groq backend adapter.

Wraps the groq AsyncGroq client. Groq's API is OpenAI-compatible, so the
request and response translation is shared with the OpenAI-compatible
adapter; only the SDK and its exception family differ.
Supports BYOC.
"""

from __future__ import annotations

from typing import Any, ClassVar

import groq
import httpx

from .base import BaseAdapter
from .openai import build_chat_kwargs, parse_chat_completion
from ..models import GenerationRequest, GenerationResponse


class GroqAdapter(BaseAdapter):
    """Adapter wrapping groq.AsyncGroq."""

    error_types: ClassVar[tuple[type[BaseException], ...]] = (groq.GroqError, httpx.HTTPError)

    def _create_client(self) -> Any:
        return groq.AsyncGroq(
            api_key=self.config.api_key,
            timeout=self._timeout,
            max_retries=0,
            http_client=httpx.AsyncClient(
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20)
            ),
        )

    async def _generate(self, model: str, request: GenerationRequest) -> GenerationResponse:
        response = await self._client.chat.completions.create(**build_chat_kwargs(model, request))
        return parse_chat_completion(self.name, model, response)
