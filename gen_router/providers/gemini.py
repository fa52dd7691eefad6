# gen_router/providers/gemini.py
"""
Google Gemini backend adapter.

Wraps the google-genai async API (``client.aio.models``). Supports BYOC:
pass an existing ``genai.Client`` (or anything exposing
``aio.models.generate_content``). The API key lives on the client, so
several Gemini keys can coexist in one process.

Message format conversion
-------------------------
Converts the uniform messages list to Gemini's contents format
(role + parts). Assistant turns use the "model" role; system turns are
folded into system_instruction together with the request's own system
instruction. A JSON hint maps to response_mime_type.
"""

from __future__ import annotations

from typing import Any, ClassVar

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from .base import BaseAdapter, fold_system_turns
from ..constants import JSON_MIME_TYPE, TEXT_MIME_TYPE
from ..models import GenerationRequest, GenerationResponse


class GeminiAdapter(BaseAdapter):
    """Adapter wrapping google.genai.Client."""

    error_types: ClassVar[tuple[type[BaseException], ...]] = (
        genai_errors.APIError,
        httpx.HTTPError,
    )

    def _create_client(self) -> Any:
        return genai.Client(
            api_key=self.config.api_key,
            # google-genai takes the timeout in milliseconds
            http_options=types.HttpOptions(timeout=int(self._timeout * 1000)),
        )

    @staticmethod
    def _to_gemini_contents(
        request: GenerationRequest,
    ) -> tuple[str | None, list[dict[str, Any]]]:
        """Convert uniform messages to (system_instruction, contents)."""
        system_instruction, conversation = fold_system_turns(request)
        contents = [
            {
                "role": "model" if msg.role == "assistant" else "user",
                "parts": [{"text": msg.content}],
            }
            for msg in conversation
        ]
        return system_instruction, contents

    def _generation_config(
        self, request: GenerationRequest, system_instruction: str | None
    ) -> types.GenerateContentConfig:
        config_kwargs: dict[str, Any] = {
            "max_output_tokens": request.max_tokens or self._default_max_tokens,
            "response_mime_type": JSON_MIME_TYPE if request.wants_json else TEXT_MIME_TYPE,
        }
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction
        if request.temperature is not None:
            config_kwargs["temperature"] = request.temperature
        return types.GenerateContentConfig(**config_kwargs)

    async def _generate(self, model: str, request: GenerationRequest) -> GenerationResponse:
        system_instruction, contents = self._to_gemini_contents(request)
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=contents,
            config=self._generation_config(request, system_instruction),
        )

        # .text is None when the candidate has no text parts (e.g. blocked output)
        text = response.text or ""
        usage = getattr(response, "usage_metadata", None)
        return GenerationResponse(
            text=text,
            provider=self.name,
            model=model,
            tokens_used=getattr(usage, "total_token_count", None),
        )

    async def close(self) -> None:
        aclose = getattr(getattr(self._client, "aio", None), "aclose", None)
        if aclose is not None:
            await aclose()
