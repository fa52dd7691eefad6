# tests/test_models.py
"""
Tests for the request/response/config models.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gen_router.models import (
    GenerationRequest,
    GenerationResponse,
    Message,
    ProviderConfig,
    ResponseFormat,
    TaskCategory,
)


class TestProviderConfig:
    def test_enabled_requires_credential(self, provider_factory):
        assert provider_factory("a").enabled
        assert not provider_factory("a", api_key="").enabled
        assert not provider_factory("a", disabled=True).enabled

    def test_model_for_category(self, provider_factory):
        cfg = provider_factory("claude")
        assert cfg.model_for(TaskCategory.LOGIC) == "claude-logic"
        assert cfg.model_for(TaskCategory.CONTENT) == "claude-content"

    def test_immutable(self, provider_factory):
        cfg = provider_factory("a")
        with pytest.raises(ValidationError):
            cfg.rpm_limit = 5

    def test_api_key_hidden_from_repr(self):
        cfg = ProviderConfig(
            name="claude",
            api_key="sk-ant-secret",
            rpm_limit=1,
            logic_model="a",
            content_model="b",
        )
        assert "sk-ant-secret" not in repr(cfg)


class TestGenerationRequest:
    def test_messages_required_non_empty(self):
        with pytest.raises(ValidationError):
            GenerationRequest(messages=[], category="logic")

    def test_category_required(self):
        with pytest.raises(ValidationError):
            GenerationRequest(messages=[{"role": "user", "content": "hi"}])

    def test_order_preserved(self):
        request = GenerationRequest(
            messages=[
                {"role": "user", "content": "1"},
                {"role": "assistant", "content": "2"},
                {"role": "user", "content": "3"},
            ],
            category="content",
        )
        assert [m.content for m in request.messages] == ["1", "2", "3"]
        assert request.category is TaskCategory.CONTENT
        assert request.response_format is ResponseFormat.TEXT
        assert not request.wants_json

    def test_model_role_normalized(self):
        assert Message(role="model", content="x").role == "assistant"

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            Message(role="tool", content="x")

    def test_parameter_bounds(self):
        with pytest.raises(ValidationError):
            GenerationRequest(
                messages=[{"role": "user", "content": "hi"}],
                category="logic",
                temperature=3.0,
            )
        with pytest.raises(ValidationError):
            GenerationRequest(
                messages=[{"role": "user", "content": "hi"}],
                category="logic",
                max_tokens=0,
            )


class TestGenerationResponse:
    def test_defaults(self):
        response = GenerationResponse(provider="gemini", model="m")
        assert response.text == ""
        assert response.tokens_used is None
        assert response.attempts == 1
