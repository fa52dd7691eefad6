# gen_router/models.py
"""
Pydantic v2 data models used throughout gen-router.

These are part of the public API surface; changes here require a major
version bump once the library reaches 1.0.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCategory(str, Enum):
    """Task class used to pick which of a provider's two models to target."""

    LOGIC = "logic"
    CONTENT = "content"


class ResponseFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class ProviderConfig(BaseModel):
    """
    Static descriptor for a single backend.

    Constructed once at process start (RouterConfig.from_env / from_dict /
    from_yaml) and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique identifier, e.g. 'gemini', 'claude'.")
    api_key: str = Field(default="", repr=False, description="Provider credential.")
    disabled: bool = Field(default=False, description="Explicit opt-out, even with a credential.")
    rpm_limit: int = Field(
        ...,
        ge=0,
        description="Max attempts per minute. 0 keeps the provider as a last resort only.",
    )
    priority: int = Field(
        default=1,
        ge=1,
        description="1 = most preferred. Only used when every provider is rate-limited.",
    )
    logic_model: str = Field(..., description="Model for short, deterministic tasks.")
    content_model: str = Field(..., description="Model for longer content generation.")
    base_url: str | None = Field(
        default=None,
        description="Endpoint override for OpenAI-compatible backends.",
    )

    @property
    def credential_present(self) -> bool:
        return bool(self.api_key)

    @property
    def enabled(self) -> bool:
        return self.credential_present and not self.disabled

    def model_for(self, category: TaskCategory) -> str:
        if category == TaskCategory.LOGIC:
            return self.logic_model
        return self.content_model


class Message(BaseModel):
    """A single conversational turn."""

    role: Literal["user", "assistant", "system"]
    content: str

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v: object) -> object:
        # Gemini-style history uses "model" for assistant turns.
        if v == "model":
            return "assistant"
        return v


class GenerationRequest(BaseModel):
    """
    The uniform, provider-agnostic input to GenerationRouter.generate().
    """

    messages: list[Message] = Field(
        ...,
        min_length=1,
        description="Conversation in order. Insertion order is preserved.",
    )
    category: TaskCategory
    system_instruction: str | None = Field(
        default=None,
        description="Kept apart from messages; each adapter decides where it goes.",
    )
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.TEXT,
        description="Advisory. Dropped silently by backends without structured output.",
    )

    @property
    def wants_json(self) -> bool:
        return self.response_format == ResponseFormat.JSON


class GenerationResponse(BaseModel):
    """
    The result returned to the caller after a successful generation.
    """

    text: str = Field(default="", description="Generated text; empty on an empty completion.")
    provider: str = Field(..., description="Name of the provider that served the request.")
    model: str = Field(..., description="Model string used.")
    tokens_used: int | None = Field(
        default=None,
        description="Total tokens, only when the backend reports usage.",
    )
    attempts: int = Field(
        default=1,
        description="Number of providers tried before success (1 = no failover needed).",
    )
    latency_ms: float = Field(default=0.0, description="Latency of the successful attempt.")


class RouterSnapshot(BaseModel):
    """Read-only view of router state for health-check and debug surfaces."""

    enabled_providers: list[str]
    cursor: int
    request_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Attempts recorded in the trailing window, per enabled provider.",
    )
