# gen_router/providers/__init__.py
from .base import BaseAdapter, classify_error
from .registry import ProviderRegistry
from .gemini import GeminiAdapter
from .anthropic import AnthropicAdapter
from .openai import DeepSeekAdapter, OpenAICompatibleAdapter, OpenRouterAdapter
from .groq import GroqAdapter

__all__ = [
    "BaseAdapter",
    "classify_error",
    "ProviderRegistry",
    "GeminiAdapter",
    "AnthropicAdapter",
    "OpenAICompatibleAdapter",
    "DeepSeekAdapter",
    "OpenRouterAdapter",
    "GroqAdapter",
]
