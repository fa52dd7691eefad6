# tests/test_registry.py
"""
Tests for ProviderRegistry.
"""

from __future__ import annotations

import pytest

from gen_router.providers import AnthropicAdapter, DeepSeekAdapter, ProviderRegistry


class TestProviderRegistry:
    def test_list_enabled_keeps_declaration_order(self, provider_factory):
        registry = ProviderRegistry(
            [
                provider_factory("c", priority=3),
                provider_factory("a", priority=1),
                provider_factory("b", priority=2),
            ]
        )
        assert [p.name for p in registry.list_enabled()] == ["c", "a", "b"]

    def test_list_enabled_filters_missing_and_disabled(self, provider_factory):
        registry = ProviderRegistry(
            [
                provider_factory("keyless", api_key=""),
                provider_factory("off", disabled=True),
                provider_factory("on"),
            ]
        )
        assert [p.name for p in registry.list_enabled()] == ["on"]
        assert registry.names() == ["keyless", "off", "on"]
        assert len(registry) == 3

    def test_empty_registry_is_valid(self):
        assert ProviderRegistry().list_enabled() == []

    def test_list_enabled_has_no_side_effects(self, provider_factory):
        registry = ProviderRegistry([provider_factory("a"), provider_factory("b")])
        assert registry.list_enabled() == registry.list_enabled()
        registry.list_enabled().clear()
        assert len(registry.list_enabled()) == 2

    def test_duplicate_names_rejected(self, provider_factory):
        with pytest.raises(ValueError):
            ProviderRegistry([provider_factory("a"), provider_factory("a")])

    def test_get(self, provider_factory):
        registry = ProviderRegistry([provider_factory("a")])
        assert registry.get("a").name == "a"
        assert registry.get("missing") is None

    def test_build_adapters_for_enabled_only(self, provider_factory):
        registry = ProviderRegistry(
            [
                provider_factory("deepseek", base_url="https://api.deepseek.com"),
                provider_factory("claude"),
                provider_factory("groq", api_key=""),
            ]
        )
        adapters = registry.build_adapters(timeout=5.0)
        assert set(adapters) == {"deepseek", "claude"}
        assert isinstance(adapters["deepseek"], DeepSeekAdapter)
        assert isinstance(adapters["claude"], AnthropicAdapter)
        assert adapters["claude"].config.name == "claude"

    def test_unknown_provider_rejected_when_building(self, provider_factory):
        registry = ProviderRegistry([provider_factory("mystery")])
        with pytest.raises(ValueError, match="Unknown provider"):
            registry.build_adapters()

    def test_from_env(self, clear_provider_env):
        clear_provider_env.setenv("GROQ_API_KEY", "gsk_test")
        registry = ProviderRegistry.from_env()
        assert registry.names() == ["gemini", "claude", "deepseek", "groq", "openrouter"]
        assert [p.name for p in registry.list_enabled()] == ["groq"]
