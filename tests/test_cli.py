# tests/test_cli.py
"""
Smoke tests for the gen-router CLI.
"""

from __future__ import annotations

from typer.testing import CliRunner

from gen_router.cli import app

runner = CliRunner()


class TestStatusCommand:
    def test_reports_enabled_count(self, clear_provider_env):
        clear_provider_env.setenv("GEMINI_API_KEY", "AIza-test")
        clear_provider_env.setenv("GROQ_API_KEY", "gsk_test")
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "Enabled providers: 2 / 5" in result.output
        assert "Multiple providers configured" in result.output

    def test_warns_when_nothing_enabled(self, clear_provider_env):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "Enabled providers: 0 / 5" in result.output
        assert "No providers enabled" in result.output

    def test_single_provider_notice(self, clear_provider_env):
        clear_provider_env.setenv("DEEPSEEK_API_KEY", "sk-test")
        result = runner.invoke(app, ["status"])
        assert "Only 1 provider enabled" in result.output


class TestGenerateCommand:
    def test_failure_shows_generic_message(self, clear_provider_env):
        result = runner.invoke(app, ["generate", "What is 2+2?"])
        assert result.exit_code == 1
        assert "Please try again." in result.output
