# gen_router/cli.py
"""
CLI entry point for gen-router.

Available commands:
  gen-router status   [--config router.yaml]
  gen-router generate "prompt" [--category logic|content] [--json] ...

Requires: pip install "gen-router[cli]"
"""

from __future__ import annotations

import asyncio
from typing import Optional

try:
    import typer
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "CLI dependencies missing. Install with: pip install 'gen-router[cli]'"
    ) from exc

from .config import RouterConfig
from .constants import KEY_PREFIXES
from .exceptions import GenRouterError
from .models import (
    GenerationRequest,
    GenerationResponse,
    Message,
    ProviderConfig,
    ResponseFormat,
    RouterSnapshot,
    TaskCategory,
)
from .observability import configure_logging
from .router import GenerationRouter

app = typer.Typer(
    name="gen-router",
    help="Round-robin, rate-limit-aware text generation across several LLM providers.",
    add_completion=False,
)
console = Console()


def _load_config(config_path: Optional[str]) -> RouterConfig:
    if config_path:
        return RouterConfig.from_yaml(config_path)
    return RouterConfig.from_env()


def _mask(api_key: str) -> str:
    if not api_key:
        return "[red]missing[/red]"
    return f"{api_key[:6]}..."


def _key_format(provider: ProviderConfig) -> str:
    prefix = KEY_PREFIXES.get(provider.name)
    if not provider.api_key or prefix is None:
        return "-"
    if provider.api_key.startswith(prefix):
        return "[green]ok[/green]"
    return f"[yellow]expected {prefix}…[/yellow]"


def _build_table(providers: list[ProviderConfig]) -> Table:
    """Render the provider list as a Rich table."""
    table = Table(title="gen-router — Providers", show_lines=True)
    table.add_column("Provider", style="bold cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("RPM")
    table.add_column("Logic model")
    table.add_column("Content model")
    table.add_column("API key")
    table.add_column("Key format")

    for provider in providers:
        if provider.enabled:
            status_str = "[green]ENABLED ✓[/green]"
        elif provider.disabled:
            status_str = "[yellow]DISABLED[/yellow]"
        else:
            status_str = "[red]NO KEY ✗[/red]"
        table.add_row(
            provider.name,
            status_str,
            str(provider.priority),
            str(provider.rpm_limit),
            provider.logic_model,
            provider.content_model,
            _mask(provider.api_key),
            _key_format(provider),
        )
    return table


def _print_snapshot(snapshot: RouterSnapshot) -> None:
    console.print(f"Enabled providers: {', '.join(snapshot.enabled_providers)}")
    console.print(f"Cursor:            {snapshot.cursor}")
    for name, count in snapshot.request_counts.items():
        console.print(f"  {name}: {count} attempt(s) in window")


async def _generate(
    config: RouterConfig, request: GenerationRequest
) -> tuple[GenerationResponse, RouterSnapshot]:
    async with GenerationRouter(config) as router:
        response = await router.generate(request)
        return response, router.snapshot()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to router.yaml"),
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines"),
) -> None:
    configure_logging(log_level=log_level, json_logs=json_logs)
    ctx.obj = {"config": config}


@app.command()
def status(ctx: typer.Context) -> None:
    """Show every known provider, its budget, models and credential state."""
    cfg = _load_config(ctx.obj["config"])
    console.print(_build_table(cfg.providers))

    enabled = [p.name for p in cfg.providers if p.enabled]
    console.print(f"\nEnabled providers: {len(enabled)} / {len(cfg.providers)}")
    if not enabled:
        console.print("[red]No providers enabled. Set at least one API key.[/red]")
    elif len(enabled) == 1:
        console.print("[yellow]Only 1 provider enabled; failover has nowhere to go.[/yellow]")
    else:
        console.print("[green]Multiple providers configured for automatic failover.[/green]")


@app.command()
def generate(
    ctx: typer.Context,
    prompt: str = typer.Argument(..., help="User message to send."),
    category: TaskCategory = typer.Option(TaskCategory.LOGIC, "--category", help="logic or content"),
    system: Optional[str] = typer.Option(None, "--system", help="System instruction"),
    json_output: bool = typer.Option(False, "--json", help="Ask the backend for JSON output"),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens"),
    temperature: Optional[float] = typer.Option(None, "--temperature"),
) -> None:
    """Send one request through the router and print which backend served it."""
    cfg = _load_config(ctx.obj["config"])
    request = GenerationRequest(
        messages=[Message(role="user", content=prompt)],
        category=category,
        system_instruction=system,
        max_tokens=max_tokens,
        temperature=temperature,
        response_format=ResponseFormat.JSON if json_output else ResponseFormat.TEXT,
    )

    try:
        response, snapshot = asyncio.run(_generate(cfg, request))
    except GenRouterError as exc:
        console.print(f"[red]{exc.user_message}[/red]")
        raise typer.Exit(1)

    console.print(f"Provider: [bold cyan]{response.provider}[/bold cyan]")
    console.print(f"Model:    {response.model}")
    if response.tokens_used is not None:
        console.print(f"Tokens:   {response.tokens_used}")
    console.print(f"Latency:  {response.latency_ms:.0f}ms ({response.attempts} attempt(s))")
    console.print()
    console.print(response.text, markup=False)
    console.print()
    _print_snapshot(snapshot)


if __name__ == "__main__":  # pragma: no cover
    app()
