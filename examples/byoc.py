# examples/byoc.py
"""
BYOC: Bring Your Own Client.

The developer keeps their existing, fully configured SDK clients.
Each one is wrapped in the matching adapter and handed to the router,
which adds round-robin routing and failover on top.

Run with:
  python examples/byoc.py
"""

import asyncio
import os

import anthropic
import openai

from gen_router import GenerationRequest, GenerationRouter, RouterConfig
from gen_router.models import ProviderConfig
from gen_router.providers import AnthropicAdapter, DeepSeekAdapter


async def main():
    deepseek = ProviderConfig(
        name="deepseek",
        api_key=os.environ["DEEPSEEK_API_KEY"],
        rpm_limit=120,
        priority=1,
        logic_model="deepseek-chat",
        content_model="deepseek-chat",
    )
    claude = ProviderConfig(
        name="claude",
        api_key=os.environ["ANTHROPIC_API_KEY"],
        rpm_limit=50,
        priority=2,
        logic_model="claude-3-5-sonnet-20240620",
        content_model="claude-3-haiku-20240307",
    )

    # Existing clients, unchanged. max_retries=0 so failover moves on immediately.
    deepseek_client = openai.AsyncOpenAI(
        api_key=deepseek.api_key,
        base_url="https://api.deepseek.com",
        timeout=30,
        max_retries=0,
    )
    anthropic_client = anthropic.AsyncAnthropic(
        api_key=claude.api_key,
        timeout=30,
        max_retries=0,
    )

    router = GenerationRouter(
        RouterConfig(providers=[deepseek, claude]),
        adapters={
            "deepseek": DeepSeekAdapter(deepseek, client=deepseek_client),
            "claude": AnthropicAdapter(claude, client=anthropic_client),
        },
    )

    async with router:
        response = await router.generate(GenerationRequest(
            messages=[{"role": "user", "content": "Hello, which provider am I talking to?"}],
            category="content",
        ))
        print(f"Provider: {response.provider}")
        print(f"Response: {response.text}")


if __name__ == "__main__":
    asyncio.run(main())
