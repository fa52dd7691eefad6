# examples/quickstart.py
"""
Quickstart: generation router via dict config.

Run with:
  GEMINI_API_KEY=... GROQ_API_KEY=... python examples/quickstart.py
"""

import asyncio
import os

from gen_router import GenerationRequest, GenerationRouter
from gen_router.observability import configure_logging


async def main():
    configure_logging("INFO")

    router = GenerationRouter.from_dict({
        "providers": [
            {
                "name": "gemini",
                "api_key": os.environ.get("GEMINI_API_KEY", ""),
                "rpm_limit": 60,
                "priority": 1,
                "logic_model": "gemini-1.5-flash-001",
                "content_model": "gemini-1.5-flash-001",
            },
            {
                "name": "groq",
                "api_key": os.environ.get("GROQ_API_KEY", ""),
                "rpm_limit": 30,
                "priority": 2,
                "logic_model": "llama-3.3-70b-versatile",
                "content_model": "llama-3.3-70b-versatile",
            },
        ]
    })

    async with router:
        for prompt in ("What is 17 * 23?", "Write a haiku about failover."):
            response = await router.generate(GenerationRequest(
                messages=[{"role": "user", "content": prompt}],
                category="logic" if "*" in prompt else "content",
                system_instruction="Answer briefly.",
            ))

            print(f"Text:       {response.text[:200]}")
            print(f"Provider:   {response.provider}")
            print(f"Model:      {response.model}")
            print(f"Latency:    {response.latency_ms:.1f}ms")
            print(f"Attempts:   {response.attempts}")
            print(f"Tokens:     {response.tokens_used}")
            print()

        snapshot = router.snapshot()
        print(f"Cursor: {snapshot.cursor}")
        for name, count in snapshot.request_counts.items():
            print(f"{name}: {count} attempt(s) in the last minute")


if __name__ == "__main__":
    asyncio.run(main())
