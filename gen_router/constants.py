# gen_router/constants.py
"""
Default constants for the generation router.
All tunable values are centralised here so they can be overridden via RouterConfig
without touching internal logic.
"""

# ---------------------------------------------------------------------------
# Sliding window
# ---------------------------------------------------------------------------
WINDOW_SECONDS: int = 60
"""Duration of the rolling attempt window in seconds."""

# ---------------------------------------------------------------------------
# Outbound calls
# ---------------------------------------------------------------------------
DEFAULT_REQUEST_TIMEOUT: float = 60.0
"""Per-call timeout handed to every SDK client, in seconds."""

DEFAULT_MAX_TOKENS: int = 4096
"""Completion budget used by backends that require an explicit max_tokens."""

JSON_MIME_TYPE: str = "application/json"
TEXT_MIME_TYPE: str = "text/plain"

# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------
RATE_LIMIT_STATUS: int = 429
AUTH_STATUSES = frozenset({401, 403})
RATE_LIMIT_MARKERS: tuple[str, ...] = ("rate limit", "rate_limit", "quota", "resource exhausted")

GENERIC_USER_MESSAGE: str = "Something went wrong while generating a response. Please try again."

# ---------------------------------------------------------------------------
# Built-in providers
# ---------------------------------------------------------------------------
GEMINI: str = "gemini"
CLAUDE: str = "claude"
DEEPSEEK: str = "deepseek"
GROQ: str = "groq"
OPENROUTER: str = "openrouter"

DEEPSEEK_BASE_URL: str = "https://api.deepseek.com"
OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"

# (env var, name, rpm, priority, logic model, content model)
KNOWN_PROVIDERS: tuple[tuple[str, str, int, int, str, str], ...] = (
    ("GEMINI_API_KEY", GEMINI, 60, 1, "gemini-1.5-flash-001", "gemini-1.5-flash-001"),
    (
        "ANTHROPIC_API_KEY",
        CLAUDE,
        50,
        2,
        "claude-3-5-sonnet-20240620",
        "claude-3-haiku-20240307",
    ),
    ("DEEPSEEK_API_KEY", DEEPSEEK, 120, 3, "deepseek-chat", "deepseek-chat"),
    ("GROQ_API_KEY", GROQ, 30, 4, "llama-3.3-70b-versatile", "llama-3.3-70b-versatile"),
    (
        "OPENROUTER_API_KEY",
        OPENROUTER,
        200,
        5,
        "anthropic/claude-3.5-haiku",
        "google/gemini-2.0-flash-exp:free",
    ),
)

KEY_PREFIXES: dict[str, str] = {
    GEMINI: "AIza",
    CLAUDE: "sk-ant",
    GROQ: "gsk_",
    OPENROUTER: "sk-or",
}
"""Expected credential prefixes, used by the CLI key-format check."""

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------
ENV_DISABLED_PROVIDERS: str = "GEN_ROUTER_DISABLED_PROVIDERS"
ENV_WINDOW_SECONDS: str = "GEN_ROUTER_WINDOW_SECONDS"
ENV_REQUEST_TIMEOUT: str = "GEN_ROUTER_REQUEST_TIMEOUT"
