"""
Response size limiter for the Mem0 MCP server.

Bounds caller-facing strings so that a single tool response cannot flood an
LLM client's context window. The built-in add/search responses are short and
do not pass through here; alternate formatting paths should.

Example:
    >>> from mem0_mcp.server.utils.response_limiter import truncate_text
    >>> truncate_text("x" * 10, max_chars=5)
    'xxxx…'
"""

from typing import Optional

from ...config import safe_get_int_env

ELLIPSIS = "…"

# Default max response size, overridable with MEM0_MCP_MAX_RESPONSE_CHARS
# 0 = unlimited
DEFAULT_MAX_CHARS = 3500
MAX_CHARS_ENV = "MEM0_MCP_MAX_RESPONSE_CHARS"


def default_max_chars() -> int:
    """Current limit: the environment override, or DEFAULT_MAX_CHARS when unset or invalid."""
    return safe_get_int_env(MAX_CHARS_ENV, DEFAULT_MAX_CHARS, min_value=0)


def truncate_text(text: Optional[str], max_chars: Optional[int] = None) -> Optional[str]:
    """
    Truncate text to at most ``max_chars`` characters.

    The last kept character is replaced by a single ellipsis, so a truncated
    result is exactly ``max_chars`` long. Empty input is returned as is.

    Args:
        text: String to bound.
        max_chars: Maximum length. None = environment default, 0 = unlimited.

    Example:
        >>> len(truncate_text("a" * 4000, max_chars=3500))
        3500
    """
    limit = default_max_chars() if max_chars is None else max_chars
    if not text or limit <= 0 or len(text) <= limit:
        return text
    return text[: limit - 1] + ELLIPSIS
