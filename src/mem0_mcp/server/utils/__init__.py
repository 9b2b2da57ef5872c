# Copyright 2024 Heinrich Krupp
# SPDX-License-Identifier: Apache-2.0

"""
Server utility modules.
"""

from .response_limiter import (
    truncate_text,
    default_max_chars,
    DEFAULT_MAX_CHARS,
    ELLIPSIS,
)
from .text import (
    normalize_one_line,
    round_score,
    format_score,
)

__all__ = [
    "truncate_text",
    "default_max_chars",
    "DEFAULT_MAX_CHARS",
    "ELLIPSIS",
    "normalize_one_line",
    "round_score",
    "format_score",
]
