# Copyright 2024 Heinrich Krupp
# SPDX-License-Identifier: Apache-2.0

"""
Text normalization helpers for tool responses.

Example:
    >>> normalize_one_line("Loves\\n\\nhiking")
    'Loves hiking'
    >>> format_score(0.8765)
    '0.877'
"""

import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

_LINE_BREAKS = re.compile(r"[\r\n\t]+")
_WHITESPACE = re.compile(r"\s+")

SCORE_PLACES = 3


def normalize_one_line(text: Optional[str]) -> str:
    """Collapse CR/LF/tab runs and repeated whitespace to single spaces, then trim."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", _LINE_BREAKS.sub(" ", text)).strip()


def _coerce_score(value: Any) -> float:
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def round_score(value: Any, places: int = SCORE_PLACES) -> float:
    """
    Round a relevance score half-up to ``places`` decimals.

    Missing, non-numeric and non-finite scores become 0.
    """
    number = _coerce_score(value)
    try:
        rounded = Decimal(repr(number)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Too large to quantize at this precision, already integral for display
        return number
    # + 0.0 turns -0.0 into 0.0
    return float(rounded) + 0.0


def format_score(value: Any, places: int = SCORE_PLACES) -> str:
    """Render a rounded score in its shortest form ("0.5", "0.877", "1")."""
    rounded = Decimal(repr(round_score(value, places)))
    return format(rounded.normalize(), "f")
