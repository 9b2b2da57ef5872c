# Copyright 2024 Heinrich Krupp
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Response formatting for MCP tool results.

Turns adapter outcomes into text content blocks. Search responses follow a
display mode: the top match alone, without a score, is the default because
voice and agent callers read it out or act on it directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence

from mcp import types

from ..storage.mem0_store import OutcomeStatus, StoreOutcome
from .utils.text import format_score, normalize_one_line

MEMORY_ADDED = "Memory added successfully"
NO_MEMORIES_FOUND = "No memories found"
NO_RELEVANT_MEMORY = "No relevant memory found"

RANKED_LIMIT = 5


@dataclass(frozen=True)
class ToolResult:
    """Uniform result of every tool call: text blocks plus an error flag."""
    content: List[types.TextContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> 'ToolResult':
        return cls([types.TextContent(type="text", text=text)], is_error)

    @property
    def texts(self) -> List[str]:
        return [block.text for block in self.content]

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(content=list(self.content), isError=self.is_error)


def error_result(message: str) -> ToolResult:
    return ToolResult.text(message, is_error=True)


class DisplayMode(Enum):
    TOP_ONE = "top_one"
    RANKED_TOP5 = "ranked_top5"

    @classmethod
    def from_return_all(cls, return_all: Any) -> 'DisplayMode':
        return cls.RANKED_TOP5 if return_all is True else cls.TOP_ONE


def _record_field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _memory_text(record: Any) -> str:
    memory = _record_field(record, "memory")
    return normalize_one_line("" if memory is None else str(memory))


def _render_top_one(records: Sequence[Any]) -> str:
    return _memory_text(records[0]) or NO_RELEVANT_MEMORY


def _render_ranked(records: Sequence[Any]) -> str:
    formatted = "; ".join(
        f"{_memory_text(record)} (relevance: {format_score(_record_field(record, 'score'))})"
        for record in records[:RANKED_LIMIT]
    )
    return formatted or NO_MEMORIES_FOUND


_RENDERERS: Dict[DisplayMode, Callable[[Sequence[Any]], str]] = {
    DisplayMode.TOP_ONE: _render_top_one,
    DisplayMode.RANKED_TOP5: _render_ranked,
}


def format_add_outcome(outcome: StoreOutcome, mask_add_failures: bool = True) -> ToolResult:
    """
    Format the result of an add call.

    With ``mask_add_failures`` a backend failure is reported as success; the
    failure itself has already been logged by the adapter.
    """
    if outcome.ok or mask_add_failures:
        return ToolResult.text(MEMORY_ADDED)
    return error_result(f"Error adding memory: {outcome.error}")


def format_search_outcome(outcome: StoreOutcome, mode: DisplayMode = DisplayMode.TOP_ONE) -> ToolResult:
    """
    Format search results according to ``mode``.

    A failed search is indistinguishable from an empty one.
    """
    if outcome.status is not OutcomeStatus.SUCCESS or not outcome.records:
        return ToolResult.text(NO_MEMORIES_FOUND)
    return ToolResult.text(_RENDERERS[mode](outcome.records))
