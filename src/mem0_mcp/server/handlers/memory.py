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
Memory handler functions for MCP server.

Arguments reaching these handlers have already been validated against the
tool catalog by the dispatch loop.
"""

import logging
import time

from ..formatters import DisplayMode, ToolResult, format_add_outcome, format_search_outcome

logger = logging.getLogger(__name__)

MEMORY_SYSTEM_MESSAGE = "Memory storage system"


async def handle_add_memory(server, arguments: dict) -> ToolResult:
    content = arguments["content"]
    user_id = server.resolve_user_id(arguments.get("userId"))

    messages = [
        {"role": "system", "content": MEMORY_SYSTEM_MESSAGE},
        {"role": "user", "content": content},
    ]
    outcome = await server.memory_store.add_memory(messages, user_id)

    if not outcome.ok:
        await server.send_log_message("error", f"Error adding memory: {outcome.error}")

    return format_add_outcome(outcome)


async def handle_search_memories(server, arguments: dict) -> ToolResult:
    query = arguments["query"]
    user_id = server.resolve_user_id(arguments.get("userId"))
    mode = DisplayMode.from_return_all(arguments.get("returnAll", False))

    start_time = time.time()
    outcome = await server.memory_store.search_memories(query, user_id)
    query_time_ms = (time.time() - start_time) * 1000
    logger.debug(f"search-memories ({mode.value}) took {query_time_ms:.0f}ms: {outcome.status.value}")

    if not outcome.ok:
        await server.send_log_message("error", f"Error searching memories: {outcome.error}")

    return format_search_outcome(outcome, mode)
