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
Server package for the Mem0 MCP server.

- logging_config: stderr-only logging configuration
- tools: tool catalog and argument validation
- formatters: tool result shaping
- handlers: add/search tool handlers

The MemoryServer class and the entry points live in ``mem0_mcp.server_impl``.
"""

# Logging Configuration
from .logging_config import configure_logging, set_mcp_log_level

# Tool Catalog
from .tools import (
    ADD_MEMORY_TOOL,
    SEARCH_MEMORIES_TOOL,
    FieldSpec,
    ToolArgumentError,
    ToolDefinition,
    get_tool,
    list_tools,
    validate_arguments,
)

# Response Formatting
from .formatters import (
    DisplayMode,
    ToolResult,
    error_result,
    format_add_outcome,
    format_search_outcome,
)

__all__ = [
    # Logging
    'configure_logging',
    'set_mcp_log_level',

    # Tool Catalog
    'ADD_MEMORY_TOOL',
    'SEARCH_MEMORIES_TOOL',
    'FieldSpec',
    'ToolArgumentError',
    'ToolDefinition',
    'get_tool',
    'list_tools',
    'validate_arguments',

    # Formatting
    'DisplayMode',
    'ToolResult',
    'error_result',
    'format_add_outcome',
    'format_search_outcome',
]
