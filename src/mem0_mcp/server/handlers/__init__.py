# Copyright 2024 Heinrich Krupp
# SPDX-License-Identifier: Apache-2.0

"""Tool handler functions for the Mem0 MCP server."""

from .memory import handle_add_memory, handle_search_memories

__all__ = [
    'handle_add_memory',
    'handle_search_memories',
]
