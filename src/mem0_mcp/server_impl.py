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
Mem0 MCP server.

Exposes ``add-memory`` and ``search-memories`` over MCP and delegates storage
and semantic search to the Mem0 platform.
"""
# Standard library imports
import sys
import asyncio
import traceback
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

# Import from server package modules
from .server import (
    # Logging
    configure_logging,
    set_mcp_log_level,
    # Tool Catalog
    ADD_MEMORY_TOOL,
    SEARCH_MEMORIES_TOOL,
    ToolArgumentError,
    get_tool,
    list_tools,
    validate_arguments,
    # Formatting
    ToolResult,
    error_result,
)

# MCP protocol imports
import mcp.types as types
from mcp.server import Server

# Package imports
from .config import SERVER_NAME, SERVER_VERSION, ConfigurationError, Mem0Config
from .storage.mem0_store import Mem0MemoryStore

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Dict[str, Any]], Awaitable[ToolResult]]


class MemoryServer:
    def __init__(self, config: Mem0Config, memory_store: Optional[Mem0MemoryStore] = None):
        """
        Initialize the server.

        Args:
            config: Resolved configuration, immutable for the server's lifetime
            memory_store: Storage adapter; defaults to a Mem0 platform adapter
        """
        self.config = config
        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self.memory_store = memory_store or Mem0MemoryStore(config)

        self._tool_handlers: Dict[str, ToolHandler] = {
            ADD_MEMORY_TOOL.name: self.handle_add_memory,
            SEARCH_MEMORIES_TOOL.name: self.handle_search_memories,
        }

        self.register_handlers()
        logger.info("Server initialization complete")

    def resolve_user_id(self, user_id: Optional[str]) -> str:
        """Use the request's user id, or the configured default when it is missing or empty."""
        return user_id or self.config.default_user_id

    async def send_log_message(self, level: types.LoggingLevel, data: Any) -> None:
        """Forward a log message to the connected client, if a request is in flight."""
        try:
            session = self.server.request_context.session
        except LookupError:
            return
        try:
            await session.send_log_message(level=level, data=data, logger=SERVER_NAME)
        except Exception as e:
            logger.debug(f"Could not send log message to client: {e}")

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
        """
        Dispatch a tool call. Never raises.

        Every failure, including unknown tools and invalid arguments, comes
        back as a ToolResult with ``is_error`` set.
        """
        logger.info(f"=== HANDLING TOOL CALL: {name} ===")
        try:
            if not arguments:
                raise ToolArgumentError("no arguments provided")

            tool = get_tool(name)
            if tool is None:
                logger.warning(f"Unknown tool requested: {name}")
                return error_result(f"Unknown tool: {name}")

            validated = validate_arguments(tool, arguments)
            return await self._tool_handlers[tool.name](validated)
        except Exception as e:
            logger.error(f"Error in {name}: {str(e)}\n{traceback.format_exc()}")
            return error_result(f"Error: {str(e)}")

    def register_handlers(self):
        @self.server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            logger.info("=== HANDLING LIST_TOOLS REQUEST ===")
            return [tool.to_mcp_tool() for tool in list_tools()]

        # Arguments are validated by invoke() against the tool catalog
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
            result = await self.invoke(name, arguments)
            return result.to_call_tool_result()

        @self.server.set_logging_level()
        async def handle_set_logging_level(level: types.LoggingLevel) -> None:
            set_mcp_log_level(level)
            logger.info(f"Log level set to {level} by client")

    async def handle_add_memory(self, arguments: dict) -> ToolResult:
        """Add memory (delegates to handler)."""
        from .server.handlers import memory as memory_handlers
        return await memory_handlers.handle_add_memory(self, arguments)

    async def handle_search_memories(self, arguments: dict) -> ToolResult:
        """Search memories (delegates to handler)."""
        from .server.handlers import memory as memory_handlers
        return await memory_handlers.handle_search_memories(self, arguments)


async def async_main(config: Mem0Config):
    """Main async entry point for the Mem0 MCP server."""
    from .utils.startup_orchestrator import ServerRunManager

    try:
        memory_server = MemoryServer(config)
        await ServerRunManager(memory_server).run_stdio()
    except Exception as e:
        logger.error(f"Server error: {str(e)}")
        logger.error(traceback.format_exc())
        print(f"Fatal server error: {str(e)}", file=sys.stderr, flush=True)
        raise


def main():
    import signal
    from .utils.startup_orchestrator import StartupCheckOrchestrator

    configure_logging()

    try:
        config = StartupCheckOrchestrator.load_config()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        print(f"Error: {e}", file=sys.stderr, flush=True)
        sys.exit(1)

    # Set up signal handlers for graceful shutdown
    def signal_handler(signum, frame):
        logger.info(f"Received signal {signum}, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    logger.info("Initializing Mem0 Memory MCP Server...")
    try:
        asyncio.run(async_main(config))
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully...")
    except Exception as e:
        logger.error(f"Fatal error: {str(e)}\n{traceback.format_exc()}")
        sys.exit(1)


if __name__ == "__main__":
    main()
