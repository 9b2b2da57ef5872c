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
Server startup orchestration utilities.

- Startup configuration checks
- stdio execution of the MCP server
"""

import asyncio
import logging
import traceback
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..server_impl import MemoryServer

from ..config import Mem0Config, load_environment

# MCP imports
import mcp.server.stdio
from mcp.server import NotificationOptions

logger = logging.getLogger(__name__)


class StartupCheckOrchestrator:
    """Orchestrate startup validation checks."""

    @staticmethod
    def load_config(dotenv_path: Optional[str] = None) -> Mem0Config:
        """
        Load the environment and resolve a validated configuration.

        Raises:
            ConfigurationError: If the configuration is unusable
        """
        load_environment(dotenv_path)
        config = Mem0Config.from_env()
        config.validate()
        logger.info(f"Configuration loaded (default user: {config.default_user_id})")
        return config


class ServerRunManager:
    """Manage server execution and lifecycle."""

    def __init__(self, server: 'MemoryServer'):
        """
        Initialize server run manager.

        Args:
            server: MemoryServer instance to manage
        """
        self.server = server
        self.logger = logging.getLogger(__name__)

    async def run_stdio(self) -> None:
        """Run server with stdio communication."""
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            self.logger.info("Server started and ready to handle requests")

            try:
                await self.server.server.run(
                    read_stream,
                    write_stream,
                    self.server.server.create_initialization_options(
                        notification_options=NotificationOptions(),
                    ),
                )
            except asyncio.CancelledError:
                self.logger.info("Server run cancelled")
                raise
            except BaseException as e:
                self._handle_server_exception(e)
            finally:
                self.logger.info("Server run completed")

    def _handle_server_exception(self, e: BaseException) -> None:
        """Handle exceptions during server run."""
        if isinstance(e, (KeyboardInterrupt, SystemExit)):
            raise e
        self.logger.error(f"Error in server.run: {str(e)}")
        self.logger.error(traceback.format_exc())
        raise e
