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
Logging configuration module for the Mem0 MCP server.

stdout carries the JSON-RPC stream on the stdio transport, so every log
record goes to stderr.
"""

import sys
import os
import logging
from typing import Optional

LOG_FORMAT = '%(levelname)s:%(name)s:%(message)s'

# MCP log levels -> stdlib levels, for logging/setLevel requests
MCP_LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'notice': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
    'alert': logging.CRITICAL,
    'emergency': logging.CRITICAL,
}


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logger with a single stderr handler."""
    log_level = (level or os.getenv('LOG_LEVEL', 'WARNING')).upper()  # Default to WARNING
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level, logging.WARNING))

    # Remove any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(stderr_handler)

    return logging.getLogger(__name__)


def set_mcp_log_level(level: str) -> int:
    """Apply an MCP logging level to the package logger; returns the stdlib level."""
    stdlib_level = MCP_LOG_LEVELS.get(str(level).lower(), logging.WARNING)
    logging.getLogger('mem0_mcp').setLevel(stdlib_level)
    return stdlib_level
