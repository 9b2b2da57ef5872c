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
Configuration for the Mem0 MCP server.

Values come from environment variables; a ``.env`` file in the working
directory is loaded by :func:`load_environment` before they are read.
The resolved :class:`Mem0Config` is immutable for the process lifetime.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from ._version import __version__

logger = logging.getLogger(__name__)

SERVER_NAME = "mem0-mcp"
SERVER_VERSION = __version__

# Fallback user id when neither the request nor the environment provides one
DEFAULT_USER_ID = "mem0-mcp-user"


class ConfigurationError(ValueError):
    """Raised when required configuration is missing or invalid."""


def load_environment(dotenv_path: Optional[str] = None) -> bool:
    """Load variables from a .env file without overriding the real environment."""
    loaded = load_dotenv(dotenv_path=dotenv_path, override=False)
    if loaded:
        logger.debug("Loaded environment from .env file")
    return loaded


def safe_get_int_env(
    name: str,
    default: int,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """Read an integer environment variable, falling back to default on bad input."""
    raw_value = os.getenv(name)
    if raw_value is None or raw_value.strip() == '':
        return default
    try:
        value = int(raw_value)
    except ValueError:
        logger.warning(f"Invalid {name} value: '{raw_value}'. Using default {default}.")
        return default
    if min_value is not None and value < min_value:
        logger.warning(f"{name}={value} is below minimum {min_value}. Using default {default}.")
        return default
    if max_value is not None and value > max_value:
        logger.warning(f"{name}={value} exceeds maximum {max_value}. Using default {default}.")
        return default
    return value


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name, '').strip()
    return value or None


@dataclass(frozen=True)
class Mem0Config:
    """Connection settings for the Mem0 platform."""

    api_key: str
    user_id: str = DEFAULT_USER_ID

    # Optional endpoint override
    host: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'Mem0Config':
        """Load configuration from environment variables."""
        return cls(
            api_key=os.getenv('MEM0_API_KEY', '').strip(),
            user_id=os.getenv('MEM0_DEFAULT_USER_ID', '').strip() or DEFAULT_USER_ID,
            host=_optional_env('MEM0_HOST'),
        )

    @property
    def default_user_id(self) -> str:
        return self.user_id or DEFAULT_USER_ID

    def validate(self) -> bool:
        """Validate configuration settings."""
        errors = self.problems()
        if errors:
            raise ConfigurationError("; ".join(errors))
        return True

    def problems(self) -> List[str]:
        """Return a list of human-readable configuration problems."""
        errors = []
        if not self.api_key or not self.api_key.strip():
            errors.append("MEM0_API_KEY environment variable is required")
        if self.host and not self.host.startswith(('http://', 'https://')):
            errors.append(f"MEM0_HOST must be an http(s) URL, got: {self.host}")
        return errors
