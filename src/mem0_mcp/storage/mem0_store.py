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
Mem0 platform storage adapter for the Mem0 MCP server.

Wraps ``mem0.AsyncMemoryClient`` add/search calls. Every call returns a
:class:`StoreOutcome` instead of raising, so callers decide how backend
failures are presented.
"""

import asyncio
import logging
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from mem0 import AsyncMemoryClient

from ..config import Mem0Config

logger = logging.getLogger(__name__)


class OutcomeStatus(Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclass(frozen=True)
class StoreOutcome:
    """Result of a single adapter call."""
    status: OutcomeStatus
    records: Sequence[Any] = ()
    error: Optional[str] = None

    @classmethod
    def success(cls, records: Sequence[Any] = ()) -> 'StoreOutcome':
        return cls(OutcomeStatus.SUCCESS, tuple(records))

    @classmethod
    def empty(cls) -> 'StoreOutcome':
        return cls(OutcomeStatus.EMPTY)

    @classmethod
    def failure(cls, error: str) -> 'StoreOutcome':
        return cls(OutcomeStatus.FAILURE, error=error)

    @property
    def ok(self) -> bool:
        return self.status is not OutcomeStatus.FAILURE


def extract_records(response: Any) -> List[Any]:
    """
    Pull the ordered record list out of a Mem0 search response.

    The v3 API wraps it as ``{"results": [...]}``; a bare list is also
    accepted. Store ordering is preserved.
    """
    if isinstance(response, Mapping):
        response = response.get("results")
    if not isinstance(response, (list, tuple)):
        return []
    return list(response)


def user_filters(user_id: str) -> Dict[str, str]:
    """Scope a Mem0 call to one user; entity ids are only accepted inside ``filters``."""
    return {"user_id": user_id}


class Mem0MemoryStore:
    """
    Mem0 platform adapter.

    The underlying client is created on first use because its constructor
    contacts the Mem0 API to validate the key. A failed creation is reported
    as a failed call and attempted again on the next one.
    """

    def __init__(self, config: Mem0Config, client: Optional[Any] = None):
        """
        Initialize the adapter.

        Args:
            config: Resolved server configuration
            client: Pre-built async Mem0 client (mainly for tests)
        """
        self.config = config
        self._client = client

    def _create_client(self) -> AsyncMemoryClient:
        # Organization and project are resolved from the API key
        kwargs: Dict[str, Any] = {"api_key": self.config.api_key}
        if self.config.host:
            kwargs["host"] = self.config.host
        return AsyncMemoryClient(**kwargs)

    async def _get_client(self) -> Any:
        if self._client is None:
            # Key validation in the constructor is a blocking HTTP call
            self._client = await asyncio.to_thread(self._create_client)
            logger.info("Initialized Mem0 client")
        return self._client

    def _log_failure(self, operation: str, e: Exception) -> str:
        error_msg = f"Error {operation}: {type(e).__name__}: {str(e)}"
        logger.error(f"{error_msg}\n{traceback.format_exc()}")
        return error_msg

    async def add_memory(self, messages: List[Dict[str, str]], user_id: str) -> StoreOutcome:
        """Store a message exchange for ``user_id``."""
        try:
            client = await self._get_client()
            await client.add(messages, filters=user_filters(user_id))
            logger.debug(f"Added memory for user {user_id}")
            return StoreOutcome.success()
        except Exception as e:
            return StoreOutcome.failure(self._log_failure("adding memory", e))

    async def search_memories(self, query: str, user_id: str) -> StoreOutcome:
        """Search ``user_id``'s memories; records come back in store order."""
        try:
            client = await self._get_client()
            response = await client.search(query, filters=user_filters(user_id))
        except Exception as e:
            return StoreOutcome.failure(self._log_failure("searching memories", e))

        records = extract_records(response)
        logger.debug(f"Search for user {user_id} returned {len(records)} records")
        if not records:
            return StoreOutcome.empty()
        return StoreOutcome.success(records)
