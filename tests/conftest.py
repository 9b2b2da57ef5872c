import os
import sys
from typing import Any, Dict, List
from unittest.mock import DEFAULT, create_autospec

import pytest

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), 'src'))

from mem0 import AsyncMemoryClient

from mem0_mcp.config import Mem0Config
from mem0_mcp.storage.mem0_store import Mem0MemoryStore

# Entity ids the Mem0 v3 client only accepts inside ``filters``
ENTITY_PARAMS = frozenset({"user_id", "agent_id", "app_id", "run_id"})


def reject_top_level_entities(*args, **kwargs):
    """Mirror AsyncMemoryClient's ValueError for entity ids passed outside ``filters``."""
    invalid_keys = ENTITY_PARAMS & set(kwargs)
    if invalid_keys:
        raise ValueError(
            f"Top-level entity parameters {invalid_keys} are not supported. "
            "Use filters={'user_id': '...'} instead."
        )
    return DEFAULT


def make_client_double():
    """AsyncMemoryClient double bound to the real SDK signatures."""
    client = create_autospec(AsyncMemoryClient, instance=True)
    client.add.side_effect = reject_top_level_entities
    client.add.return_value = {"results": []}
    client.search.side_effect = reject_top_level_entities
    client.search.return_value = {"results": []}
    return client


@pytest.fixture
def config() -> Mem0Config:
    '''Configuration with a fake API key and the stock default user.'''
    return Mem0Config(api_key="m0-test-key")


@pytest.fixture
def search_records() -> List[Dict[str, Any]]:
    """Two Mem0 search records in descending relevance order."""
    return [
        {"memory": "Loves\n\nhiking", "score": 0.8765},
        {"memory": "Owns a dog", "score": 0.5},
    ]


@pytest.fixture
def mock_client():
    """Async Mem0 client double with empty default responses."""
    return make_client_double()


@pytest.fixture
def memory_store(config, mock_client) -> Mem0MemoryStore:
    return Mem0MemoryStore(config, client=mock_client)
