# Copyright 2024 Heinrich Krupp
# SPDX-License-Identifier: Apache-2.0

"""Storage adapters for the Mem0 MCP server."""

from .mem0_store import Mem0MemoryStore, OutcomeStatus, StoreOutcome, extract_records

__all__ = [
    'Mem0MemoryStore',
    'OutcomeStatus',
    'StoreOutcome',
    'extract_records',
]
