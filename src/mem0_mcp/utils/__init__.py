# Copyright 2024 Heinrich Krupp
# SPDX-License-Identifier: Apache-2.0

"""Utility modules for the Mem0 MCP server."""
