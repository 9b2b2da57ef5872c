"""Tests for the tool catalog and argument validation."""

import pytest
from mcp import types

from mem0_mcp.server.tools import (
    ADD_MEMORY_TOOL,
    SEARCH_MEMORIES_TOOL,
    ToolArgumentError,
    get_tool,
    list_tools,
    validate_arguments,
)


class TestCatalog:
    """Static tool declarations."""

    def test_list_tools_is_stable_and_ordered(self):
        names = [tool.name for tool in list_tools()]

        assert names == ["add-memory", "search-memories"]
        assert list_tools() == list_tools()

    def test_add_memory_schema(self):
        schema = ADD_MEMORY_TOOL.input_schema

        assert schema["type"] == "object"
        assert set(schema["required"]) == {"content", "userId"}
        assert schema["properties"]["content"]["type"] == "string"
        assert schema["properties"]["userId"]["type"] == "string"

    def test_search_memories_schema(self):
        schema = SEARCH_MEMORIES_TOOL.input_schema

        assert set(schema["required"]) == {"query", "userId"}
        assert schema["properties"]["returnAll"]["type"] == "boolean"
        assert "returnAll" not in schema["required"]

    def test_every_required_field_is_declared(self):
        for tool in list_tools():
            assert set(tool.required) <= set(tool.fields)

    def test_to_mcp_tool(self):
        tool = SEARCH_MEMORIES_TOOL.to_mcp_tool()

        assert isinstance(tool, types.Tool)
        assert tool.name == "search-memories"
        assert tool.description.startswith("Search through stored memories")
        assert tool.inputSchema == SEARCH_MEMORIES_TOOL.input_schema

    def test_get_tool(self):
        assert get_tool("add-memory") is ADD_MEMORY_TOOL
        assert get_tool("delete-memory") is None
        assert get_tool("") is None
        assert get_tool(None) is None


class TestValidateArguments:
    """Schema-driven argument checks."""

    def test_valid_add_arguments(self):
        result = validate_arguments(ADD_MEMORY_TOOL, {"content": "I like tea", "userId": "alice"})
        assert result == {"content": "I like tea", "userId": "alice"}

    def test_missing_content_fails(self):
        with pytest.raises(ToolArgumentError, match="Missing required argument: content"):
            validate_arguments(ADD_MEMORY_TOOL, {"userId": "alice"})

    def test_none_query_fails(self):
        with pytest.raises(ToolArgumentError, match="query"):
            validate_arguments(SEARCH_MEMORIES_TOOL, {"query": None, "userId": "alice"})

    def test_missing_user_id_is_tolerated(self):
        result = validate_arguments(ADD_MEMORY_TOOL, {"content": "I like tea"})
        assert result == {"content": "I like tea"}

    def test_wrong_type_fails(self):
        with pytest.raises(ToolArgumentError, match="Invalid argument 'content': expected string"):
            validate_arguments(ADD_MEMORY_TOOL, {"content": 42, "userId": "alice"})

    def test_return_all_must_be_boolean(self):
        with pytest.raises(ToolArgumentError, match="returnAll"):
            validate_arguments(SEARCH_MEMORIES_TOOL, {"query": "q", "userId": "u", "returnAll": "true"})

    def test_boolean_is_not_a_string(self):
        with pytest.raises(ToolArgumentError):
            validate_arguments(SEARCH_MEMORIES_TOOL, {"query": True, "userId": "u"})

    def test_undeclared_fields_are_dropped(self):
        result = validate_arguments(
            SEARCH_MEMORIES_TOOL,
            {"query": "q", "userId": "u", "returnAll": True, "limit": 3},
        )
        assert result == {"query": "q", "userId": "u", "returnAll": True}
