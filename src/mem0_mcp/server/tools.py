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
Tool catalog for the Mem0 MCP server.

Declares the two tools the server exposes and validates the untyped argument
mapping of a tool call against the declared fields.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from mcp import types


class ToolArgumentError(ValueError):
    """Raised when tool call arguments do not match the tool's input schema."""


# JSON schema type name -> accepted Python types
_JSON_TYPES: Dict[str, Tuple[type, ...]] = {
    "string": (str,),
    "boolean": (bool,),
    "number": (int, float),
}


@dataclass(frozen=True)
class FieldSpec:
    """A single input field of a tool."""
    type: str
    description: str
    # Required in the advertised schema, but filled in by the server when absent
    server_default: bool = False

    def accepts(self, value: Any) -> bool:
        expected = _JSON_TYPES.get(self.type)
        if expected is None:
            return True
        if isinstance(value, bool) and self.type != "boolean":
            return False
        return isinstance(value, expected)


@dataclass(frozen=True)
class ToolDefinition:
    """Static declaration of a tool: name, description and input schema."""
    name: str
    description: str
    fields: Mapping[str, FieldSpec] = field(default_factory=dict)
    required: Tuple[str, ...] = ()

    @property
    def input_schema(self) -> Dict[str, Any]:
        """JSON schema form of the declared fields."""
        return {
            "type": "object",
            "properties": {
                name: {"type": spec.type, "description": spec.description}
                for name, spec in self.fields.items()
            },
            "required": list(self.required),
        }

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


_USER_ID_DESCRIPTION = (
    "User ID for memory storage. If not provided explicitly, "
    "use a generic user ID like, 'mem0-mcp-user'"
)

ADD_MEMORY_TOOL = ToolDefinition(
    name="add-memory",
    description=(
        "Add a new memory. This method is called everytime the user informs anything "
        "about themselves, their preferences, or anything that has any relevent information "
        "whcih can be useful in the future conversation. This can also be called when the "
        "user asks you to remember something."
    ),
    fields={
        "content": FieldSpec("string", "The content to store in memory"),
        "userId": FieldSpec("string", _USER_ID_DESCRIPTION, server_default=True),
    },
    required=("content", "userId"),
)

SEARCH_MEMORIES_TOOL = ToolDefinition(
    name="search-memories",
    description=(
        "Search through stored memories. This method is called ANYTIME the user asks anything."
    ),
    fields={
        "query": FieldSpec(
            "string",
            "The search query. This is the query that the user has asked for. "
            "Example: 'What did I tell you about the weather last week?' or "
            "'What did I tell you about my friend John?'",
        ),
        "userId": FieldSpec("string", _USER_ID_DESCRIPTION, server_default=True),
        "returnAll": FieldSpec(
            "boolean",
            "If true, returns all matching memories with scores. "
            "If false (default), returns only the most relevant memory.",
        ),
    },
    required=("query", "userId"),
)

TOOLS: Tuple[ToolDefinition, ...] = (ADD_MEMORY_TOOL, SEARCH_MEMORIES_TOOL)
_TOOLS_BY_NAME: Dict[str, ToolDefinition] = {tool.name: tool for tool in TOOLS}


def list_tools() -> List[ToolDefinition]:
    """Return the tool catalog in declaration order."""
    return list(TOOLS)


def get_tool(name: Optional[str]) -> Optional[ToolDefinition]:
    return _TOOLS_BY_NAME.get(name) if name else None


def validate_arguments(tool: ToolDefinition, arguments: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Check a tool call's arguments against the tool's declared fields.

    Required fields must be present and not None, unless the server supplies
    a default for them. Present fields must match their declared type.
    Undeclared fields are dropped.

    Returns:
        The declared fields that were supplied (None values removed).

    Raises:
        ToolArgumentError: On the first missing or mistyped field.
    """
    for name in tool.required:
        if arguments.get(name) is None and not tool.fields[name].server_default:
            raise ToolArgumentError(f"Missing required argument: {name}")

    validated: Dict[str, Any] = {}
    for name, spec in tool.fields.items():
        value = arguments.get(name)
        if value is None:
            continue
        if not spec.accepts(value):
            raise ToolArgumentError(
                f"Invalid argument '{name}': expected {spec.type}, got {type(value).__name__}"
            )
        validated[name] = value
    return validated
