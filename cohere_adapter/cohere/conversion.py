"""Generic-to-Cohere schema conversion.

Pure functions with no I/O:

- :func:`convert_tool_definition` flattens a JSON-schema-like tool
  definition into Cohere's ``parameter_definitions`` map.
- :func:`convert_type` reduces a JSON-schema ``type`` (string or nullable
  type list) to one of Cohere's parameter type tokens.
- :func:`convert_message` maps generic chat roles to Cohere role tokens.

Malformed tool schemas raise :class:`PreconditionViolation`; callers are
expected to validate tool definitions before building a request.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ..base.errors import PreconditionViolation
from ..base.models import Message, ToolDefinition
from . import schemas

_KNOWN_TYPES = frozenset({"string", "number", "integer", "boolean", "array", "object"})
_DEFAULT_TYPE = "string"

ROLE_MAP: Dict[str, str] = {
    "system": "SYSTEM",
    "user": "USER",
    "assistant": "CHATBOT",
}
DEFAULT_ROLE = "USER"


def _convert_type_str(type_name: str) -> str:
    return type_name if type_name in _KNOWN_TYPES else _DEFAULT_TYPE


def convert_type(schema_type: Any) -> str:
    """Map a JSON-schema ``type`` value onto a Cohere parameter type.

    - ``"integer"`` -> ``"integer"``; unknown names -> ``"string"``.
    - ``["null", "number"]`` -> ``"number"``: the first non-``"null"`` entry
      is used; an empty or all-null list yields ``"string"``.
    - Any other JSON value -> ``"string"``.
    """
    if isinstance(schema_type, str):
        return _convert_type_str(schema_type)
    if isinstance(schema_type, list):
        first = next((t for t in schema_type if t != "null"), None)
        return _convert_type_str(first) if isinstance(first, str) else _DEFAULT_TYPE
    return _DEFAULT_TYPE


def _required_names(parameters: Mapping[str, Any]) -> List[str]:
    required = parameters.get("required")
    if not isinstance(required, list):
        return []
    return [name for name in required if isinstance(name, str)]


def convert_tool_definition(tool: ToolDefinition) -> schemas.ToolDefinition:
    """Convert a generic tool definition into Cohere's flat shape.

    Raises:
        PreconditionViolation: When ``parameters.properties`` is missing or
            not an object, or a property lacks a string ``description`` or a
            ``type``.
    """
    parameters = tool.parameters if isinstance(tool.parameters, Mapping) else {}
    if "properties" not in parameters:
        raise PreconditionViolation(f"tool '{tool.name}': parameters.properties must exist")
    properties = parameters["properties"]
    if not isinstance(properties, Mapping):
        raise PreconditionViolation(f"tool '{tool.name}': parameters.properties must be an object")

    required = set(_required_names(parameters))
    definitions: Dict[str, schemas.Parameter] = {}
    for arg_name, arg_def in properties.items():
        if not isinstance(arg_def, Mapping) or "description" not in arg_def:
            raise PreconditionViolation(f"tool '{tool.name}': argument '{arg_name}' description must exist")
        description = arg_def["description"]
        if not isinstance(description, str):
            raise PreconditionViolation(f"tool '{tool.name}': argument '{arg_name}' description must be a string")
        if "type" not in arg_def:
            raise PreconditionViolation(f"tool '{tool.name}': argument '{arg_name}' type must exist")
        definitions[arg_name] = schemas.Parameter(
            description=description,
            type=convert_type(arg_def["type"]),
            required=arg_name in required,
        )

    return schemas.ToolDefinition(
        name=tool.name,
        description=tool.description,
        parameter_definitions=definitions,
    )


def convert_role(role: str) -> str:
    """Return the Cohere role token for a generic role (unknown -> ``USER``)."""
    return ROLE_MAP.get(role, DEFAULT_ROLE)


def convert_message(message: Message) -> schemas.Message:
    """Convert a generic chat message into a Cohere chat history entry."""
    return schemas.Message(role=convert_role(message.role), message=message.content)


__all__ = [
    "ROLE_MAP",
    "DEFAULT_ROLE",
    "convert_type",
    "convert_tool_definition",
    "convert_role",
    "convert_message",
]
