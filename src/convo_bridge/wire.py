"""Chat-completion wire records.

These mirror the OpenAI chat-completion request shapes. ``to_openai()``
renders the plain dicts the ``openai`` SDK accepts, leaving out empty fields.
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_core import PydanticSerializationError, to_jsonable_python

from convo_bridge.exceptions import ConversionError

CALL_ID_PREFIX = "call_"


def call_id_for(tool_name: str) -> str:
    """Correlation identifier linking a tool call to its result.

    Deterministic in the tool name, so two calls to the same tool within one
    turn share an identifier.
    """
    return f"{CALL_ID_PREFIX}{tool_name}"


def canonical_json(value: Any) -> str:
    """Encode structured data as compact, key-sorted UTF-8 JSON.

    Raises:
        ConversionError: If the value has no JSON representation.
    """
    try:
        jsonable = to_jsonable_python(value)
    except PydanticSerializationError as e:
        raise ConversionError(f"value is not JSON serializable: {e}") from e
    return json.dumps(jsonable, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


class ToolCallRecord(BaseModel):
    """A tool invocation owned by an assistant message."""

    id: str
    name: str
    arguments: str = "{}"

    def to_openai(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


class WireMessage(BaseModel):
    """One entry of the chat-completion ``messages`` list.

    Attributes:
        role: Wire role.
        content: Text content, None when the message only carries tool calls.
        tool_calls: Tool invocations (assistant messages only).
        tool_call_id: Identifier of the call this message answers (tool
            messages only).
    """

    role: Literal["system", "user", "assistant", "tool"]
    content: str | None = None
    tool_calls: list[ToolCallRecord] = Field(default_factory=list)
    tool_call_id: str | None = None

    def to_openai(self) -> dict[str, Any]:
        message: dict[str, Any] = {"role": self.role}
        if self.content is not None:
            message["content"] = self.content
        if self.tool_calls:
            message["tool_calls"] = [tc.to_openai() for tc in self.tool_calls]
        if self.tool_call_id is not None:
            message["tool_call_id"] = self.tool_call_id
        return message


class ToolDefinition(BaseModel):
    """A function tool advertised to the endpoint."""

    name: str
    description: str = ""
    parameters: dict[str, Any] | None = None

    def to_openai(self) -> dict[str, Any]:
        function: dict[str, Any] = {"name": self.name, "description": self.description}
        if self.parameters is not None:
            function["parameters"] = self.parameters
        return {"type": "function", "function": function}
