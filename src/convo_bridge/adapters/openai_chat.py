"""OpenAI chat-completion adapter.

Converts generic turns to the OpenAI chat-completion message list and a
``ChatCompletion`` back to a generic response.

The wire protocol puts tool calls on an assistant message and each tool
result in its own ``tool`` message that follows it. A turn may interleave
text, calls and results, so text and calls are buffered and flushed as one
message whenever a tool result is reached, and once more at the end of the
turn.
"""

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from convo_bridge.diagnostics import DiagnosticsSink, LoggingDiagnostics
from convo_bridge.exceptions import ArgumentDecodeError, EmptyResponse
from convo_bridge.messages import (
    InlineBinaryFragment,
    LLMResponse,
    TextFragment,
    ToolCallFragment,
    ToolResultFragment,
    Turn,
)
from convo_bridge.tools import DeclaredTool, ToolDeclaration
from convo_bridge.wire import (
    ToolCallRecord,
    ToolDefinition,
    WireMessage,
    call_id_for,
    canonical_json,
)

if TYPE_CHECKING:
    from openai.types.chat import ChatCompletion

# Some models (seen with Qwen served by Ollama) send a bare string where the
# load_artifacts tool expects a list of names.
ARTIFACT_NAMES_FIELD = "artifact_names"


def _wire_role(role: str | None) -> str:
    if role == "model":
        return "assistant"
    if not role:
        return "user"
    return role


class OpenAIChatAdapter:
    """Translates between generic turns and OpenAI chat-completion shapes.

    Usage:
        ```python
        from convo_bridge.adapters.openai_chat import OpenAIChatAdapter
        from convo_bridge.messages import TextFragment, Turn

        adapter = OpenAIChatAdapter()
        messages = adapter.to_wire_messages([
            Turn(role="user", fragments=[TextFragment(text="Hello")]),
        ])
        payload = [m.to_openai() for m in messages]
        ```

    Args:
        diagnostics: Sink for repair and drop events. Defaults to a sink that
            writes to this package's logger.
    """

    def __init__(self, diagnostics: DiagnosticsSink | None = None) -> None:
        self._diagnostics = LoggingDiagnostics() if diagnostics is None else diagnostics

    # Inbound

    def to_wire_messages(self, contents: list[Turn]) -> list[WireMessage]:
        """Translate conversation turns to wire messages.

        Turns never merge: each produces zero or more messages of its own.

        Text and inline data are best-effort. Tool arguments and results are
        not: a value with no JSON form (an arbitrary object, say) fails the
        whole translation instead of being sent as an empty or partial
        payload.

        Args:
            contents: Conversation turns, oldest first.

        Returns:
            Wire messages in conversation order.

        Raises:
            ConversionError: If tool arguments or results cannot be encoded.
        """
        messages: list[WireMessage] = []
        for turn in contents:
            messages.extend(self._convert_turn(turn))
        return messages

    def _convert_turn(self, turn: Turn) -> list[WireMessage]:
        role = _wire_role(turn.role)
        messages: list[WireMessage] = []
        text = ""
        tool_calls: list[ToolCallRecord] = []
        issued_ids: set[str] = set()

        def flush() -> None:
            nonlocal text, tool_calls
            if text or tool_calls:
                messages.append(
                    WireMessage(role=role, content=text or None, tool_calls=tool_calls)
                )
                text = ""
                tool_calls = []

        for fragment in turn.fragments:
            if isinstance(fragment, TextFragment):
                text += fragment.text
            elif isinstance(fragment, InlineBinaryFragment):
                text += fragment.data.decode("utf-8", errors="replace")
            elif isinstance(fragment, ToolCallFragment):
                call_id = call_id_for(fragment.name)
                if call_id in issued_ids:
                    self._diagnostics.record(
                        "tool_call_id_collision", tool=fragment.name, call_id=call_id
                    )
                issued_ids.add(call_id)
                tool_calls.append(
                    ToolCallRecord(
                        id=call_id,
                        name=fragment.name,
                        arguments=canonical_json(fragment.args),
                    )
                )
            elif isinstance(fragment, ToolResultFragment):
                flush()
                call_id = call_id_for(fragment.name)
                payload = canonical_json(fragment.response)
                self._diagnostics.record(
                    "tool_result_converted",
                    call_id=call_id,
                    payload_bytes=len(payload.encode("utf-8")),
                )
                messages.append(
                    WireMessage(role="tool", content=payload, tool_call_id=call_id)
                )

        flush()
        return messages

    def to_system_message(self, instruction: Turn) -> WireMessage:
        """Translate a system instruction to one system message.

        Only text fragments contribute; they are concatenated in order.
        """
        text = "".join(
            fragment.text
            for fragment in instruction.fragments
            if isinstance(fragment, TextFragment)
        )
        return WireMessage(role="system", content=text)

    # Tool catalog

    def to_tool_definitions(self, tools: Mapping[str, Any]) -> list[ToolDefinition]:
        """Translate a tool catalog to wire tool definitions.

        Declared tools describe themselves. Any other value is converted to
        JSON-compatible data and read as a {name, description, parameters}
        object. Tools that yield no name are left out.

        Args:
            tools: Tool name to tool value, in the order to advertise them.

        Returns:
            Tool definitions in catalog order.
        """
        definitions: list[ToolDefinition] = []
        for key, tool in tools.items():
            declaration = self._declaration_for(tool)
            if declaration is None or not declaration.name:
                self._diagnostics.record("tool_skipped", tool=key)
                continue
            definitions.append(
                ToolDefinition(
                    name=declaration.name,
                    description=declaration.description,
                    parameters=declaration.parameters,
                )
            )
        return definitions

    def _declaration_for(self, tool: Any) -> ToolDeclaration | None:
        if isinstance(tool, DeclaredTool):
            return tool.declaration()
        try:
            data = to_jsonable_python(tool)
        except PydanticSerializationError:
            return None
        if not isinstance(data, dict):
            return None
        try:
            return ToolDeclaration.model_validate(data)
        except ValidationError:
            return None

    # Outbound

    def from_completion(self, completion: "ChatCompletion") -> LLMResponse:
        """Translate a chat completion to a generic model response.

        Only the first choice is used. Tool calls whose arguments cannot be
        decoded are dropped and reported; the rest of the response survives.

        Raises:
            EmptyResponse: If the completion has no choices.
        """
        if not completion.choices:
            raise EmptyResponse("no choices returned from the chat completion endpoint")

        message = completion.choices[0].message
        fragments: list[TextFragment | ToolCallFragment] = []

        if message.content:
            fragments.append(TextFragment(text=message.content))

        for tool_call in message.tool_calls or []:
            function = getattr(tool_call, "function", None)
            if function is None:
                self._diagnostics.record(
                    "argument_decode_failed",
                    error=ArgumentDecodeError(
                        "", "", f"unsupported tool call type {tool_call.type!r}"
                    ),
                )
                continue
            args = self._decode_arguments(function.name, function.arguments)
            if args is None:
                continue
            fragments.append(ToolCallFragment(name=function.name, args=args))

        return LLMResponse(content=Turn(role="model", fragments=fragments))

    def _decode_arguments(self, tool_name: str, raw: str) -> dict[str, Any] | None:
        try:
            args = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as e:
            self._diagnostics.record(
                "argument_decode_failed",
                error=ArgumentDecodeError(tool_name, raw, str(e)),
            )
            return None
        if args is None:
            args = {}
        if not isinstance(args, dict):
            self._diagnostics.record(
                "argument_decode_failed",
                error=ArgumentDecodeError(
                    tool_name, raw, f"expected an object, got {type(args).__name__}"
                ),
            )
            return None
        return self._repair_arguments(tool_name, args)

    def _repair_arguments(self, tool_name: str, args: dict[str, Any]) -> dict[str, Any]:
        value = args.get(ARTIFACT_NAMES_FIELD)
        if isinstance(value, str):
            self._diagnostics.record(
                "arguments_repaired",
                tool=tool_name,
                field=ARTIFACT_NAMES_FIELD,
                value=value,
            )
            args[ARTIFACT_NAMES_FIELD] = [value]
        return args
