"""Protocol for conversation adapters."""

from collections.abc import Mapping
from typing import Any, Protocol

from convo_bridge.messages import LLMResponse, Turn
from convo_bridge.wire import ToolDefinition, WireMessage


class ChatAdapter(Protocol):
    """Protocol for translating between generic turns and a wire format.

    Implementations are stateless: every method is a function of its
    arguments, so one adapter may serve many concurrent requests.
    """

    def to_wire_messages(self, contents: list[Turn]) -> list[WireMessage]:
        """Translate conversation turns to wire messages.

        Args:
            contents: Conversation turns, oldest first.

        Returns:
            Wire messages in conversation order.
        """
        ...

    def to_system_message(self, instruction: Turn) -> WireMessage:
        """Translate a system instruction to a single system message."""
        ...

    def to_tool_definitions(self, tools: Mapping[str, Any]) -> list[ToolDefinition]:
        """Translate a tool catalog to wire tool definitions.

        Tools without extractable metadata are omitted.
        """
        ...

    def from_completion(self, completion: Any) -> LLMResponse:
        """Translate a wire completion to a generic response."""
        ...
