from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai.types.chat import ChatCompletion

from convo_bridge.adapters.openai_chat import OpenAIChatAdapter


class RecordingDiagnostics:
    """Diagnostics sink that keeps every event for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def record(self, event: str, **details: Any) -> None:
        self.events.append((event, details))

    def named(self, event: str) -> list[dict[str, Any]]:
        """Details of every recorded event with the given name."""
        return [details for name, details in self.events if name == event]


def make_completion(
    content: str | None = None,
    tool_calls: list[tuple[str, str]] | None = None,
    *,
    choices: bool = True,
) -> ChatCompletion:
    """Build a ChatCompletion with one choice.

    Args:
        content: Assistant text.
        tool_calls: (tool name, raw arguments) pairs.
        choices: If False, the completion has no choices at all.
    """
    message: dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls:
        message["tool_calls"] = [
            {
                "id": f"call_{i}",
                "type": "function",
                "function": {"name": name, "arguments": arguments},
            }
            for i, (name, arguments) in enumerate(tool_calls)
        ]
    return ChatCompletion.model_validate(
        {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "qwen2.5:latest",
            "choices": (
                [{"index": 0, "finish_reason": "stop", "message": message}]
                if choices
                else []
            ),
        }
    )


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    """Provide a recording diagnostics sink."""
    return RecordingDiagnostics()


@pytest.fixture
def adapter(diagnostics: RecordingDiagnostics) -> OpenAIChatAdapter:
    """Provide an adapter wired to the recording sink."""
    return OpenAIChatAdapter(diagnostics=diagnostics)


@pytest.fixture
def mock_client() -> MagicMock:
    """Provide a chat-completion client whose create() returns a text answer."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion("Paris."))
    return client
