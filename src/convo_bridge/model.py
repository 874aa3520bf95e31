"""OpenAI-compatible model.

Runs one generation: translate the request, make a single chat-completion
call, translate the answer back.
"""

from typing import Any

from openai import APIError, AsyncOpenAI

from convo_bridge.adapters.openai_chat import OpenAIChatAdapter
from convo_bridge.config import LLMConfig
from convo_bridge.diagnostics import DiagnosticsSink, LoggingDiagnostics
from convo_bridge.exceptions import UpstreamCallError
from convo_bridge.messages import LLMRequest, LLMResponse


class OpenAICompatibleModel:
    """A model served behind an OpenAI-compatible chat-completion API.

    Example:
        ```python
        from convo_bridge import LLMConfig, LLMRequest, OpenAICompatibleModel
        from convo_bridge.messages import TextFragment, Turn

        model = OpenAICompatibleModel.from_config(LLMConfig())
        response = await model.generate_content(LLMRequest(contents=[
            Turn(role="user", fragments=[TextFragment(text="Hi")]),
        ]))
        ```

    Cancelling the awaiting task aborts the in-flight call; the
    ``CancelledError`` propagates and no response is translated.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        diagnostics: DiagnosticsSink | None = None,
        adapter: OpenAIChatAdapter | None = None,
    ) -> None:
        """Initialize the model.

        Args:
            client: Chat-completion client. It should not retry on its own.
            model: Model identifier sent with every request.
            diagnostics: Sink for request and translation events.
            adapter: Translator to use. Built around ``diagnostics`` if not
                provided.
        """
        self._client = client
        self._model = model
        self._diagnostics = LoggingDiagnostics() if diagnostics is None else diagnostics
        if adapter is None:
            adapter = OpenAIChatAdapter(diagnostics=self._diagnostics)
        self._adapter = adapter

    @classmethod
    def from_config(
        cls,
        config: LLMConfig | None = None,
        diagnostics: DiagnosticsSink | None = None,
    ) -> "OpenAICompatibleModel":
        """Build a model and its client from connection settings."""
        config = config or LLMConfig()
        client = AsyncOpenAI(
            base_url=config.host,
            api_key=config.api_key,
            timeout=config.timeout,
            max_retries=0,
        )
        return cls(client, config.model, diagnostics=diagnostics)

    @property
    def name(self) -> str:
        return f"ollama-{self._model}"

    async def generate_content(self, request: LLMRequest) -> LLMResponse:
        """Generate one response for the request.

        Args:
            request: Conversation, optional system instruction and tools.

        Returns:
            The model's answer as a single "model" turn.

        Raises:
            ConversionError: If the request content cannot be encoded.
            UpstreamCallError: If the chat-completion call fails.
            EmptyResponse: If the endpoint returns no choices.
        """
        messages = self._adapter.to_wire_messages(request.contents)
        if request.system_instruction is not None:
            messages.insert(0, self._adapter.to_system_message(request.system_instruction))

        tools = self._adapter.to_tool_definitions(request.tools) if request.tools else []

        params: dict[str, Any] = {
            "model": self._model,
            "messages": [m.to_openai() for m in messages],
        }
        if tools:
            params["tools"] = [t.to_openai() for t in tools]

        self._diagnostics.record(
            "request_sent", model=self._model, messages=len(messages), tools=len(tools)
        )

        try:
            completion = await self._client.chat.completions.create(**params)
        except APIError as e:
            raise UpstreamCallError(f"chat completion call to {self._model} failed: {e}") from e

        return self._adapter.from_completion(completion)
