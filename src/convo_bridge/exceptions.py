"""Errors raised while translating a conversation or calling the endpoint."""


class AdapterError(Exception):
    """Base class for all convo_bridge errors."""


class ConversionError(AdapterError):
    """Inbound content could not be encoded for the wire."""


class UpstreamCallError(AdapterError):
    """The chat-completion exchange failed (network, auth, timeout, status)."""


class EmptyResponse(AdapterError):
    """The endpoint answered with zero choices."""


class ArgumentDecodeError(AdapterError):
    """A single tool call's arguments could not be parsed.

    Never raised out of the adapter. It is handed to the diagnostics sink
    and the offending tool call is dropped from the response.
    """

    def __init__(self, tool_name: str, arguments: str, reason: str) -> None:
        super().__init__(f"could not decode arguments for tool {tool_name!r}: {reason}")
        self.tool_name = tool_name
        self.arguments = arguments
        self.reason = reason
