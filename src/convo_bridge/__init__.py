from convo_bridge.adapters import ChatAdapter, OpenAIChatAdapter
from convo_bridge.config import LLMConfig
from convo_bridge.diagnostics import DiagnosticsSink, LoggingDiagnostics, NullDiagnostics
from convo_bridge.exceptions import (
    AdapterError,
    ArgumentDecodeError,
    ConversionError,
    EmptyResponse,
    UpstreamCallError,
)
from convo_bridge.messages import (
    Fragment,
    InlineBinaryFragment,
    LLMRequest,
    LLMResponse,
    TextFragment,
    ToolCallFragment,
    ToolResultFragment,
    Turn,
)
from convo_bridge.model import OpenAICompatibleModel
from convo_bridge.tools import DeclaredTool, FunctionTool, OpaqueTool, ToolDeclaration
from convo_bridge.wire import ToolCallRecord, ToolDefinition, WireMessage, canonical_json

__all__ = [
    # Model
    "OpenAICompatibleModel",
    # Config
    "LLMConfig",
    # Adapters
    "ChatAdapter",
    "OpenAIChatAdapter",
    # Conversation
    "Fragment",
    "InlineBinaryFragment",
    "LLMRequest",
    "LLMResponse",
    "TextFragment",
    "ToolCallFragment",
    "ToolResultFragment",
    "Turn",
    # Wire
    "ToolCallRecord",
    "ToolDefinition",
    "WireMessage",
    "canonical_json",
    # Tools
    "DeclaredTool",
    "FunctionTool",
    "OpaqueTool",
    "ToolDeclaration",
    # Diagnostics
    "DiagnosticsSink",
    "LoggingDiagnostics",
    "NullDiagnostics",
    # Errors
    "AdapterError",
    "ArgumentDecodeError",
    "ConversionError",
    "EmptyResponse",
    "UpstreamCallError",
]
