"""Generic conversation representation.

A conversation is an ordered list of turns. Each turn carries a role and an
ordered list of fragments; a fragment is exactly one of text, inline binary
data, a tool call or a tool result. Adapters translate these types to and
from provider wire formats.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextFragment(BaseModel):
    """Plain text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class InlineBinaryFragment(BaseModel):
    """Raw bytes embedded in the conversation (e.g. a loaded artifact)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["inline_binary"] = "inline_binary"
    data: bytes
    mime_type: str = "application/octet-stream"


class ToolCallFragment(BaseModel):
    """A request from the model to invoke a tool."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_call"] = "tool_call"
    name: str
    args: dict[str, Any] = Field(default_factory=dict)


class ToolResultFragment(BaseModel):
    """The outcome of a tool invocation, fed back to the model."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_result"] = "tool_result"
    name: str
    response: dict[str, Any] = Field(default_factory=dict)


Fragment = Annotated[
    TextFragment | InlineBinaryFragment | ToolCallFragment | ToolResultFragment,
    Field(discriminator="type"),
]


class Turn(BaseModel):
    """One role-tagged unit of conversation content.

    Attributes:
        role: "user", "model" (the assistant), "system", or None/"" which
            means user.
        fragments: Ordered content of the turn.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model", "assistant", "system", ""] | None = None
    fragments: list[Fragment] = Field(default_factory=list)


class LLMRequest(BaseModel):
    """Everything needed for one generation call.

    Attributes:
        contents: The conversation so far, oldest turn first.
        system_instruction: Optional instruction prepended as a system message.
        tools: Tool name to tool value. Values are DeclaredTool instances or
            anything whose JSON form has name/description/parameters keys.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    contents: list[Turn] = Field(default_factory=list)
    system_instruction: Turn | None = None
    tools: dict[str, Any] = Field(default_factory=dict)


class LLMResponse(BaseModel):
    """A single generated answer."""

    content: Turn | None = None
