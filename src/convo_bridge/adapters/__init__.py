"""Adapters between generic conversations and provider wire formats.

Available adapters:
    - OpenAIChatAdapter: OpenAI chat-completion messages, tools and responses.

Usage:
    ```python
    from convo_bridge.adapters import OpenAIChatAdapter
    from convo_bridge.messages import TextFragment, Turn

    adapter = OpenAIChatAdapter()
    messages = adapter.to_wire_messages([
        Turn(role="user", fragments=[TextFragment(text="Hello")]),
    ])
    ```
"""

from convo_bridge.adapters.openai_chat import OpenAIChatAdapter
from convo_bridge.adapters.protocol import ChatAdapter

__all__ = ["ChatAdapter", "OpenAIChatAdapter"]
