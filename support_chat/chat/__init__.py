"""Conversation stream reducer.

Owns the ordered list of chat turns, sends the conversation to the chat
backend and folds each streamed chunk into the trailing assistant turn.

Responsibilities:
    - Conversation state with its pairing and single-open-turn rules
    - Streaming POST to the backend with incremental text decoding
    - Send loop with in-flight guard and apology fallback
    - Environment-driven configuration

Holds no UI code. The chat page subscribes to a session and renders its turns.
"""

from support_chat.chat.client import ChatClient, StreamDecoder
from support_chat.chat.config import ChatConfig, get_chat_config
from support_chat.chat.conversation import Conversation, ConversationError
from support_chat.chat.session import ChatSession

__all__ = [
    "ChatClient",
    "ChatConfig",
    "ChatSession",
    "Conversation",
    "ConversationError",
    "StreamDecoder",
    "get_chat_config",
]
