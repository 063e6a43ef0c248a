"""Chat session: the send loop that folds a streamed reply into the conversation.

One session exists per open chat page. It owns the conversation, the
pending draft and the in-flight flag, and notifies its listeners after every
change so the page can re-render.
"""

import logging
from collections.abc import Callable

from support_chat.chat.client import ChatClient
from support_chat.chat.config import ChatConfig, get_chat_config
from support_chat.chat.conversation import Conversation
from support_chat.models import SendOutcome, SendResult, Turn

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[Turn, ...]], None]


class ChatSession:
    """Manages chat state for a single page."""

    def __init__(
        self,
        config: ChatConfig | None = None,
        client: ChatClient | None = None,
    ) -> None:
        self._config = config or get_chat_config()
        self._client = client or ChatClient(self._config)
        self._conversation = Conversation(self._config.greeting)
        self._listeners: list[Listener] = []
        self.draft: str = ""
        self.is_sending: bool = False

    @property
    def turns(self) -> tuple[Turn, ...]:
        return self._conversation.turns

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with the current turns after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def update_draft(self, text: str) -> None:
        self.draft = text

    async def send_draft(self) -> SendResult | None:
        """Submit the current draft."""
        return await self.submit(self.draft)

    async def submit(self, text: str) -> SendResult | None:
        """Send a user message and stream the reply into the conversation.

        Blank messages and calls made while a reply is still streaming are
        ignored without touching any state.

        Args:
            text: The user's message.

        Returns:
            The outcome of the exchange, or None if the call was ignored.
        """
        if not text.strip() or self.is_sending:
            return None

        self.is_sending = True
        self.draft = ""
        history = self._conversation.open_exchange(text)

        try:
            self._publish()
            async for chunk in self._client.stream_reply(history):
                self._conversation.fold(chunk)
                self._publish()
        except Exception as e:
            logger.error(f"Chat exchange failed: {e!r}")
            self._conversation.overwrite(self._config.apology)
            result = SendResult(outcome=SendOutcome.FAILED, error=str(e) or type(e).__name__)
        else:
            result = SendResult(outcome=SendOutcome.COMPLETE, reply=self._conversation.last.content)
            logger.info(f"Reply complete ({len(result.reply)} chars)")
        finally:
            self._conversation.close()
            self.is_sending = False
            self._publish_final()

        return result

    def _publish(self) -> None:
        turns = self._conversation.turns
        for listener in list(self._listeners):
            listener(turns)

    def _publish_final(self) -> None:
        """Publish the closed exchange; the outcome is already decided."""
        try:
            self._publish()
        except Exception as e:
            logger.warning(f"Listener failed after exchange closed: {e!r}")
