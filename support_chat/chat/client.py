"""HTTPX client that streams the assistant reply from the chat backend.

The whole conversation is POSTed as a JSON list of turns. The backend answers
with a plain text byte stream whose concatenation is the full reply.
"""

import codecs
import logging
from collections.abc import AsyncIterator, Sequence

import httpx

from support_chat.chat.config import ChatConfig, get_chat_config
from support_chat.models import Turn

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class StreamDecoder:
    """Incremental text decoder for a chunked byte stream.

    Partial multi-byte sequences at the end of one chunk are held back and
    completed by the next, so chunk boundaries never corrupt the text.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="strict")

    def decode(self, data: bytes) -> str:
        return self._decoder.decode(data)

    def flush(self) -> str:
        """Decode whatever is pending at end of stream.

        Raises:
            UnicodeDecodeError: If the stream ended inside a character.
        """
        return self._decoder.decode(b"", final=True)


class ChatClient:
    """Client for the streaming chat backend."""

    def __init__(
        self,
        config: ChatConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the chat client.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
            transport: Optional HTTPX transport, used to swap the network out.
        """
        self._config = config or get_chat_config()
        self._transport = transport

    async def stream_reply(self, history: Sequence[Turn]) -> AsyncIterator[str]:
        """Send the conversation and yield reply text as it arrives.

        Args:
            history: Turns to send, in chronological order.

        Yields:
            Decoded reply text, one piece per received chunk.

        Raises:
            httpx.HTTPStatusError: If the backend answers with a non-2xx status.
            httpx.RequestError: If the request or the body read fails.
            UnicodeDecodeError: If the body is not valid text.
        """
        payload = [turn.model_dump(mode="json") for turn in history]
        logger.info(f"Sending {len(payload)} turns to {self._config.endpoint_url}")

        async with (
            httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout),
                transport=self._transport,
            ) as client,
            client.stream("POST", self._config.endpoint_url, json=payload) as response,
        ):
            response.raise_for_status()
            decoder = StreamDecoder(response.charset_encoding or DEFAULT_ENCODING)

            async for data in response.aiter_bytes():
                text = decoder.decode(data)
                if text:
                    yield text

            tail = decoder.flush()
            if tail:
                yield tail
