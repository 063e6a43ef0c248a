"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: Config pointing at a fake backend URL
    - make_session: Factory building a ChatSession over a mock transport
    - async_client: HTTPX client for the host application

Helpers:
    - byte_stream: Async body yielding byte chunks, optionally failing midway
"""

import json
from collections.abc import AsyncIterator, Callable, Iterable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from support_chat.api import create_app
from support_chat.chat import ChatClient, ChatConfig, ChatSession

BACKEND_URL = "http://backend.test/api/chat"


async def byte_stream(
    chunks: Iterable[bytes],
    error: Exception | None = None,
) -> AsyncIterator[bytes]:
    """Yield each chunk, then raise ``error`` if given."""
    for chunk in chunks:
        yield chunk
    if error is not None:
        raise error


def streaming_handler(
    chunks: Iterable[bytes],
    status_code: int = 200,
    error: Exception | None = None,
    requests: list[httpx.Request] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler answering with a chunked body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(
            status_code,
            headers={"Content-Type": "text/plain; charset=utf-8"},
            content=byte_stream(chunks, error),
        )

    return handler


def request_turns(request: httpx.Request) -> list[dict[str, str]]:
    """Decode the JSON turn list sent in a request."""
    return json.loads(request.content)


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return a config pointing at the fake backend.

    Returns:
        ChatConfig with default greeting and apology.
    """
    return ChatConfig(endpoint_url=BACKEND_URL, timeout=None)


@pytest.fixture
def make_session(chat_config: ChatConfig) -> Callable[..., ChatSession]:
    """Return a factory building sessions over a MockTransport handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> ChatSession:
        client = ChatClient(chat_config, transport=httpx.MockTransport(handler))
        return ChatSession(config=chat_config, client=client)

    return factory


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
