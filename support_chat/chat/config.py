"""Chat configuration with environment variable loading.

Pydantic-based configuration for the chat session and its backend client.
Values default to environment variables, optionally read from a .env file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_ENDPOINT_URL = "http://localhost:3000/api/chat"
DEFAULT_GREETING = "Hi! I'm the support assistant. How can I help you today?"
DEFAULT_APOLOGY = "I'm sorry, but I encountered an error. Please try again later."


class ChatConfig(BaseModel):
    """Configuration for the chat session.

    Attributes:
        endpoint_url: Backend URL the conversation is POSTed to.
        greeting: Assistant turn every new conversation starts with.
        apology: Text that replaces the assistant reply when an exchange fails.
        timeout: Request timeout in seconds (None waits indefinitely).
    """

    model_config = ConfigDict(validate_default=True)

    endpoint_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_ENDPOINT_URL", DEFAULT_ENDPOINT_URL),
        description="Chat backend endpoint",
    )
    greeting: str = Field(
        default_factory=lambda: os.getenv("CHAT_GREETING", DEFAULT_GREETING),
        min_length=1,
        description="Opening assistant message",
    )
    apology: str = Field(
        default_factory=lambda: os.getenv("CHAT_APOLOGY", DEFAULT_APOLOGY),
        min_length=1,
        description="Message shown when a reply fails",
    )
    timeout: float | None = Field(
        default_factory=lambda: os.getenv("CHAT_TIMEOUT") or None,
        description="Request timeout in seconds, unset for none",
    )

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Validate that the endpoint is an absolute http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "Chat endpoint must be an http(s) URL. Set CHAT_ENDPOINT_URL in .env"
            )
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate that a configured timeout is positive."""
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive. Unset CHAT_TIMEOUT for no timeout")
        return v


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.

    Raises:
        ValueError: If CHAT_ENDPOINT_URL is not an http(s) URL.
    """
    return ChatConfig()
