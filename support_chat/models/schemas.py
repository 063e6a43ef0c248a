from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Turn(BaseModel):
    """A single message in the conversation.

    Turns are immutable. Growing an assistant reply produces a new Turn
    that replaces the previous one in the conversation.

    Attributes:
        role: The speaker identifier (user or assistant).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str = ""

    def extended(self, text: str) -> "Turn":
        """Return a copy of this turn with ``text`` appended to its content."""
        return self.model_copy(update={"content": self.content + text})


class SendOutcome(str, Enum):
    """Result tag of one submission."""

    COMPLETE = "complete"
    FAILED = "failed"


class SendResult(BaseModel):
    """Outcome of one submission.

    Attributes:
        outcome: Whether the reply streamed to completion or failed.
        reply: Final assistant text when the stream completed.
        error: Diagnostic message when the exchange failed.
    """

    outcome: SendOutcome
    reply: str | None = None
    error: str | None = Field(None, description="Logged only, never shown in the chat")

    @property
    def ok(self) -> bool:
        """Whether the reply streamed to completion."""
        return self.outcome is SendOutcome.COMPLETE
