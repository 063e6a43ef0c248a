"""Ordered conversation state and the fold applied to streamed chunks."""

from support_chat.models import Role, Turn


class ConversationError(Exception):
    """Raised when the conversation is mutated outside an open exchange."""

    pass


class Conversation:
    """Ordered list of turns for one chat session.

    The conversation always starts with an assistant greeting. Each exchange
    appends a user turn and an empty assistant turn together; the assistant
    turn stays open while its reply streams in and is frozen once closed.
    """

    def __init__(self, greeting: str) -> None:
        self._turns: list[Turn] = [Turn(role=Role.ASSISTANT, content=greeting)]
        self._open = False

    def __len__(self) -> int:
        return len(self._turns)

    @property
    def turns(self) -> tuple[Turn, ...]:
        """Snapshot of the turns in display order."""
        return tuple(self._turns)

    @property
    def is_open(self) -> bool:
        """Whether the last turn is still receiving streamed content."""
        return self._open

    @property
    def last(self) -> Turn:
        return self._turns[-1]

    def open_exchange(self, text: str) -> list[Turn]:
        """Append a user turn and an empty assistant turn in one step.

        Args:
            text: The user's message, stored as given.

        Returns:
            The history to send: every turn up to and including the new user
            turn, without the empty assistant placeholder.

        Raises:
            ConversationError: If an exchange is already open.
        """
        if self._open:
            raise ConversationError("An assistant turn is already open")

        history = [*self._turns, Turn(role=Role.USER, content=text)]
        self._turns = [*history, Turn(role=Role.ASSISTANT)]
        self._open = True
        return history

    def fold(self, chunk: str) -> Turn:
        """Append a chunk of reply text to the open assistant turn.

        Only the last turn is replaced; earlier turns keep their identity.

        Raises:
            ConversationError: If no assistant turn is open.
        """
        self._require_open()
        updated = self._turns[-1].extended(chunk)
        self._turns[-1] = updated
        return updated

    def overwrite(self, content: str) -> Turn:
        """Replace the open assistant turn's content entirely.

        Raises:
            ConversationError: If no assistant turn is open.
        """
        self._require_open()
        updated = self._turns[-1].model_copy(update={"content": content})
        self._turns[-1] = updated
        return updated

    def close(self) -> None:
        """Freeze the open assistant turn. Closing twice is harmless."""
        self._open = False

    def _require_open(self) -> None:
        if not self._open:
            raise ConversationError("No assistant turn is open")
