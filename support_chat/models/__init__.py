"""Pydantic models for conversation turns and send outcomes.

Models:
    - Role: Speaker of a turn (user or assistant)
    - Turn: Individual message in the conversation
    - SendOutcome: Result tag of one submission
    - SendResult: Outcome of one submission with reply or error detail
"""

from support_chat.models.schemas import Role, SendOutcome, SendResult, Turn

__all__ = ["Role", "SendOutcome", "SendResult", "Turn"]
