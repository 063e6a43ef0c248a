"""Unit tests for individual components in isolation.

Coverage:
    - models/: Turn and SendResult schemas
    - chat/: Conversation fold, stream decoding, client, session send loop
    - config: Environment-driven configuration

The backend is replaced with httpx.MockTransport. Leverages pytest-check for
multiple assertions per test.
"""
