"""Support Chat - single-page chat widget with streamed assistant replies.

Combines NiceGUI for the chat page, HTTPX for streaming the backend reply,
FastAPI as the host application, and Pydantic for data validation.

Components:
    - chat: Conversation state, streaming client and send loop
    - ui: Web interface for chat interactions
    - api: Host application the chat page is mounted on
    - models: Turn and send outcome schemas
"""

__version__ = "0.1.0"
