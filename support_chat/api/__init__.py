"""FastAPI host application for the chat page.

NiceGUI mounts the chat page onto this app, so a single uvicorn server
serves both the page and the operational endpoints.

Endpoints:
    - GET /health: Service health status
"""

from support_chat.api.app import create_app

__all__ = ["create_app"]
