"""Integration tests for components working together as a system.

Coverage:
    - Chat session against a FastAPI streaming backend over ASGITransport
    - Host application routes
"""
