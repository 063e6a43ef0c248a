"""Test package for Support Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Session and host app tests over in-process HTTP

The chat backend is simulated in-process; no network access is needed.
Leverages pytest with pytest-check for soft assertions.
"""
