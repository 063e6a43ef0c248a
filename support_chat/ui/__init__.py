"""NiceGUI interface - thin rendering surface for the chat session.

Responsibilities:
    - Message list display, re-rendered as the reply streams in
    - Input box and send button, disabled while a reply is streaming
    - Enter key submission

Contains no conversation logic. Delegates every action to ChatSession.
"""
