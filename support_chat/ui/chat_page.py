"""NiceGUI chat page rendering a ChatSession."""

import logging
import os

from nicegui import ui

from support_chat.chat import ChatSession
from support_chat.models import Role, Turn

logger = logging.getLogger(__name__)

PAGE_TITLE = "Support Chat"

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .chat-window {
        background: white;
        border: 1px solid black;
        border-radius: 12px;
        overflow: hidden;
    }

    .message-user {
        background: #9c27b0;
        color: white;
        border-radius: 16px;
    }

    .message-assistant {
        background: #1976d2;
        color: white;
        border-radius: 16px;
    }
</style>
"""


def bubble_classes(turn: Turn) -> tuple[str, str]:
    """Return (row alignment, bubble style) classes for a turn."""
    if turn.role is Role.USER:
        return "justify-end", "message-user"
    return "justify-start", "message-assistant"


def send_button_text(is_sending: bool) -> str:
    return "Sending..." if is_sending else "Send"


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button
    bubbles: list[ui.label] = []

    def render_turn(turn: Turn) -> None:
        align, bubble = bubble_classes(turn)
        with ui.row().classes(f"w-full {align}"):
            label = ui.label(turn.content).classes(
                f"max-w-[80%] px-6 py-4 whitespace-pre-wrap {bubble}"
            )
        bubbles.append(label)

    def refresh_messages(turns: tuple[Turn, ...]) -> None:
        # A fold only ever changes the last turn
        if len(turns) == len(bubbles):
            bubbles[-1].set_text(turns[-1].content)
        else:
            messages_container.clear()
            bubbles.clear()
            with messages_container:
                for turn in turns:
                    render_turn(turn)
        scroll_area.scroll_to(percent=1.0)

    def refresh_controls() -> None:
        if input_field.value != session.draft:
            input_field.value = session.draft
        # Inert while a reply is streaming
        input_field.set_enabled(not session.is_sending)
        send_btn.set_enabled(not session.is_sending)
        send_btn.set_text(send_button_text(session.is_sending))

    def on_change(turns: tuple[Turn, ...]) -> None:
        refresh_messages(turns)
        refresh_controls()

    async def send_message() -> None:
        result = await session.send_draft()
        if result is not None and not result.ok:
            logger.warning(f"Reply failed, apology shown: {result.error}")

    # === UI Layout ===
    with (
        ui.column().classes("w-full h-screen items-center justify-center"),
        ui.column().classes("chat-window p-4 gap-4").style("width: 500px; height: 700px"),
    ):
        scroll_area = ui.scroll_area().classes("flex-grow w-full")
        with scroll_area:
            messages_container = ui.column().classes("w-full gap-4")

        with ui.row().classes("w-full gap-4 items-center no-wrap"):
            input_field = (
                ui.input(label="Message", on_change=lambda e: session.update_draft(e.value or ""))
                .props("outlined")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button(send_button_text(False), on_click=send_message).props("unelevated")

    session.subscribe(on_change)
    on_change(session.turns)


def main() -> None:
    """Serve the chat page on its own NiceGUI server."""
    ui.run(title=PAGE_TITLE, port=int(os.getenv("PORT", "8080")), reload=False)


if __name__ == "__main__":
    main()
