"""NiceGUI chat interface with file attachments."""

from nicegui import app, events, ui

from easychat.chat import Change, ChatOrchestrator
from easychat.models import Attachment, Role, TextPart, Turn

ACCEPTED_FILES = ".pdf,.docx,.txt,.csv,.json,.md,.xls,.xlsx,image/*"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .app-container {
        border-radius: 16px;
        box-shadow: 0 10px 30px rgba(0, 0, 0, 0.15);
        overflow: hidden;
        max-width: 32rem;
    }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 12px;
    }
    .body--dark .message-user { background: #1d4ed8; }

    .message-bot {
        background: #e5e7eb;
        color: #1f2937;
        border-radius: 12px;
    }
    .body--dark .message-bot { background: #374151; color: #e5e7eb; }

    .typing-dot {
        width: 6px; height: 6px;
        background: #6b7280;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.15s; }
    .typing-dot:nth-child(3) { animation-delay: 0.3s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-5px); }
    }
</style>
"""


def display_text(turn: Turn) -> str:
    """Text shown in a bubble.

    User turns show only what was typed plus the attachment count; the
    extracted file content is not echoed back.
    """
    if turn.role is Role.BOT:
        return turn.text
    typed = turn.content[: len(turn.content) - len(turn.attachments)]
    text = " ".join(p.text for p in typed if isinstance(p, TextPart))
    if turn.attachments:
        text = f"{text} (Attached: {len(turn.attachments)} files)".strip()
    return text


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    chat = ChatOrchestrator()

    dark = ui.dark_mode(app.storage.user.get("theme") == "dark")

    messages_container: ui.column
    attachments_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button
    upload: ui.upload
    theme_btn: ui.button

    def toggle_theme() -> None:
        dark.toggle()
        app.storage.user["theme"] = "dark" if dark.value else "light"
        theme_btn.props(f"icon={'light_mode' if dark.value else 'dark_mode'}")

    def render_message(turn: Turn) -> None:
        is_user = turn.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-bot"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"px-4 py-2 max-w-[85%] text-sm {bubble}"):
                if is_user:
                    ui.label(display_text(turn)).classes("whitespace-pre-wrap")
                else:
                    ui.markdown(display_text(turn))

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-bot px-4 py-3"):
                with ui.row().classes("items-center gap-2"):
                    ui.label("Generating response...").classes("text-sm")
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")

    rendered_state: tuple[int, bool] | None = None

    def refresh_messages() -> None:
        nonlocal rendered_state
        state = (len(chat.store), chat.is_sending)
        if state == rendered_state:
            return
        rendered_state = state
        messages_container.clear()
        with messages_container:
            for turn in chat.store.snapshot():
                render_message(turn)
            if chat.is_sending:
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    def refresh_attachments() -> None:
        attachments_container.clear()
        with attachments_container:
            for attachment in chat.attachments:
                with ui.row().classes(
                    "w-full items-center justify-between rounded-md p-2 bg-gray-100 "
                    "dark:bg-gray-600"
                ):
                    ui.label(attachment.name).classes("truncate pr-2 text-sm")
                    ui.button(
                        icon="close",
                        on_click=lambda a=attachment: chat.remove_attachment(a),
                    ).props("flat round dense size=sm").bind_enabled_from(
                        chat, "is_sending", backward=lambda sending: not sending
                    )

    def refresh_controls() -> None:
        if (input_field.value or "") != chat.input_text:
            input_field.value = chat.input_text
        if chat.is_sending:
            input_field.disable()
            upload.disable()
        else:
            input_field.enable()
            upload.enable()
        if chat.can_send:
            send_btn.enable()
        else:
            send_btn.disable()

    def refresh(change: Change = Change.CONVERSATION) -> None:
        if change is Change.TEXT:
            refresh_controls()
            return
        refresh_messages()
        refresh_attachments()
        refresh_controls()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        chat.attach_files([Attachment(name=e.file.name, mime_type=e.file.content_type, data=data)])

    async def send_message() -> None:
        await chat.send_turn()

    # === UI Layout ===
    with ui.column().classes("w-full min-h-screen items-center p-4 md:p-8"):
        with ui.card().classes("w-full app-container p-0 gap-0").style("height: 700px"):
            # Header
            with ui.row().classes("w-full p-4 items-center justify-between border-b"):
                ui.label("Chat with Easychat").classes("text-xl font-bold")
                theme_btn = ui.button(on_click=toggle_theme).props(
                    f"flat round icon={'light_mode' if dark.value else 'dark_mode'}"
                )

            # Messages
            with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
                messages_container = ui.column().classes("w-full p-4 gap-4")

            # Composer
            with ui.column().classes("w-full p-4 gap-2 border-t"):
                attachments_container = ui.column().classes("w-full gap-2")
                with ui.row().classes("w-full items-center gap-3 no-wrap"):
                    upload = (
                        ui.upload(on_upload=handle_upload, multiple=True, auto_upload=True)
                        .props(f'accept="{ACCEPTED_FILES}" flat dense hide-upload-btn')
                        .classes("w-12")
                        .on("finish", lambda: upload.reset())
                    )
                    input_field = (
                        ui.input(
                            placeholder="Type your message...",
                            on_change=lambda e: chat.submit_text(e.value or ""),
                        )
                        .props("rounded outlined dense autocomplete=off")
                        .classes("flex-grow")
                        .on("keydown.enter", send_message)
                    )
                    send_btn = ui.button("Send", on_click=send_message).props("rounded")

    chat.add_listener(refresh)
    refresh()

