"""NiceGUI chat page bound to a ConversationController."""

import logging
from collections.abc import MutableMapping
from typing import Any

from nicegui import Client, app, ui

from cyber_assistant.client.assistant_client import AssistantClient
from cyber_assistant.config import Settings, StorageScope
from cyber_assistant.conversation.controller import ConversationController
from cyber_assistant.conversation.store import ConversationStore
from cyber_assistant.models.schemas import ConversationState, Message, Sender
from cyber_assistant.session.identity import SessionIdentity

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #0f2027 0%, #2c5364 100%); }

    .message-user {
        background: #2c5364;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .error-message {
        background: #fee2e2;
        color: #991b1b;
        border-radius: 8px;
    }
</style>
"""


class ComposerBinding:
    """Keeps the input field and send button in step with the conversation.

    The input is cleared when a turn starts sending and is never restored, so
    a failed turn has to be retyped.
    """

    def __init__(self, input_field: Any, send_btn: Any) -> None:
        self._input_field = input_field
        self._send_btn = send_btn
        self._was_pending = False

    def __call__(self, state: ConversationState) -> None:
        if state.pending and not self._was_pending:
            self._input_field.value = ""
        self._was_pending = state.pending

        self._input_field.set_enabled(not state.pending)
        self._send_btn.set_enabled(not state.pending)
        self._send_btn.set_text("Loading..." if state.pending else "Send")


async def resolve_session_storage(
    scope: StorageScope, client: Client
) -> MutableMapping[str, Any] | None:
    """Return the NiceGUI storage backing the session id, or None if unavailable."""
    try:
        if scope is StorageScope.TAB:
            # Tab storage only exists once the websocket is connected
            await client.connected()
            return app.storage.tab
        return app.storage.user
    except (RuntimeError, TimeoutError) as e:
        logger.warning(f"Browser storage unavailable for scope '{scope.value}': {e}")
        return None


def create_chat_page(settings: Settings) -> None:
    """Register the chat page for the given settings."""

    @ui.page("/")
    async def chat_page(client: Client) -> None:
        ui.add_head_html(CUSTOM_CSS)

        storage = await resolve_session_storage(settings.session_storage_scope, client)
        session_id = SessionIdentity(
            storage, settings.session_storage_key
        ).get_or_create_session_id()

        store = ConversationStore()
        controller = ConversationController(
            store=store,
            client=AssistantClient(
                settings.endpoint_url,
                settings.fallback_reply,
                timeout=settings.request_timeout,
            ),
            session_id=session_id,
            error_message=settings.error_message,
        )

        messages_container: ui.column
        scroll_area: ui.scroll_area
        input_field: ui.input
        send_btn: ui.button

        def render_message(msg: Message) -> None:
            is_user = msg.sender is Sender.USER
            align = "justify-end" if is_user else "justify-start"
            bubble = "message-user" if is_user else "message-assistant"
            with ui.row().classes(f"w-full {align}"):
                with ui.element("div").classes(f"max-w-[70%] px-4 py-3 {bubble}"):
                    ui.label(msg.text).classes("text-sm whitespace-pre-wrap")

        def render_thread(state: ConversationState) -> None:
            messages_container.clear()
            with messages_container:
                with ui.row().classes("w-full justify-start"):
                    with ui.element("div").classes("max-w-[70%] px-4 py-3 message-assistant"):
                        ui.markdown(
                            "Hello! I am your Cybersecurity Assistant. "
                            f"My session ID is: **{session_id}**. "
                            "Ask me about any information security topic."
                        ).classes("text-sm")
                for msg in state.messages:
                    render_message(msg)
                if state.pending:
                    ui.label("Typing...").classes("text-sm text-gray-500 italic")
                if state.last_error is not None:
                    ui.label(state.last_error.message).classes(
                        "w-full px-4 py-2 text-sm error-message"
                    )
            scroll_area.scroll_to(percent=1.0)

        async def send_message() -> None:
            await controller.submit(input_field.value or "")

        # === UI Layout ===
        with (
            ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
            ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
                "height: calc(100vh - 4rem)"
            ),
        ):
            # Header
            with ui.row().classes("w-full header px-5 py-4 items-center"):
                ui.icon("shield").classes("text-white text-3xl")
                ui.label(settings.title).classes("text-lg font-semibold text-white")

            # Messages
            with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
                messages_container = ui.column().classes("w-full gap-4 p-5")

            # Input
            with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t"):
                input_field = (
                    ui.input(placeholder="Type your cybersecurity question here...")
                    .props("outlined dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button("Send", on_click=send_message).props("unelevated")

        store.subscribe(ComposerBinding(input_field, send_btn))
        store.subscribe(render_thread)
        render_thread(store.state)
