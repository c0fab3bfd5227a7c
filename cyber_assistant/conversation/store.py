"""Append-only conversation store with observer notifications."""

import logging
from collections.abc import Callable

from cyber_assistant.models.schemas import (
    ConversationError,
    ConversationState,
    Message,
    Sender,
)

logger = logging.getLogger(__name__)

Observer = Callable[[ConversationState], None]


class ConversationStore:
    """Holds the message thread and transient UI flags.

    Every mutation replaces the current ``ConversationState`` with a new
    snapshot and hands it to all subscribers. Messages are never removed or
    edited.
    """

    def __init__(self) -> None:
        self._state = ConversationState()
        self._observers: list[Observer] = []

    @property
    def state(self) -> ConversationState:
        return self._state

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._state.messages

    @property
    def pending(self) -> bool:
        return self._state.pending

    @property
    def last_error(self) -> ConversationError | None:
        return self._state.last_error

    def append_message(self, sender: Sender, text: str) -> Message:
        """Append a message to the end of the thread.

        Args:
            sender: Author of the message.
            text: Message text, already validated by the caller.

        Returns:
            The stored message.
        """
        message = Message(sender=sender, text=text)
        self._update(messages=(*self._state.messages, message))
        return message

    def set_pending(self, pending: bool) -> None:
        self._update(pending=pending)

    def set_error(self, error: ConversationError | None) -> None:
        self._update(last_error=error)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer for state snapshots.

        Returns:
            Callable that removes the observer.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _update(self, **changes: object) -> None:
        self._state = self._state.model_copy(update=changes)
        for observer in list(self._observers):
            try:
                observer(self._state)
            except Exception:
                logger.exception("Conversation observer failed")
