"""Conversation controller: user input -> store -> assistant -> store.

State machine:
    IDLE --submit(text)--> SENDING --success/failure--> IDLE

A submit is accepted only when the trimmed text is non-empty and no call is
in flight. The guard runs before the first ``await``, so on a single event
loop two submits can never both start a turn.
"""

import logging
from enum import Enum
from typing import Protocol

from cyber_assistant.conversation.store import ConversationStore
from cyber_assistant.models.schemas import ConversationError, Sender, TurnResult

logger = logging.getLogger(__name__)


class ControllerState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"


class TurnSender(Protocol):
    async def send_turn(self, session_id: str, user_text: str) -> TurnResult: ...


class ConversationController:
    """Owns the request lifecycle for one conversation."""

    def __init__(
        self,
        store: ConversationStore,
        client: TurnSender,
        session_id: str,
        error_message: str,
    ) -> None:
        """Initialize the controller.

        Args:
            store: Store receiving every state change.
            client: Assistant client performing one call per turn.
            session_id: Identifier sent with every turn.
            error_message: Text of the notice shown when a turn fails.
        """
        self._store = store
        self._client = client
        self._session_id = session_id
        self._error_message = error_message

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def state(self) -> ControllerState:
        return ControllerState.SENDING if self._store.pending else ControllerState.IDLE

    def can_submit(self, text: str) -> bool:
        return bool(text.strip()) and self.state is ControllerState.IDLE

    async def submit(self, text: str) -> bool:
        """Run one turn for the given user text.

        Args:
            text: Raw user input.

        Returns:
            True if a turn was started, False if the submit was ignored.
        """
        if not self.can_submit(text):
            return False

        user_text = text.strip()
        self._store.append_message(Sender.USER, user_text)
        self._store.set_error(None)
        self._store.set_pending(True)
        logger.debug(f"Sending turn for session {self._session_id}")

        try:
            result = await self._client.send_turn(self._session_id, user_text)
        except Exception:
            self._store.set_pending(False)
            raise

        if result.ok:
            self._store.append_message(Sender.ASSISTANT, result.reply)
        else:
            logger.info(f"Turn failed for session {self._session_id}: {result.error.value}")
            self._store.set_error(
                ConversationError(kind=result.error, message=self._error_message)
            )
        self._store.set_pending(False)
        return True
