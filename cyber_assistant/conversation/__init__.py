"""Conversation state and the send/receive controller.

Responsibilities:
    - Append-only message thread with loading and error flags
    - Snapshot notifications for the UI layer
    - One assistant call in flight at a time
"""

from cyber_assistant.conversation.controller import ControllerState, ConversationController
from cyber_assistant.conversation.store import ConversationStore

__all__ = ["ControllerState", "ConversationController", "ConversationStore"]
