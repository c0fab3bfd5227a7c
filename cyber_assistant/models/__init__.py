"""Pydantic models for conversation state and the assistant wire format.

Models:
    - Message: Immutable entry in the conversation thread
    - ConversationState: Snapshot published to UI observers
    - ConversationError: User-facing failure descriptor
    - TurnResult: Outcome of a single assistant call
    - AssistantRequest / AssistantReply: Webhook payloads
"""

from cyber_assistant.models.schemas import (
    AssistantReply,
    AssistantRequest,
    ConversationError,
    ConversationState,
    ErrorKind,
    Message,
    Sender,
    TurnResult,
)

__all__ = [
    "AssistantReply",
    "AssistantRequest",
    "ConversationError",
    "ConversationState",
    "ErrorKind",
    "Message",
    "Sender",
    "TurnResult",
]
