from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Sender(str, Enum):
    """Author of a message in the thread."""

    USER = "user"
    ASSISTANT = "assistant"


class ErrorKind(str, Enum):
    """Failure categories surfaced by the assistant client."""

    NETWORK_FAILURE = "network_failure"


class Message(BaseModel):
    """A single message in the conversation.

    Attributes:
        sender: Who wrote the message.
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str = Field(..., min_length=1)


class ConversationError(BaseModel):
    """Failure shown to the user after a turn could not complete.

    Attributes:
        kind: Failure category.
        message: Text rendered in the error notice.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str


class ConversationState(BaseModel):
    """Snapshot of the conversation handed to observers.

    Attributes:
        messages: Thread in display order.
        pending: Whether an assistant call is in flight.
        last_error: Failure from the most recent turn, if any.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    pending: bool = False
    last_error: ConversationError | None = None


class TurnResult(BaseModel):
    """Outcome of one assistant call: either a reply or an error kind."""

    model_config = ConfigDict(frozen=True)

    reply: str | None = None
    error: ErrorKind | None = None

    @model_validator(mode="after")
    def check_outcome(self) -> "TurnResult":
        """Require exactly one of reply or error."""
        if (self.reply is None) == (self.error is None):
            raise ValueError("TurnResult needs exactly one of reply or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, reply: str) -> "TurnResult":
        return cls(reply=reply)

    @classmethod
    def failure(cls, kind: ErrorKind = ErrorKind.NETWORK_FAILURE) -> "TurnResult":
        return cls(error=kind)


class AssistantRequest(BaseModel):
    """Body posted to the assistant webhook."""

    session_id: str
    mensaje_usuario: str


class AssistantReply(BaseModel):
    """Body returned by the assistant webhook.

    Unknown fields are ignored; a missing answer is filled in by the client.
    """

    respuesta_asistente: str | None = None

    @field_validator("respuesta_asistente", mode="before")
    @classmethod
    def stringify_scalar(cls, v: object) -> object:
        """Render numeric answers as text; zero counts as no answer."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v) if v else None
        return v
