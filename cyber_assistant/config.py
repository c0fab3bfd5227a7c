"""Client configuration with environment variable loading.

Pydantic-based settings read once at startup. The assistant endpoint and the
session storage scope are passed explicitly to the components that need them.
"""

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class StorageScope(str, Enum):
    """Where the session identifier is kept in the browser."""

    USER = "user"
    TAB = "tab"


class Settings(BaseModel):
    """Configuration for the chat client.

    Attributes:
        endpoint_url: Assistant webhook receiving one POST per turn.
        session_storage_scope: ``user`` survives reloads, ``tab`` is per tab.
        session_storage_key: Storage key holding the session identifier.
        fallback_reply: Reply shown when the endpoint omits the answer field.
        error_message: Notice shown when a turn fails.
        request_timeout: Seconds to wait for the assistant, None for no limit.
        title: Page title.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    endpoint_url: str = Field(
        default_factory=lambda: os.getenv("CYBER_ASSISTANT_API_ENDPOINT", ""),
        description="Assistant webhook URL",
    )
    session_storage_scope: StorageScope = Field(
        default_factory=lambda: os.getenv("SESSION_STORAGE_SCOPE", StorageScope.USER.value),
        description="Storage scope for the session identifier",
    )
    session_storage_key: str = Field(
        default_factory=lambda: os.getenv(
            "CYBER_ASSISTANT_SESSION_KEY", "cyber-assistant-session-id"
        ),
        min_length=1,
        description="Storage key for the session identifier",
    )
    fallback_reply: str = Field(
        default_factory=lambda: os.getenv(
            "ASSISTANT_FALLBACK_REPLY",
            "The assistant did not provide a valid response.",
        ),
        min_length=1,
    )
    error_message: str = Field(
        default_factory=lambda: os.getenv(
            "ASSISTANT_ERROR_MESSAGE",
            "Error: Could not get a response from the assistant. "
            "Check the API endpoint.",
        ),
        min_length=1,
    )
    title: str = Field(default_factory=lambda: os.getenv("APP_TITLE", "Cyber Assistant"))
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("ASSISTANT_TIMEOUT_SECONDS", "120"),
        gt=0,
        description="Assistant call timeout in seconds",
    )

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Validate that an http(s) endpoint is provided."""
        v = v.strip() if v else ""
        if not v:
            raise ValueError(
                "Assistant endpoint required. Set CYBER_ASSISTANT_API_ENDPOINT in .env"
            )
        if not v.startswith(("http://", "https://")):
            raise ValueError("Assistant endpoint must be an http:// or https:// URL")
        return v

    @field_validator("request_timeout", mode="before")
    @classmethod
    def parse_timeout(cls, v: object) -> object:
        """Treat an empty value or ``none`` as no timeout."""
        if isinstance(v, str) and v.strip().lower() in {"", "none"}:
            return None
        return v

    @field_validator("session_storage_scope", mode="before")
    @classmethod
    def normalize_scope(cls, v: object) -> object:
        """Accept scope names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def get_settings() -> Settings:
    """Create client settings from environment.

    Returns:
        Configured Settings instance.

    Raises:
        ValueError: If no endpoint is set.
    """
    return Settings()
