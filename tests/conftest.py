"""Pytest fixtures and shared test configuration.

Fixtures:
    - endpoint_url: Stub webhook URL
    - mock_session_id: Consistent session ID for tests
    - settings: Settings pointing at the stub endpoint
    - store: Empty ConversationStore
    - fake_client: Scripted stand-in for AssistantClient
"""

import asyncio

import pytest

from cyber_assistant.config import Settings
from cyber_assistant.conversation.store import ConversationStore
from cyber_assistant.models.schemas import TurnResult

FALLBACK_REPLY = "The assistant did not provide a valid response."
ERROR_MESSAGE = "Error: Could not get a response from the assistant."


class FakeAssistantClient:
    """Records calls and returns scripted results.

    When ``gate`` is set, each call waits on it before returning so tests can
    observe the in-flight state.
    """

    def __init__(self, result: TurnResult | None = None) -> None:
        self.result = result or TurnResult.success("ok")
        self.calls: list[tuple[str, str]] = []
        self.gate: asyncio.Event | None = None
        self.error: Exception | None = None

    async def send_turn(self, session_id: str, user_text: str) -> TurnResult:
        self.calls.append((session_id, user_text))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def endpoint_url() -> str:
    """Return the stub webhook URL."""
    return "http://assistant.test/webhook/chat"


@pytest.fixture
def mock_session_id() -> str:
    """Generate consistent session ID for testing."""
    return "sess-1700000000000-abc1234"


@pytest.fixture
def settings(endpoint_url: str) -> Settings:
    """Settings pointing at the stub endpoint."""
    return Settings(
        endpoint_url=endpoint_url,
        fallback_reply=FALLBACK_REPLY,
        error_message=ERROR_MESSAGE,
    )


@pytest.fixture
def store() -> ConversationStore:
    return ConversationStore()


@pytest.fixture
def fake_client() -> FakeAssistantClient:
    return FakeAssistantClient()
