"""Unit tests for the ConversationController state machine."""

import asyncio

import pytest
import pytest_check as check

from cyber_assistant.conversation.controller import ControllerState, ConversationController
from cyber_assistant.conversation.store import ConversationStore
from cyber_assistant.models.schemas import (
    ConversationError,
    ConversationState,
    ErrorKind,
    Message,
    Sender,
    TurnResult,
)
from tests.conftest import ERROR_MESSAGE, FakeAssistantClient


@pytest.fixture
def controller(
    store: ConversationStore, fake_client: FakeAssistantClient, mock_session_id: str
) -> ConversationController:
    return ConversationController(
        store=store,
        client=fake_client,
        session_id=mock_session_id,
        error_message=ERROR_MESSAGE,
    )


class TestSubmitGuard:
    """Tests for inputs that must not start a turn."""

    @pytest.mark.parametrize("text", ["", "  ", "\n\t "])
    async def test_blank_input_is_noop(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
        text: str,
    ) -> None:
        seen: list[ConversationState] = []
        store.subscribe(seen.append)

        started = await controller.submit(text)

        check.is_false(started)
        check.equal(store.messages, ())
        check.equal(fake_client.calls, [])
        check.equal(seen, [])

    async def test_submit_while_sending_is_noop(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
    ) -> None:
        fake_client.gate = asyncio.Event()
        first = asyncio.create_task(controller.submit("first question"))
        await asyncio.sleep(0)

        check.equal(controller.state, ControllerState.SENDING)
        second = await controller.submit("second question")

        fake_client.gate.set()
        await first

        check.is_false(second)
        check.equal(len(fake_client.calls), 1)
        check.equal(
            [m.text for m in store.messages if m.sender is Sender.USER],
            ["first question"],
        )


class TestSubmitSuccess:
    """Tests for successful turns."""

    async def test_appends_user_then_assistant(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
        mock_session_id: str,
    ) -> None:
        fake_client.result = TurnResult.success("Use a password manager.")

        started = await controller.submit("  How do I store passwords?  ")

        check.is_true(started)
        check.equal(fake_client.calls, [(mock_session_id, "How do I store passwords?")])
        check.equal(
            store.messages,
            (
                Message(sender=Sender.USER, text="How do I store passwords?"),
                Message(sender=Sender.ASSISTANT, text="Use a password manager."),
            ),
        )
        check.is_false(store.pending)
        check.is_none(store.last_error)
        check.equal(controller.state, ControllerState.IDLE)

    async def test_user_message_precedes_network_call(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
    ) -> None:
        fake_client.gate = asyncio.Event()
        task = asyncio.create_task(controller.submit("hello"))
        await asyncio.sleep(0)

        check.equal(store.messages, (Message(sender=Sender.USER, text="hello"),))
        check.is_true(store.pending)

        fake_client.gate.set()
        await task

    async def test_new_turn_clears_previous_error(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
    ) -> None:
        store.set_error(ConversationError(kind=ErrorKind.NETWORK_FAILURE, message="old"))
        errors_seen: list[ConversationError | None] = []
        store.subscribe(lambda state: errors_seen.append(state.last_error))

        await controller.submit("retry")

        check.is_none(store.last_error)
        check.is_none(errors_seen[1])

    async def test_state_sequence(
        self,
        controller: ConversationController,
        store: ConversationStore,
    ) -> None:
        """Observers see user append, error clear, pending, reply, idle."""
        seen: list[ConversationState] = []
        store.subscribe(seen.append)

        await controller.submit("hi")

        check.equal([len(s.messages) for s in seen], [1, 1, 1, 2, 2])
        check.equal([s.pending for s in seen], [False, False, True, True, False])


class TestSubmitFailure:
    """Tests for failed turns."""

    async def test_failure_sets_error_and_keeps_user_message(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
    ) -> None:
        fake_client.result = TurnResult.failure(ErrorKind.NETWORK_FAILURE)

        started = await controller.submit("test")

        check.is_true(started)
        check.equal(store.messages, (Message(sender=Sender.USER, text="test"),))
        check.is_false(store.pending)
        check.equal(
            store.last_error,
            ConversationError(kind=ErrorKind.NETWORK_FAILURE, message=ERROR_MESSAGE),
        )

    async def test_controller_usable_after_failure(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
    ) -> None:
        fake_client.result = TurnResult.failure()
        await controller.submit("first")

        fake_client.result = TurnResult.success("answer")
        started = await controller.submit("second")

        check.is_true(started)
        check.equal([m.text for m in store.messages], ["first", "second", "answer"])
        check.is_none(store.last_error)

    async def test_unexpected_exception_clears_pending(
        self,
        controller: ConversationController,
        store: ConversationStore,
        fake_client: FakeAssistantClient,
    ) -> None:
        fake_client.error = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await controller.submit("hello")

        check.is_false(store.pending)
        check.equal(controller.state, ControllerState.IDLE)
