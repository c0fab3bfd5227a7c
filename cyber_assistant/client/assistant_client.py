"""Assistant webhook client.

Performs exactly one POST per turn and maps every outcome to a ``TurnResult``.
Transport errors and non-2xx responses become ``ErrorKind.NETWORK_FAILURE``;
a 2xx response without a usable answer yields the fallback reply.
"""

import logging

import httpx
from pydantic import ValidationError

from cyber_assistant.models.schemas import (
    AssistantReply,
    AssistantRequest,
    ErrorKind,
    TurnResult,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0


class AssistantClient:
    """Sends user turns to the assistant endpoint.

    Args:
        endpoint_url: Webhook receiving the JSON payload.
        fallback_reply: Reply used when a successful response has no answer.
        timeout: Seconds to wait for the reply, None for no limit.
        http_client: Optional shared client; one is opened per call otherwise.
    """

    def __init__(
        self,
        endpoint_url: str,
        fallback_reply: str,
        timeout: float | None = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._fallback_reply = fallback_reply
        self._timeout = timeout
        self._http_client = http_client

    async def send_turn(self, session_id: str, user_text: str) -> TurnResult:
        """Send one user message and return the assistant's reply.

        Args:
            session_id: Session identifier for the remote conversation.
            user_text: The user's message.

        Returns:
            TurnResult with the reply text, or with an error kind on failure.
        """
        payload = AssistantRequest(session_id=session_id, mensaje_usuario=user_text)

        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, payload)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await self._post(client, payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Assistant API returned HTTP {e.response.status_code}")
            return TurnResult.failure(ErrorKind.NETWORK_FAILURE)
        except httpx.RequestError as e:
            logger.error(f"Connection to assistant API failed: {e!r}")
            return TurnResult.failure(ErrorKind.NETWORK_FAILURE)

        return TurnResult.success(self._extract_reply(response))

    async def _post(
        self, client: httpx.AsyncClient, payload: AssistantRequest
    ) -> httpx.Response:
        return await client.post(
            self._endpoint_url,
            json=payload.model_dump(),
            headers={"Content-Type": "application/json"},
            timeout=self._timeout,
            follow_redirects=True,
        )

    def _extract_reply(self, response: httpx.Response) -> str:
        try:
            reply = AssistantReply.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unusable assistant response body, using fallback: {e}")
            return self._fallback_reply

        if not reply.respuesta_asistente:
            logger.warning("Assistant response has no answer, using fallback")
            return self._fallback_reply
        return reply.respuesta_asistente
