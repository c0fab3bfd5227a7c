"""HTTP client for the remote assistant webhook."""

from cyber_assistant.client.assistant_client import AssistantClient

__all__ = ["AssistantClient"]
