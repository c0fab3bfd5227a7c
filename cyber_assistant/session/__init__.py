"""Session identity for correlating turns at the remote assistant."""

from cyber_assistant.session.identity import SessionIdentity, generate_session_id

__all__ = ["SessionIdentity", "generate_session_id"]
