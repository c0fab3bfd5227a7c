"""Per-browser-session identifier backed by a key/value storage scope.

The storage is any mutable mapping: NiceGUI's ``app.storage.user`` or
``app.storage.tab`` in the app, a plain dict in tests.
"""

import logging
import secrets
import string
import time
from collections.abc import MutableMapping
from typing import Any

logger = logging.getLogger(__name__)

SESSION_PREFIX = "sess-"
SUFFIX_LENGTH = 7
_BASE36 = string.digits + string.ascii_lowercase


def generate_session_id() -> str:
    """Build a new ``sess-<epoch-ms>-<base36>`` identifier."""
    epoch_ms = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(SUFFIX_LENGTH))
    return f"{SESSION_PREFIX}{epoch_ms}-{suffix}"


class SessionIdentity:
    """Obtains or creates the session identifier for one storage scope.

    When the storage is missing or fails, a fresh identifier is returned on
    every call and the session is simply not persistent.
    """

    def __init__(self, storage: MutableMapping[str, Any] | None, key: str) -> None:
        self._storage = storage
        self._key = key

    def get_or_create_session_id(self) -> str:
        """Return the stored identifier, creating and storing one if absent.

        Returns:
            The session identifier for this scope.
        """
        stored = self._read()
        if stored:
            return stored

        session_id = generate_session_id()
        self._write(session_id)
        return session_id

    def _read(self) -> str | None:
        if self._storage is None:
            return None
        try:
            value = self._storage.get(self._key)
        except Exception as e:
            logger.warning(f"Session storage unavailable, id will not persist: {e}")
            return None
        if isinstance(value, str) and value:
            return value
        return None

    def _write(self, session_id: str) -> None:
        if self._storage is None:
            logger.warning("No session storage configured, id will not persist")
            return
        try:
            self._storage[self._key] = session_id
        except Exception as e:
            logger.warning(f"Failed to store session id, id will not persist: {e}")
            return
        logger.info(f"Created session {session_id}")
