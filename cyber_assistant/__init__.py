"""Cyber Assistant - single-page chat client for a remote assistant webhook.

Collects user questions, forwards them to the assistant endpoint and renders
the exchange as a message thread, keyed by a per-browser session identifier.

Components:
    - config: Environment-driven, immutable settings
    - models: Message, state and wire schemas
    - session: Session identifier lookup and creation
    - conversation: Message store and the send/receive controller
    - client: HTTP client for the assistant endpoint
    - ui: NiceGUI chat page
"""

__version__ = "0.1.0"
