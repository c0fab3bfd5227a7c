"""Unit tests for individual components in isolation.

Coverage:
    - config: Settings validation and environment loading
    - session: Identifier format, idempotence and storage degradation
    - conversation: Store snapshots and the controller state machine
    - client: Outcome mapping with httpx.MockTransport

Uses fakes for the assistant endpoint. Leverages pytest-check for multiple
assertions per test.
"""
