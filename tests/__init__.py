"""Test package for the Cyber Assistant chat client.

Structure:
    - unit/: Session identity, store, controller, client and config tests
    - integration/: Full turns against an in-process stub webhook

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
