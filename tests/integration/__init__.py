"""Integration tests for components working together as a system.

Runs the real controller, store and httpx client against a FastAPI stub of
the assistant webhook mounted through ASGITransport. No network required.
"""
