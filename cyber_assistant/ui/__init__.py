"""NiceGUI interface - thin visualization layer over the conversation controller.

Responsibilities:
    - Message thread rendering from store snapshots
    - Typing indicator and inline error notice
    - Single text input wired to the controller

Contains no business logic. All state lives in the conversation store.
"""
