"""Event emitter error classes."""
from typing import Hashable


class EmitterError(Exception):

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

"""Raised by deregister when no live listener has the given id (never issued or already removed)."""
class ListenerNotFoundError(EmitterError):
    def __init__(self, listener_id: int, message: str = "Listener not found"):
        super().__init__(f"{message}: {listener_id}")
        self.listener_id = listener_id

"""Raised when an event key has no entry in the emitter (nothing was ever registered for it).
        Attributes:
            event: the key that was looked up
"""
class UnknownEventError(EmitterError, KeyError):
    def __init__(self, event: Hashable, message: str = "Unknown event"):
        super().__init__(f"{message}: {event!r}")
        self.event = event

    def __str__(self) -> str:
        return self.message
