"""
Synchronous in-process event emitter.
Listeners are (event key -> ordered list of Listener records); each record carries
an id from a per-emitter counter, and removal is always by that id.
Not thread-safe: callers sharing an emitter across threads must serialize access.
"""
import logging
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from Emitter.Exception.EmitterError import ListenerNotFoundError, UnknownEventError
from Emitter.Model.Listener import Listener
from Emitter.Utility.settings import resolve_copier

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Hashable)
P = TypeVar("P")


class EventEmitter(Generic[E, P]):
    """Registry of listeners keyed by event.

    Typical usage:
        emitter: EventEmitter[str, int] = EventEmitter()
        listener_id = emitter.register("tick", lambda n: print(n))
        emitter.dispatch("tick", 3)
        emitter.deregister(listener_id)

    Dispatch iterates over a snapshot of the key's listeners taken when it starts,
    so callbacks may register or deregister on the same emitter; those changes
    apply from the next dispatch onward.
    """

    def __init__(self, copier: Optional[Callable[[P], P]] = None):
        self._next_id = 0
        self._listeners: Dict[E, List[Listener[P]]] = {}
        # payload duplication strategy, see Emitter.Utility.settings
        self._copier: Callable[[P], P] = copier or resolve_copier()

    def register(self, event: E, callback: Callable[[P], None]) -> int:
        """Append a listener for `event` and return its id."""
        if not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        listener_id = self._next_id
        self._listeners.setdefault(event, []).append(Listener(listener_id, callback))
        self._next_id += 1
        logger.debug("Registered listener %d for event %r", listener_id, event)
        return listener_id

    def deregister(self, listener_id: int) -> None:
        """Remove the listener with `listener_id`.

        The event's entry is kept even if this was its last listener, so later
        dispatches to it still succeed.

        Raises:
            ListenerNotFoundError: if no live listener has that id
        """
        for event, listeners in self._listeners.items():
            for index, listener in enumerate(listeners):
                if listener.id == listener_id:
                    del listeners[index]
                    logger.debug("Deregistered listener %d from event %r", listener_id, event)
                    return
        logger.debug("Deregister failed, no listener with id %d", listener_id)
        raise ListenerNotFoundError(listener_id)

    def dispatch(self, event: Hashable, payload: P) -> None:
        """Call every listener of `event`, in registration order, with a copy of `payload`.

        `event` only has to hash and compare equal to the registered key.
        Exceptions raised by a callback propagate unchanged and skip the
        listeners after it.

        Raises:
            UnknownEventError: if nothing was ever registered for `event`
        """
        listeners = self._listeners.get(event)
        if listeners is None:
            logger.debug("Dispatch failed, unknown event %r", event)
            raise UnknownEventError(event)
        snapshot = list(listeners)
        logger.debug("Dispatching %r to %d listeners", event, len(snapshot))
        for listener in snapshot:
            listener.callback(self._copier(payload))

    def listener_ids(self, event: Hashable) -> List[int]:
        listeners = self._listeners.get(event)
        if listeners is None:
            raise UnknownEventError(event)
        return [listener.id for listener in listeners]

    def has_event(self, event: Hashable) -> bool:
        return event in self._listeners

    def events(self) -> List[E]:
        return list(self._listeners.keys())

    def __len__(self) -> int:
        return sum(len(listeners) for listeners in self._listeners.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(events={len(self._listeners)}, listeners={len(self)})"
