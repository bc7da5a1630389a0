"""Typed event dispatch to receivers that are held weakly."""

from __future__ import annotations

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Any, Callable

_log = logging.getLogger(__name__)

_event_ids: dict[str, int] = {}


def register_event_type(name: str) -> int:
    """Return the id for an event type name, assigning the next free id on first use."""
    event_id = _event_ids.get(name)
    if event_id is not None:
        return event_id
    event_id = len(_event_ids)
    _event_ids[name] = event_id
    _log.debug("New event type: [%s], id: [%d]", name, event_id)
    return event_id


def _type_name(event_type: type) -> str:
    return f"{event_type.__module__}.{event_type.__qualname__}"


class Receiver(ABC):
    """Something that handles events of one type posted to an EventManager."""

    _manager_ref: weakref.ref[EventManager] | None = None
    _event_type: type | None = None

    @abstractmethod
    def on_event(self, event: Any) -> None:
        """Handle one posted event."""

    def unsubscribe(self) -> bool:
        """Stop receiving events; return False if the manager is gone or never knew us."""
        manager = self._manager_ref() if self._manager_ref is not None else None
        if manager is None or self._event_type is None:
            return False
        return manager.unsubscribe(self._event_type, self)


class _FunctionReceiver(Receiver):
    def __init__(self, func: Callable[[Any], None]) -> None:
        self._func = func

    def on_event(self, event: Any) -> None:
        self._func(event)


class EventManager:
    """Routes posted events to the receivers subscribed to their type.

    Receivers are held weakly: a receiver that is no longer referenced
    anywhere else stops receiving events.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[int, list[weakref.ref[Receiver]]] = {}

    def register_event_type(self, event_type: type) -> int:
        """Return the id of an event type, making room for its receivers."""
        event_id = register_event_type(_type_name(event_type))
        self._subscriptions.setdefault(event_id, [])
        return event_id

    def subscribe(self, event_type: type, func: Callable[[Any], None] | Receiver) -> Receiver:
        """Subscribe a callable or a Receiver to an event type; keep the result alive."""
        receiver = func if isinstance(func, Receiver) else _FunctionReceiver(func)
        event_id = self.register_event_type(event_type)
        receiver._manager_ref = weakref.ref(self)
        receiver._event_type = event_type
        self._subscriptions[event_id].append(weakref.ref(receiver))
        _log.debug("Subscriber [%r] on event type: [%s] added", receiver, _type_name(event_type))
        return receiver

    def unsubscribe(self, event_type: type, receiver: Receiver) -> bool:
        """Remove a receiver from an event type; return whether it was subscribed."""
        refs = self._subscriptions[self.register_event_type(event_type)]
        for position, ref in enumerate(refs):
            if ref() is receiver:
                del refs[position]
                _log.debug(
                    "Subscriber [%r] on event type: [%s] removed", receiver, _type_name(event_type)
                )
                return True
        return False

    def post(self, event: Any) -> None:
        """Deliver an event to every live receiver of its type, in subscription order."""
        refs = self._subscriptions[self.register_event_type(type(event))]
        for ref in list(refs):
            receiver = ref()
            if receiver is not None:
                receiver.on_event(event)
        refs[:] = [ref for ref in refs if ref() is not None]