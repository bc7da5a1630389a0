"""The world: version counter, systems, events and storage."""

from __future__ import annotations

import dataclasses
import itertools
from dataclasses import dataclass

from whisker.events import EventManager
from whisker.system_manager import SystemManager
from whisker.world_storage import WorldStorage

_world_ids = itertools.count()


def next_world_id() -> int:
    """Return a fresh world id."""
    return next(_world_ids)


@dataclass
class WorldContext:
    """Services that several worlds may share."""

    events: EventManager | None = None


class World:
    """A world of systems driven by update steps."""

    def __init__(self, context: WorldContext | None = None, world_id: int | None = None) -> None:
        self._id = next_world_id() if world_id is None else world_id
        self._context = dataclasses.replace(context) if context is not None else WorldContext()
        self._systems: SystemManager | None = None
        self._storage = WorldStorage()
        self._version = 0

    def __enter__(self) -> World:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def id(self) -> int:
        return self._id

    @property
    def version(self) -> int:
        return self._version

    @property
    def storage(self) -> WorldStorage:
        return self._storage

    @property
    def systems(self) -> SystemManager:
        """The world's system manager, created on first use."""
        if self._systems is None:
            self._systems = SystemManager(self)
        return self._systems

    @property
    def events(self) -> EventManager:
        """The event manager from the context, created on first use."""
        if self._context.events is None:
            self._context.events = EventManager()
        return self._context.events

    def init(self) -> None:
        """Reset the version and initialise the systems."""
        self._version = 0
        if self._systems is not None:
            self._systems.init()

    def update(self) -> None:
        """Advance the version and update the systems."""
        self.increment_version()
        if self._systems is not None:
            self._systems.update()

    def increment_version(self) -> None:
        self._version += 1

    def close(self) -> None:
        """Destroy the world's systems."""
        if self._systems is not None:
            self._systems.shutdown()