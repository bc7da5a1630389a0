"""Systems and their life cycle."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

_log = logging.getLogger(__name__)


class InvalidStateError(RuntimeError):
    """A life-cycle step was asked of a system in the wrong state."""


class SystemState(IntEnum):
    UNINIT = 0
    INITED = 1
    CONFIGURED = 2
    STOPPED = 3
    ACTIVE = 4
    PAUSED = 5


def _name_of(system: str | type) -> str:
    return system if isinstance(system, str) else system.__qualname__


@dataclass
class SystemConfig:
    """Ordering preferences a system states while being configured."""

    before: set[str] = field(default_factory=set)
    after: set[str] = field(default_factory=set)
    group: str = ""
    priority: int = 0

    def update_before(self, *args: str | type) -> None:
        """Update before the given systems (names or System subclasses)."""
        self.before.update(_name_of(arg) for arg in args)

    def update_after(self, *args: str | type) -> None:
        """Update after the given systems (names or System subclasses)."""
        self.after.update(_name_of(arg) for arg in args)


class System(ABC):
    """Base of all systems.

    Life cycle: create -> configure -> start -> update* -> pause ->
    (resume -> update* -> pause)* -> stop -> destroy.
    """

    _state: SystemState = SystemState.UNINIT
    _world: Any = None

    @property
    def state(self) -> SystemState:
        return self._state

    @property
    def world(self) -> Any:
        """The world that last drove this system's life cycle, or None once destroyed."""
        return self._world

    @property
    def name(self) -> str:
        """The system's name; by default its class's qualified name."""
        return _name_of(type(self))

    def _check_state(self, expected: SystemState) -> None:
        if self._state != expected:
            raise InvalidStateError("Invalid state")

    def _attach(self, world: Any, step: str) -> None:
        self._world = world
        _log.debug("System [%s] %s", self.name, step)

    def create(self, world: Any) -> None:
        self._check_state(SystemState.UNINIT)
        self.on_create(world)
        self._state = SystemState.INITED

    def configure(self, world: Any, config: SystemConfig) -> None:
        self._check_state(SystemState.INITED)
        self.on_configure(world, config)
        self._state = SystemState.CONFIGURED

    def start(self, world: Any) -> None:
        self._check_state(SystemState.CONFIGURED)
        self.on_start(world)
        self._state = SystemState.ACTIVE

    def update(self, world: Any) -> None:
        self._check_state(SystemState.ACTIVE)
        self.on_update(world)

    def pause(self, world: Any) -> None:
        self._check_state(SystemState.ACTIVE)
        self.on_pause(world)
        self._state = SystemState.PAUSED

    def stop(self, world: Any) -> None:
        self._check_state(SystemState.PAUSED)
        self.on_stop(world)
        self._state = SystemState.STOPPED

    def resume(self, world: Any) -> None:
        self._check_state(SystemState.PAUSED)
        self.on_resume(world)
        self._state = SystemState.ACTIVE

    def destroy(self, world: Any) -> None:
        """Pause and stop as needed, then destroy; the system ends uninitialised."""
        if self._state == SystemState.ACTIVE:
            self.pause(world)
        if self._state == SystemState.PAUSED:
            self.stop(world)
        self.on_destroy(world)
        self._state = SystemState.UNINIT

    def on_create(self, world: Any) -> None:
        """Called once after construction; binds the system to the world."""
        self._attach(world, "created")

    def on_configure(self, world: Any, config: SystemConfig) -> None:
        """Called after creation, when the world initialises; binds the world."""
        self._world = world
        _log.debug(
            "System [%s] configured, group: [%s], priority: [%d]",
            self.name,
            config.group,
            config.priority,
        )

    def on_start(self, world: Any) -> None:
        """Called before the first update; binds the system to the world."""
        self._attach(world, "started")

    @abstractmethod
    def on_update(self, world: Any) -> None:
        """Called on every world update while active."""

    def on_pause(self, world: Any) -> None:
        """Called when an active system is paused; binds the system to the world."""
        self._attach(world, "paused")

    def on_stop(self, world: Any) -> None:
        """Called when a paused system is stopped; binds the system to the world."""
        self._attach(world, "stopped")

    def on_resume(self, world: Any) -> None:
        """Called when a paused system becomes active again; binds the world."""
        self._attach(world, "resumed")

    def on_destroy(self, world: Any) -> None:
        """Called when the system is destroyed; detaches it from its world."""
        self._attach(None, "destroyed")