"""Ordering and driving of a world's systems."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from whisker.system import System, SystemConfig, SystemState


class SystemOrderError(RuntimeError):
    """The systems' ordering constraints cannot all be met."""


@dataclass
class _SystemInfo:
    system: System
    config: SystemConfig = field(default_factory=SystemConfig)


def _name_of(name: str | type) -> str:
    return name if isinstance(name, str) else name.__qualname__


class SystemManager:
    """Keeps a world's systems, orders them, and steps them through their life cycle."""

    def __init__(self, world: Any) -> None:
        self._world = world
        self._was_init = False
        self._infos: list[_SystemInfo] = []
        self._ordered: list[System] = []
        self._group_priorities: dict[str, int] = {}
        self._by_name: dict[str, System] = {}

    def __enter__(self) -> SystemManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def add_system(self, system: System | type[System]) -> System:
        """Add a system (or construct one from its class) and return it."""
        if isinstance(system, type):
            system = system()
        info = _SystemInfo(system)
        self._infos.append(info)
        if system.state == SystemState.UNINIT:
            system.create(self._world)
        self._by_name[system.name] = system
        if self._was_init:
            system.configure(self._world, info.config)
            self._reorder()
        return system

    def remove_system(self, name: str | type) -> None:
        """Remove the system with this name, if there is one."""
        system = self._by_name.pop(_name_of(name), None)
        if system is None:
            return
        self._ordered = [s for s in self._ordered if s is not system]
        self._infos = [info for info in self._infos if info.system is not system]
        self._reorder()

    def find_system(self, name: str | type) -> System | None:
        return self._by_name.get(_name_of(name))

    def update(self) -> None:
        """Update every active system in order, starting configured ones first."""
        if not self._was_init:
            return
        for system in self._ordered:
            if system.state == SystemState.CONFIGURED:
                system.start(self._world)
            if system.state == SystemState.ACTIVE:
                system.update(self._world)

    def init(self) -> None:
        """Configure, order and start the systems; only the first call has effect."""
        if self._was_init:
            return
        self._was_init = True
        for info in self._infos:
            if info.system.state == SystemState.INITED:
                info.system.configure(self._world, info.config)
        self._reorder()
        for system in self._ordered:
            if system.state == SystemState.CONFIGURED:
                system.start(self._world)

    def get_group_priority(self, group_name: str) -> int:
        return self._group_priorities.get(group_name, 0)

    def set_group_priority(self, group_name: str, priority: int) -> None:
        self._group_priorities[group_name] = priority

    def shutdown(self) -> None:
        """Destroy every ordered system."""
        for system in self._ordered:
            system.destroy(self._world)

    def _reorder(self) -> None:
        after: dict[str, set[str]] = {}
        for info in self._infos:
            after.setdefault(info.system.name, set()).update(info.config.after)
        for info in self._infos:
            for later in info.config.before:
                if later in after:
                    after[later].add(info.system.name)

        pending = sorted(
            self._infos,
            key=lambda info: (self.get_group_priority(info.config.group), info.config.priority),
            reverse=True,
        )
        unplaced = {info.system.name for info in self._infos}
        ordered: list[System] = []
        while pending:
            for position, info in enumerate(pending):
                if not after[info.system.name] & unplaced:
                    ordered.append(info.system)
                    unplaced.discard(info.system.name)
                    del pending[position]
                    break
            else:
                raise SystemOrderError("Can not reorder systems")
        self._ordered = ordered