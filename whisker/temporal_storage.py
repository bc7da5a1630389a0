"""Commands recorded while entities cannot be changed directly."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Hashable


class Action(IntEnum):
    DESTROY_ENTITY_NOW = 0
    CREATE_ENTITY = 1
    DESTROY_ENTITY = 2
    REMOVE_COMPONENT = 3
    ASSIGN_COMPONENT = 4


@dataclass
class ActionInfo:
    """One recorded command."""

    entity: Hashable
    action: Action
    component_id: int | None = None
    value: Any = None
    create_action_index: int | None = None


@dataclass(frozen=True)
class CreateAction:
    """The components an entity is to be created with."""

    mask: frozenset[int]
    shared: Any


class TemporalStorage:
    """An ordered log of entity commands to be applied later."""

    def __init__(self) -> None:
        self.actions: list[ActionInfo] = []
        self.create_actions: list[CreateAction] = []

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self):
        return iter(self.actions)

    def _emplace(self, entity: Hashable, action: Action) -> ActionInfo:
        info = ActionInfo(entity, action)
        self.actions.append(info)
        return info

    def assign_component(self, entity: Hashable, component_id: int, value: Any) -> Any:
        """Record that a component is assigned to an entity; return the value."""
        info = self._emplace(entity, Action.ASSIGN_COMPONENT)
        info.component_id = component_id
        info.value = value
        return value

    def create(self, entity: Hashable, mask: Any = (), shared: Any = None) -> None:
        """Record that an entity is created, with components if any are given."""
        info = self._emplace(entity, Action.CREATE_ENTITY)
        if mask or shared:
            info.create_action_index = len(self.create_actions)
            self.create_actions.append(CreateAction(frozenset(mask), shared))

    def remove_component(self, entity: Hashable, component_id: int) -> None:
        info = self._emplace(entity, Action.REMOVE_COMPONENT)
        info.component_id = component_id

    def destroy(self, entity: Hashable) -> None:
        """Record a destruction to happen after all systems have updated."""
        self._emplace(entity, Action.DESTROY_ENTITY)

    def destroy_now(self, entity: Hashable) -> None:
        """Record a destruction to happen as soon as the commands are applied."""
        self._emplace(entity, Action.DESTROY_ENTITY_NOW)

    def clear(self) -> None:
        self.actions.clear()
        self.create_actions.clear()