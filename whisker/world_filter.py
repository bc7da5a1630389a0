"""Results of filtering a world's archetypes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EntityBlock:
    """A half-open range [begin, end) of entity indexes in an archetype."""

    begin: int
    end: int

    @property
    def size(self) -> int:
        return max(self.end - self.begin, 0)


@dataclass
class ArchetypeFilterResult:
    """The blocks of one archetype that passed a filter."""

    archetype: Any = None
    entities_count: int = 0
    blocks: list[EntityBlock] = field(default_factory=list)

    def add_block(self, block: EntityBlock) -> None:
        """Add a block; empty blocks are ignored."""
        if block.size > 0:
            self.entities_count += block.size
            self.blocks.append(block)


@dataclass
class WorldFilterResult:
    """The archetypes that passed a filter, and the masks used."""

    filtered_archetypes: list[ArchetypeFilterResult] = field(default_factory=list)
    mask: frozenset[int] = frozenset()
    shared_component_mask: frozenset[int] = frozenset()
    total_entity_count: int = 0

    def clear(self) -> None:
        self.total_entity_count = 0
        self.filtered_archetypes.clear()