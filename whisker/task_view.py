"""Splitting filtered entities into tasks and walking them archetype by archetype."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from whisker.world_filter import ArchetypeFilterResult, EntityBlock, WorldFilterResult


@dataclass
class TaskInfo:
    """Where a task starts among the filtered entities, and how many it covers.

    ``first_entity`` counts filtered entities of the first archetype, not
    positions in the archetype itself.
    """

    size: int
    id: int = 0
    first_archetype: int = 0
    first_entity: int = 0


@dataclass(frozen=True)
class ArchetypeSlice:
    """The part of one filtered archetype that a task covers."""

    archetype_index: int
    filter_result: ArchetypeFilterResult
    first_entity: int
    size: int

    @property
    def archetype(self) -> Any:
        return self.filter_result.archetype

    def __iter__(self) -> Iterator[EntityBlock]:
        """Yield the runs of archetype entity indexes this slice covers, in order."""
        skip = self.first_entity
        remaining = self.size
        for block in self.filter_result.blocks:
            if remaining == 0:
                return
            if skip >= block.size:
                skip -= block.size
                continue
            begin = block.begin + skip
            skip = 0
            count = min(block.end - begin, remaining)
            yield EntityBlock(begin, begin + count)
            remaining -= count


class ArchetypeGroup:
    """The entities of one task, grouped by the archetype they live in."""

    def __init__(self, info: TaskInfo, filter_result: WorldFilterResult) -> None:
        self._info = info
        self._filter_result = filter_result

    @property
    def info(self) -> TaskInfo:
        return self._info

    def task_size(self) -> int:
        """Number of entities the task covers."""
        return self._info.size

    def __iter__(self) -> Iterator[ArchetypeSlice]:
        archetypes = self._filter_result.filtered_archetypes
        remaining = self._info.size
        if remaining == 0 or not archetypes:
            return
        index = self._info.first_archetype
        first_entity = self._info.first_entity
        current = min(remaining, archetypes[index].entities_count - first_entity)
        while remaining:
            yield ArchetypeSlice(index, archetypes[index], first_entity, current)
            remaining -= current
            if remaining:
                index += 1
                first_entity = 0
                current = min(remaining, archetypes[index].entities_count)


def split_tasks(filter_result: WorldFilterResult, num_tasks: int) -> Iterator[ArchetypeGroup]:
    """Split the filtered entities into ``num_tasks`` consecutive tasks.

    Every task gets ``total // num_tasks`` entities; the first
    ``total % num_tasks`` tasks get one more.
    """
    if num_tasks <= 0:
        raise ValueError("number of tasks must be positive")
    total = filter_result.total_entity_count
    per_task = total // num_tasks
    with_extra = total - num_tasks * per_task
    archetypes = filter_result.filtered_archetypes
    first_archetype = 0
    first_entity = 0
    for task_id in range(num_tasks):
        size = per_task + 1 if task_id < with_extra else per_task
        yield ArchetypeGroup(TaskInfo(size, task_id, first_archetype, first_entity), filter_result)
        to_skip = size
        while to_skip:
            free = archetypes[first_archetype].entities_count - first_entity
            if free > to_skip:
                first_entity += to_skip
                to_skip = 0
            else:
                to_skip -= free
                first_archetype += 1
                first_entity = 0