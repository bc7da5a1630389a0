"""Component values stored column by column in fixed-size blocks."""

from __future__ import annotations

import logging
from typing import Any, Iterable

_log = logging.getLogger(__name__)

_BLOCK_SIZE = 1024 * 16


class ComponentDataStorage:
    """Stores one column of values per component, grown a block at a time.

    Columns are addressed by their position among the sorted component ids
    given at construction.
    """

    def __init__(self, component_ids: Iterable[int]) -> None:
        self._component_ids = sorted(set(component_ids))
        self._columns: list[list[list[Any]]] = [[] for _ in self._component_ids]
        self._capacity = 0
        self._size = 0
        _log.debug(
            "New ComponentDataStorage has been created, components: %s | chunk capacity: %d",
            self._component_ids,
            _BLOCK_SIZE,
        )

    @staticmethod
    def chunk_capacity() -> int:
        """Number of values in one block."""
        return _BLOCK_SIZE

    @property
    def component_ids(self) -> list[int]:
        return list(self._component_ids)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        if value < 0:
            raise ValueError("size must not be negative")
        self.reserve(value)
        self._size = value

    def __len__(self) -> int:
        return self._size

    def reserve(self, new_capacity: int) -> None:
        """Grow by whole blocks until at least ``new_capacity`` values fit."""
        while self._capacity < new_capacity:
            for column in self._columns:
                column.append([None] * _BLOCK_SIZE)
            self._capacity += _BLOCK_SIZE

    def clear(self, free_chunks: bool = True) -> None:
        """Forget all values; with ``free_chunks`` also release the blocks."""
        self._size = 0
        if free_chunks:
            for column in self._columns:
                column.clear()
            self._capacity = 0

    def _locate(self, component_index: int, index: int) -> tuple[list[Any], int]:
        if not 0 <= index < self._size:
            raise IndexError(f"entity index {index} out of range")
        if not 0 <= component_index < len(self._columns):
            raise IndexError(f"component index {component_index} out of range")
        block, offset = divmod(index, _BLOCK_SIZE)
        return self._columns[component_index][block], offset

    def get(self, component_index: int, index: int) -> Any:
        """Return the value of a component at an index."""
        block, offset = self._locate(component_index, index)
        return block[offset]

    def set(self, component_index: int, index: int, value: Any) -> None:
        """Store the value of a component at an index."""
        block, offset = self._locate(component_index, index)
        block[offset] = value

    def dist_to_chunk_end(self, global_index: int) -> int:
        """How many stored values follow from ``global_index`` without leaving its block."""
        in_chunk = max(_BLOCK_SIZE - global_index % _BLOCK_SIZE, 0)
        in_storage = max(self._size - global_index, 0)
        return min(in_storage, in_chunk)