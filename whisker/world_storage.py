"""Per-world storage of singletons and tagged objects."""

from __future__ import annotations

import logging
import zlib
from typing import Any

_log = logging.getLogger(__name__)

_singleton_ids: dict[str, int] = {}


def get_singleton_id(name: str) -> int:
    """Return the id for a singleton type name, assigning the next free id on first use."""
    singleton_id = _singleton_ids.get(name)
    if singleton_id is not None:
        return singleton_id
    singleton_id = len(_singleton_ids)
    _singleton_ids[name] = singleton_id
    _log.debug("New singleton: %s, id: %d", name, singleton_id)
    return singleton_id


def object_tag(text: str) -> int:
    """Return the CRC-32 tag of a text."""
    return zlib.crc32(text.encode("utf-8"))


def _type_name(singleton_type: type) -> str:
    return f"{singleton_type.__module__}.{singleton_type.__qualname__}"


def _as_tag(tag: int | str) -> int:
    return object_tag(tag) if isinstance(tag, str) else tag


class WorldStorage:
    """Holds one instance per singleton type and arbitrary objects under tags."""

    def __init__(self) -> None:
        self._singletons: dict[int, Any] = {}
        self._objects: dict[int, Any] = {}

    @staticmethod
    def register_singleton(singleton_type: type) -> int:
        """Return the singleton id of a type."""
        return get_singleton_id(_type_name(singleton_type))

    def get_instance_of(self, singleton_type: type | int) -> Any | None:
        """Return the stored instance of a singleton type (or id), or None."""
        if isinstance(singleton_type, type):
            singleton_type = self.register_singleton(singleton_type)
        return self._singletons.get(singleton_type)

    def store_singleton(self, singleton: Any) -> Any:
        """Store an object as the singleton of its own type and return it."""
        self._singletons[self.register_singleton(type(singleton))] = singleton
        return singleton

    def store(self, tag: int | str, obj: Any) -> Any:
        """Store an object under a tag (a number or a text to be hashed) and return it."""
        self._objects[_as_tag(tag)] = obj
        return obj

    def load(self, tag: int | str) -> Any | None:
        """Return the object stored under a tag, or None."""
        return self._objects.get(_as_tag(tag))