# whisker

Building blocks for an entity-component-system (ECS) framework, written in pure Python
with no third-party dependencies.

## Modules

- `whisker.events`: typed publish/subscribe.
  - `EventManager.subscribe(event_type, func)` takes a callable or a `Receiver` and
    returns the `Receiver`.
  - `EventManager.post(event)` delivers the event to every live receiver of
    `type(event)`, in subscription order.
  - Receivers are held weakly. Keep the returned receiver referenced for as long as it
    should receive events. `Receiver.unsubscribe()` removes it and returns whether it
    was subscribed.
  - `register_event_type(name)` gives each event type name a stable id.
- `whisker.system`: the `System` base class. Subclasses implement `on_update` and may
  override the other `on_*` hooks. The life cycle methods are `create`, `configure`,
  `start`, `update`, `pause`, `resume`, `stop` and `destroy`, and the current state is
  a `SystemState`.
  - Calling a step from the wrong state raises `InvalidStateError`.
  - `destroy` pauses and stops an active system first.
  - `SystemConfig` holds the ordering constraints `before` and `after`, which are set
    through `update_before(...)` and `update_after(...)` with names or `System`
    subclasses. It also holds the `group` and the `priority`.
  - A system's `name` defaults to its class's qualified name.
- `whisker.system_manager`: `SystemManager` keeps systems and orders them.
  - Ordering is by group priority first (`set_group_priority` /
    `get_group_priority`), then by system priority, higher values first. Before/after
    constraints are respected on top of that.
  - `init()` configures, orders and starts the systems. `update()` updates every
    active system.
  - `add_system`, `find_system` and `remove_system` manage the systems.
  - `shutdown()` destroys them; the manager also works as a context manager.
  - Constraints that cannot be met raise `SystemOrderError`.
- `whisker.world`: `World` owns a version counter, a lazily created `SystemManager`
  (`world.systems`), a `WorldStorage` (`world.storage`) and an `EventManager`
  (`world.events`, taken from the `WorldContext` if one is given).
  - `init()` resets the version to 0. `update()` increments it and updates the
    systems. `close()` shuts the systems down.
  - A world is also a context manager. `next_world_id()` hands out fresh ids.
- `whisker.world_storage`: `WorldStorage` holds one instance per singleton type
  (`store_singleton`, `get_instance_of`) and objects stored under tags (`store`, `load`).
  A tag is either a number or a text, which is turned into its CRC-32 with
  `object_tag`.
- `whisker.temporal_storage`: `TemporalStorage` is an ordered log of entity commands:
  `create`, `assign_component`, `remove_component`, `destroy`, `destroy_now` and `clear`.
  Each command is an `ActionInfo` with an `Action` kind. Creations that carry components
  also get a `CreateAction`.
- `whisker.world_filter`: plain result types. `WorldFilterResult` holds a list of
  `ArchetypeFilterResult`, and each of those holds `EntityBlock` ranges.
  `ArchetypeFilterResult.add_block` ignores empty blocks and counts the entities it
  adds.
- `whisker.task_view`: `split_tasks(filter_result, num_tasks)` divides the filtered
  entities into consecutive tasks of near-equal size. Each task is an `ArchetypeGroup`
  that yields one `ArchetypeSlice` per archetype it touches. Each slice yields the
  `EntityBlock` runs it covers.
- `whisker.component_storage`: `ComponentDataStorage` keeps one column of values per
  component id, grown in blocks of `chunk_capacity()` values.
  - Values are read and written with `get` and `set` by column index and entity index.
    Either index out of range raises `IndexError`.
  - `size` sets how many entries are in use.
  - `dist_to_chunk_end` tells how far the current block runs.

## What it does not do

There is no entity manager and no archetype store here. Nothing creates entities,
moves them between archetypes or applies the commands that a `TemporalStorage` records.
Nothing fills a `WorldFilterResult` either: the caller builds one, including its
`total_entity_count`. Systems run one after another on the calling thread; there is no
job dispatcher.

## Installation

```
pip install .
```

## Examples

Systems in a world:

```python
from whisker.system import System, SystemConfig
from whisker.world import World


class Movement(System):
    def on_configure(self, world, config: SystemConfig):
        config.priority = 10

    def on_update(self, world):
        print("tick", world.version)


with World() as world:
    world.systems.add_system(Movement)
    world.init()
    world.update()   # prints: tick 1
```

Events:

```python
from whisker.events import EventManager


class Collision:
    pass


events = EventManager()
receiver = events.subscribe(Collision, lambda event: print("hit"))
events.post(Collision())   # prints: hit
receiver.unsubscribe()
```

Storage:

```python
from whisker.world_storage import WorldStorage, object_tag

storage = WorldStorage()
storage.store("settings", {"gravity": 9.8})
assert storage.load(object_tag("settings")) == {"gravity": 9.8}
```

Splitting filtered entities into tasks:

```python
from whisker.task_view import split_tasks
from whisker.world_filter import ArchetypeFilterResult, EntityBlock, WorldFilterResult

first = ArchetypeFilterResult(archetype="first")
first.add_block(EntityBlock(0, 5))
second = ArchetypeFilterResult(archetype="second")
second.add_block(EntityBlock(10, 13))
result = WorldFilterResult(filtered_archetypes=[first, second], total_entity_count=8)

for group in split_tasks(result, 3):
    for part in group:
        print(group.info.id, part.archetype, [(b.begin, b.end) for b in part])
# 0 first [(0, 3)]
# 1 first [(3, 5)]
# 1 second [(10, 11)]
# 2 second [(11, 13)]
```

## Running the tests

```
pip install .[test]
pytest
```