"""Building blocks for an entity-component-system framework: worlds, systems, events, storage and task splitting."""

__version__ = "0.1.0"