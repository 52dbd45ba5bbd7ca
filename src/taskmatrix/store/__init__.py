"""Storage module for board state."""

from taskmatrix.store.kv import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from taskmatrix.store.models import (
    QUADRANT_COLORS,
    QUADRANT_ORDER,
    QUADRANT_TITLES,
    STORAGE_KEYS,
    Quadrant,
    Task,
)
from taskmatrix.store.tasks import TaskStore, get_task_store

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "Quadrant",
    "QUADRANT_COLORS",
    "QUADRANT_ORDER",
    "QUADRANT_TITLES",
    "STORAGE_KEYS",
    "Task",
    "TaskStore",
    "get_task_store",
]
