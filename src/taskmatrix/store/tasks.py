"""Quadrant task store with per-quadrant key-value persistence."""

import logging
from collections.abc import Callable
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from taskmatrix.config import settings
from taskmatrix.store.kv import JsonFileKeyValueStore, KeyValueStore
from taskmatrix.store.models import QUADRANT_ORDER, STORAGE_KEYS, Quadrant, Task

logger = logging.getLogger(__name__)

Listener = Callable[["TaskStore"], None]

_task_list = TypeAdapter(list[Task])


class TaskStore:
    """Owns the four ordered task lists and writes them back after every mutation.

    Lookup misses and empty text are silent no-ops: ids are generated here,
    so a miss means the caller holds a stale view, not a fault.

    A given task id lives in at most one quadrant at a time.
    """

    def __init__(self, kv: KeyValueStore) -> None:
        """Initialize an empty store over a key-value backend."""
        self._kv = kv
        self._quadrants: dict[Quadrant, list[Task]] = {q: [] for q in QUADRANT_ORDER}
        self._listeners: list[Listener] = []

    # =========================================================================
    # Queries
    # =========================================================================

    def tasks(self, quadrant: Quadrant) -> list[Task]:
        """Return a copy of one quadrant's tasks, in order."""
        return list(self._quadrants[quadrant])

    def snapshot(self) -> dict[Quadrant, list[Task]]:
        """Return copies of all four quadrants in fixed order."""
        return {q: list(self._quadrants[q]) for q in QUADRANT_ORDER}

    def get(self, task_id: str) -> tuple[Quadrant, Task] | None:
        """Find a task by id across all quadrants.

        Returns:
            The quadrant holding the task and the task, or None if not found
        """
        for quadrant in QUADRANT_ORDER:
            index = self._index_of(quadrant, task_id)
            if index is not None:
                return quadrant, self._quadrants[quadrant][index]
        return None

    def _index_of(self, quadrant: Quadrant, task_id: str) -> int | None:
        for index, task in enumerate(self._quadrants[quadrant]):
            if task.id == task_id:
                return index
        return None

    # =========================================================================
    # Mutations
    # =========================================================================

    def add(self, quadrant: Quadrant, text: str) -> Task | None:
        """Append a new task to a quadrant.

        Args:
            quadrant: Target quadrant
            text: Task text; surrounding whitespace is stripped

        Returns:
            The created Task, or None if the text is blank
        """
        text = text.strip()
        if not text:
            return None

        task = Task(id=str(uuid4()), text=text)
        self._quadrants[quadrant].append(task)
        logger.debug(f"Added task {task.id} to {quadrant.value}")
        self._commit()
        return task

    def edit(self, quadrant: Quadrant, task_id: str, new_text: str) -> bool:
        """Replace a task's text in place.

        Args:
            quadrant: Quadrant expected to hold the task
            task_id: Task ID
            new_text: Replacement text; surrounding whitespace is stripped

        Returns:
            True if the text changed, False for blank/unchanged text or a missing task
        """
        new_text = new_text.strip()
        if not new_text:
            return False

        index = self._index_of(quadrant, task_id)
        if index is None:
            return False

        tasks = self._quadrants[quadrant]
        if tasks[index].text == new_text:
            return False

        tasks[index] = tasks[index].model_copy(update={"text": new_text})
        logger.debug(f"Edited task {task_id} in {quadrant.value}")
        self._commit()
        return True

    def delete(self, quadrant: Quadrant, task_id: str) -> bool:
        """Remove a task from a quadrant.

        Returns:
            True if removed, False if not found
        """
        index = self._index_of(quadrant, task_id)
        if index is None:
            return False

        del self._quadrants[quadrant][index]
        logger.debug(f"Deleted task {task_id} from {quadrant.value}")
        self._commit()
        return True

    def move(self, task_id: str, target: Quadrant) -> Task | None:
        """Move a task to another quadrant (drag-and-drop).

        The task is taken from the first quadrant holding it, in fixed
        order, and appended to ``target`` unless ``target`` already holds
        that id. State is persisted whether or not the task was found.

        Returns:
            The moved Task, or None if no quadrant holds it
        """
        moved: Task | None = None
        for quadrant in QUADRANT_ORDER:
            index = self._index_of(quadrant, task_id)
            if index is not None:
                moved = self._quadrants[quadrant].pop(index)
                break

        if moved is not None and self._index_of(target, task_id) is None:
            self._quadrants[target].append(moved)
            logger.debug(f"Moved task {task_id} to {target.value}")

        self.save()
        if moved is not None:
            self._notify()
        return moved

    # =========================================================================
    # Persistence
    # =========================================================================

    def load(self) -> None:
        """Replace each quadrant with its persisted contents.

        Quadrants are read independently; an absent or undecodable entry
        leaves that quadrant's current contents untouched. A payload that
        repeats an id, or reuses an id held by an earlier quadrant, counts
        as undecodable.
        """
        seen: set[str] = set()
        for quadrant in QUADRANT_ORDER:
            key = STORAGE_KEYS[quadrant]
            data = self._kv.get(key)
            if data is not None:
                try:
                    tasks = _task_list.validate_json(data)
                except ValidationError as e:
                    logger.warning(f"Ignoring undecodable tasks under '{key}': {e.error_count()} errors")
                else:
                    ids = {task.id for task in tasks}
                    if len(ids) != len(tasks) or not ids.isdisjoint(seen):
                        logger.warning(f"Ignoring tasks under '{key}': duplicate task ids")
                    else:
                        self._quadrants[quadrant] = tasks
            seen.update(task.id for task in self._quadrants[quadrant])

        counts = ", ".join(f"{q.value}={len(self._quadrants[q])}" for q in QUADRANT_ORDER)
        logger.info(f"Loaded tasks: {counts}")

    def save(self) -> None:
        """Write every quadrant to its key; a failing quadrant does not block the others."""
        for quadrant in QUADRANT_ORDER:
            key = STORAGE_KEYS[quadrant]
            try:
                self._kv.set(key, _task_list.dump_json(self._quadrants[quadrant]))
            except (PydanticSerializationError, UnicodeDecodeError) as e:
                logger.warning(f"Skipped saving '{key}': {e}")
        logger.debug("Saved all quadrants")

    # =========================================================================
    # Change notification
    # =========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback invoked with the store after each change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _commit(self) -> None:
        self.save()
        self._notify()


# Singleton instance
_task_store: TaskStore | None = None


def get_task_store() -> TaskStore:
    """Get the singleton TaskStore instance, loaded from the configured file."""
    global _task_store
    if _task_store is None:
        _task_store = TaskStore(JsonFileKeyValueStore(settings.storage_path))
        _task_store.load()
    return _task_store
