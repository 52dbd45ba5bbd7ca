# tests/test_persistence.py

from __future__ import annotations

import json
from pathlib import Path

from taskmatrix.store.kv import JsonFileKeyValueStore, MemoryKeyValueStore
from taskmatrix.store.models import QUADRANT_ORDER, STORAGE_KEYS, Quadrant
from taskmatrix.store.tasks import TaskStore

UI = Quadrant.URGENT_IMPORTANT
NUI = Quadrant.NOT_URGENT_IMPORTANT
UNI = Quadrant.URGENT_NOT_IMPORTANT
NUNI = Quadrant.NOT_URGENT_NOT_IMPORTANT


def test_storage_keys_are_fixed() -> None:
    assert [STORAGE_KEYS[q] for q in QUADRANT_ORDER] == [
        "urgentImportant",
        "notUrgentImportant",
        "urgentNotImportant",
        "notUrgentNotImportant",
    ]


def test_saved_format_is_list_of_id_and_text(store: TaskStore, kv: MemoryKeyValueStore) -> None:
    task = store.add(UI, "Pay rent")
    assert task is not None

    payload = json.loads(kv.get("urgentImportant") or b"")
    assert payload == [{"id": task.id, "text": "Pay rent"}]
    assert json.loads(kv.get("notUrgentImportant") or b"") == []


def test_round_trip_into_fresh_store(store: TaskStore, kv: MemoryKeyValueStore) -> None:
    a = store.add(UI, "one")
    b = store.add(UI, "two")
    c = store.add(NUI, "three")
    assert a and b and c
    store.save()

    fresh = TaskStore(kv)
    fresh.load()

    assert [(t.id, t.text) for t in fresh.tasks(UI)] == [(a.id, "one"), (b.id, "two")]
    assert [(t.id, t.text) for t in fresh.tasks(NUI)] == [(c.id, "three")]
    assert fresh.tasks(UNI) == []
    assert fresh.tasks(NUNI) == []


def test_load_with_nothing_persisted_keeps_state(kv: MemoryKeyValueStore) -> None:
    store = TaskStore(kv)
    store.load()
    assert all(tasks == [] for tasks in store.snapshot().values())


def test_undecodable_quadrant_is_skipped_independently(kv: MemoryKeyValueStore) -> None:
    store = TaskStore(kv)
    existing = store.add(UI, "in memory")
    kept = store.add(NUI, "kept")
    assert existing and kept

    kv.set("urgentImportant", b'{"id": "x"}')
    kv.set("urgentNotImportant", b'[{"text": "missing id"}]')
    kv.set("notUrgentNotImportant", b"\xff\xfe")

    store.load()
    assert [t.id for t in store.tasks(UI)] == [existing.id]
    assert [t.id for t in store.tasks(NUI)] == [kept.id]
    assert store.tasks(UNI) == []
    assert store.tasks(NUNI) == []

    fresh = TaskStore(kv)
    fresh.load()
    assert fresh.tasks(UI) == []
    assert [t.id for t in fresh.tasks(NUI)] == [kept.id]


def test_load_rejects_blank_text(kv: MemoryKeyValueStore) -> None:
    kv.set("urgentImportant", b'[{"id": "a", "text": "ok"}, {"id": "b", "text": "   "}]')

    store = TaskStore(kv)
    store.load()
    assert store.tasks(UI) == []


def test_load_rejects_non_string_id(kv: MemoryKeyValueStore) -> None:
    kv.set("urgentImportant", b'[{"id": 7, "text": "numeric id"}]')
    kv.set("notUrgentImportant", b'[{"id": null, "text": "null id"}]')

    store = TaskStore(kv)
    store.load()
    assert store.tasks(UI) == []
    assert store.tasks(NUI) == []


def test_load_rejects_ids_repeated_within_a_quadrant(kv: MemoryKeyValueStore) -> None:
    kv.set("urgentImportant", b'[{"id": "a", "text": "one"}, {"id": "a", "text": "two"}]')
    kv.set("notUrgentImportant", b'[{"id": "b", "text": "fine"}]')

    store = TaskStore(kv)
    store.load()
    assert store.tasks(UI) == []
    assert [t.id for t in store.tasks(NUI)] == ["b"]


def test_load_rejects_ids_already_held_by_an_earlier_quadrant(kv: MemoryKeyValueStore) -> None:
    kv.set("urgentImportant", b'[{"id": "a", "text": "first"}]')
    kv.set("notUrgentImportant", b'[{"id": "a", "text": "again"}, {"id": "b", "text": "b"}]')
    kv.set("urgentNotImportant", b'[{"id": "c", "text": "c"}]')

    store = TaskStore(kv)
    store.load()

    assert [(t.id, t.text) for t in store.tasks(UI)] == [("a", "first")]
    assert store.tasks(NUI) == []
    assert [t.id for t in store.tasks(UNI)] == ["c"]


def test_rejected_quadrant_keeps_its_current_tasks(kv: MemoryKeyValueStore) -> None:
    store = TaskStore(kv)
    kept = store.add(NUI, "kept")
    assert kept is not None

    kv.set("urgentImportant", b'[{"id": "x", "text": "x"}]')
    kv.set("notUrgentImportant", b'[{"id": "x", "text": "dup"}]')

    store.load()
    assert [t.id for t in store.tasks(UI)] == ["x"]
    assert [t.id for t in store.tasks(NUI)] == [kept.id]


def test_save_failure_in_one_quadrant_does_not_block_others() -> None:
    class PickyKV(MemoryKeyValueStore):
        def set(self, key: str, value: bytes) -> None:
            if key == "notUrgentImportant":
                raise UnicodeDecodeError("utf-8", value, 0, 1, "refused")
            super().set(key, value)

    kv = PickyKV()
    store = TaskStore(kv)
    store.add(UI, "a")
    store.add(NUNI, "b")

    assert set(kv.keys()) == {"urgentImportant", "urgentNotImportant", "notUrgentNotImportant"}


def test_file_round_trip(file_store: TaskStore, storage_path: Path) -> None:
    a = file_store.add(UI, "Pay rent")
    b = file_store.add(UI, "Call bank")
    assert a and b
    file_store.move(a.id, NUNI)

    on_disk = json.loads(storage_path.read_text(encoding="utf-8"))
    assert set(on_disk) == set(STORAGE_KEYS.values())
    assert json.loads(on_disk["notUrgentNotImportant"]) == [{"id": a.id, "text": "Pay rent"}]

    reloaded = TaskStore(JsonFileKeyValueStore(storage_path))
    reloaded.load()
    assert [t.id for t in reloaded.tasks(UI)] == [b.id]
    assert [t.id for t in reloaded.tasks(NUNI)] == [a.id]
    assert reloaded.tasks(UNI) == []


def test_file_store_missing_file_starts_empty(tmp_path: Path) -> None:
    kv = JsonFileKeyValueStore(tmp_path / "nope.json")
    assert kv.get("urgentImportant") is None
    assert not (tmp_path / "nope.json").exists()


def test_file_store_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{broken", encoding="utf-8")

    kv = JsonFileKeyValueStore(path)
    assert kv.get("urgentImportant") is None

    store = TaskStore(kv)
    store.load()
    task = store.add(UI, "recovered")
    assert task is not None
    assert json.loads(path.read_text(encoding="utf-8"))["urgentImportant"]


def test_file_store_ignores_non_object_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    kv = JsonFileKeyValueStore(path)
    assert kv.get("urgentImportant") is None
