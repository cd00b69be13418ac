# tests/test_task_store.py

from __future__ import annotations

import pytest

from task_manager.tasks.task_models import Task
from task_manager.tasks.task_store import TaskNotFoundError, TaskStore, TaskValidationError


def test_ids_are_sequential_from_one(store: TaskStore) -> None:
    ids = [store.add_task(text) for text in ("Buy milk", "Walk dog", "Buy milk")]
    assert ids == [1, 2, 3]
    assert store.next_id == 4
    assert [t.description for t in store.list_tasks()] == ["Buy milk", "Walk dog", "Buy milk"]
    assert all(not t.completed for t in store.list_tasks())


@pytest.mark.parametrize("text", ["", "   ", "\t"])
def test_add_rejects_empty_description(store: TaskStore, text: str) -> None:
    with pytest.raises(TaskValidationError):
        store.add_task(text)
    assert store.count_tasks() == 0
    assert store.next_id == 1


@pytest.mark.parametrize("text", ["a|b", "line\nbreak"])
def test_add_rejects_delimiter_and_newlines(store: TaskStore, text: str) -> None:
    with pytest.raises(TaskValidationError):
        store.add_task(text)
    assert store.count_tasks() == 0
    assert store.next_id == 1


def test_add_strips_surrounding_whitespace(store: TaskStore) -> None:
    task_id = store.add_task("  Call  mom  ")
    task = store.get_task(task_id)
    assert task is not None
    assert task.description == "Call  mom"


def test_complete_is_idempotent(store: TaskStore) -> None:
    store.add_task("Buy milk")
    store.add_task("Walk dog")

    store.complete_task(1)
    first = [(t.id, t.description, t.completed) for t in store.list_tasks()]
    store.complete_task(1)
    second = [(t.id, t.description, t.completed) for t in store.list_tasks()]

    assert first == second == [(1, "Buy milk", True), (2, "Walk dog", False)]


def test_complete_unknown_id_leaves_store_unchanged(store: TaskStore) -> None:
    store.add_task("Buy milk")
    before = [(t.id, t.description, t.completed) for t in store.list_tasks()]

    with pytest.raises(TaskNotFoundError) as exc:
        store.complete_task(99)

    assert exc.value.task_id == 99
    assert [(t.id, t.description, t.completed) for t in store.list_tasks()] == before
    assert store.next_id == 2


def test_complete_on_empty_store_reports_not_found(store: TaskStore) -> None:
    with pytest.raises(TaskNotFoundError):
        store.complete_task(99)
    assert store.count_tasks() == 0
    assert store.next_id == 1


def test_list_returns_copy(store: TaskStore) -> None:
    store.add_task("Buy milk")
    listing = store.list_tasks()
    listing.clear()
    assert store.count_tasks() == 1


def test_restore_bumps_next_id_and_rejects_duplicates() -> None:
    store = TaskStore()
    assert store.restore_task(Task(id=7, description="seven", completed=True))
    assert store.restore_task(Task(id=3, description="three"))
    assert store.next_id == 8

    assert not store.restore_task(Task(id=3, description="again"))
    assert [t.id for t in store.list_tasks()] == [7, 3]

    assert store.add_task("next") == 8


def test_constructor_accepts_existing_tasks() -> None:
    store = TaskStore([Task(id=2, description="b"), Task(id=5, description="e")])
    assert store.next_id == 6
    assert store.get_task(5) is not None
    assert store.get_task(4) is None
