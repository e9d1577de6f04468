"""
Unit tests for the in-memory task list manager
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.apps.tasklist.errors import TaskNotFoundError
from src.apps.tasklist.manager import TaskListManager
from src.apps.tasklist.models import Task


def test_add_appends_in_order():
    """Added tasks keep insertion order"""
    manager = TaskListManager()
    manager.add_task("Buy milk")
    manager.add_task("Walk dog", "media/dog.png")

    assert manager.get_tasks() == [Task("Buy milk"), Task("Walk dog", "media/dog.png")]
    assert len(manager) == 2


def test_add_rejects_empty_title():
    """Empty title is not added"""
    manager = TaskListManager()

    assert manager.add_task("") is None
    assert manager.add_task("", "media/a.png") is None
    assert len(manager) == 0, "Empty titles must be rejected"


def test_add_accepts_whitespace_title():
    """Only the empty string is rejected"""
    manager = TaskListManager()

    assert manager.add_task("  ") == Task("  ")


def test_tasks_is_a_snapshot():
    """Mutating the returned list does not touch the manager"""
    manager = TaskListManager()
    manager.add_task("One")

    manager.tasks.append(Task("Two"))
    assert len(manager) == 1


def test_remove_by_value():
    """Remove matches by value, not by object identity"""
    manager = TaskListManager()
    manager.add_task("One")
    manager.add_task("Two", "media/two.png")
    manager.add_task("Three")

    assert manager.remove_task(Task("Two", "media/two.png"))
    assert manager.get_tasks() == [Task("One"), Task("Three")]


def test_remove_missing_returns_false():
    """Removing an unknown task leaves the list unchanged"""
    manager = TaskListManager()
    manager.add_task("One")

    assert not manager.remove_task(Task("One", "media/other.png"))
    assert manager.get_tasks() == [Task("One")]


def test_remove_duplicate_removes_first():
    """Equal tasks are removed one at a time"""
    manager = TaskListManager()
    manager.add_task("Same")
    manager.add_task("Other")
    manager.add_task("Same")

    manager.remove_task(Task("Same"))
    assert manager.get_tasks() == [Task("Other"), Task("Same")]


def test_edit_replaces_in_place():
    """Edit keeps the position and length of the list"""
    manager = TaskListManager()
    manager.add_task("One")
    manager.add_task("Two")
    manager.add_task("Three")

    updated = manager.edit_task(Task("Two"), "Second", "media/2.png")

    assert updated == Task("Second", "media/2.png")
    assert manager.get_tasks() == [Task("One"), Task("Second", "media/2.png"), Task("Three")]


def test_edit_can_clear_image_and_title():
    """Edit has no empty-title guard and None clears the image"""
    manager = TaskListManager()
    manager.add_task("One", "media/1.png")

    manager.edit_task(Task("One", "media/1.png"), "", None)
    assert manager.get_tasks() == [Task("", None)]


def test_edit_missing_raises():
    """Editing a task that is no longer in the list fails"""
    manager = TaskListManager()
    manager.add_task("One")

    with pytest.raises(TaskNotFoundError):
        manager.edit_task(Task("Gone"), "New", None)


def test_get_task_by_row():
    """Rows are looked up by position"""
    manager = TaskListManager()
    manager.add_task("One")

    assert manager.get_task(0) == Task("One")
    with pytest.raises(TaskNotFoundError):
        manager.get_task(1)
    with pytest.raises(TaskNotFoundError):
        manager.get_task(-1)


def test_listeners_notified():
    """Listeners see every successful mutation"""
    manager = TaskListManager()
    events = []
    manager.add_listener(lambda action, task: events.append((action, task.title)))

    manager.add_task("One")
    manager.add_task("")
    manager.edit_task(Task("One"), "Uno", None)
    manager.remove_task(Task("Uno"))
    manager.remove_task(Task("Uno"))

    assert events == [('add', 'One'), ('edit', 'Uno'), ('remove', 'Uno')]


def test_failing_listener_does_not_abort():
    """A listener error is logged, the mutation still happens"""
    manager = TaskListManager()

    def broken(action, task):
        raise RuntimeError("boom")

    manager.add_listener(broken)
    manager.add_task("One")

    assert manager.get_tasks() == [Task("One")]


def test_clear():
    manager = TaskListManager()
    manager.add_task("One")
    manager.clear()

    assert len(manager) == 0
