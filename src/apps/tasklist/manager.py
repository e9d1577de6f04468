"""
Task List Manager

Holds the in-memory task list and notifies listeners when it changes.
"""

import logging
from typing import Callable, List, Optional

from .errors import TaskNotFoundError
from .models import Task


class TaskListManager:
    """Manages the ordered list of tasks for the lifetime of the screen"""

    def __init__(self):
        self._tasks: List[Task] = []
        self._listeners: List[Callable[[str, Task], None]] = []
        self.logger = logging.getLogger(__name__)

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the tasks in insertion order"""
        return list(self._tasks)

    def get_tasks(self) -> List[Task]:
        return self.tasks

    def get_task(self, index: int) -> Task:
        """
        Get the task shown at a row position

        Args:
            index: Row position in the list

        Returns:
            Task at that position

        Raises:
            TaskNotFoundError: If the index is out of range
        """
        if not 0 <= index < len(self._tasks):
            raise TaskNotFoundError(f"No task at row {index}")
        return self._tasks[index]

    def add_listener(self, callback: Callable[[str, Task], None]):
        """
        Register a change callback

        Args:
            callback: Called as callback(action, task) after every mutation
        """
        self._listeners.append(callback)

    def add_task(self, title: str, image_uri: Optional[str] = None) -> Optional[Task]:
        """
        Append a new task

        Args:
            title: Task title, must not be empty
            image_uri: Optional image reference from the picker

        Returns:
            The new Task, or None if the title was empty
        """
        if not title:
            self.logger.debug("Rejected task with empty title")
            return None

        task = Task(title, image_uri)
        self._tasks.append(task)
        self.logger.info(f"Added task: {title}")
        self._notify('add', task)
        return task

    def remove_task(self, task: Task) -> bool:
        """
        Remove the first task equal to the given one

        Returns:
            True if a task was removed, False if none matched
        """
        try:
            self._tasks.remove(task)
        except ValueError:
            self.logger.debug(f"Task not in list, nothing removed: {task.title}")
            return False

        self.logger.info(f"Removed task: {task.title}")
        self._notify('remove', task)
        return True

    def edit_task(self, task: Task, title: str, image_uri: Optional[str]) -> Task:
        """
        Replace the first task equal to the given one, keeping its position

        Args:
            task: Task as currently shown
            title: New title
            image_uri: New image reference (None clears the image)

        Returns:
            The replacement Task

        Raises:
            TaskNotFoundError: If no equal task is in the list
        """
        try:
            index = self._tasks.index(task)
        except ValueError:
            raise TaskNotFoundError(f"Task not found: {task.title}") from None

        updated = Task(title, image_uri)
        self._tasks[index] = updated
        self.logger.info(f"Edited task {index}: {task.title} -> {title}")
        self._notify('edit', updated)
        return updated

    def clear(self):
        """Remove all tasks without notifying listeners"""
        self._tasks.clear()
        self.logger.debug("Task list cleared")

    def _notify(self, action: str, task: Task):
        for callback in self._listeners:
            try:
                callback(action, task)
            except Exception as e:
                self.logger.error(f"Task listener failed on {action}: {e}")

    def __len__(self) -> int:
        return len(self._tasks)
