"""
Task List Errors

Exceptions raised by the task list manager and image picker.
"""


class TaskListError(Exception):
    """Base class for task list errors"""


class TaskNotFoundError(TaskListError):
    """No task equal to the requested one is in the list"""


class InvalidImageError(TaskListError):
    """Picked file is not a usable image"""


class PermissionDeniedError(TaskListError):
    """Media directory access was not granted"""
