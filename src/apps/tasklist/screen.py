"""
Task List Screen

Renders the task list page: the add form, the task rows and the edit dialog.
"""

import logging
from typing import List, Optional, Tuple

from flask import render_template_string

from .manager import TaskListManager
from .models import Task

LAYOUT_COLUMN = 'column'
LAYOUT_LAZY = 'lazy'
LAYOUTS = (LAYOUT_COLUMN, LAYOUT_LAZY)


class TaskListScreen:
    """
    Task list page in one of two layouts:
    'column' shows every row in a plain list,
    'lazy' shows a scrollable window of rows at a time.
    """

    def __init__(self, manager: TaskListManager, layout: str = LAYOUT_COLUMN,
                 window_size: int = 20, thumbnail_size: int = 64):
        """
        Initialize task list screen

        Args:
            manager: Task list to display
            layout: 'column' or 'lazy'
            window_size: Rows per window in the lazy layout
            thumbnail_size: Displayed image size in pixels
        """
        if layout not in LAYOUTS:
            raise ValueError(f"Unknown layout: {layout}")

        self.manager = manager
        self.layout = layout
        self.window_size = max(1, window_size)
        self.thumbnail_size = thumbnail_size
        self.permission_denied = False
        self.logger = logging.getLogger(__name__)

    def visible_rows(self, offset: int = 0) -> Tuple[List[Tuple[int, Task]], Optional[int]]:
        """
        Rows to render for the current layout

        Args:
            offset: First row of the window (lazy layout only)

        Returns:
            (index, task) pairs and the offset of the next window, or None
        """
        rows = list(enumerate(self.manager.get_tasks()))
        if self.layout == LAYOUT_COLUMN:
            return rows, None

        offset = min(max(0, offset), len(rows))
        end = offset + self.window_size
        next_offset = end if end < len(rows) else None
        return rows[offset:end], next_offset

    def render(self, offset: int = 0) -> str:
        """Render the page as HTML"""
        rows, next_offset = self.visible_rows(offset)
        self.logger.debug(f"Rendering {len(rows)} of {len(self.manager)} tasks ({self.layout})")
        return render_template_string(
            SCREEN_TEMPLATE,
            rows=rows,
            total=len(self.manager),
            layout=self.layout,
            next_offset=next_offset,
            thumbnail_size=self.thumbnail_size,
            permission_denied=self.permission_denied,
        )


SCREEN_TEMPLATE = '''
<!DOCTYPE html>
<html>
<head>
    <title>Task List</title>
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
        body {
            font-family: Arial, sans-serif;
            max-width: 600px;
            margin: 0 auto;
            padding: 16px;
            background: #f5f5f5;
        }
        h1 {
            text-align: center;
            color: #333;
        }
        .section {
            background: white;
            padding: 16px;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        .field {
            width: 100%;
            padding: 10px;
            font-size: 16px;
            box-sizing: border-box;
        }
        .actions {
            display: flex;
            justify-content: space-between;
            gap: 10px;
            margin-top: 8px;
        }
        .actions.stacked {
            flex-direction: column;
        }
        .btn {
            padding: 10px 16px;
            font-size: 16px;
            border: none;
            border-radius: 5px;
            cursor: pointer;
            background: #4CAF50;
            color: white;
        }
        .btn-secondary {
            background: #008CBA;
        }
        .btn-danger {
            background: #f44336;
        }
        .task-list {
            list-style: none;
            padding: 0;
            margin-top: 16px;
        }
        .task-list.scroll {
            max-height: 70vh;
            overflow-y: auto;
        }
        .task {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 8px;
            padding: 8px;
            margin-bottom: 8px;
            background: white;
            border-radius: 5px;
        }
        .task .title {
            flex: 1;
        }
        .notice {
            padding: 10px;
            margin: 10px 0;
            background: #ffe0e0;
            border-radius: 5px;
        }
        .empty {
            text-align: center;
            color: #999;
            padding: 20px;
        }
    </style>
</head>
<body>
    <h1>Task List</h1>

    {% with messages = get_flashed_messages() %}
    {% for message in messages %}
    <div class="notice">{{ message }}</div>
    {% endfor %}
    {% endwith %}
    {% if permission_denied %}
    <div class="notice">Permission denied</div>
    {% endif %}

    <div class="section">
        <form action="{{ url_for('tasklist.add_task') }}" method="post" enctype="multipart/form-data">
            <label for="title">Task Title</label>
            <input class="field" type="text" id="title" name="title">
            <div class="actions{% if layout == 'lazy' %} stacked{% endif %}">
                <label class="btn btn-secondary">
                    Pick Image
                    <input type="file" name="image" accept="image/*" hidden
                           {% if permission_denied %}disabled{% endif %}>
                </label>
                <button type="submit" class="btn">Add Task</button>
            </div>
        </form>
    </div>

    {% if rows %}
    <ul class="task-list{% if layout == 'lazy' %} scroll{% endif %}">
        {% for index, task in rows %}
        <li class="task">
            <span class="title">{{ task.title }}</span>
            {% if task.image_uri %}
            <img src="{{ url_for('tasklist.task_image', filename=task.image_uri.split('/', 1)[1]) }}"
                 width="{{ thumbnail_size }}" height="{{ thumbnail_size }}" alt=""
                 {% if layout == 'lazy' %}loading="lazy"{% endif %}>
            {% endif %}
            <button class="btn btn-secondary" title="Edit Task"
                    onclick="document.getElementById('edit-{{ index }}').showModal()">Edit</button>
            <form action="{{ url_for('tasklist.delete_task', index=index) }}" method="post">
                <input type="hidden" name="current_title" value="{{ task.title }}">
                <input type="hidden" name="current_image_uri" value="{{ task.image_uri or '' }}">
                <button type="submit" class="btn btn-danger" title="Delete Task">Delete</button>
            </form>

            <dialog id="edit-{{ index }}">
                <h2>Edit Task</h2>
                <form action="{{ url_for('tasklist.edit_task', index=index) }}" method="post"
                      enctype="multipart/form-data">
                    <input type="hidden" name="current_title" value="{{ task.title }}">
                    <input type="hidden" name="current_image_uri" value="{{ task.image_uri or '' }}">
                    <label for="new-title-{{ index }}">New Title</label>
                    <input class="field" type="text" id="new-title-{{ index }}" name="title"
                           value="{{ task.title }}">
                    <label class="btn btn-secondary">
                        Pick a new image
                        <input type="file" name="image" accept="image/*" hidden
                               {% if permission_denied %}disabled{% endif %}>
                    </label>
                    <div class="actions">
                        <button type="submit" class="btn">Save</button>
                        <button type="button" class="btn btn-secondary"
                                onclick="this.closest('dialog').close()">Cancel</button>
                    </div>
                </form>
            </dialog>
        </li>
        {% endfor %}
    </ul>
    {% if next_offset is not none %}
    <a class="btn btn-secondary" href="{{ url_for('tasklist.index', offset=next_offset) }}">More tasks</a>
    {% endif %}
    {% else %}
    <div class="empty">
        <p>{% if total %}No more tasks{% else %}No tasks yet{% endif %}</p>
    </div>
    {% endif %}
</body>
</html>
'''
