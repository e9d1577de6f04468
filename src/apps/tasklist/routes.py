"""
Task List Routes

Flask Blueprint for the task list page, its form actions and the JSON API.
"""

import logging
from flask import Blueprint, Response, abort, flash, jsonify, redirect, request, url_for

from .errors import InvalidImageError, PermissionDeniedError, TaskNotFoundError
from .picker import REFERENCE_PREFIX
from .models import Task

# Create Blueprint
tasklist_bp = Blueprint('tasklist', __name__)
logger = logging.getLogger(__name__)

# Set by init_routes
task_manager = None
image_picker = None
image_loader = None
task_screen = None


def init_routes(manager, picker, loader, screen):
    """
    Initialize routes with the task list components

    Args:
        manager: TaskListManager instance
        picker: ImagePicker instance
        loader: ImageLoader instance
        screen: TaskListScreen instance
    """
    global task_manager, image_picker, image_loader, task_screen
    task_manager = manager
    image_picker = picker
    image_loader = loader
    task_screen = screen
    logger.info("Initialized task list routes")


def _posted_task(index: int) -> Task:
    """Task a row form was rendered for, falling back to the task at its position"""
    if 'current_title' in request.form:
        return Task(request.form['current_title'], request.form.get('current_image_uri') or None)
    return task_manager.get_task(index)


def _json_fields(data, current: Task = None):
    """
    Read title and image_uri from a JSON body

    Args:
        data: Parsed JSON body
        current: Task being edited; missing fields keep its values

    Returns:
        (title, image_uri) tuple

    Raises:
        ValueError: If the body or a field has the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')

    title = data.get('title', current.title if current else '')
    if not isinstance(title, str):
        raise ValueError('Task title must be a string')

    image_uri = data['image_uri'] if 'image_uri' in data else (current.image_uri if current else None)
    if image_uri is not None:
        if not isinstance(image_uri, str) or image_picker.resolve(image_uri) is None:
            raise ValueError('Invalid image reference')

    return title, image_uri


# ---- Page ----

@tasklist_bp.route('/')
def index():
    """Task list page"""
    offset = request.args.get('offset', 0, type=int)
    return task_screen.render(offset)


@tasklist_bp.route('/tasks', methods=['POST'])
def add_task():
    """Add a task from the form"""
    title = request.form.get('title', '')
    if not title:
        return redirect(url_for('tasklist.index'))

    try:
        image_uri = image_picker.pick(request.files.get('image'))
    except (InvalidImageError, PermissionDeniedError) as e:
        flash(str(e))
        return redirect(url_for('tasklist.index'))

    task_manager.add_task(title, image_uri)
    return redirect(url_for('tasklist.index'))


@tasklist_bp.route('/tasks/<int:index>/edit', methods=['POST'])
def edit_task(index):
    """Save the edit dialog"""
    try:
        task = _posted_task(index)
        if task not in task_manager.tasks:
            raise TaskNotFoundError(f"Task not found: {task.title}")

        new_image = image_picker.pick(request.files.get('image'))
        task_manager.edit_task(
            task,
            request.form.get('title', task.title),
            new_image if new_image is not None else task.image_uri
        )
    except TaskNotFoundError:
        flash("Task no longer exists")
    except (InvalidImageError, PermissionDeniedError) as e:
        flash(str(e))

    return redirect(url_for('tasklist.index'))


@tasklist_bp.route('/tasks/<int:index>/delete', methods=['POST'])
def delete_task(index):
    """Delete a task row"""
    try:
        task = _posted_task(index)
    except TaskNotFoundError:
        task = None

    if task is None or not task_manager.remove_task(task):
        flash("Task no longer exists")

    return redirect(url_for('tasklist.index'))


@tasklist_bp.route('/media/<filename>')
def task_image(filename):
    """Thumbnail of a task image"""
    if image_picker.resolve(REFERENCE_PREFIX + filename) is None:
        abort(404)
    return Response(image_loader.thumbnail_png(REFERENCE_PREFIX + filename), mimetype='image/png')


# ---- JSON API ----

@tasklist_bp.route('/api/tasks', methods=['GET'])
def api_get_tasks():
    """Get all tasks"""
    return jsonify({'tasks': [task.to_dict() for task in task_manager.get_tasks()]})


@tasklist_bp.route('/api/tasks', methods=['POST'])
def api_add_task():
    """Add a task"""
    try:
        try:
            title, image_uri = _json_fields(request.get_json(silent=True) or {})
        except ValueError as e:
            return jsonify({'error': str(e)}), 400

        task = task_manager.add_task(title, image_uri)
        if task is None:
            return jsonify({'error': 'Task title is required'}), 400

        return jsonify({'success': True, 'task': task.to_dict()}), 201

    except Exception as e:
        logger.error(f"Failed to add task: {e}")
        return jsonify({'error': str(e)}), 500


@tasklist_bp.route('/api/tasks/<int:index>', methods=['PATCH'])
def api_edit_task(index):
    """Edit the task at a row"""
    try:
        task = task_manager.get_task(index)
        title, image_uri = _json_fields(request.get_json(silent=True) or {}, task)
        updated = task_manager.edit_task(task, title, image_uri)
        return jsonify({'success': True, 'task': updated.to_dict()})

    except TaskNotFoundError:
        return jsonify({'error': 'Task not found'}), 404
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Failed to edit task: {e}")
        return jsonify({'error': str(e)}), 500


@tasklist_bp.route('/api/tasks/<int:index>', methods=['DELETE'])
def api_delete_task(index):
    """Delete the task at a row"""
    try:
        task = task_manager.get_task(index)
        task_manager.remove_task(task)
        return jsonify({'success': True})

    except TaskNotFoundError:
        return jsonify({'error': 'Task not found'}), 404
    except Exception as e:
        logger.error(f"Failed to delete task: {e}")
        return jsonify({'error': str(e)}), 500


@tasklist_bp.route('/api/images', methods=['POST'])
def api_pick_image():
    """Store an uploaded image and return its reference"""
    try:
        reference = image_picker.pick(request.files.get('image'))
    except PermissionDeniedError as e:
        return jsonify({'error': str(e)}), 403
    except InvalidImageError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({'image_uri': reference})
