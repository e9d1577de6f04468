"""
Task List App Module

Provides the task list screen including:
- TaskListManager: In-memory task list
- ImagePicker / ImageLoader: Task images
- TaskListScreen: Web page rendering
- Flask Blueprint: Page actions and REST API routes
"""

from .models import Task
from .manager import TaskListManager
from .picker import ImagePicker
from .image_loader import ImageLoader
from .screen import TaskListScreen
from .routes import tasklist_bp, init_routes

__all__ = ['Task', 'TaskListManager', 'ImagePicker', 'ImageLoader',
           'TaskListScreen', 'tasklist_bp', 'init_routes']
