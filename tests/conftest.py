"""
Shared fixtures for task list tests
"""

import io
import sys
from pathlib import Path

import pytest
from PIL import Image
from werkzeug.datastructures import FileStorage

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.apps.tasklist import TaskListManager, ImagePicker, ImageLoader, TaskListScreen
from src.web.webserver import TaskListWebServer


def make_png(size=(120, 80), color='red') -> bytes:
    """Encode a solid-colour PNG"""
    buffer = io.BytesIO()
    Image.new('RGB', size, color).save(buffer, format='PNG')
    return buffer.getvalue()


def make_upload(data: bytes, filename: str = 'photo.png') -> FileStorage:
    return FileStorage(stream=io.BytesIO(data), filename=filename, content_type='image/png')


@pytest.fixture()
def picker(tmp_path):
    picker = ImagePicker(media_dir=str(tmp_path / 'media'))
    assert picker.request_permission(), "Temp media directory should be writable"
    return picker


@pytest.fixture()
def manager():
    return TaskListManager()


def build_server(manager, picker, layout='column', window_size=20):
    loader = ImageLoader(picker, size=(64, 64))
    screen = TaskListScreen(manager, layout=layout, window_size=window_size)
    server = TaskListWebServer(manager, picker, loader, screen, secret_key='test')
    server.flask_app.config['TESTING'] = True
    return server


@pytest.fixture()
def client(manager, picker):
    return build_server(manager, picker).flask_app.test_client()
