"""
Tests for configuration loading and application wiring
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import Config
from src.main import TaskListApp


def write_config(tmp_path, layout='column') -> str:
    config_file = tmp_path / 'config.yaml'
    config_file.write_text(
        "web:\n"
        "  port: 5055\n"
        "  secret_key: test\n"
        "tasklist:\n"
        f"  layout: {layout}\n"
        "  window_size: 3\n"
        "images:\n"
        f"  media_directory: {tmp_path / 'media'}\n"
        "  thumbnail_size: 32\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    return str(config_file)


def test_config_dot_paths(tmp_path):
    config = Config(write_config(tmp_path))

    assert config.get('web.port') == 5055
    assert config.get('web.missing', 'fallback') == 'fallback'
    assert config.get('tasklist.layout.deeper') is None

    config.set('tasklist.layout', 'lazy')
    config.set('new.section.key', 1)
    assert config.get('tasklist.layout') == 'lazy'
    assert config.get('new.section.key') == 1


def test_config_expands_home(tmp_path, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    config_file = tmp_path / 'config.yaml'
    config_file.write_text("images:\n  media_directory: ~/media\n")

    config = Config(str(config_file))
    assert config.get('images.media_directory') == str(tmp_path / 'media')


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / 'nope.yaml'))


def test_app_wiring(tmp_path):
    """The app builds every component from config"""
    app = TaskListApp(write_config(tmp_path, layout='lazy'))

    assert app.request_permissions()
    assert not app.screen.permission_denied
    assert app.screen.layout == 'lazy'
    assert app.screen.window_size == 3
    assert app.loader.size == (32, 32)
    assert app.web_server.port == 5055

    client = app.web_server.flask_app.test_client()
    client.post('/api/tasks', json={'title': 'Wired'})
    assert [task.title for task in app.manager.get_tasks()] == ['Wired']


def test_app_rejects_unknown_layout(tmp_path):
    with pytest.raises(ValueError):
        TaskListApp(write_config(tmp_path, layout='grid'))


def test_config_fills_defaults(tmp_path):
    """Keys missing from the file fall back to built-in defaults"""
    config_file = tmp_path / 'config.yaml'
    config_file.write_text("web:\n  port: 6000\n")

    config = Config(str(config_file))
    assert config.get('web.port') == 6000
    assert config.get('web.host') == '0.0.0.0', "Sibling keys keep their defaults"
    assert config.get('tasklist.layout') == 'column'
    assert config.get('images.thumbnail_size') == 64


@pytest.mark.parametrize('body', [
    "tasklist:\n  layout: grid\n",
    "tasklist:\n  window_size: 0\n",
    "tasklist:\n  window_size: many\n",
    "images:\n  thumbnail_size: -4\n",
    "images:\n  thumbnail_size: true\n",
    "images:\n  allowed_extensions: .png\n",
    "logging:\n  level: LOUD\n",
    "- just\n- a list\n",
])
def test_config_rejects_bad_values(tmp_path, body):
    config_file = tmp_path / 'config.yaml'
    config_file.write_text(body)

    with pytest.raises(ValueError):
        Config(str(config_file))


def test_app_counts_task_changes(tmp_path):
    """The app listens to list mutations"""
    app = TaskListApp(write_config(tmp_path))
    client = app.web_server.flask_app.test_client()

    client.post('/api/tasks', json={'title': 'One'})
    client.patch('/api/tasks/0', json={'title': 'Uno'})
    client.post('/api/tasks', json={'title': ''})
    client.delete('/api/tasks/0')

    assert app.change_count == 3, f"Expected 3 changes, got {app.change_count}"


def test_package_readme_exists():
    """pyproject's readme points at a file shipped with the project"""
    root = Path(__file__).parent.parent
    readme = None
    for line in (root / 'pyproject.toml').read_text().splitlines():
        if line.startswith('readme'):
            readme = line.split('=', 1)[1].strip().strip('"')

    assert readme == 'README.md'
    assert (root / readme).exists()
