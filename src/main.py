"""
Task List - Main Application
Single-screen to-do list served over HTTP
"""

import sys
import os
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import Config
from src.apps.tasklist import TaskListManager, ImagePicker, ImageLoader, TaskListScreen
from src.web.webserver import TaskListWebServer


class TaskListApp:
    """
    Main task list application
    """

    def __init__(self, config_path: str):
        """
        Initialize application

        Args:
            config_path: Path to config.yaml
        """
        # Load configuration
        self.config = Config(config_path)

        # Setup logging
        self._setup_logging()
        self.logger = logging.getLogger(__name__)
        self.logger.info("=" * 50)
        self.logger.info("Task List starting...")
        self.logger.info("=" * 50)

        # Tasks live only as long as the app
        self.manager = TaskListManager()
        self.change_count = 0
        self.manager.add_listener(self._on_tasks_changed)

        thumbnail_size = self.config.get('images.thumbnail_size')
        self.picker = ImagePicker(
            media_dir=self.config.get('images.media_directory'),
            allowed_extensions=self.config.get('images.allowed_extensions')
        )
        self.loader = ImageLoader(self.picker, size=(thumbnail_size, thumbnail_size))

        self.screen = TaskListScreen(
            self.manager,
            layout=self.config.get('tasklist.layout'),
            window_size=self.config.get('tasklist.window_size'),
            thumbnail_size=thumbnail_size
        )

        self.web_server = TaskListWebServer(
            self.manager,
            self.picker,
            self.loader,
            self.screen,
            host=self.config.get('web.host'),
            port=self.config.get('web.port'),
            secret_key=self.config.get('web.secret_key'),
            max_upload_mb=self.config.get('web.max_upload_mb')
        )

    def _on_tasks_changed(self, action: str, task):
        """Count list changes for the shutdown summary"""
        self.change_count += 1
        self.logger.debug(f"Task list {action} #{self.change_count}: {len(self.manager)} tasks")

    def _setup_logging(self):
        """Configure logging"""
        log_level = getattr(logging, self.config.get('logging.level').upper())
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        handlers = []

        # Console handler
        if self.config.get('logging.console'):
            handlers.append(logging.StreamHandler())

        # File handler
        log_file = self.config.get('logging.file')
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format=log_format,
            handlers=handlers
        )

    def request_permissions(self) -> bool:
        """Ask for media access; the screen shows a notice if it is denied"""
        granted = self.picker.request_permission()
        self.screen.permission_denied = not granted
        if not granted:
            self.logger.warning("Image picking disabled: permission denied")
        return granted

    def start(self):
        """Start the application"""
        self.request_permissions()

        try:
            self.web_server.run()
        except KeyboardInterrupt:
            self.logger.info("Received interrupt signal")
        finally:
            self.logger.info(f"Task List stopped ({self.change_count} changes, {len(self.manager)} tasks discarded)")


def main():
    """Main entry point"""
    # Determine config path
    if len(sys.argv) > 1:
        config_path = sys.argv[1]
    else:
        config_path = os.environ.get(
            'TASKLIST_CONFIG',
            os.path.join(os.path.dirname(__file__), '../config/config.yaml')
        )

    # Ensure config exists
    if not os.path.exists(config_path):
        print(f"ERROR: Configuration file not found: {config_path}")
        print(f"Usage: python3 {sys.argv[0]} [config_path]")
        sys.exit(1)

    app = TaskListApp(config_path)
    app.start()


if __name__ == '__main__':
    main()
