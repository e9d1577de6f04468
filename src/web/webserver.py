"""
Flask web server for the task list.
Serves the task list page, its form actions and the JSON API.
"""

from flask import Flask
import logging

from src.apps.tasklist import tasklist_bp, init_routes


class TaskListWebServer:
    """
    Web server hosting the task list screen
    """

    def __init__(self, manager, picker, loader, screen, host: str = '0.0.0.0',
                 port: int = 5000, secret_key: str = 'tasklist', max_upload_mb: int = 16):
        """
        Initialize web server

        Args:
            manager: TaskListManager instance
            picker: ImagePicker instance
            loader: ImageLoader instance
            screen: TaskListScreen instance
            host: Interface to bind
            port: Port to run server on
            secret_key: Flask secret key (flash messages)
            max_upload_mb: Largest accepted image upload
        """
        self.logger = logging.getLogger(__name__)
        self.host = host
        self.port = port
        self.flask_app = Flask(__name__)
        self.flask_app.config['MAX_CONTENT_LENGTH'] = max_upload_mb * 1024 * 1024
        self.flask_app.secret_key = secret_key

        init_routes(manager, picker, loader, screen)
        self.flask_app.register_blueprint(tasklist_bp)

    def run(self):
        """Start the web server (blocks)"""
        self.logger.info(f"Web server starting on {self.host}:{self.port}")
        self.flask_app.run(host=self.host, port=self.port, debug=False, use_reloader=False)
