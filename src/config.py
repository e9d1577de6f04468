"""
Configuration management for the task list app.
Loads config.yaml over built-in defaults and checks the values the app relies on.
"""

import copy
import yaml
import os
from typing import Any, Dict
import logging

LAYOUTS = ('column', 'lazy')

DEFAULTS: Dict[str, Any] = {
    'web': {
        'host': '0.0.0.0',
        'port': 5000,
        'secret_key': 'tasklist',
        'max_upload_mb': 16,
    },
    'tasklist': {
        'layout': 'column',
        'window_size': 20,
    },
    'images': {
        'media_directory': 'data/media',
        'allowed_extensions': ['.png', '.jpg', '.jpeg', '.gif', '.bmp', '.webp'],
        'thumbnail_size': 64,
    },
    'logging': {
        'level': 'INFO',
        'console': True,
        'file': None,
    },
}


class Config:
    """
    Application configuration, defaults filled in for missing keys
    """

    def __init__(self, config_path: str):
        """
        Load configuration from YAML file

        Args:
            config_path: Path to config.yaml

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a setting has an unusable value
        """
        self.logger = logging.getLogger(__name__)

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration must be a mapping: {config_path}")

        self._config = copy.deepcopy(DEFAULTS)
        self._merge(self._config, loaded)

        # Expand ~ and environment variables in paths
        self._expand_paths(self._config)
        self.validate()

        self.logger.info(f"Configuration loaded from {config_path}")

    def _merge(self, base: Dict, overrides: Dict):
        """Recursively overlay loaded sections onto the defaults"""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _expand_paths(self, config: Dict):
        for key, value in config.items():
            if isinstance(value, dict):
                self._expand_paths(value)
            elif isinstance(value, str) and ('$' in value or '~' in value):
                config[key] = os.path.expandvars(os.path.expanduser(value))

    def validate(self):
        """
        Check layout and size settings

        Raises:
            ValueError: On the first unusable value
        """
        layout = self.get('tasklist.layout')
        if layout not in LAYOUTS:
            raise ValueError(f"tasklist.layout must be one of {', '.join(LAYOUTS)}, got {layout!r}")

        for path in ('tasklist.window_size', 'images.thumbnail_size', 'web.port', 'web.max_upload_mb'):
            value = self.get(path)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{path} must be a positive integer, got {value!r}")

        extensions = self.get('images.allowed_extensions')
        if not isinstance(extensions, list) or not all(isinstance(ext, str) for ext in extensions):
            raise ValueError("images.allowed_extensions must be a list of strings")

        level = self.get('logging.level')
        if not isinstance(level, str) or not isinstance(getattr(logging, level.upper(), None), int):
            raise ValueError(f"logging.level is not a logging level: {level!r}")

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'web.port')
            default: Default value if path doesn't exist

        Returns:
            Configuration value
        """
        value = self._config

        for key in path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, path: str, value: Any):
        """
        Set configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'tasklist.layout')
            value: Value to set
        """
        keys = path.split('.')
        config = self._config

        for key in keys[:-1]:
            config = config.setdefault(key, {})

        config[keys[-1]] = value
        self.logger.debug(f"Config set: {path} = {value}")
