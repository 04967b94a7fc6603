"""
Configuration management for BotStats
"""

import copy
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from botstats.utils.logger import get_logger
from botstats.utils.paths import get_config_path, get_db_path, get_logs_dir, get_project_root


logger = get_logger(__name__)


class Config:
    """Configuration manager for BotStats"""

    DEFAULT_CONFIG_PATHS = [
        str(get_config_path()),
    ]

    # Relative values for these keys are taken from the project root, not the cwd
    PATH_KEYS = [('database', 'path'), ('logging', 'log_dir')]

    DEFAULT_CONFIG = {
        'database': {
            'path': str(get_db_path()),
            'retention_days': 365,
        },
        'export': {
            'indent': 2,
        },
        'logging': {
            'level': 'INFO',
            'log_dir': str(get_logs_dir()),
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration

        Args:
            config_path: Optional path to config file. If None, searches default paths.
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file or use defaults"""
        config_file = None

        if self.config_path:
            config_file = Path(self.config_path)
            if not config_file.exists():
                logger.warning(f"Config file not found: {self.config_path}")
                config_file = None
        else:
            for path in self.DEFAULT_CONFIG_PATHS:
                expanded = Path(path).expanduser()
                if expanded.exists():
                    config_file = expanded
                    logger.info(f"Using config file: {config_file}")
                    break

        if config_file:
            try:
                with open(config_file, 'r') as f:
                    loaded_config = yaml.safe_load(f) or {}
                if not isinstance(loaded_config, dict):
                    raise ValueError("top-level YAML value must be a mapping")
                # Loaded config takes precedence over defaults
                config = self._deep_merge(copy.deepcopy(self.DEFAULT_CONFIG), loaded_config)
                return self._resolve_paths(config)
            except (OSError, yaml.YAMLError, ValueError) as e:
                logger.error(f"Error loading config file {config_file}: {e}")

        logger.info("Using default configuration")
        return copy.deepcopy(self.DEFAULT_CONFIG)

    def _resolve_paths(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Anchor relative database and log paths at the project root"""
        for section, key in self.PATH_KEYS:
            values = config.get(section)
            if not isinstance(values, dict) or not values.get(key):
                continue
            path = Path(values[key]).expanduser()
            if not path.is_absolute():
                path = get_project_root() / path
            values[key] = str(path)
        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated path

        Args:
            key_path: Dot-separated path (e.g., 'database.path')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config

        for key in key_path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_database_config(self) -> Dict[str, Any]:
        """Get database configuration"""
        return self.config.get('database', {})

    def get_export_config(self) -> Dict[str, Any]:
        """Get export configuration"""
        return self.config.get('export', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration"""
        return self.config.get('logging', {})
