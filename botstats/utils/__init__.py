"""Utility modules for BotStats"""

from botstats.utils.logger import get_logger, initialize_logging, get_current_log_file
from botstats.utils.paths import (
    get_project_root,
    get_logs_dir,
    get_db_dir,
    get_db_path,
    get_config_path,
)

__all__ = [
    # Logger utilities
    "get_logger",
    "initialize_logging",
    "get_current_log_file",
    # Path utilities
    "get_project_root",
    "get_logs_dir",
    "get_db_dir",
    "get_db_path",
    "get_config_path",
]
