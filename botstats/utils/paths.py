"""
Path utilities for BotStats
Provides the default locations for logs, the database and the config file
"""

from pathlib import Path


def get_project_root() -> Path:
    """
    Get absolute path to project root (auto-detected using __file__)

    File structure:
        botstats-project/                   <- project root (returned)
        └── botstats/                       <- package directory
            └── utils/                      <- utils directory
                └── paths.py                <- this file (__file__)

    Returns:
        Absolute Path to project root
    """
    return Path(__file__).parent.parent.parent.resolve()


def get_logs_dir() -> Path:
    """
    Get logs directory path, created if missing

    Returns:
        Absolute Path to logs directory: {project_root}/logs/
    """
    logs_dir = get_project_root() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_db_dir() -> Path:
    """
    Get database directory path, created if missing

    Returns:
        Absolute Path to database directory: {project_root}/db/
    """
    db_dir = get_project_root() / "db"
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir


def get_db_path() -> Path:
    """
    Get default database file path

    Returns:
        Absolute Path to database file: {project_root}/db/botstats.db
    """
    return get_db_dir() / "botstats.db"


def get_config_path() -> Path:
    """Default config file location: {project_root}/config/botstats.yaml"""
    return get_project_root() / "config" / "botstats.yaml"
