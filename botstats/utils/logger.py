"""
Centralized logging utility with daily file rotation
A new log file is opened at midnight, named after the date
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from botstats.utils.paths import get_logs_dir


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


class DailyRotatingLogger:
    """Logger that switches to a new file each day"""

    def __init__(self, name: str = "botstats", log_dir: Optional[Path] = None):
        """
        Initialize daily rotating logger

        Args:
            name: Base name for log files and the parent logger
            log_dir: Directory for log files (defaults to the project logs dir)
        """
        self.log_dir = Path(log_dir) if log_dir else get_logs_dir()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.name = name
        self.current_date = None
        self.file_handler = None
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = True  # keeps caplog working in tests
        self._setup_handler()

    def _get_log_filename(self) -> Path:
        """Log filename for today"""
        date_str = datetime.now().strftime('%Y-%m-%d')
        return self.log_dir / f"{self.name}-{date_str}.log"

    def _setup_handler(self):
        """Setup or rotate file handler based on date"""
        current_date = datetime.now().date()

        if self.current_date == current_date:
            return

        if self.file_handler:
            self.logger.removeHandler(self.file_handler)
            self.file_handler.close()

        log_file = self._get_log_filename()
        self.file_handler = logging.FileHandler(log_file, mode='a')
        self.file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        )

        self.logger.addHandler(self.file_handler)
        self.current_date = current_date

        self.logger.debug(f"Log rotation: writing to {log_file}")

    def close(self):
        """Detach and close the current file handler"""
        if self.file_handler:
            self.logger.removeHandler(self.file_handler)
            self.file_handler.close()
            self.file_handler = None
            self.current_date = None

    def get_logger(self, module_name: str) -> logging.Logger:
        """
        Get logger for a module, rotating first if midnight has passed

        Args:
            module_name: Name of the module requesting logger

        Returns:
            Child logger of the daily rotating parent
        """
        self._setup_handler()

        # Modules inside the package already carry the prefix
        if module_name == self.name or module_name.startswith(f"{self.name}."):
            return logging.getLogger(module_name)
        return logging.getLogger(f"{self.name}.{module_name}")


_daily_logger: Optional[DailyRotatingLogger] = None


def get_logger(module_name: str) -> logging.Logger:
    """
    Get a logger instance with daily rotation

    All BotStats modules log through this function. Output goes to
    botstats-YYYY-MM-DD.log in the logs directory.

    Args:
        module_name: Name of the module requesting logger (typically __name__)

    Returns:
        Logger instance configured for daily rotation

    Example:
        from botstats.utils.logger import get_logger
        logger = get_logger(__name__)
        logger.info("Recorded stats for bot")
    """
    global _daily_logger
    if _daily_logger is None:
        _daily_logger = DailyRotatingLogger()
    return _daily_logger.get_logger(module_name)


def initialize_logging(log_dir: Optional[str] = None):
    """
    Initialize the logging system

    Called once at application startup. Replaces any previous file handler.

    Args:
        log_dir: Optional override for the log directory
    """
    global _daily_logger
    if _daily_logger is not None:
        _daily_logger.close()
    _daily_logger = DailyRotatingLogger(log_dir=Path(log_dir) if log_dir else None)


def get_current_log_file() -> Optional[Path]:
    """
    Get the path to the current day's log file

    Returns:
        Path to current log file, or None if logging not initialized
    """
    if _daily_logger is None:
        return None
    return _daily_logger._get_log_filename()
