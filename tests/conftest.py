"""
Pytest configuration and fixtures for BotStats tests
Provides shared test fixtures and utilities for all test types
"""

import sys
import tempfile
import shutil
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock
import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_dir = tempfile.mkdtemp(prefix="botstats_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def temp_db_path(temp_dir):
    """Create a temporary database path"""
    yield str(temp_dir / "test.db")


@pytest.fixture
def temp_log_dir(temp_dir):
    """Create a temporary log directory"""
    log_dir = temp_dir / "logs"
    log_dir.mkdir(exist_ok=True)
    yield log_dir


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file"""
    config_path = temp_dir / "test_config.yaml"
    config_content = f"""
database:
  path: "{temp_dir / 'config.db'}"
  retention_days: 30

export:
  indent: 4

logging:
  level: DEBUG
  log_dir: "{temp_dir / 'logs'}"
"""
    config_path.write_text(config_content)
    yield str(config_path)


# ============================================================================
# SAMPLE DATA FIXTURES
# ============================================================================


@pytest.fixture
def sample_batch():
    """Three readings over two days, oldest first"""
    from botstats.storage.models import Sample

    return [
        Sample(created_at=datetime(2021, 1, 1, 0, 0, 0), value=5),
        Sample(created_at=datetime(2021, 1, 1, 12, 0, 0), value=9),
        Sample(created_at=datetime(2021, 1, 2, 3, 0, 0), value=3),
    ]


@pytest.fixture
def mock_bot():
    """A bot that is not backed by any store"""
    from botstats.storage.models import Bot

    return Bot(id=1, name="Forum Bot")


@pytest.fixture
def mock_store(sample_batch, mock_bot):
    """Store stub returning the sample batch for any stat"""
    store = Mock()
    store.get_samples.return_value = sample_batch
    store.get_bot_by_name.return_value = mock_bot
    return store


# ============================================================================
# STORAGE FIXTURES
# ============================================================================


@pytest.fixture
def test_store(temp_db_path):
    """Create a SQLiteStore on a temporary database"""
    from botstats.storage.sqlite_store import SQLiteStore

    yield SQLiteStore(temp_db_path)


@pytest.fixture
def populated_store(test_store):
    """Store with one bot and readings spread over two days"""
    bot = test_store.insert_bot("Forum Bot")
    readings = [
        (datetime(2021, 1, 1, 0, 0, 0), 5, 40),
        (datetime(2021, 1, 1, 12, 0, 0), 9, 42),
        (datetime(2021, 1, 1, 18, 30, 0), 7, 45),
        (datetime(2021, 1, 2, 3, 0, 0), 3, 45),
    ]
    for created_at, posts, members in readings:
        test_store.insert_stats(
            bot.id, created_at, total_posts=posts, total_members=members
        )
    yield test_store


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture
def mock_config(temp_db_path):
    """Create a mock Config object"""
    config_dict = {
        "database": {"path": temp_db_path, "retention_days": 30},
        "export": {"indent": 2},
        "logging": {"level": "INFO"},
    }

    config = Mock()
    config.config = config_dict
    config.get_database_config.return_value = config_dict["database"]
    config.get_export_config.return_value = config_dict["export"]
    config.get_logging_config.return_value = config_dict["logging"]
    config.get.side_effect = lambda key, default=None: {
        "export.indent": 2,
        "database.retention_days": 30,
    }.get(key, default)
    return config


# ============================================================================
# TEST MARKERS
# ============================================================================


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test component interactions"
    )
