"""
Unit tests for botstats.utils.paths module
"""

import pytest
from unittest.mock import patch

from botstats.utils import paths


class TestPaths:
    """Test suite for default path helpers"""

    @pytest.mark.unit
    def test_project_root_contains_package(self):
        assert (paths.get_project_root() / "botstats" / "utils" / "paths.py").exists()

    @pytest.mark.unit
    def test_db_path_under_db_dir(self, temp_dir):
        with patch("botstats.utils.paths.get_project_root", return_value=temp_dir):
            db_path = paths.get_db_path()

        assert db_path == temp_dir / "db" / "botstats.db"
        assert db_path.parent.is_dir()

    @pytest.mark.unit
    def test_logs_dir_is_created(self, temp_dir):
        with patch("botstats.utils.paths.get_project_root", return_value=temp_dir):
            logs_dir = paths.get_logs_dir()

        assert logs_dir == temp_dir / "logs"
        assert logs_dir.is_dir()

    @pytest.mark.unit
    def test_config_path(self, temp_dir):
        with patch("botstats.utils.paths.get_project_root", return_value=temp_dir):
            assert paths.get_config_path() == temp_dir / "config" / "botstats.yaml"
