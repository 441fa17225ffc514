"""
Tests for configuration and logging setup.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from api.config import APIConfig
from utilities.config import CatalogConfig
from utilities.logger import get_logger, setup_logging
from web.config import WebConfig


class TestCatalogConfig:
    """Test cases for CatalogConfig."""

    def test_defaults(self, monkeypatch):
        for name in ("DB_FILE", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
            monkeypatch.delenv(name, raising=False)

        config = CatalogConfig(_env_file=None)

        assert config.db_file == "db.json"
        assert config.get_db_file_path().name == "db.json"
        assert config.get_log_file_path() is None

    def test_log_level_is_normalized(self):
        assert CatalogConfig(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            CatalogConfig(_env_file=None, log_level="chatty")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            CatalogConfig(_env_file=None, log_format="xml")

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DB_FILE", str(tmp_path / "books.json"))

        assert CatalogConfig(_env_file=None).get_db_file_path() == tmp_path / "books.json"


class TestServerConfig:
    """Test cases for the API and web settings."""

    def test_api_port_default(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)

        assert APIConfig(_env_file=None).port == 5500

    def test_api_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")

        assert APIConfig(_env_file=None).port == 8080

    def test_web_backend_host(self, monkeypatch):
        monkeypatch.setenv("WEB_BACKEND_HOST", "http://api.internal:5500")
        monkeypatch.delenv("WEB_PORT", raising=False)

        config = WebConfig(_env_file=None)

        assert config.backend_host == "http://api.internal:5500"
        assert config.port == 3000


class TestLogging:
    """Test cases for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        yield
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        structlog.reset_defaults()

    def test_file_logging_creates_directory(self, tmp_path):
        log_file = tmp_path / "logs" / "catalog.log"

        setup_logging(log_level="INFO", log_format="json", log_file=log_file)

        assert log_file.parent.is_dir()
        assert any(
            isinstance(handler, logging.FileHandler) for handler in logging.getLogger().handlers
        )

    def test_events_reach_log_file(self, tmp_path):
        log_file = tmp_path / "catalog.log"
        setup_logging(log_level="INFO", log_format="json", log_file=log_file)

        get_logger("catalog.storage").error("Error saving books", path="db.json")

        content = log_file.read_text()
        assert "Error saving books" in content
        assert '"path": "db.json"' in content
