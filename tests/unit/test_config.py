"""Tests for settings and logger helpers."""

from pathlib import Path
import sys

from loguru import logger

from playlist_catalog.config import (
    Settings,
    get_config,
    get_logger,
    settings,
    setup_loguru_logger,
)


class TestSettings:
    """Test settings loading."""

    def test_defaults(self):
        """Test default values when nothing is configured."""
        config = Settings(_env_file=None)

        assert config.logging.console_level == "INFO"
        assert config.logging.file_level == "DEBUG"
        assert config.logging.log_file is None
        assert config.sorting.collation_table is None

    def test_flat_keys_map_to_nested_groups(self):
        """Test legacy flat names land in their groups."""
        config = Settings(
            _env_file=None,
            console_log_level="WARNING",
            log_file="logs/catalog.log",
            collation_table="tables/allkeys.txt",
        )

        assert config.logging.console_level == "WARNING"
        assert config.logging.log_file == Path("logs/catalog.log")
        assert config.sorting.collation_table == Path("tables/allkeys.txt")

    def test_nested_environment_variables(self, monkeypatch):
        """Test nested delimiter env vars are honoured."""
        monkeypatch.setenv("SORTING__COLLATION_TABLE", "custom/allkeys.txt")
        monkeypatch.setenv("LOGGING__FILE_LEVEL", "ERROR")

        config = Settings(_env_file=None)

        assert config.sorting.collation_table == Path("custom/allkeys.txt")
        assert config.logging.file_level == "ERROR"

    def test_get_config(self):
        """Test flat key access and defaults."""
        assert get_config("COLLATION_TABLE") == settings.sorting.collation_table
        assert get_config("UNKNOWN_KEY", 42) == 42


class TestGetLogger:
    """Test bound loggers."""

    def test_logger_carries_module_context(self):
        """Test records include module and service extras."""
        records = []
        handler_id = logger.add(records.append, level="DEBUG", format="{message}")
        try:
            get_logger("tests.module").debug("hello")
        finally:
            logger.remove(handler_id)

        extra = records[0].record["extra"]
        assert extra["module"] == "tests.module"
        assert extra["service"] == "playlist_catalog"


class TestSetupLoguruLogger:
    """Test sink configuration."""

    def test_file_sink_written_when_configured(self, tmp_path, monkeypatch):
        """Test the log file is written under the configured path."""
        log_file = tmp_path / "logs" / "catalog.log"
        monkeypatch.setattr(settings.logging, "log_file", log_file)

        try:
            setup_loguru_logger()
            get_logger("tests.module").info("catalog ready")
        finally:
            logger.remove()
            logger.add(sys.stderr)

        # Closing the sink archives the file
        written = [p.name for p in log_file.parent.iterdir()]
        assert written
        assert all(name.startswith("catalog") for name in written)

    def test_console_only_without_log_file(self, tmp_path, monkeypatch):
        """Test no file is created when log_file is unset."""
        monkeypatch.setattr(settings.logging, "log_file", None)
        monkeypatch.chdir(tmp_path)

        try:
            setup_loguru_logger(verbose=True)
        finally:
            logger.remove()
            logger.add(sys.stderr)

        assert list(tmp_path.iterdir()) == []
