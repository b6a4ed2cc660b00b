"""Tests for logging configuration utilities."""

import json
import logging
from pathlib import Path
import sys

from springr.core.config.loader import configure_logging as configure_logging_from_config
from springr.core.config.models import AppConfig, LoggingConfig
from springr.core.utils.logging import configure_logging, get_logger


def _flush_root() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_text_format_to_file(self, tmp_path: Path) -> None:
        """Test text logs use the given format string."""
        log_file = tmp_path / "springr.log"
        configure_logging(
            level="debug", format_string="%(levelname)s|%(message)s", filename=str(log_file)
        )

        logging.getLogger("springr.test").debug("seeded gamma")
        _flush_root()

        assert log_file.read_text(encoding="utf-8").strip() == "DEBUG|seeded gamma"

    def test_structured_json_to_file(self, tmp_path: Path) -> None:
        """Test structured logs are one JSON object per line with extra context."""
        log_file = tmp_path / "springr.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)

        logging.getLogger("springr.test").info("derived", extra={"preset": "mobile"})
        _flush_root()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert entry["level"] == "INFO"
        assert entry["message"] == "derived"
        assert entry["context"]["logger_name"] == "springr.test"
        assert entry["context"]["preset"] == "mobile"
        assert "msg" not in entry["context"]

    def test_level_filters(self, tmp_path: Path) -> None:
        """Test messages below the level are dropped."""
        log_file = tmp_path / "springr.log"
        configure_logging(level="WARNING", filename=str(log_file))

        logging.getLogger("springr.test").info("hidden")
        _flush_root()

        assert log_file.read_text(encoding="utf-8") == ""

    def test_defaults_to_stderr(self) -> None:
        """Test logs go to stderr when no file is given."""
        configure_logging(level="INFO")

        (handler,) = logging.getLogger().handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_configure_from_app_config(self) -> None:
        """Test the config-driven wrapper sets the root level."""
        config = AppConfig(logging=LoggingConfig(level="ERROR"))
        configure_logging_from_config(config)

        assert logging.getLogger().level == logging.ERROR


class TestGetLogger:
    """Tests for get_logger."""

    def test_plain_logger(self) -> None:
        """Test get_logger without context returns a Logger."""
        assert isinstance(get_logger("springr.test"), logging.Logger)

    def test_adapter_with_context(self) -> None:
        """Test context kwargs wrap the logger in a LoggerAdapter."""
        adapter = get_logger("springr.test", preset="long")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"preset": "long"}
