"""Tests for logging setup."""

import logging
from pathlib import Path

from console_core.utils.logging_config import (
    SecretRedactingFilter,
    setup_logging,
    setup_logging_from_settings,
)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_returns_named_logger(self):
        """Test the named logger is returned at the requested level."""
        logger = setup_logging("console_core.test", level="DEBUG")

        assert logger.name == "console_core.test"
        assert logging.getLogger().level == logging.DEBUG

    def test_writes_log_file(self, temp_dir: Path):
        """Test a file handler is added and its directory created."""
        log_file = temp_dir / "nested" / "console.log"

        logger = setup_logging("console_core.file", level="INFO", log_file=log_file)
        logger.info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        assert "console_core.file - INFO - hello" in log_file.read_text()

    def test_level_from_env(self, monkeypatch):
        """Test LOG_LEVEL is used when no level is passed."""
        monkeypatch.setenv("LOG_LEVEL", "warning")

        setup_logging("console_core.env")

        assert logging.getLogger().level == logging.WARNING


class TestSecretRedactingFilter:
    """Tests for SecretRedactingFilter."""

    def test_redacts_api_keys(self):
        """Test provider keys are replaced in the formatted message."""
        record = logging.LogRecord(
            "x", logging.WARNING, __file__, 1,
            "upstream said: invalid key %s", ("sk-ant-REDACTED",), None,
        )

        assert SecretRedactingFilter().filter(record) is True
        assert record.getMessage() == "upstream said: invalid key [REDACTED]"

    def test_redacts_service_tokens(self):
        """Test OpenBao tokens are redacted."""
        redactor = SecretRedactingFilter()

        assert redactor.redact("token hvs.ABCDEFGHIJKLMNOPQRST") == "token [REDACTED]"

    def test_leaves_plain_messages(self):
        """Test ordinary messages pass through untouched."""
        record = logging.LogRecord(
            "x", logging.INFO, __file__, 1, "Resolved %s from %s", ("N8N_API_KEY", "env"), None
        )

        SecretRedactingFilter().filter(record)

        assert record.args == ("N8N_API_KEY", "env")
        assert record.getMessage() == "Resolved N8N_API_KEY from env"

    def test_file_output_is_redacted(self, temp_dir: Path):
        """Test configured handlers redact before writing."""
        log_file = temp_dir / "redacted.log"

        logger = setup_logging("console_core.redact", level="INFO", log_file=log_file)
        logger.warning("bad key sk-or-v1-0123456789abcdef")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "sk-or-v1-0123456789abcdef" not in content
        assert "[REDACTED]" in content


class TestSetupLoggingFromSettings:
    """Tests for setup_logging_from_settings."""

    def test_uses_settings_log_file(self, settings):
        """Test the component's daily log file under log_dir is used."""
        logger = setup_logging_from_settings(settings, component="console_cli")
        logger.info("started")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert logger.name == "console_core.console_cli"
        assert settings.get_log_file("console_cli").exists()
