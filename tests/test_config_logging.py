"""
Tests for configuration and structured logging
"""

import json
import logging
import sys

import pytest

from bank_ledger import config as config_module
from bank_ledger.config import LedgerConfig, get_config, reload_config
from bank_ledger.logging_config import (
    JSONFormatter, setup_logging, configure_logging, get_logger, log_action
)


class TestLedgerConfig:
    """Test environment-based configuration"""

    def test_defaults(self, monkeypatch):
        for name in ("LEDGER_LOG_LEVEL", "LEDGER_LOG_FORMAT", "LEDGER_LOG_FILE", "LEDGER_ENABLE_EVENTS"):
            monkeypatch.delenv(name, raising=False)

        cfg = LedgerConfig(_env_file=None)

        assert cfg.log_level == "INFO"
        assert cfg.log_format == "json"
        assert cfg.log_file is None
        assert cfg.enable_events is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LEDGER_ENABLE_EVENTS", "false")

        cfg = LedgerConfig(_env_file=None)

        assert cfg.log_level == "DEBUG"
        assert cfg.enable_events is False

    def test_reload_config(self, monkeypatch):
        original = get_config()
        monkeypatch.setenv("LEDGER_LOG_FORMAT", "text")
        try:
            reloaded = reload_config()
            assert reloaded.log_format == "text"
            assert get_config() is reloaded
        finally:
            config_module.config = original


class TestJSONFormatter:
    """Test JSON log rendering"""

    def _record(self, message="hello", **fields):
        record = logging.LogRecord("bank_ledger.test", logging.INFO, __file__, 1, message, (), None)
        for key, value in fields.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(self._record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert "timestamp" in entry
        assert "action" not in entry

    def test_structured_fields(self):
        record = self._record(action="deposit", resource="account:1", extra={"amount": 5})

        entry = json.loads(JSONFormatter().format(record))

        assert entry["action"] == "deposit"
        assert entry["resource"] == "account:1"
        assert entry["extra"] == {"amount": 5}

    def test_exception_info(self):
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: bad" in entry["exception"]


class TestSetupLogging:
    """Test logger configuration"""

    def teardown_method(self):
        logger = logging.getLogger("bank_ledger")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_setup_logging_json(self):
        logger = setup_logging("DEBUG")

        assert logger.name == "bank_ledger"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        logger = setup_logging(log_format="text")

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_to_file(self, tmp_path):
        log_file = tmp_path / "ledger.log"
        logger = setup_logging(log_file=str(log_file))

        log_action(get_logger("bank_ledger.bank"), "info", "Account created: 1",
                   action="create_account", resource="account:1")
        logger.handlers[0].flush()

        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == "Account created: 1"
        assert entry["action"] == "create_account"

    def test_configure_logging_from_config(self):
        cfg = LedgerConfig(_env_file=None, log_level="WARNING", log_format="text")

        logger = configure_logging(cfg)

        assert logger.level == logging.WARNING

    def test_log_action_respects_level(self, tmp_path):
        log_file = tmp_path / "ledger.log"
        logger = setup_logging(level="WARNING", log_file=str(log_file))

        log_action(get_logger("bank_ledger.bank"), "info", "ignored")
        log_action(get_logger("bank_ledger.bank"), "warning", "kept")
        logger.handlers[0].flush()

        lines = log_file.read_text().strip().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["kept"]

    def test_invalid_level_raises(self):
        with pytest.raises(AttributeError):
            setup_logging("NOT_A_LEVEL")
