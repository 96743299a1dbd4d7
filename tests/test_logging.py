"""
Tests for module-prefixed logging
"""

import logging

import pytest
from pytunnel.utils.logging_config import ModuleLogger, ModulePrefixFormatter, configure_logging


@pytest.fixture
def reset_loggers():
    yield
    for name in ModuleLogger.MODULE_PREFIXES:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


class TestModuleLogger:
    """Prefix selection and formatting"""

    def test_prefix_for(self):
        assert ModuleLogger.prefix_for("pytunnel.codec.decoder") == "[CODEC]"
        assert ModuleLogger.prefix_for("pytunnel.tunnel.chat_tunnel") == "[TUNNEL]"
        assert ModuleLogger.prefix_for("pytunnel.utils.compression") == "[ZLIB]"
        assert ModuleLogger.prefix_for("somewhere.else") == "[TUNNEL]"

    def test_formatter_adds_prefix(self):
        formatter = ModulePrefixFormatter("[CODEC]")
        record = logging.LogRecord("pytunnel.codec", logging.INFO, __file__, 1, "hello", None, None)
        assert "[CODEC] INFO - hello" in formatter.format(record)

    def test_configure_logging_sets_levels(self, reset_loggers):
        configure_logging(logging.DEBUG)
        logger = logging.getLogger("pytunnel.tunnel")
        assert logger.level == logging.DEBUG
        assert logger.handlers
        assert logger.propagate is False

        # Configuring twice must not stack handlers
        count = len(logger.handlers)
        configure_logging(logging.WARNING)
        assert len(logger.handlers) == count
        assert logger.level == logging.WARNING
