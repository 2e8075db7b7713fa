"""Logging setup."""

import logging
from pathlib import Path

from loguru import logger

from src.catalog.api.utils.app_startup import InterceptHandler, configure_logging
from src.catalog.runtime.config.config_data import ConfigData, LoggingConfig


def _console_only() -> ConfigData:
    return ConfigData(logging=LoggingConfig(file=None))


class TestConfigureLogging:
    def test_file_sink_created(self, tmp_path: Path):
        log_file = tmp_path / "nested" / "catalog.log"
        try:
            configure_logging(ConfigData(logging=LoggingConfig(file=str(log_file))))
            logger.info("hello")
            logger.complete()

            assert log_file.exists()
            assert "hello" in log_file.read_text()
        finally:
            configure_logging(_console_only())

    def test_stdlib_logging_is_intercepted(self):
        try:
            configure_logging(_console_only())

            assert any(
                isinstance(handler, InterceptHandler)
                for handler in logging.getLogger().handlers
            )
        finally:
            configure_logging(_console_only())

    def test_stdlib_records_reach_loguru(self):
        messages: list[str] = []
        configure_logging(_console_only())
        sink_id = logger.add(lambda message: messages.append(message.record["message"]))
        try:
            logging.getLogger("catalog.test").warning("from stdlib")
        finally:
            logger.remove(sink_id)

        assert "from stdlib" in messages
