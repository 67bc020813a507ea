import logging
from unittest.mock import patch

from flashq.logging import TEXT_FORMAT, configure_logging


class TestConfigureLogging:
    def test_text_format(self):
        with patch("flashq.logging.settings") as mock_settings:
            mock_settings.log_level = "debug"
            mock_settings.log_json = False
            mock_settings.flash_log_level = ""
            configure_logging()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == TEXT_FORMAT

    def test_json_format(self):
        with patch("flashq.logging.settings") as mock_settings:
            mock_settings.log_level = "INFO"
            mock_settings.log_json = True
            mock_settings.flash_log_level = ""
            configure_logging()

        root = logging.getLogger()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(handler.formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self):
        with patch("flashq.logging.settings") as mock_settings:
            mock_settings.log_level = "chatty"
            mock_settings.log_json = False
            mock_settings.flash_log_level = ""
            configure_logging()

        assert logging.getLogger().level == logging.INFO

    def test_flash_log_level_tunes_package_logger(self):
        with patch("flashq.logging.settings") as mock_settings:
            mock_settings.log_level = "WARNING"
            mock_settings.log_json = False
            mock_settings.flash_log_level = "debug"
            configure_logging()

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("flashq").level == logging.DEBUG
        assert logging.getLogger("flashq.queue").isEnabledFor(logging.DEBUG)

    def test_empty_flash_log_level_follows_root(self):
        with patch("flashq.logging.settings") as mock_settings:
            mock_settings.log_level = "INFO"
            mock_settings.log_json = False
            mock_settings.flash_log_level = ""
            configure_logging()

        assert logging.getLogger("flashq").level == logging.NOTSET
