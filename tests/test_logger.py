# test_logger.py

import logging
from unittest.mock import patch

from termbox.logger import Logger


class TestLogger:

    def test_disabled_logger_uses_null_handler(self):
        logger = Logger("termbox.tests.disabled")
        assert any(isinstance(h, logging.NullHandler) for h in logger._logger.handlers)

    def test_level_methods_forward(self):
        logger = Logger("termbox.tests.forward")
        with patch.object(logger._logger, 'warning') as warning:
            logger.warning("region desync")
        warning.assert_called_once_with("region desync", exc_info=None)

    def test_enabled_logger_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "termbox.log"
        with patch('termbox.logger.logging.basicConfig') as basic_config:
            logger = Logger("termbox.tests.enabled", logging_enabled=True, log_file=str(log_file))
        assert basic_config.call_args.kwargs['filename'] == str(log_file)
        assert logger._logger.level == logging.DEBUG
