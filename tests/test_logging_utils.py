import os
import unittest
from unittest.mock import patch

import logging_utils


class TestLoggingUtils(unittest.TestCase):
    def test_explicit_level_wins(self):
        with patch.dict(os.environ, {"MINISH_LOG_LEVEL": "error"}):
            self.assertEqual("DEBUG", logging_utils.resolve_log_level("debug"))

    def test_environment_level(self):
        with patch.dict(os.environ, {"MINISH_LOG_LEVEL": "info"}):
            self.assertEqual("INFO", logging_utils.resolve_log_level())

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual("WARNING", logging_utils.resolve_log_level())

    def test_configure_logging_replaces_sinks(self):
        with patch.object(logging_utils, "logger") as mock_logger:
            logging_utils.configure_logging("info")

        mock_logger.remove.assert_called_once_with()
        _, kwargs = mock_logger.add.call_args
        self.assertEqual("INFO", kwargs["level"])


if __name__ == "__main__":
    unittest.main()
