import logging
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from logging_config import LOGGER_NAME, set_console_level, setup_logger


class TestSetupLogger(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.log_file = os.path.join(self.tmp_dir, "kitty.log")
        self.logger = logging.getLogger(LOGGER_NAME)
        self.saved_handlers = list(self.logger.handlers)
        self.logger.handlers = []

    def tearDown(self):
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers = self.saved_handlers
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_file_and_console_handlers(self):
        logger = setup_logger(self.log_file)

        self.assertIs(logger, self.logger)
        levels = sorted(h.level for h in logger.handlers)
        self.assertEqual(levels, [logging.DEBUG, logging.INFO])

        logger.debug("START cat_breed")
        for handler in logger.handlers:
            handler.flush()
        with open(self.log_file, encoding="utf-8") as f:
            self.assertIn("DEBUG - ", f.read())

    def test_idempotent(self):
        setup_logger(self.log_file)
        setup_logger(self.log_file)

        self.assertEqual(len(self.logger.handlers), 2)

    def test_log_file_from_environment(self):
        env_log = os.path.join(self.tmp_dir, "from-env.log")
        with patch.dict(os.environ, {"KITTY_LOG_FILE": env_log}):
            logger = setup_logger()

        logger.info("Program started (breed)")
        for handler in logger.handlers:
            handler.flush()
        self.assertTrue(os.path.exists(env_log))
        self.assertFalse(os.path.exists(self.log_file))

    def test_set_console_level_leaves_file_at_debug(self):
        setup_logger(self.log_file)

        set_console_level(logging.DEBUG)

        by_type = {type(h): h.level for h in self.logger.handlers}
        self.assertEqual(by_type[logging.StreamHandler], logging.DEBUG)
        self.assertEqual(by_type[logging.FileHandler], logging.DEBUG)

        set_console_level(logging.WARNING)
        by_type = {type(h): h.level for h in self.logger.handlers}
        self.assertEqual(by_type[logging.StreamHandler], logging.WARNING)
        self.assertEqual(by_type[logging.FileHandler], logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
