#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from infosource.logger import Logger, Log, LogLevel, SourceCreationLog, ValidationFailureLog

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is a warning", printed_output)

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)

        printed_output = self.captured_output.getvalue()
        self.assertIn("This is an error", printed_output)

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            self.logger.log(Log("Bad", 99, "unknown"))

    def test_get_and_clear_logs(self):
        self.logger.log(SourceCreationLog(3))
        self.logger.log(ValidationFailureLog("set_probs", ValueError("bad")))
        self.assertEqual(len(self.logger.get_logs()), 2)
        self.assertEqual(len(self.logger.get_logs(SourceCreationLog)), 1)
        self.logger.clear_logs()
        self.assertEqual(self.logger.get_logs(), [])

    def test_save(self):
        self.logger.log(SourceCreationLog(3))
        with tempfile.NamedTemporaryFile(delete=False) as tmp_file:
            tmp_path = tmp_file.name
        try:
            self.logger.save(tmp_path)
            with open(tmp_path) as file:
                content = file.read()
            self.assertIn("Source_creation_log", content)
            self.assertIn("Length: 3", content)
        finally:
            os.remove(tmp_path)

if __name__ == '__main__':
    unittest.main()
