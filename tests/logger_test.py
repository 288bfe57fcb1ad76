#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, CodingProgressStep, TreeBuildLog

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
        self.assertEqual(self.logger.logs[0].type_name, "General")
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

    def test_progress_interval(self):
        self.logger.coding_step_interval_count = 2
        for _ in range(4):
            self.logger.log(CodingProgressStep("Encoding symbols", 4))
        self.assertEqual(self.logger.coding_progress_count, 4)
        self.assertEqual(len(self.logger.logs), 0)
        printed_output = self.captured_output.getvalue()
        self.assertIn("Encoding symbols (2/4)", printed_output)
        self.assertIn("Encoding symbols (4/4)", printed_output)
        self.assertNotIn("(1/4)", printed_output)

    def test_get_logs_and_clear(self):
        self.logger.log(TreeBuildLog(3, 2))
        self.logger.log("other")
        self.assertEqual(len(self.logger.get_logs("Tree_build_log")), 1)
        self.assertEqual(len(self.logger.get_logs()), 2)
        self.logger.clear()
        self.assertEqual(self.logger.get_logs(), [])

    def test_save(self):
        self.logger.log(TreeBuildLog(3, 2))
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            self.logger.save(temp_file_name)
            with open(temp_file_name) as file:
                content = file.read()
            self.assertIn("Leaves: 3, Depth: 2", content)
        finally:
            os.remove(temp_file_name)

if __name__ == '__main__':
    unittest.main()
