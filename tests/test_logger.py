"""Tests for pensar_ci.logger."""

import io
import sys
import unittest

from pensar_ci.logger import log_fail, log_info, log_pass, log_warn


def _capture(func, msg, stream="stdout"):
    captured = io.StringIO()
    old = getattr(sys, stream)
    setattr(sys, stream, captured)
    try:
        func(msg)
    finally:
        setattr(sys, stream, old)
    return captured.getvalue()


class TestLogInfo(unittest.TestCase):
    def test_output_contains_info_prefix(self):
        output = _capture(log_info, "Dispatching scan")
        self.assertIn("INFO", output)
        self.assertIn("Dispatching scan", output)

    def test_output_contains_ansi_cyan(self):
        self.assertIn("\033[96m", _capture(log_info, "test"))


class TestLogPass(unittest.TestCase):
    def test_output_contains_pass_prefix(self):
        output = _capture(log_pass, "No issues found")
        self.assertIn("PASS", output)
        self.assertIn("No issues found", output)

    def test_output_contains_ansi_green(self):
        self.assertIn("\033[92m", _capture(log_pass, "test"))


class TestLogWarn(unittest.TestCase):
    def test_writes_to_stderr(self):
        output = _capture(log_warn, "Using dev environment", stream="stderr")
        self.assertIn("WARN", output)
        self.assertIn("Using dev environment", output)
        self.assertIn("\033[93m", output)

    def test_nothing_on_stdout(self):
        old_stderr = sys.stderr
        sys.stderr = io.StringIO()
        try:
            output = _capture(log_warn, "test")
        finally:
            sys.stderr = old_stderr
        self.assertEqual(output, "")


class TestLogFail(unittest.TestCase):
    def test_writes_to_stderr(self):
        output = _capture(log_fail, "Scan failed", stream="stderr")
        self.assertIn("FAIL", output)
        self.assertIn("Scan failed", output)
        self.assertIn("\033[91m", output)


if __name__ == "__main__":
    unittest.main()
