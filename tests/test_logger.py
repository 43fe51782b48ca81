# tests/test_logger.py
import io
import unittest

from chemistry.utils.logger import Logger, LogLevel
from chemistry.utils.text_formatter import format_amount, strip_formatting

class TestLogger(unittest.TestCase):

    def setUp(self):
        self.stream = io.StringIO()
        self.previous_level = Logger.get_level()
        Logger.set_stream(self.stream)

    def tearDown(self):
        Logger.set_level(self.previous_level)
        Logger.set_stream(None)

    def test_line_format(self):
        Logger.set_level(LogLevel.DEBUG)
        Logger.error("Chemistry", "Invalid transfer mode")
        line = self.stream.getvalue().strip()
        self.assertRegex(line, r"^\[\d\d:\d\d:\d\d\] \[ERROR\] \[Chemistry\] Invalid transfer mode$")

    def test_level_filtering(self):
        Logger.set_level(LogLevel.WARNING)
        Logger.trace("Chemistry", "hidden")
        Logger.info("Chemistry", "hidden")
        Logger.warning("Chemistry", "shown")
        output = self.stream.getvalue()
        self.assertNotIn("hidden", output)
        self.assertIn("[WARN ]", output)

    def test_trace_needs_explicit_level(self):
        Logger.set_level(LogLevel.DEBUG)
        Logger.trace("Chemistry", "chatter")
        self.assertEqual(self.stream.getvalue(), "")
        Logger.set_level(LogLevel.TRACE)
        Logger.trace("Chemistry", "chatter")
        self.assertIn("[TRACE] [Chemistry] chatter", self.stream.getvalue())

class TestTextFormatter(unittest.TestCase):

    def test_format_amount(self):
        self.assertEqual(format_amount(20.0), "20")
        self.assertEqual(format_amount(12.3456), "12.35")
        self.assertEqual(format_amount(2.5), "2.5")
        self.assertEqual(format_amount(-0.0001), "0")

    def test_strip_formatting(self):
        self.assertEqual(strip_formatting("[[ERR]]The Beaker is empty![[/]]"), "The Beaker is empty!")
