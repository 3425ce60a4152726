import io
import unittest
from unittest.mock import MagicMock, patch

from tokenprint.lib.logger import Logger
from tokenprint.lib.token import Token
from tokenprint.report import OutputWriteError, format_line, write_report

EXPECTED = (
    "Token 0: length = 5, data = 10\n"
    "Token 1: length = 3, data = 20\n"
    "Token 2: length = 8, data = 30\n"
)


class TestReport(unittest.TestCase):
    def setUp(self):
        Logger.setup(Logger.INFO)
        Logger._logger.handlers.clear()  # Silence std logs

    def test_format_line(self):
        self.assertEqual(format_line(7, Token(length=255, data=0)), "Token 7: length = 255, data = 0")

    def test_exact_output(self):
        out = io.StringIO()

        count = write_report(out)

        self.assertEqual(count, 3)
        self.assertEqual(out.getvalue(), EXPECTED)

    def test_deterministic(self):
        first, second = io.StringIO(), io.StringIO()
        write_report(first)
        write_report(second)

        self.assertEqual(first.getvalue(), second.getvalue())

    def test_defaults_to_stdout(self):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            write_report()

        self.assertEqual(stdout.getvalue(), EXPECTED)

    def test_line_count_matches_tokens(self):
        tokens = [Token(1, 1), Token(2, 2)]
        out = io.StringIO()

        self.assertEqual(write_report(out, tokens), len(tokens))
        self.assertEqual(len(out.getvalue().splitlines()), len(tokens))

    def test_broken_pipe(self):
        stream = MagicMock()
        stream.write.side_effect = BrokenPipeError(32, "Broken pipe")

        with self.assertRaises(OutputWriteError) as cm:
            write_report(stream)

        self.assertIsInstance(cm.exception.__cause__, BrokenPipeError)

    def test_flush_failure(self):
        stream = MagicMock()
        stream.flush.side_effect = OSError(28, "No space left on device")

        with self.assertRaises(OutputWriteError):
            write_report(stream)

        self.assertEqual(stream.write.call_count, 3)
