"""
Tests for the mathlang-scan command.

Author: xwest
"""

import unittest
import sys
import os
import io
import tempfile
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from mathlang.cli import main
from mathlang.lexer.config import NUMERIC_MODE_ENV


class TestScanCommand(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        env = mock.patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop(NUMERIC_MODE_ENV, None)

    def _write(self, source):
        path = os.path.join(self.tmp.name, "prog.ml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_dumps_tokens(self):
        path = self._write("x=5;")
        code, out, err = self._run([path])

        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[0], f"{path}:1:1\tNAME('x')")
        self.assertEqual(lines[2], f"{path}:1:3\tNUMBER('5' -> 5.0)")
        self.assertEqual(lines[3], f"{path}:1:4\tSYMBOL(';')")

    def test_greedy_flag(self):
        path = self._write("42")
        code, out, _ = self._run([path, "--numbers", "greedy"])

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [f"{path}:1:1\tNUMBER('42' -> 42.0)"])

    def test_greedy_from_env(self):
        path = self._write("42")
        os.environ[NUMERIC_MODE_ENV] = "greedy"
        _, out, _ = self._run([path])
        self.assertEqual(len(out.splitlines()), 1)

    def test_flag_overrides_env(self):
        path = self._write("42")
        os.environ[NUMERIC_MODE_ENV] = "greedy"
        _, out, _ = self._run([path, "--numbers", "single-digit"])
        self.assertEqual(len(out.splitlines()), 2)

    def test_bad_env_mode(self):
        path = self._write("42")
        os.environ[NUMERIC_MODE_ENV] = "hex"
        code, _, err = self._run([path])
        self.assertEqual(code, 2)
        self.assertIn(NUMERIC_MODE_ENV, err)

    def test_reads_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("a + b;")):
            code, out, _ = self._run([])

        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("<stdin>:1:1\tNAME('a')"))

    def test_unterminated_string(self):
        path = self._write('print "oops;\n')
        code, out, err = self._run([path])

        self.assertEqual(code, 1)
        self.assertEqual(out.splitlines(), [f"{path}:1:1\tNAME('print')"])
        self.assertIn("ERROR[L002]: Unterminated string literal", err)

    def test_missing_file(self):
        code, _, err = self._run([os.path.join(self.tmp.name, "nope.ml")])
        self.assertEqual(code, 1)
        self.assertIn("cannot read", err)


if __name__ == '__main__':
    unittest.main()
