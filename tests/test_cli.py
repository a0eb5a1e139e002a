"""
Tests for the lox-scan command line driver.

Author: xwest
"""

import io
import json
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.cli import main, EXIT_OK, EXIT_DATAERR, EXIT_NOINPUT


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, name: str, source: str) -> str:
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(argv)
        return status, out.getvalue(), err.getvalue()

    def test_prints_tokens(self):
        path = self._write("ok.lox", "var x = 1;")
        status, out, err = self._run([path])

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(out.splitlines(), [
            "VAR var null",
            "IDENTIFIER x null",
            "EQUAL = null",
            "NUMBER 1 1.0",
            "SEMICOLON ; null",
            "EOF  null",
        ])
        self.assertEqual(err, "")

    def test_json_output(self):
        path = self._write("s.lox", 'print "a\nb";')
        status, out, _ = self._run(["--format", "json", path])

        self.assertEqual(status, EXIT_OK)
        tokens = json.loads(out)
        self.assertEqual([t["type"] for t in tokens], ["PRINT", "STRING", "SEMICOLON", "EOF"])
        self.assertEqual(tokens[1]["literal"], "a\nb")
        self.assertEqual(tokens[1]["line"], 1)
        self.assertEqual(tokens[-1]["line"], 2)

    def test_lexical_error_exit_status(self):
        path = self._write("bad.lox", "1 @\n\"open")
        status, out, err = self._run([path])

        self.assertEqual(status, EXIT_DATAERR)
        self.assertIn("EOF", out)
        self.assertIn("[line 1] Error: Unexpected character.", err)
        self.assertIn("[line 2] Error: Unterminated string.", err)

    def test_quiet(self):
        path = self._write("q.lox", "a b c")
        status, out, _ = self._run(["--quiet", path])

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(out, "")

    def test_missing_file(self):
        status, out, err = self._run([os.path.join(self.tmp.name, "nope.lox")])

        self.assertEqual(status, EXIT_NOINPUT)
        self.assertEqual(out, "")
        self.assertIn("cannot read", err)

    def test_diagnostics_name_the_file(self):
        path = self._write("named.lox", "x = $;")
        status, _, err = self._run(["--quiet", path])

        self.assertEqual(status, EXIT_DATAERR)
        self.assertIn(f"{path}: [line 1] Error: Unexpected character.", err)

    def test_undecodable_file(self):
        path = os.path.join(self.tmp.name, "latin1.lox")
        with open(path, "wb") as f:
            f.write(b"print \"caf\xe9\";")
        status, out, err = self._run([path])

        self.assertEqual(status, EXIT_NOINPUT)
        self.assertEqual(out, "")
        self.assertIn("cannot read", err)

    def test_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("nil")):
            status, out, _ = self._run(["-"])

        self.assertEqual(status, EXIT_OK)
        self.assertEqual(out.splitlines(), ["NIL nil null", "EOF  null"])


if __name__ == '__main__':
    unittest.main()
