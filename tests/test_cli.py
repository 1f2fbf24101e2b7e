"""
Command line tests for sexpr.

Author: xwest
"""

import io
import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sexpr.cli import main, EXIT_OK, EXIT_PARSE_ERROR, EXIT_READ_ERROR


class TestCommandLine(unittest.TestCase):
    """Run main() against in-memory streams and temporary files."""

    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name: str, contents: str) -> str:
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(contents)
        return path

    def _run(self, argv, stdin_text=""):
        return main(argv, stdin=io.StringIO(stdin_text),
                    stdout=self.stdout, stderr=self.stderr)

    def test_reads_stdin_by_default(self):
        status = self._run([], "(+   1\n 2.5)")
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue(), "(+ 1 2.5)\n")
        self.assertEqual(self.stderr.getvalue(), "")

    def test_dash_reads_stdin(self):
        status = self._run(["-"], "42")
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue(), "42\n")

    def test_files_in_order(self):
        first = self._write("a.sexp", "(a 1 )")
        second = self._write("b.sexp", '"text"')
        status = self._run([first, second])
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue(), '(a 1)\n"text"\n')

    def test_repr_output(self):
        status = self._run(["--repr"], "7")
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue(), "IntLiteral(value=7)\n")

    def test_check_is_silent_on_success(self):
        status = self._run(["--check"], "(1 2 3)")
        self.assertEqual(status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue(), "")

    def test_parse_error(self):
        status = self._run([], ")")
        self.assertEqual(status, EXIT_PARSE_ERROR)
        self.assertEqual(self.stdout.getvalue(), "")
        self.assertTrue(self.stderr.getvalue().startswith(
            "<stdin>: ERROR[S003]: ')' has no matching '('"))

    def test_parse_error_does_not_stop_other_files(self):
        bad = self._write("bad.sexp", '"open')
        good = self._write("good.sexp", "(1 2)")
        status = self._run([bad, good])
        self.assertEqual(status, EXIT_PARSE_ERROR)
        self.assertEqual(self.stdout.getvalue(), "(1 2)\n")
        self.assertIn(f"{bad}: ERROR[S001]: unclosed string", self.stderr.getvalue())

    def test_missing_file(self):
        missing = os.path.join(self.tmpdir.name, "missing.sexp")
        status = self._run([missing])
        self.assertEqual(status, EXIT_READ_ERROR)
        self.assertIn("cannot read input", self.stderr.getvalue())

    def test_undecodable_file(self):
        path = os.path.join(self.tmpdir.name, "latin1.sexp")
        with open(path, "wb") as f:
            f.write(b"(\xff )")
        good = self._write("good.sexp", "(1 2)")
        status = self._run([path, good])
        self.assertEqual(status, EXIT_READ_ERROR)
        self.assertIn(f"{path}: cannot read input", self.stderr.getvalue())
        self.assertEqual(self.stdout.getvalue(), "(1 2)\n")

    def test_read_error_outranks_parse_error(self):
        bad = self._write("bad.sexp", "(")
        missing = os.path.join(self.tmpdir.name, "missing.sexp")
        status = self._run([bad, missing])
        self.assertEqual(status, EXIT_READ_ERROR)


if __name__ == '__main__':
    unittest.main()
