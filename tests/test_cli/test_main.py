"""Tests for the command-line entry point."""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from main import main


class TestCli(unittest.TestCase):

    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(fd, "w") as fh:
            json.dump([
                {"name": "b", "age": 3},
                {"name": "a", "age": 1},
                {"name": "c", "age": 2},
            ], fh)

    def tearDown(self):
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass

    def _run(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue()

    def test_rows_sorted_and_paged(self):
        output = self._run("rows", self.path, "--sort", "age", "--rows", "2")
        self.assertIn('"name": "a"', output)
        self.assertIn('"name": "c"', output)
        self.assertNotIn('"name": "b"', output)
        self.assertLess(output.index('"name": "a"'), output.index('"name": "c"'))
        self.assertIn("Page 1 of 2 (3 rows)", output)

    def test_rows_descending_second_page(self):
        output = self._run("rows", self.path, "--sort", "age", "--dir", "desc", "--rows", "2", "--page", "2")
        self.assertIn('"name": "a"', output)
        self.assertNotIn('"name": "b"', output)

    def test_unknown_column_uses_default_sort(self):
        output = self._run("rows", self.path, "--sort", "nope", "--default-sort", "name", "--no-paging")
        self.assertLess(output.index('"name": "a"'), output.index('"name": "b"'))
        self.assertLess(output.index('"name": "b"'), output.index('"name": "c"'))

    def test_count(self):
        output = self._run("count", self.path, "--rows", "2")
        self.assertIn("Rows:  3", output)
        self.assertIn("Pages: 2", output)

    def test_missing_file_exits_with_error(self):
        with self.assertRaises(SystemExit) as cm:
            self._run("rows", self.path + ".missing")
        self.assertEqual(cm.exception.code, 2)

    def test_no_command_prints_help(self):
        with self.assertRaises(SystemExit) as cm:
            self._run()
        self.assertEqual(cm.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
