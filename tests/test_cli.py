"""
# SQL-Spans: test_cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `cli.py`.
"""

import contextlib
import io
import os
import tempfile
import unittest

from sqlspans.cli import extract_sql_name, generate_html_file, is_sql_file, main, parse_command_line_arguments
from sqlspans.constants import COMMAND_LINE_ERROR_EXIT_CODE, DEFAULT_TIMEOUT_SECONDS


class TestCli(unittest.TestCase):
    def test_extract_sql_name(self):
        self.assertEqual(extract_sql_name('file.sql'), 'file')
        self.assertEqual(extract_sql_name('file.'), 'file')
        self.assertEqual(extract_sql_name('file'), 'file')

        if os.sep == '/':
            self.assertEqual(extract_sql_name('./././file.sql'), 'file')
            self.assertEqual(extract_sql_name('./dir/../file.sql'), 'file')
            self.assertEqual(extract_sql_name('./file.'), 'file')
            self.assertEqual(extract_sql_name('./file'), 'file')
        elif os.sep == '\\':
            self.assertEqual(extract_sql_name(r'.\.\.\file.sql'), 'file')
            self.assertEqual(extract_sql_name(r'.\dir\..\file.sql'), 'file')
            self.assertEqual(extract_sql_name(r'.\file.'), 'file')
            self.assertEqual(extract_sql_name(r'.\file'), 'file')

    def test_is_sql_file(self):
        self.assertTrue(is_sql_file('file.sql'))
        self.assertTrue(is_sql_file('.sql'))
        self.assertFalse(is_sql_file('file/sql'))
        self.assertFalse(is_sql_file('file.'))
        self.assertFalse(is_sql_file('file'))

    def test_parse_command_line_arguments(self):
        parsed_arguments = parse_command_line_arguments(['-x', '-t', '0.5', '-d', 'deps.txt', 'a.sql', 'b'])
        self.assertTrue(parsed_arguments.verbose_mode_enabled)
        self.assertEqual(parsed_arguments.timeout, 0.5)
        self.assertEqual(parsed_arguments.dependency_file_name, 'deps.txt')
        self.assertEqual(parsed_arguments.sql_file_name_arguments, ['a.sql', 'b'])

        parsed_arguments = parse_command_line_arguments([])
        self.assertFalse(parsed_arguments.all_mode_enabled)
        self.assertEqual(parsed_arguments.timeout, DEFAULT_TIMEOUT_SECONDS)
        self.assertIsNone(parsed_arguments.dependency_file_name)

    def test_main(self):
        with tempfile.TemporaryDirectory() as temporary_directory:
            sql_file_name = os.path.join(temporary_directory, 'script.sql')
            with open(sql_file_name, 'w', encoding='utf-8') as sql_file:
                sql_file.write("SELECT * FROM Orders WHERE x = 'y'\n")

            dependency_file_name = os.path.join(temporary_directory, 'dependencies.txt')
            with open(dependency_file_name, 'w', encoding='utf-8') as dependency_file:
                dependency_file.write('* orders --> <a>Orders</a>\n')

            with contextlib.redirect_stdout(io.StringIO()):
                main(['-d', dependency_file_name, os.path.join(temporary_directory, 'script.')])

            with open(os.path.join(temporary_directory, 'script.html'), 'r', encoding='utf-8') as html_file:
                html = html_file.read()

        self.assertIn('<title>script</title>', html)
        self.assertIn(
            "<pre><b style='color:blue'>SELECT</b> * <b style='color:blue'>FROM</b> <a>Orders</a> "
            "<b style='color:blue'>WHERE</b> x = <b style='color:red'>'y'</b>\n</pre>",
            html,
        )

    def test_main_missing_file(self):
        with tempfile.TemporaryDirectory() as temporary_directory:
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as context_manager:
                    main([os.path.join(temporary_directory, 'missing.sql')])
        self.assertEqual(context_manager.exception.code, COMMAND_LINE_ERROR_EXIT_CODE)

    def test_generate_html_file_vanished_file(self):
        with tempfile.TemporaryDirectory() as temporary_directory:
            sql_file_name = os.path.join(temporary_directory, 'vanished.sql')
            with self.assertRaisesRegex(FileNotFoundError, 'could not be opened'):
                generate_html_file(sql_file_name, {}, DEFAULT_TIMEOUT_SECONDS, False, uses_command_line_argument=False)

    def test_main_all_mode_with_positional_argument(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context_manager:
                main(['-a', 'file.sql'])
        self.assertEqual(context_manager.exception.code, COMMAND_LINE_ERROR_EXIT_CODE)


if __name__ == '__main__':
    unittest.main()
