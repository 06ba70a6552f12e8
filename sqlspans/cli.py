"""
# SQL-Spans: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys
from typing import Optional

from sqlspans._version import __version__
from sqlspans.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    DEFAULT_TIMEOUT_SECONDS,
    GENERIC_ERROR_EXIT_CODE,
    HTML_DOCUMENT_TEMPLATE,
)
from sqlspans.core import sql_to_html
from sqlspans.dependencies import load_dependency_table
from sqlspans.exceptions import DependencyFileSyntaxException

DESCRIPTION = '''
    Convert SQL scripts to highlighted HTML.
'''
SQL_FILE_NAME_HELP = '''
    name of SQL file to be converted
    (can be abbreviated as `file` or `file.` for increased productivity)
'''
ALL_MODE_HELP = '''
    convert all SQL files under the working directory
'''
DEPENDENCIES_HELP = '''
    name of dependency table file, with lines of the form `* «name» --> «replacement»`
'''
TIMEOUT_HELP = f'''
    time budget in seconds for each pattern matching operation (default {DEFAULT_TIMEOUT_SECONDS})
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the input and output of every stage)
'''


def is_sql_file(file_name: str) -> bool:
    return file_name.endswith('.sql')


def extract_sql_name(sql_file_name_argument: str) -> str:
    """
    Extract name-without-extension from an SQL file name argument.

    Here, SQL file name argument may be of the form `«sql_name».sql`, `«sql_name».`, or `«sql_name»`.
    The path is normalised by resolving `./` and `../`.
    """
    sql_file_name_argument = os.path.normpath(sql_file_name_argument)
    sql_name = re.sub(pattern=r'[.](sql)? \Z', repl='', string=sql_file_name_argument, flags=re.VERBOSE)

    return sql_name


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-d', '--dependencies',
        dest='dependency_file_name',
        default=None,
        help=DEPENDENCIES_HELP,
        metavar='FILE',
    )
    argument_parser.add_argument(
        '-t', '--timeout',
        dest='timeout',
        default=DEFAULT_TIMEOUT_SECONDS,
        help=TIMEOUT_HELP,
        metavar='SECONDS',
        type=float,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'sql_file_name_arguments',
        default=[],
        help=SQL_FILE_NAME_HELP,
        metavar='file.sql',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def read_dependency_table(dependency_file_name: Optional[str]) -> dict[str, str]:
    if dependency_file_name is None:
        return {}

    try:
        return load_dependency_table(dependency_file_name)
    except FileNotFoundError:
        print(f'error: dependency table file `{dependency_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except DependencyFileSyntaxException as dependency_file_syntax_exception:
        line_number = dependency_file_syntax_exception.line_number
        print(
            f'error: `{dependency_file_name}`, line {line_number}: expected `* «name» --> «replacement»`',
            file=sys.stderr,
        )
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def generate_html_file(sql_file_name_argument: str, dependency_from_name: dict[str, str], timeout: float,
                       verbose_mode_enabled: bool, uses_command_line_argument: bool):
    sql_name = extract_sql_name(sql_file_name_argument)
    sql_file_name = f'{sql_name}.sql'
    try:
        with open(sql_file_name, 'r', encoding='utf-8') as sql_file:
            sql = sql_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{sql_file_name_argument}`: file `{sql_file_name}` not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            error_message = f'file `{sql_file_name}` found under the working directory could not be opened'
            raise FileNotFoundError(error_message) from file_not_found_error

    content = sql_to_html(sql, dependency_from_name, verbose_mode_enabled=verbose_mode_enabled, timeout=timeout)
    html = HTML_DOCUMENT_TEMPLATE.format(title=os.path.basename(sql_name), content=content)

    html_file_name = f'{sql_name}.html'
    try:
        with open(html_file_name, 'w', encoding='utf-8') as html_file:
            html_file.write(html)
        print(f'success: wrote to `{html_file_name}`')
    except IOError:
        print(f'error: cannot write to `{html_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    sql_file_name_arguments = parsed_arguments.sql_file_name_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled
    timeout = parsed_arguments.timeout
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    if all_mode_enabled and len(sql_file_name_arguments) > 0:
        print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    dependency_from_name = read_dependency_table(parsed_arguments.dependency_file_name)

    if all_mode_enabled:
        sql_file_names = [
            os.path.join(path, file_name)
            for path, _, file_names in os.walk(os.curdir)
            for file_name in file_names
            if is_sql_file(file_name)
        ]
        for sql_file_name in sorted(sql_file_names):
            generate_html_file(sql_file_name, dependency_from_name, timeout, verbose_mode_enabled,
                               uses_command_line_argument=False)

    else:
        for sql_file_name_argument in sql_file_name_arguments:
            generate_html_file(sql_file_name_argument, dependency_from_name, timeout, verbose_mode_enabled,
                               uses_command_line_argument=True)


if __name__ == '__main__':
    main()
