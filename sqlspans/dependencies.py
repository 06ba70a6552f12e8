"""
# SQL-Spans: dependencies.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Dependency table files.

A dependency table file has one entry per line, of the form
````
* «name» --> «replacement»
````
where «name» is a run of word characters (matched case-insensitively)
and «replacement» is the rest of the line, with surrounding whitespace trimmed.
Whitespace-only lines and comment lines (beginning with `#`) are ignored.
"""

import re
from typing import Optional

from sqlspans.exceptions import DependencyFileSyntaxException


def is_whitespace_only(line: str) -> bool:
    return bool(re.fullmatch(pattern=r'[\s]*', string=line, flags=re.ASCII))


def is_comment(line: str) -> bool:
    return line.startswith('#')


def compute_entry_match(line: str) -> Optional[re.Match]:
    return re.fullmatch(
        pattern=r'''
            [*] [\s]+
            (?P<name> [\w]+ )
            [\s]+
            [-]{2,} [>]
            [\s]*
            (?P<replacement> [\s\S]*? )
            [\s]*
        ''',
        string=line,
        flags=re.VERBOSE,
    )


def parse_dependency_table(content: str) -> dict[str, str]:
    """
    Parse the content of a dependency table file.

    Names are normalised to lower case; a later entry for the same name wins.
    """
    dependency_from_name = {}

    for line_number, line in enumerate(content.splitlines(), start=1):
        if is_whitespace_only(line) or is_comment(line):
            continue

        entry_match = compute_entry_match(line)
        if entry_match is None:
            raise DependencyFileSyntaxException(line_number)

        name = entry_match.group('name').lower()
        replacement = entry_match.group('replacement')
        dependency_from_name[name] = replacement

    return dependency_from_name


def load_dependency_table(dependency_file_name: str) -> dict[str, str]:
    with open(dependency_file_name, 'r', encoding='utf-8') as dependency_file:
        content = dependency_file.read()

    return parse_dependency_table(content)
