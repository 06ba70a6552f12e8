"""
# SQL-Spans: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception and warning classes.
"""


class DependencyFileSyntaxException(Exception):
    _line_number: int

    def __init__(self, line_number: int):
        super().__init__(f'error: line {line_number}: expected `* «name» --> «replacement»`')
        self._line_number = line_number

    @property
    def line_number(self) -> int:
        return self._line_number


class TemplateFormatException(Exception):
    _template: str

    def __init__(self, template: str):
        super().__init__(f'error: template `{template}` must contain exactly one replacement field `{{}}`')
        self._template = template

    @property
    def template(self) -> str:
        return self._template


class MatchingTimeoutWarning(UserWarning):
    pass
