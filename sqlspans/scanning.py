"""
# SQL-Spans: scanning.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Literal and comment scanning.

String literals (`'...'`) and block comments (`/*...*/`) are found by a forward scan
over delimiter events, that is, every occurrence of `'`, `/*`, and `*/`, sorted by position.
The scan has three states:
````
NORMAL
    `'` or `/*` outside a line comment --> IN_STRING or IN_BLOCK_COMMENT
    `*/` --> (inert)
IN_STRING
    `'` --> NORMAL (claim the string)
IN_BLOCK_COMMENT
    `*/` --> NORMAL (claim the comment)
````
A delimiter preceded by `--` on the same line is inside a line comment and is inert.
The search for `--` goes back to the start of the line (or of the buffer),
and is made afresh for every delimiter.

An unterminated string or comment claims the rest of the buffer.
"""

from typing import NamedTuple, Optional

import regex

from sqlspans.spans import Span, build_span, build_whole_span, warn_matching_timeout


STRING_DELIMITER = "'"
BLOCK_COMMENT_OPENING_DELIMITER = '/*'
BLOCK_COMMENT_CLOSING_DELIMITER = '*/'
LINE_COMMENT_DELIMITER = '--'

DELIMITER_PATTERNS_COMPILED = [
    regex.compile(regex.escape(delimiter))
    for delimiter in (STRING_DELIMITER, BLOCK_COMMENT_OPENING_DELIMITER, BLOCK_COMMENT_CLOSING_DELIMITER)
]

NORMAL = 'NORMAL'
IN_STRING = 'IN_STRING'
IN_BLOCK_COMMENT = 'IN_BLOCK_COMMENT'


class DelimiterEvent(NamedTuple):
    start: int
    end: int
    delimiter: str


def collect_delimiter_events(string: str, timeout: Optional[float]) -> list[DelimiterEvent]:
    """
    Collect the occurrences of each delimiter, merged in order of position.

    Each delimiter is scanned for independently, so overlapping occurrences
    (as in `/*/`) are all collected.
    Raises `TimeoutError` if matching takes longer than «timeout» seconds.
    """
    delimiter_events = [
        DelimiterEvent(match.start(), match.end(), match.group())
        for pattern_compiled in DELIMITER_PATTERNS_COMPILED
        for match in pattern_compiled.finditer(string, timeout=timeout)
    ]
    delimiter_events.sort(key=lambda delimiter_event: delimiter_event.start)

    return delimiter_events


def is_in_line_comment(string: str, index: int) -> bool:
    line_start = string.rfind('\n', 0, index) + 1

    return LINE_COMMENT_DELIMITER in string[line_start:index]


def is_closing_event(delimiter_event: DelimiterEvent, state: str, opening_event: DelimiterEvent) -> bool:
    if state == IN_STRING:
        return delimiter_event.delimiter == STRING_DELIMITER

    return (
        delimiter_event.delimiter == BLOCK_COMMENT_CLOSING_DELIMITER
        and delimiter_event.start >= opening_event.end
    )


def split_literals_and_comments(string: str, timeout: Optional[float]) -> list[Span]:
    """
    Split a string by claiming string literals and block comments, with filler between them.
    """
    try:
        delimiter_events = collect_delimiter_events(string, timeout)
    except TimeoutError:
        warn_matching_timeout('literal and comment splitter', string, timeout)
        return [build_whole_span(string)]

    spans = []
    position = 0
    state = NORMAL
    opening_event = None

    for delimiter_event in delimiter_events:
        if state == NORMAL:
            if delimiter_event.start < position:  # overlaps the last claimed span
                continue
            if delimiter_event.delimiter == BLOCK_COMMENT_CLOSING_DELIMITER:
                continue
            if is_in_line_comment(string, delimiter_event.start):
                continue

            if position < delimiter_event.start:
                spans.append(build_span(string, False, position, delimiter_event.start))

            opening_event = delimiter_event
            if delimiter_event.delimiter == STRING_DELIMITER:
                state = IN_STRING
            else:
                state = IN_BLOCK_COMMENT

        elif is_closing_event(delimiter_event, state, opening_event):
            spans.append(build_span(string, True, opening_event.start, delimiter_event.end))
            position = delimiter_event.end
            state = NORMAL
            opening_event = None

    if state != NORMAL:
        spans.append(build_span(string, True, opening_event.start, len(string)))
        position = len(string)

    if position < len(string) or len(spans) == 0:
        spans.append(build_span(string, False, position, len(string)))

    return spans
