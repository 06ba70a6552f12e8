"""
# SQL-Spans: splitters.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Keyword and region splitters.
"""

from typing import Optional

import regex

from sqlspans.spans import (
    Span,
    build_whole_span,
    fill_gaps,
    find_claimed_spans,
    split_words,
    warn_matching_timeout,
)


def split_keywords(string: str, keywords: frozenset[str], timeout: Optional[float]) -> list[Span]:
    """
    Split a string into words and non-words, claiming the words whose lower-case form is in «keywords».

    No gap filling is needed since the words and non-words already cover the string.
    """
    try:
        words = split_words(string, timeout)
    except TimeoutError:
        warn_matching_timeout('keyword splitter', string, timeout)
        return [build_whole_span(string)]

    if len(words) == 0:
        return [build_whole_span(string)]

    spans = []
    start = 0
    for word in words:
        spans.append(Span(word.lower() in keywords, start, len(word), word))
        start += len(word)

    return spans


def split_regions(string: str, pattern_compiled: 'regex.Pattern', timeout: Optional[float]) -> list[Span]:
    """
    Split a string by claiming the matches of a pattern, with filler between them.
    """
    try:
        claimed_spans = find_claimed_spans(pattern_compiled, string, timeout)
    except TimeoutError:
        warn_matching_timeout('region splitter', string, timeout)
        return [build_whole_span(string)]

    return fill_gaps(string, claimed_spans)
