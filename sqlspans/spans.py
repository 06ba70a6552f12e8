"""
# SQL-Spans: spans.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Spans, gap filling, and time-bounded matching.

A splitter partitions a buffer of length L into a sequence of spans that
- is sorted ascending by start,
- is contiguous (each span ends where the next one starts),
- starts at 0 and ends at L,
- is free of empty spans, except that an empty buffer is a single empty unclaimed span.
"""

import warnings
from typing import Iterable, NamedTuple, Optional

import regex

from sqlspans.exceptions import MatchingTimeoutWarning


WORDS_OR_NON_WORDS_PATTERN_COMPILED = regex.compile(r'\w+|\W+')


class Span(NamedTuple):
    """
    A claimed or filler range of a source buffer, where «text» is `source[start:start + length]`.
    """
    is_claimed: bool
    start: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.start + self.length


def build_span(string: str, is_claimed: bool, start: int, end: int) -> Span:
    return Span(is_claimed, start, end - start, string[start:end])


def build_whole_span(string: str) -> Span:
    return build_span(string, False, 0, len(string))


def fill_gaps(string: str, claimed_spans: Iterable[Span]) -> list[Span]:
    """
    Merge claimed spans with unclaimed filler into a gap-free partition of a string.

    Claimed spans may be unordered. Empty claimed spans are dropped.
    Where claimed spans overlap, the one starting first wins and the later one is dropped;
    any of its text beyond the winner is covered by filler instead.
    """
    spans = []
    position = 0

    for claimed_span in sorted(claimed_spans, key=lambda span: span.start):
        if claimed_span.length == 0 or claimed_span.start < position:
            continue

        if position < claimed_span.start:
            spans.append(build_span(string, False, position, claimed_span.start))

        spans.append(claimed_span)
        position = claimed_span.end

    if position < len(string) or len(spans) == 0:
        spans.append(build_span(string, False, position, len(string)))

    return spans


def find_claimed_spans(pattern_compiled: 'regex.Pattern', string: str, timeout: Optional[float]) -> list[Span]:
    """
    Claim every non-overlapping match of a pattern.

    Raises `TimeoutError` if matching takes longer than «timeout» seconds.
    """
    return [
        build_span(string, True, match.start(), match.end())
        for match in pattern_compiled.finditer(string, timeout=timeout)
    ]


def split_words(string: str, timeout: Optional[float]) -> list[str]:
    """
    Split a string into runs of word characters and runs of non-word characters.

    The runs concatenate back to the string.
    Raises `TimeoutError` if matching takes longer than «timeout» seconds.
    """
    return WORDS_OR_NON_WORDS_PATTERN_COMPILED.findall(string, timeout=timeout)


def warn_matching_timeout(splitter_name: str, string: str, timeout: Optional[float]):
    warnings.warn(
        f'warning: {splitter_name} exceeded the matching timeout of {timeout} seconds '
        f'on a buffer of {len(string)} characters; the buffer has been left as is',
        MatchingTimeoutWarning,
    )
