"""
# SQL-Spans: test_splitters.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `splitters.py`.
"""

import unittest
from unittest import mock

import regex

from sqlspans.exceptions import MatchingTimeoutWarning
from sqlspans.spans import Span
from sqlspans.splitters import split_keywords, split_regions

KEYWORDS = frozenset(['select', 'from'])


class TestSplitters(unittest.TestCase):
    def test_split_keywords(self):
        self.assertEqual(
            split_keywords('SELECT a FROM t', KEYWORDS, timeout=1),
            [
                Span(True, 0, 6, 'SELECT'),
                Span(False, 6, 1, ' '),
                Span(False, 7, 1, 'a'),
                Span(False, 8, 1, ' '),
                Span(True, 9, 4, 'FROM'),
                Span(False, 13, 1, ' '),
                Span(False, 14, 1, 't'),
            ],
        )

    def test_split_keywords_is_case_insensitive(self):
        self.assertEqual(split_keywords('SELECT', KEYWORDS, timeout=1), [Span(True, 0, 6, 'SELECT')])
        self.assertEqual(split_keywords('select', KEYWORDS, timeout=1), [Span(True, 0, 6, 'select')])
        self.assertEqual(split_keywords('SeLeCt', KEYWORDS, timeout=1), [Span(True, 0, 6, 'SeLeCt')])

    def test_split_keywords_only_claims_whole_words(self):
        self.assertEqual(
            split_keywords('selected,from_x', KEYWORDS, timeout=1),
            [
                Span(False, 0, 8, 'selected'),
                Span(False, 8, 1, ','),
                Span(False, 9, 6, 'from_x'),
            ],
        )

    def test_split_keywords_empty_string(self):
        self.assertEqual(split_keywords('', KEYWORDS, timeout=1), [Span(False, 0, 0, '')])

    def test_split_keywords_timeout(self):
        with mock.patch('sqlspans.splitters.split_words', side_effect=TimeoutError):
            with self.assertWarns(MatchingTimeoutWarning):
                spans = split_keywords('SELECT a FROM t', KEYWORDS, timeout=1)
        self.assertEqual(spans, [Span(False, 0, 15, 'SELECT a FROM t')])

    def test_split_regions(self):
        pattern_compiled = regex.compile(r'--[^\n]*', flags=regex.MULTILINE)
        self.assertEqual(
            split_regions('a -- b\nc -- d', pattern_compiled, timeout=1),
            [
                Span(False, 0, 2, 'a '),
                Span(True, 2, 4, '-- b'),
                Span(False, 6, 3, '\nc '),
                Span(True, 9, 4, '-- d'),
            ],
        )
        self.assertEqual(
            split_regions('no comment', pattern_compiled, timeout=1),
            [Span(False, 0, 10, 'no comment')],
        )

    def test_split_regions_multiline(self):
        pattern_compiled = regex.compile(r'^GO$', flags=regex.MULTILINE)
        self.assertEqual(
            split_regions('x\nGO\ny', pattern_compiled, timeout=1),
            [Span(False, 0, 2, 'x\n'), Span(True, 2, 2, 'GO'), Span(False, 4, 2, '\ny')],
        )

    def test_split_regions_ignores_empty_matches(self):
        pattern_compiled = regex.compile(r'[0-9]*')
        self.assertEqual(
            split_regions('ab12c', pattern_compiled, timeout=1),
            [Span(False, 0, 2, 'ab'), Span(True, 2, 2, '12'), Span(False, 4, 1, 'c')],
        )

    def test_split_regions_is_idempotent(self):
        pattern_compiled = regex.compile(r'[0-9]+')
        string = 'a1b22c333'
        self.assertEqual(
            split_regions(string, pattern_compiled, timeout=1),
            split_regions(string, pattern_compiled, timeout=1),
        )

    def test_split_regions_timeout(self):
        pattern_compiled = mock.Mock()
        pattern_compiled.finditer.side_effect = TimeoutError('regex timed out')
        with self.assertWarns(MatchingTimeoutWarning):
            spans = split_regions('a1b2', pattern_compiled, timeout=0.001)
        self.assertEqual(spans, [Span(False, 0, 4, 'a1b2')])


if __name__ == '__main__':
    unittest.main()
