"""
# SQL-Spans: stages.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Concrete stages, chained by passing each stage the processor it wraps.
"""

from typing import Iterable, Optional

import regex

from sqlspans.bases import SplittingStage, TextProcessor
from sqlspans.constants import BLOCK_COMMENT_TEMPLATE, DEFAULT_TIMEOUT_SECONDS, STRING_TEMPLATE
from sqlspans.scanning import STRING_DELIMITER, split_literals_and_comments
from sqlspans.spans import Span, split_words, warn_matching_timeout
from sqlspans.splitters import split_keywords, split_regions
from sqlspans.utilities import fill_template, normalise_dependency_names, normalise_keywords, validate_template


class KeywordStage(SplittingStage):
    """
    A stage claiming keywords.

    The string is split into runs of word characters and runs of non-word characters;
    runs whose lower-case form is in «keywords» are rendered through «template».
    """
    _keywords: frozenset[str]
    _template: str

    def __init__(self, inner_processor: TextProcessor, keywords: Iterable[str], template: str,
                 id_: str = 'keywords', timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
                 verbose_mode_enabled: bool = False):
        super().__init__(id_, inner_processor, timeout, verbose_mode_enabled)
        self._keywords = normalise_keywords(keywords)
        self._template = validate_template(template)

    @property
    def keywords(self) -> frozenset[str]:
        return self._keywords

    def split(self, string: str) -> list[Span]:
        return split_keywords(string, self._keywords, self._timeout)

    def _render(self, string: str) -> str:
        return fill_template(self._template, string)


class RegionStage(SplittingStage):
    """
    A stage claiming the matches of a regular expression.

    The pattern is compiled with «flags» (default MULTILINE);
    empty matches are not claimed.
    """
    _pattern_compiled: 'regex.Pattern'
    _template: str

    def __init__(self, inner_processor: TextProcessor, pattern: str, template: str,
                 id_: str = 'regions', flags: int = regex.MULTILINE,
                 timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS, verbose_mode_enabled: bool = False):
        super().__init__(id_, inner_processor, timeout, verbose_mode_enabled)
        self._pattern_compiled = regex.compile(pattern, flags=flags)
        self._template = validate_template(template)

    @property
    def pattern(self) -> str:
        return self._pattern_compiled.pattern

    def split(self, string: str) -> list[Span]:
        return split_regions(string, self._pattern_compiled, self._timeout)

    def _render(self, string: str) -> str:
        return fill_template(self._template, string)


class LiteralCommentStage(SplittingStage):
    """
    A stage claiming string literals and block comments.

    Claimed text starting with a quote is rendered through «string_template»,
    and other claimed text (a block comment) through «block_comment_template».
    See `sqlspans.scanning` for how line comments suppress delimiters.
    """
    _string_template: str
    _block_comment_template: str

    def __init__(self, inner_processor: TextProcessor,
                 string_template: str = STRING_TEMPLATE, block_comment_template: str = BLOCK_COMMENT_TEMPLATE,
                 id_: str = 'literals-and-comments', timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
                 verbose_mode_enabled: bool = False):
        super().__init__(id_, inner_processor, timeout, verbose_mode_enabled)
        self._string_template = validate_template(string_template)
        self._block_comment_template = validate_template(block_comment_template)

    def split(self, string: str) -> list[Span]:
        return split_literals_and_comments(string, self._timeout)

    def _render(self, string: str) -> str:
        if string.startswith(STRING_DELIMITER):
            template = self._string_template
        else:
            template = self._block_comment_template

        return fill_template(template, string)


class DependencyStage(TextProcessor):
    """
    The innermost stage, substituting dependency names.

    Runs of word characters whose lower-case form is a name in «dependency_from_name»
    are replaced by the corresponding replacement; nothing is delegated further.
    """
    _dependency_from_name: dict[str, str]
    _timeout: Optional[float]

    def __init__(self, dependency_from_name: dict[str, str], id_: str = 'dependencies',
                 timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS, verbose_mode_enabled: bool = False):
        super().__init__(id_, verbose_mode_enabled)
        self._dependency_from_name = normalise_dependency_names(dependency_from_name)
        self._timeout = timeout

    @property
    def dependency_from_name(self) -> dict[str, str]:
        return dict(self._dependency_from_name)

    def _process(self, string: str) -> str:
        if len(self._dependency_from_name) == 0:
            return string

        try:
            words = split_words(string, self._timeout)
        except TimeoutError:
            warn_matching_timeout('dependency substitution', string, self._timeout)
            return string

        return ''.join(
            self._dependency_from_name.get(word.lower(), word)
            for word in words
        )
