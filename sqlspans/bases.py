"""
# SQL-Spans: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for text processors and splitting stages.
"""

import abc
from typing import Optional

from sqlspans.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from sqlspans.spans import Span


class TextProcessor(abc.ABC):
    """
    Base class for a text processor, which turns text into rendered text.

    Processors hold no mutable state after construction,
    so the same processor may be used for any number of calls to `process(string)`.
    """
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    def process(self, string: str) -> str:
        string_before = string
        string = self._process(string)
        string_after = string

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            try:
                print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
                print(string_before)
                print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
                print(string_after)
                print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
                print('\n\n\n\n')
            except UnicodeEncodeError as unicode_encode_error:
                error_message = (
                    'cannot print stage output: the terminal encoding cannot represent it; '
                    'try setting `PYTHONIOENCODING=utf-8`'
                )
                raise UnicodeError(error_message) from unicode_encode_error

        return string_after

    @abc.abstractmethod
    def _process(self, string: str) -> str:
        """
        Process a string.
        """
        raise NotImplementedError


class SplittingStage(TextProcessor, abc.ABC):
    """
    Base class for a stage wrapping an inner processor.

    The stage splits a string into spans.
    Claimed spans are rendered by the stage itself;
    unclaimed spans are delegated to the inner processor.
    The results are concatenated in span order.
    """
    _inner_processor: TextProcessor
    _timeout: Optional[float]

    def __init__(self, id_: str, inner_processor: TextProcessor, timeout: Optional[float], verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._inner_processor = inner_processor
        self._timeout = timeout

    @property
    def inner_processor(self) -> TextProcessor:
        return self._inner_processor

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def _process(self, string: str) -> str:
        return ''.join(
            self._render(span.text) if span.is_claimed else self._inner_processor.process(span.text)
            for span in self.split(string)
        )

    @abc.abstractmethod
    def split(self, string: str) -> list[Span]:
        """
        Split a string into a gap-free sequence of claimed and unclaimed spans.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _render(self, string: str) -> str:
        """
        Render the text of a claimed span.
        """
        raise NotImplementedError
