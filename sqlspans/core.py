"""
# SQL-Spans: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

The standard processor chain is, from the outside in:
````
literals-and-comments  (string literals and block comments)
line-comments          (`--` to end of line)
keywords               (STANDARD_KEYWORDS unless overridden)
dependencies           (dependency name substitution)
````
Each stage only sees the text left unclaimed by the stages outside it.
"""

from typing import Callable, Iterable, Optional

from sqlspans.bases import TextProcessor
from sqlspans.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    KEYWORD_TEMPLATE,
    LINE_COMMENT_PATTERN,
    LINE_COMMENT_TEMPLATE,
    STANDARD_KEYWORDS,
)
from sqlspans.stages import DependencyStage, KeywordStage, LiteralCommentStage, RegionStage


def assemble_chain(stage_builders: Iterable[Callable[[TextProcessor], TextProcessor]],
                   terminal_processor: TextProcessor) -> TextProcessor:
    """
    Assemble a chain of stages around a terminal processor.

    «stage_builders» are listed outermost first; each one is called with the processor it is to wrap.
    Returns the outermost processor.
    """
    processor = terminal_processor
    for stage_builder in reversed(list(stage_builders)):
        processor = stage_builder(processor)

    return processor


def build_standard_processor(dependency_from_name: Optional[dict[str, str]] = None,
                             keywords: Optional[Iterable[str]] = None,
                             verbose_mode_enabled: bool = False,
                             timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS) -> TextProcessor:
    if dependency_from_name is None:
        dependency_from_name = {}

    if keywords is None:
        keywords = STANDARD_KEYWORDS

    stage_builders = [
        lambda inner_processor: LiteralCommentStage(
            inner_processor,
            timeout=timeout,
            verbose_mode_enabled=verbose_mode_enabled,
        ),
        lambda inner_processor: RegionStage(
            inner_processor,
            LINE_COMMENT_PATTERN,
            LINE_COMMENT_TEMPLATE,
            id_='line-comments',
            timeout=timeout,
            verbose_mode_enabled=verbose_mode_enabled,
        ),
        lambda inner_processor: KeywordStage(
            inner_processor,
            keywords,
            KEYWORD_TEMPLATE,
            timeout=timeout,
            verbose_mode_enabled=verbose_mode_enabled,
        ),
    ]
    terminal_processor = DependencyStage(
        dependency_from_name,
        timeout=timeout,
        verbose_mode_enabled=verbose_mode_enabled,
    )

    return assemble_chain(stage_builders, terminal_processor)


def sql_to_html(sql: str, dependency_from_name: Optional[dict[str, str]] = None,
                keywords: Optional[Iterable[str]] = None, verbose_mode_enabled: bool = False,
                timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS) -> str:
    """
    Convert SQL to a highlighted HTML fragment.

    The SQL text itself is not escaped.
    """
    processor = build_standard_processor(dependency_from_name, keywords, verbose_mode_enabled, timeout)

    return processor.process(sql)
