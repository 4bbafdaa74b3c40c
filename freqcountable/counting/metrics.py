"""Paragraph, sentence, word and character counts for a text source.

All counts are recomputed from the full current text on every call.
"""

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Union

from freqcountable.counting.normalize import as_source, strip_text, tokenize
from freqcountable.counting.options import CountOptions, resolve_configuration
from freqcountable.sources.base_source import TextSource
from freqcountable.utils.codepoints import code_point_length

logger = logging.getLogger(__name__)

# Pre-compiled patterns for performance
_SOFT_PARAGRAPH_RE = re.compile(r"\n+")
_HARD_PARAGRAPH_RE = re.compile(r"\n{2,}")
# A run of terminators counts only when some character follows it on the same line
_SENTENCE_RE = re.compile(r"[.?!\u2026]+[^\n\r\u2028\u2029]")
_WHITESPACE_RE = re.compile(r"\s")
_RETURNS_RE = re.compile(r"[\n\r]")


@dataclass(frozen=True)
class MetricsResult:
    """Counts produced by count_metrics()."""

    paragraphs: int = 0
    sentences: int = 0
    words: int = 0
    characters: int = 0
    all: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def count_metrics(source: TextSource, options: CountOptions) -> MetricsResult:
    """
    Count paragraphs, sentences, words, characters and raw characters.

    ``all`` measures the raw source text, before tags or zero-width spaces
    are removed, so it can be larger than ``characters`` plus whitespace.
    Every other count is 0 when the trimmed text is empty.
    """
    trimmed = strip_text(source, options)
    raw = source.get_raw_text() or ""

    if options.ignore_returns:
        raw = _RETURNS_RE.sub("", raw)
    all_count = code_point_length(raw)

    if not trimmed:
        return MetricsResult(all=all_count)

    paragraph_re = _HARD_PARAGRAPH_RE if options.hard_returns else _SOFT_PARAGRAPH_RE

    return MetricsResult(
        paragraphs=len(paragraph_re.findall(trimmed)) + 1,
        sentences=len(_SENTENCE_RE.findall(trimmed)) + 1,
        words=len(tokenize(trimmed)),
        characters=code_point_length(_WHITESPACE_RE.sub("", trimmed)),
        all=all_count,
    )


def compute_metrics(
    source: Union[TextSource, str],
    config: Union[Mapping[str, Any], CountOptions, None] = None,
) -> MetricsResult:
    """Public entry point: resolve options and count ``source``.

    Args:
        source: A TextSource, or a plain string to count directly.
        config: Option overrides (mapping or CountOptions). None uses defaults.

    Returns:
        MetricsResult with paragraphs, sentences, words, characters and all.
    """
    options = resolve_configuration(config)
    result = count_metrics(as_source(source), options)
    logger.debug("Counted %s", result)
    return result
