"""Word frequencies and top-K ranking with a counting sort.

Ranking runs in O(n + max_frequency): words are dropped into buckets indexed
by their count, then buckets are drained from the highest count downwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from freqcountable.counting.normalize import as_source, strip_text, tokenize
from freqcountable.counting.options import (
    DEFAULT_FREQ_ITEM_COUNT,
    CountOptions,
    resolve_configuration,
)
from freqcountable.sources.base_source import TextSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrequencyAnalysis:
    """Frequency map of one text plus the numbers the ranking step needs."""

    frequency_map: dict = field(default_factory=dict)
    max_frequency: int = 0
    word_count: int = 0


def build_frequency_map(words: list[str]) -> FrequencyAnalysis:
    """Count each word in a single pass, tracking the highest count seen."""
    frequency_map: dict[str, int] = {}
    max_frequency = 1 if words else 0

    for word in words:
        count = frequency_map.get(word, 0) + 1
        frequency_map[word] = count
        if count > max_frequency:
            max_frequency = count

    return FrequencyAnalysis(
        frequency_map=frequency_map,
        max_frequency=max_frequency,
        word_count=len(words),
    )


def clamp_item_count(requested: int, word_count: int) -> int:
    """Cap the requested top-K size at the total word count; reset non-positive values."""
    if requested > word_count:
        return word_count
    if requested <= 0:
        return DEFAULT_FREQ_ITEM_COUNT
    return requested


def counting_sort(
    frequency_map: Mapping[str, int],
    max_frequency: int,
    item_count: int,
) -> dict[str, int]:
    """
    Return up to ``item_count`` of the most frequent words.

    Buckets are drained from ``max_frequency`` down to 1, so no word is
    returned ahead of a word with a higher count. Words with equal counts
    are taken in the order they were first seen in the text. Words with a
    count of 0 are never returned.

    Args:
        frequency_map: Word -> occurrence count.
        max_frequency: Highest count in ``frequency_map``.
        item_count: Maximum number of words to return.

    Returns:
        Dict of word -> count, ordered by descending count.
    """
    buckets: list[list[str]] = [[] for _ in range(max_frequency + 1)]
    for word, count in frequency_map.items():
        buckets[count].append(word)

    ranked: dict[str, int] = {}
    for count in range(max_frequency, 0, -1):
        for word in buckets[count]:
            if len(ranked) >= item_count:
                return ranked
            ranked[word] = count

    return ranked


def compute_frequencies(
    source: Union[TextSource, str],
    config: Union[Mapping[str, Any], CountOptions, None] = None,
) -> Optional[dict[str, int]]:
    """
    Rank the most frequent words of ``source``.

    Args:
        source: A TextSource, or a plain string to analyze directly.
        config: Option overrides (mapping or CountOptions). None uses defaults.
            ``freq_item_count`` sets how many words to return.

    Returns:
        Dict of word -> count for at most ``freq_item_count`` words, or None
        when the text has no words at all.
    """
    options = resolve_configuration(config)
    trimmed = strip_text(as_source(source), options)

    words = tokenize(trimmed)
    if not words:
        logger.debug("No words to rank")
        return None

    analysis = build_frequency_map(words)
    item_count = clamp_item_count(options.freq_item_count, analysis.word_count)

    ranked = counting_sort(analysis.frequency_map, analysis.max_frequency, item_count)
    logger.debug(
        "Ranked %d of %d distinct words (max frequency %d)",
        len(ranked), len(analysis.frequency_map), analysis.max_frequency,
    )
    return ranked
