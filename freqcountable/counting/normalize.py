"""Turn a text source's raw content into the trimmed text that gets counted."""

import re
from typing import Union

from freqcountable.counting.options import CountOptions
from freqcountable.sources.base_source import TextSource
from freqcountable.sources.memory_source import StaticTextSource

# Angle-bracket heuristic, not an HTML parser
_TAG_RE = re.compile(r"</?[a-z][^>]*>", re.IGNORECASE)
_ZERO_WIDTH_RE = re.compile("\u200b+")
# Punctuation removed before splitting text into words
PUNCTUATION_RE = re.compile(r"['\";:,.?¿\-!¡]+")
_WORD_RE = re.compile(r"\S+")


def as_source(source: Union[TextSource, str, None]) -> TextSource:
    """Wrap plain strings in a StaticTextSource; pass sources through."""
    if isinstance(source, TextSource):
        return source
    return StaticTextSource(source or "")


def strip_text(source: TextSource, options: CountOptions) -> str:
    """
    Return the source's text with tags and zero-width spaces removed and
    surrounding whitespace trimmed.

    Every zero-width space is removed, not only the first run.
    """
    raw = source.get_raw_text() or ""

    if options.strip_tags:
        raw = _TAG_RE.sub("", raw)
    if options.ignore_zero_width:
        raw = _ZERO_WIDTH_RE.sub("", raw)

    return raw.strip()


def tokenize(trimmed: str) -> list[str]:
    """Split text into case-sensitive words with punctuation removed."""
    if not trimmed:
        return []
    return _WORD_RE.findall(PUNCTUATION_RE.sub("", trimmed))
