"""Live paragraph, sentence, word and character counts with word-frequency rankings."""

from freqcountable.counting.options import CountOptions, resolve_configuration
from freqcountable.counting.metrics import MetricsResult, compute_metrics
from freqcountable.counting.frequency import compute_frequencies
from freqcountable.sources.base_source import TextSource
from freqcountable.sources.memory_source import EditableTextSource, StaticTextSource
from freqcountable.live.registry import SubscriptionRegistry

__version__ = "0.1.0"

__all__ = [
    "CountOptions", "resolve_configuration", "MetricsResult",
    "compute_metrics", "compute_frequencies", "TextSource",
    "StaticTextSource", "EditableTextSource", "SubscriptionRegistry",
]
