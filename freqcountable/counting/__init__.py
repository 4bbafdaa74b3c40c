"""Text counting engine: normalization, metrics and word-frequency ranking."""

from freqcountable.counting.options import CountOptions, resolve_configuration
from freqcountable.counting.metrics import MetricsResult, compute_metrics
from freqcountable.counting.frequency import compute_frequencies, counting_sort

__all__ = [
    "CountOptions", "resolve_configuration", "MetricsResult",
    "compute_metrics", "compute_frequencies", "counting_sort",
]
