"""Bind text sources to counting callbacks that rerun on every change."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from freqcountable.counting.frequency import compute_frequencies
from freqcountable.counting.metrics import compute_metrics
from freqcountable.counting.options import CountOptions, resolve_configuration
from freqcountable.sources.base_source import TextSource

logger = logging.getLogger(__name__)

Sources = Union[TextSource, Iterable[TextSource]]
Options = Union[Mapping[str, Any], CountOptions, None]
ResultCallback = Callable[[TextSource, Any], None]


@dataclass
class _Binding:
    source: TextSource
    handler: Callable[[TextSource], None]
    handle: Any


def _collect_sources(sources: Sources) -> list[TextSource]:
    """Return the given source(s) as a list, or [] if none are usable."""
    if isinstance(sources, TextSource):
        return [sources]
    if sources is None or isinstance(sources, (str, bytes)):
        return []
    try:
        collected = list(sources)
    except TypeError:
        return []
    if not collected or not all(isinstance(s, TextSource) for s in collected):
        return []
    return collected


class SubscriptionRegistry:
    """
    Keeps track of which text sources are bound to live counting.

    Lifecycle: create -> bind_metrics()/bind_frequencies() -> unbind() ->
    dispose(). The registry can be used as a context manager, which disposes
    every binding on exit.

    Invalid arguments are logged as warnings and the call does nothing.
    Every public method returns the registry so calls can be chained.
    """

    def __init__(self):
        self._bindings: list[_Binding] = []

    def _validate(self, sources: Sources, callback: Optional[Callable]) -> list[TextSource]:
        collected = _collect_sources(sources)
        if not collected:
            logger.warning("No valid text sources were found: %r", sources)
        if not callable(callback):
            logger.warning("%r is not a valid callback function", callback)
            return []
        return collected

    def _bind(self, sources: Sources, callback: ResultCallback, compute, options: Options):
        collected = self._validate(sources, callback)
        resolved = resolve_configuration(options)

        for source in collected:
            def handler(changed: TextSource) -> None:
                callback(changed, compute(changed, resolved))

            handler(source)
            handle = source.subscribe(handler)
            self._bindings.append(_Binding(source, handler, handle))
            logger.debug("Bound %s to %r", compute.__name__, source)

        return self

    def bind_metrics(self, sources: Sources, callback: ResultCallback,
                     options: Options = None) -> "SubscriptionRegistry":
        """
        Count each source now and again after every change.

        ``callback`` is called as ``callback(source, MetricsResult)``.
        """
        return self._bind(sources, callback, compute_metrics, options)

    def bind_frequencies(self, sources: Sources, callback: ResultCallback,
                         options: Options = None) -> "SubscriptionRegistry":
        """
        Rank word frequencies of each source now and after every change.

        ``callback`` is called as ``callback(source, dict_or_None)``.
        """
        return self._bind(sources, callback, compute_frequencies, options)

    def unbind(self, sources: Sources) -> "SubscriptionRegistry":
        """Stop live counting for the given source(s). Unbound sources are ignored."""
        collected = _collect_sources(sources)
        if not collected:
            logger.warning("No valid text sources were found: %r", sources)
            return self

        remaining = []
        for binding in self._bindings:
            if any(binding.source is source for source in collected):
                binding.source.unsubscribe(binding.handle)
                logger.debug("Unbound %r", binding.source)
            else:
                remaining.append(binding)
        self._bindings = remaining
        return self

    def count_once(self, sources: Sources, callback: ResultCallback,
                   options: Options = None) -> "SubscriptionRegistry":
        """Count each source once without binding it."""
        resolved = resolve_configuration(options)
        for source in self._validate(sources, callback):
            callback(source, compute_metrics(source, resolved))
        return self

    def frequencies_once(self, sources: Sources, callback: ResultCallback,
                         options: Options = None) -> "SubscriptionRegistry":
        """Rank word frequencies of each source once without binding it."""
        resolved = resolve_configuration(options)
        for source in self._validate(sources, callback):
            callback(source, compute_frequencies(source, resolved))
        return self

    def is_bound(self, source: TextSource) -> bool:
        """True if live counting is bound to ``source``."""
        return any(binding.source is source for binding in self._bindings)

    def dispose(self) -> None:
        """Unbind every source."""
        for binding in self._bindings:
            binding.source.unsubscribe(binding.handle)
        if self._bindings:
            logger.debug("Disposed %d binding(s)", len(self._bindings))
        self._bindings = []

    def __len__(self) -> int:
        return len(self._bindings)

    def __enter__(self) -> "SubscriptionRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
