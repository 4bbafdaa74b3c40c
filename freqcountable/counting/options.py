"""Counting options and the resolver that merges caller overrides onto defaults."""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Union

logger = logging.getLogger(__name__)

DEFAULT_FREQ_ITEM_COUNT = 10

# camelCase option names accepted as aliases
OPTION_ALIASES = {
    "hardReturns": "hard_returns",
    "stripTags": "strip_tags",
    "ignoreReturns": "ignore_returns",
    "ignoreZeroWidth": "ignore_zero_width",
    "freqItemCount": "freq_item_count",
}


@dataclass(frozen=True)
class CountOptions:
    """
    Options for one counting call.

    hard_returns:       two or more newlines separate paragraphs instead of one.
    strip_tags:         remove HTML tags before counting.
    ignore_returns:     leave newlines out of the ``all`` metric.
    ignore_zero_width:  remove zero-width space characters before counting.
    freq_item_count:    how many of the most frequent words to return.
    """

    hard_returns: bool = False
    strip_tags: bool = False
    ignore_returns: bool = False
    ignore_zero_width: bool = True
    freq_item_count: int = DEFAULT_FREQ_ITEM_COUNT


_OPTION_NAMES = frozenset(f.name for f in fields(CountOptions))

DEFAULT_OPTIONS = CountOptions()


def resolve_configuration(
    overrides: Union[Mapping[str, Any], CountOptions, None] = None,
) -> CountOptions:
    """
    Merge ``overrides`` onto the default options.

    Keys may use either the snake_case field names or their camelCase
    aliases (hardReturns, freqItemCount, ...). Values are copied without type validation. Unknown
    keys, including the old ``max`` scratch field, are ignored.
    """
    if overrides is None:
        return DEFAULT_OPTIONS
    if isinstance(overrides, CountOptions):
        return overrides

    changes = {}
    for key, value in overrides.items():
        name = OPTION_ALIASES.get(key, key)
        if name in _OPTION_NAMES:
            changes[name] = value
        else:
            logger.debug("Ignoring unknown counting option: %s", key)

    return replace(DEFAULT_OPTIONS, **changes)
