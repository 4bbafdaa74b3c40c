"""In-memory text surfaces: a fixed one and an editable one."""

import itertools
import logging

from freqcountable.sources.base_source import ChangeHandler, TextSource

logger = logging.getLogger(__name__)


class StaticTextSource(TextSource):
    """Text that never changes. Subscriptions are accepted but never fire."""

    def __init__(self, text: str = "", name: str = None):
        self._text = text or ""
        self.name = name

    def get_raw_text(self) -> str:
        return self._text

    def subscribe(self, handler: ChangeHandler) -> int:
        return 0

    def unsubscribe(self, handle: int) -> None:
        return None

    def __repr__(self) -> str:
        return f"StaticTextSource(name={self.name!r}, length={len(self._text)})"


class EditableTextSource(TextSource):
    """
    Text that can be replaced with set_text().

    Every replacement notifies the subscribed handlers, in the order they
    subscribed, with the source itself as the only argument.
    """

    def __init__(self, text: str = "", name: str = None):
        self._text = text or ""
        self.name = name
        self._handlers: dict[int, ChangeHandler] = {}
        self._next_handle = itertools.count(1)

    def get_raw_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the content and notify subscribers."""
        self._text = text or ""
        logger.debug(
            "%r changed, notifying %d handler(s)", self, len(self._handlers)
        )
        for handler in list(self._handlers.values()):
            handler(self)

    def subscribe(self, handler: ChangeHandler) -> int:
        handle = next(self._next_handle)
        self._handlers[handle] = handler
        return handle

    def unsubscribe(self, handle: int) -> None:
        self._handlers.pop(handle, None)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"EditableTextSource(name={self.name!r}, length={len(self._text)})"
