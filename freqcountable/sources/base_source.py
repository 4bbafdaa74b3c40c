"""Base class for text surfaces whose content can be counted."""

from abc import ABC, abstractmethod
from typing import Any, Callable

ChangeHandler = Callable[["TextSource"], None]


class TextSource(ABC):
    """
    Abstract base class for a text surface.

    Subclasses must implement:
        - get_raw_text() -> str
        - subscribe(handler) -> handle
        - unsubscribe(handle)

    The counting functions only ever call get_raw_text(). Subscriptions are
    used by SubscriptionRegistry to recount when the content changes.
    """

    @abstractmethod
    def get_raw_text(self) -> str:
        """Return the current, unprocessed content of the surface."""
        ...

    @abstractmethod
    def subscribe(self, handler: ChangeHandler) -> Any:
        """
        Register ``handler`` to be called with this source after each change.

        Returns an opaque handle to pass to unsubscribe().
        """
        ...

    @abstractmethod
    def unsubscribe(self, handle: Any) -> None:
        """Remove a subscription. Unknown handles are ignored."""
        ...
