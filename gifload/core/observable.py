"""Replay-latest observable value."""

import logging
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger("GifLoad.Observable")

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """Holds a current value and notifies subscribers when it changes.

    New subscribers immediately receive the current value.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception as e:
                logger.error(f"Subscriber {callback!r} failed: {e}")

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback and replay the current value to it.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def clear(self) -> None:
        self._subscribers.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
