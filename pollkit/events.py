"""A bounded collection of readiness events filled by a poll."""

from __future__ import annotations

from typing import Iterator, List

from pollkit.event import Event


class Events:
    """Readiness events gathered by one call to poll.

    An ``Events`` holds at most ``capacity`` events. It is usually created once
    and reused for every poll; it is cleared before each poll fills it again.
    """

    __slots__ = ("_capacity", "_events")

    def __init__(self, capacity: int) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError("capacity must be an integer")
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._capacity = capacity
        self._events: List[Event] = []

    @classmethod
    def with_capacity(cls, capacity: int) -> Events:
        """Return an empty collection able to hold up to ``capacity`` events."""
        return cls(capacity)

    def capacity(self) -> int:
        """The number of events this collection can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """Whether no events are held."""
        return not self._events

    def iter(self) -> Iterator[Event]:
        """Return an iterator over the held events, in the order received."""
        return iter(self._events)

    def clear(self) -> None:
        """Drop every held event."""
        self._events.clear()

    def push(self, event: Event) -> None:
        """Append ``event``; raise ``OverflowError`` if the collection is full."""
        if not isinstance(event, Event):
            raise TypeError("only Event values can be stored")
        if len(self._events) >= self._capacity:
            raise OverflowError(
                f"events collection is full (capacity {self._capacity})"
            )
        self._events.append(event)

    def __iter__(self) -> Iterator[Event]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return repr(self._events)