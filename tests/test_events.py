import pytest

from pollkit.event import Event
from pollkit.events import Events


def test_with_capacity_reports_capacity():
    events = Events.with_capacity(1024)
    assert events.capacity() == 1024


def test_new_collection_is_empty():
    events = Events.with_capacity(16)
    assert events.capacity() == 16
    assert events.is_empty()
    assert len(events) == 0
    assert list(events) == []


def test_push_and_iterate_in_order():
    events = Events.with_capacity(4)
    first = Event(1, readable=True)
    second = Event(2, writable=True)
    events.push(first)
    events.push(second)
    assert not events.is_empty()
    assert len(events) == 2
    assert list(events.iter()) == [first, second]
    assert [e.token() for e in events] == [1, 2]


def test_iter_count_matches_len():
    events = Events.with_capacity(8)
    for token in range(5):
        events.push(Event(token, readable=True))
    assert sum(1 for _ in events.iter()) == len(events)


def test_iterators_are_independent():
    events = Events.with_capacity(2)
    events.push(Event(10, readable=True))
    it1 = events.iter()
    it2 = events.iter()
    assert next(it1).token() == 10
    assert next(it2).token() == 10
    assert next(it1, None) is None


def test_clear_empties_collection():
    events = Events.with_capacity(4)
    events.push(Event(10, readable=True))
    assert not events.is_empty()
    events.clear()
    assert events.is_empty()
    assert events.capacity() == 4


def test_reuse_after_clear():
    events = Events.with_capacity(1)
    events.push(Event(1, readable=True))
    events.clear()
    events.push(Event(2, writable=True))
    assert [e.token() for e in events] == [2]


def test_push_beyond_capacity_raises():
    events = Events.with_capacity(1)
    events.push(Event(0, readable=True))
    with pytest.raises(OverflowError):
        events.push(Event(1, readable=True))
    assert len(events) == 1


def test_zero_capacity_rejects_push():
    events = Events.with_capacity(0)
    with pytest.raises(OverflowError):
        events.push(Event(0))
    assert events.is_empty()


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        Events.with_capacity(-1)


def test_non_integer_capacity_raises():
    with pytest.raises(TypeError):
        Events.with_capacity("8")


def test_push_non_event_raises():
    events = Events.with_capacity(2)
    with pytest.raises(TypeError):
        events.push("not an event")
    assert events.is_empty()


def test_repr_empty():
    assert repr(Events.with_capacity(4)) == "[]"


def test_repr_lists_events():
    events = Events.with_capacity(4)
    event = Event(10, readable=True)
    events.push(event)
    assert repr(events) == f"[{event!r}]"