# pollkit

Building blocks for readiness-based, non-blocking I/O: interest sets,
readiness events, bounded event collections, the event-source interface
and an adapter that turns any file-descriptor-backed object into an
event source.

## Installation

```
pip install pollkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "pollkit[test]"
pytest
```

## Modules

### `pollkit.interest`

`Interest` is an immutable, non-empty set of readiness kinds. The class
constants are `Interest.READABLE`, `Interest.WRITABLE`, `Interest.AIO`,
`Interest.LIO` and `Interest.PRIORITY`.

- Combine sets with `a | b` or `a.add(b)`.
- `a.remove(b)` returns the remaining set, or `None` if nothing is left.
- `is_readable()`, `is_writable()`, `is_aio()`, `is_lio()` and
  `is_priority()` test membership.
- `repr()` lists the members joined by `" | "`, e.g. `READABLE | WRITABLE`.
- Interests compare equal by value, are hashable and are ordered.
- Building an `Interest` from `0` raises `ValueError`, as do unknown bits.
  A non-integer raises `TypeError`.

### `pollkit.event`

`Event(token, *, readable=False, writable=False, error=False,
read_closed=False, write_closed=False, priority=False, aio=False,
lio=False)` is one readiness event. `token()` returns the token. The
flags are read with `is_readable()`, `is_writable()`, `is_error()`,
`is_read_closed()`, `is_write_closed()`, `is_priority()`, `is_aio()` and
`is_lio()`. Events compare equal and hash by token and flags.

### `pollkit.events`

`Events.with_capacity(n)` (or `Events(n)`) creates an empty collection
that holds at most `n` events.

- `capacity()` returns `n`.
- `is_empty()` and `len()` report how many events it holds.
- `push(event)` appends an `Event`. It raises `OverflowError` when the
  collection is full and `TypeError` for anything that is not an `Event`.
- `iter()` and plain iteration yield the events in the order they were
  pushed.
- `clear()` drops them all.

A negative capacity raises `ValueError`.

### `pollkit.source`

`Source` is an abstract base class with three methods:
`register(registry, token, interests)`,
`reregister(registry, token, interests)` and `deregister(registry)`.
Implement it to make your own object registrable. Report failures by
raising `OSError` or one of its subclasses.

### `pollkit.io_source`

`IoSource(io)` wraps an integer file descriptor, or any object with a
`fileno()` method, as a `Source`.

- `do_io(f)` calls `f(io)` and returns its result.
- `into_inner()` returns the wrapped object.
- Other attributes are looked up on the wrapped object.
- `repr()` is the wrapped object's `repr()`.

`register`, `reregister` and `deregister` pass the file descriptor on to
`registry.selector()`. That object must provide `id()`,
`register(fd, token, interests)`, `reregister(fd, token, interests)` and
`deregister(fd)`.

Unless Python runs with `-O`, the wrapper also records which selector it
belongs to:

- Registering while it is already registered raises `FileExistsError`.
- Re-registering with a different registry raises `FileExistsError`.
- Re-registering or deregistering when it is not registered raises
  `FileNotFoundError`.

## Example

```python
from pollkit.interest import Interest

interests = Interest.READABLE | Interest.WRITABLE
assert interests.is_readable() and interests.is_writable()
print(repr(interests))          # READABLE | WRITABLE

writable_only = interests.remove(Interest.READABLE)
assert writable_only is not None and not writable_only.is_readable()
assert writable_only.remove(Interest.WRITABLE) is None
```

```python
from pollkit.event import Event
from pollkit.events import Events

events = Events.with_capacity(2)
events.push(Event(0, readable=True))
events.push(Event(1, writable=True))
for event in events:
    print(event.token(), event.is_readable(), event.is_writable())
events.clear()
assert events.is_empty()
```

## What pollkit does not do

pollkit has no poller, registry or selector of its own. It does not wait
on operating-system readiness and never fills an `Events` collection by
itself. It has no network types and no command-line program. To use
`IoSource` you supply a registry object whose `selector()` follows the
interface described above, and you push events into `Events` yourself.