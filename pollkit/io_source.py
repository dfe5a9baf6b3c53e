"""Adapter that lets any file-descriptor-backed object act as an event source."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Hashable, Protocol, TypeVar

from pollkit.interest import Interest
from pollkit.source import Source

T = TypeVar("T")
R = TypeVar("R")


class _Selector(Protocol):
    def id(self) -> int: ...

    def register(self, fd: int, token: Hashable, interests: Interest) -> None: ...

    def reregister(self, fd: int, token: Hashable, interests: Interest) -> None: ...

    def deregister(self, fd: int) -> None: ...


class _Registry(Protocol):
    def selector(self) -> _Selector: ...


def _raw_fd(io: Any) -> int:
    if isinstance(io, int) and not isinstance(io, bool):
        return io
    try:
        fileno = io.fileno
    except AttributeError:
        raise TypeError(
            f"{type(io).__name__} has no file descriptor to register"
        ) from None
    return fileno()


class _SelectorId:
    """Tracks which selector an I/O source is registered with."""

    UNASSOCIATED = 0

    def __init__(self) -> None:
        self._id = self.UNASSOCIATED
        self._lock = threading.Lock()

    def _swap(self, new_id: int) -> int:
        with self._lock:
            previous, self._id = self._id, new_id
        return previous

    def associate(self, registry: _Registry) -> None:
        registry_id = registry.selector().id()
        if self._swap(registry_id) != self.UNASSOCIATED:
            raise FileExistsError("I/O source already registered with a `Registry`")

    def check_association(self, registry: _Registry) -> None:
        registry_id = registry.selector().id()
        with self._lock:
            current = self._id
        if current == registry_id:
            return
        if current == self.UNASSOCIATED:
            raise FileNotFoundError("I/O source not registered with `Registry`")
        raise FileExistsError(
            "I/O source already registered with a different `Registry`"
        )

    def remove_association(self, registry: _Registry) -> None:
        registry_id = registry.selector().id()
        if self._swap(self.UNASSOCIATED) != registry_id:
            raise FileNotFoundError("I/O source not registered with `Registry`")


class IoSource(Source, Generic[T]):
    """Wraps an object with a file descriptor so it can be registered.

    All I/O on the wrapped object should go through :meth:`do_io`. Other
    attributes of the wrapped object are reachable directly on the wrapper.
    """

    def __init__(self, io: T) -> None:
        self._inner = io
        self._selector_id = _SelectorId()

    def do_io(self, f: Callable[[T], R]) -> R:
        """Run the I/O operation ``f`` on the wrapped object and return its result."""
        return f(self._inner)

    def into_inner(self) -> T:
        """Return the wrapped object; deregister first to stop its events."""
        return self._inner

    def register(
        self, registry: _Registry, token: Hashable, interests: Interest
    ) -> None:
        if __debug__:
            self._selector_id.associate(registry)
        registry.selector().register(_raw_fd(self._inner), token, interests)

    def reregister(
        self, registry: _Registry, token: Hashable, interests: Interest
    ) -> None:
        if __debug__:
            self._selector_id.check_association(registry)
        registry.selector().reregister(_raw_fd(self._inner), token, interests)

    def deregister(self, registry: _Registry) -> None:
        if __debug__:
            self._selector_id.remove_association(registry)
        registry.selector().deregister(_raw_fd(self._inner))

    def __getattr__(self, name: str) -> Any:
        if name in ("_inner", "_selector_id"):
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __repr__(self) -> str:
        return repr(self._inner)