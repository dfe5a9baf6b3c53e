"""A readiness event paired with the token of its source."""

from __future__ import annotations

from typing import Hashable

_FLAGS = (
    "readable",
    "writable",
    "error",
    "read_closed",
    "write_closed",
    "priority",
    "aio",
    "lio",
)


class Event:
    """Readiness state reported for the source registered under a token."""

    __slots__ = ("_token",) + tuple(f"_{flag}" for flag in _FLAGS)

    def __init__(
        self,
        token: Hashable,
        *,
        readable: bool = False,
        writable: bool = False,
        error: bool = False,
        read_closed: bool = False,
        write_closed: bool = False,
        priority: bool = False,
        aio: bool = False,
        lio: bool = False,
    ) -> None:
        self._token = token
        self._readable = bool(readable)
        self._writable = bool(writable)
        self._error = bool(error)
        self._read_closed = bool(read_closed)
        self._write_closed = bool(write_closed)
        self._priority = bool(priority)
        self._aio = bool(aio)
        self._lio = bool(lio)

    def token(self) -> Hashable:
        """The token the source was registered with."""
        return self._token

    def is_readable(self) -> bool:
        """Whether the event carries readable readiness."""
        return self._readable

    def is_writable(self) -> bool:
        """Whether the event carries writable readiness."""
        return self._writable

    def is_error(self) -> bool:
        """Whether the source entered an error state."""
        return self._error

    def is_read_closed(self) -> bool:
        """Whether the read half of the source was closed."""
        return self._read_closed

    def is_write_closed(self) -> bool:
        """Whether the write half of the source was closed."""
        return self._write_closed

    def is_priority(self) -> bool:
        """Whether the event carries priority readiness."""
        return self._priority

    def is_aio(self) -> bool:
        """Whether the event carries AIO completion readiness."""
        return self._aio

    def is_lio(self) -> bool:
        """Whether the event carries LIO completion readiness."""
        return self._lio

    def _state(self) -> tuple:
        return (self._token,) + tuple(getattr(self, f"_{flag}") for flag in _FLAGS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash(self._state())

    def __repr__(self) -> str:
        fields = ", ".join(f"{flag}={getattr(self, '_' + flag)!r}" for flag in _FLAGS)
        return f"Event(token={self._token!r}, {fields})"