"""The interface for anything that can be registered with a registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Hashable

from pollkit.interest import Interest


class Source(ABC):
    """An event source that can be registered with a registry.

    Callers should use the registry's own ``register``, ``reregister`` and
    ``deregister`` rather than calling these methods directly. Implementations
    usually delegate to a lower-level source. Errors are raised as ``OSError``.
    Sources should be deregistered before they are discarded.
    """

    @abstractmethod
    def register(self, registry: Any, token: Hashable, interests: Interest) -> None:
        """Register this source with ``registry`` under ``token`` for ``interests``."""

    @abstractmethod
    def reregister(self, registry: Any, token: Hashable, interests: Interest) -> None:
        """Replace the token and interests this source is registered with."""

    @abstractmethod
    def deregister(self, registry: Any) -> None:
        """Remove this source from ``registry``."""