"""Readiness interests, events, event collections and event sources for non-blocking I/O."""

__version__ = "1.0.3"

__all__ = ["event", "events", "interest", "io_source", "source"]