"""Abstract interfaces for task schedulers and command history storage."""

from abc import ABC, abstractmethod

__all__ = ["Scheduler", "HistoryStorage"]


class Scheduler(ABC):
    """An engine that runs submitted tasks.

    ``post`` may be called from any thread. The task runs in an unspecified
    thread of execution as soon as possible, but always after ``post``
    has returned.
    """

    @abstractmethod
    def post(self, func):
        """Submit the callable ``func`` for execution."""


class HistoryStorage(ABC):
    """A place where the command history of sessions is kept."""

    @abstractmethod
    def store(self, commands):
        """Append the sequence of strings ``commands`` to the storage."""

    @abstractmethod
    def commands(self):
        """Return every stored command as a list of strings."""

    @abstractmethod
    def clear(self):
        """Remove everything, so that ``commands()`` returns an empty list."""