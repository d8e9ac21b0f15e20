"""Key events and the devices that produce them."""

from enum import Enum, auto

__all__ = ["KeyType", "InputDevice"]


class KeyType(Enum):
    """Kind of key read from an input device."""

    ASCII = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    CANC = auto()
    HOME = auto()
    END = auto()
    RET = auto()
    EOF = auto()
    IGNORED = auto()


class InputDevice:
    """Source of key events delivered to a handler through a scheduler.

    The handler is called as ``handler(key, char)`` in the scheduler's
    thread; it is looked up when the task runs, not when it is posted.
    """

    def __init__(self, scheduler):
        self._scheduler = scheduler
        self._handler = None

    def register(self, handler):
        """Set the callable that receives key events, replacing any previous one."""
        self._handler = handler

    def notify(self, key, char=" "):
        """Post the key event to the scheduler for delivery to the handler."""

        def deliver():
            if self._handler is not None:
                self._handler(key, char)

        self._scheduler.post(deliver)