"""Global colour switch and the escape sequences framing prompt and input."""

import threading

__all__ = [
    "set_color",
    "set_no_color",
    "is_color_enabled",
    "before_prompt",
    "after_prompt",
    "before_input",
    "after_input",
]

_GREEN = "\x1b[32m"
_BOLD = "\x1b[1m"
_BRIGHT_GRAY = "\x1b[97m"
_RESET = "\x1b[0m"

_color = threading.Event()


def set_color():
    """Turn coloured output on."""
    _color.set()


def set_no_color():
    """Turn coloured output off."""
    _color.clear()


def is_color_enabled():
    """Return whether coloured output is on."""
    return _color.is_set()


def before_prompt():
    """Sequence written before the prompt: bold green when colours are on."""
    return _GREEN + _BOLD if is_color_enabled() else ""


def after_prompt():
    """Sequence written after the prompt."""
    return _RESET if is_color_enabled() else ""


def before_input():
    """Sequence written before echoed user input: gray when colours are on."""
    return _BRIGHT_GRAY if is_color_enabled() else ""


def after_input():
    """Sequence written after echoed user input."""
    return _RESET if is_color_enabled() else ""