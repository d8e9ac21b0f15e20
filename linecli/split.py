"""Split a command line into words, honouring quotes and escapes."""

from enum import Enum, auto

__all__ = ["split"]

_SPACES = " \t\n"
_QUOTES = "\"'"
_ESCAPABLE = "\"'\\"


class _State(Enum):
    SPACE = auto()
    WORD = auto()
    SENTENCE = auto()
    ESCAPE = auto()


def split(text):
    """Split ``text`` at blanks into a list of words.

    Single or double quotes group a sentence that may contain blanks.
    A backslash escapes a quote or another backslash; before any other
    character the backslash is kept. Empty words are dropped.
    """
    words = []
    state = _State.SPACE
    resume = _State.SPACE
    quote = '"'

    for char in text:
        if state is _State.SPACE:
            if char in _SPACES:
                continue
            if char in _QUOTES:
                state, quote = _State.SENTENCE, char
                words.append("")
            elif char == "\\":
                # an escaped first character still begins a plain word
                resume, state = _State.WORD, _State.ESCAPE
                words.append("")
            else:
                state = _State.WORD
                words.append(char)
        elif state is _State.WORD:
            if char in _SPACES:
                state = _State.SPACE
            elif char in _QUOTES:
                state, quote = _State.SENTENCE, char
                words.append("")
            elif char == "\\":
                resume, state = _State.WORD, _State.ESCAPE
            else:
                words[-1] += char
        elif state is _State.SENTENCE:
            if char in _QUOTES:
                if char == quote:
                    state = _State.SPACE
                else:
                    words[-1] += char
            elif char == "\\":
                resume, state = _State.SENTENCE, _State.ESCAPE
            else:
                words[-1] += char
        else:
            if char not in _ESCAPABLE:
                words[-1] += "\\"
            words[-1] += char
            state = resume

    return [word for word in words if word]