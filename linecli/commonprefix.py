"""Longest common prefix of a set of strings."""

__all__ = ["common_prefix"]


def common_prefix(strings):
    """Return the longest prefix shared by every string in ``strings``.

    Raises ValueError if ``strings`` is empty.
    """
    strings = list(strings)
    if not strings:
        raise ValueError("common_prefix() needs at least one string")
    prefix = []
    for chars in zip(*strings):
        first = chars[0]
        if any(c != first for c in chars):
            break
        prefix.append(first)
    return "".join(prefix)