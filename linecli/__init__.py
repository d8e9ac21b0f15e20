"""Building blocks for interactive command line interfaces: word splitting,
completion prefixes, strict argument parsing, colour sequences, key decoding
and an asyncio telnet server."""

__version__ = "0.1.0"

__all__ = [
    "split",
    "commonprefix",
    "fromstring",
    "colorprofile",
    "interfaces",
    "inputdevice",
    "server",
    "telnet",
]