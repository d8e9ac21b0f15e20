# linecli

Small, dependency-free building blocks for interactive command line
interfaces, including a telnet front end built on `asyncio`.

## Installation

```
pip install linecli
```

To run the test suite:

```
pip install "linecli[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `linecli.split` | `split(text)` breaks a command line into words. Single or double quotes group words containing blanks; a backslash escapes a quote or another backslash and is kept before any other character. Empty words are dropped. |
| `linecli.commonprefix` | `common_prefix(strings)` returns the longest prefix shared by all strings; it raises `ValueError` when given none. |
| `linecli.fromstring` | Strict conversion of command arguments: `parse_signed(text, bits)`, `parse_unsigned(text, bits)`, `parse_bool`, `parse_char`, `parse_float` and the dispatcher `from_string(text, target)`. Failures raise `BadConversion` (a `ValueError`). `IntType` names fixed-width integer targets such as `IntType.INT` or `IntType.UNSIGNED_SHORT`. |
| `linecli.colorprofile` | A global colour switch (`set_color`, `set_no_color`, `is_color_enabled`) and the ANSI sequences written around the prompt and the user's input (`before_prompt`, `after_prompt`, `before_input`, `after_input`); with colours off they are empty strings. |
| `linecli.interfaces` | The abstract `Scheduler` (`post(func)`) and `HistoryStorage` (`store`, `commands`, `clear`). |
| `linecli.inputdevice` | `KeyType` and `InputDevice`, which posts key events through a scheduler to a registered handler called as `handler(key, char)`. |
| `linecli.server` | `Session` and `Server`: an `asyncio` TCP server that creates one session per connection. `Server` is also an async context manager. |
| `linecli.telnet` | `TelnetSession` (telnet option negotiation, LF sent as CR LF, data bytes passed to `output` and an optional `data_handler`), `TelnetServer`, `TelnetCommand` and `KeyDecoder`, which turns terminal bytes into key events. |

## Examples

Splitting a command line:

```python
from linecli.split import split

split('load "my plugin" --fast')   # ['load', 'my plugin', '--fast']
split(r'"foo\"bar"')                # ['foo"bar']
```

Completion:

```python
from linecli.commonprefix import common_prefix

common_prefix(["prefix_foo", "prefix_bar"])   # 'prefix_'
```

Typed arguments:

```python
from linecli.fromstring import BadConversion, IntType, from_string, parse_signed

parse_signed("-128", 8)                    # -128
from_string("42", IntType.UNSIGNED_SHORT)  # 42
from_string("true", bool)                  # True
from_string("1.5", float)                  # 1.5

try:
    parse_signed("128", 8)
except BadConversion:
    print("out of range")
```

`from_string` also accepts `str`, `None`, `int` (treated as a 32-bit
signed integer) and any other callable that builds a value from a string;
errors raised by that callable are reported as `BadConversion`.

Colours:

```python
from linecli import colorprofile

colorprofile.set_color()
print(colorprofile.before_prompt() + "cli> " + colorprofile.after_prompt())
```

Decoding keys from a terminal byte stream:

```python
from linecli.interfaces import Scheduler
from linecli.telnet import KeyDecoder

class Immediate(Scheduler):
    def post(self, func):
        func()

decoder = KeyDecoder(Immediate())
decoder.register(lambda key, char: print(key, repr(char)))
for byte in b"a\x1b[A":
    decoder.feed(byte)   # KeyType.ASCII 'a', then KeyType.UP ' '
```

A telnet server:

```python
import asyncio
from linecli.telnet import TelnetServer

async def main():
    async with TelnetServer(port=5000):
        await asyncio.Event().wait()

asyncio.run(main())
```

## What the package does not do

- There is no menu or command registry and no command dispatch: a
  `TelnetSession` negotiates options and hands each data byte to `output`
  (and to `data_handler` if one is set), but nothing interprets the lines.
- `TelnetServer` does not connect sessions to a `KeyDecoder`; wiring the
  two together is left to the application.
- `Scheduler` and `HistoryStorage` are abstract only; no concrete
  scheduler, in-memory or file-backed history is included.
- There is no local keyboard session and no command to run.