"""Telnet sessions: option negotiation, line encoding and key decoding."""

import logging
from enum import Enum, IntEnum, auto

from .inputdevice import InputDevice, KeyType
from .server import Server, Session

__all__ = ["TelnetCommand", "TelnetSession", "TelnetServer", "KeyDecoder"]

_log = logging.getLogger(__name__)


class TelnetCommand(IntEnum):
    """Telnet command bytes and the option codes this module negotiates."""

    SE = 0xF0  # end of subnegotiation parameters
    NOP = 0xF1
    DATA_MARK = 0xF2
    BREAK = 0xF3
    INTERRUPT_PROCESS = 0xF4
    ABORT_OUTPUT = 0xF5
    ARE_YOU_THERE = 0xF6
    ERASE_CHARACTER = 0xF7
    ERASE_LINE = 0xF8
    GO_AHEAD = 0xF9
    SB = 0xFA  # start of subnegotiation
    WILL = 0xFB
    WONT = 0xFC
    DO = 0xFD
    DONT = 0xFE
    IAC = 0xFF

    ECHO = 0x01
    SUPPRESS_GO_AHEAD = 0x03
    TERMINAL_TYPE = 0x18
    NEGOTIATE_ABOUT_WINDOW_SIZE = 0x1F
    TERMINAL_SPEED = 0x20
    NEW_ENVIRON = 0x27


_IAC_DO_LINEMODE = b"\xff\xfd\x22"
_IAC_SB_LINEMODE_MODE0_IAC_SE = b"\xff\xfa\x22\x01\x00\xff\xf0"
_IAC_WILL_ECHO = b"\xff\xfb\x01"

_RESET_COMMANDS = frozenset(
    {
        TelnetCommand.DATA_MARK,
        TelnetCommand.BREAK,
        TelnetCommand.INTERRUPT_PROCESS,
        TelnetCommand.ABORT_OUTPUT,
        TelnetCommand.ARE_YOU_THERE,
        TelnetCommand.ERASE_CHARACTER,
        TelnetCommand.ERASE_LINE,
        TelnetCommand.GO_AHEAD,
        TelnetCommand.NOP,
    }
)


class _State(Enum):
    DATA = auto()
    SUB = auto()
    WAIT_WILL = auto()
    WAIT_WONT = auto()
    WAIT_DO = auto()
    WAIT_DONT = auto()


class TelnetSession(Session):
    """A connection speaking the telnet protocol.

    Incoming bytes are stripped of telnet commands, option requests are
    answered, and the remaining data bytes are handed one at a time to
    ``output``. Outgoing newlines become CR LF.
    """

    def __init__(self, reader, writer, data_handler=None):
        super().__init__(reader, writer)
        self._state = _State.DATA
        self._escape = False
        self.data_handler = data_handler

    def encode(self, data):
        """Prefix every LF with CR."""
        return bytes(data).replace(b"\n", b"\r\n")

    def on_connect(self):
        """Ask the client for line mode (mode 0) and offer to echo."""
        self.send(_IAC_DO_LINEMODE)
        self.send(_IAC_SB_LINEMODE_MODE0_IAC_SE)
        self.send(_IAC_WILL_ECHO)

    def on_disconnect(self):
        """Forget any half-parsed command once the peer has gone."""
        self._reset_protocol()

    def on_error(self):
        """Drop the protocol state after a transport error."""
        self._reset_protocol()

    def on_data_received(self, data):
        """Process each received byte through the telnet state machine."""
        for byte in data:
            self._consume(byte)

    def output(self, byte):
        """Receive one data byte of the stream and pass it to ``data_handler``."""
        if self.data_handler is not None:
            self.data_handler(byte)

    def _reset_protocol(self):
        self._state = _State.DATA
        self._escape = False

    def _consume(self, byte):
        if self._escape:
            if byte == TelnetCommand.IAC:
                self._data(byte)
            else:
                self._command(byte)
            self._escape = False
        elif byte == TelnetCommand.IAC:
            self._escape = True
        else:
            self._data(byte)

    def _data(self, byte):
        state = self._state
        if state is _State.DATA:
            self.output(byte)
            return
        if state is _State.SUB:
            return
        self._state = _State.DATA
        if state is _State.WAIT_WILL:
            self._rx_will(byte)
        elif state is _State.WAIT_DO:
            self._rx_do(byte)

    def _command(self, byte):
        if byte == TelnetCommand.SE:
            if self._state is _State.SUB:
                self._state = _State.DATA
            else:
                _log.error("received SE when not in sub state")
        elif byte in _RESET_COMMANDS:
            self._state = _State.DATA
        elif byte == TelnetCommand.SB:
            if self._state is not _State.SUB:
                self._state = _State.SUB
            else:
                _log.error("received SB when already in sub state")
        elif byte == TelnetCommand.WILL:
            self._state = _State.WAIT_WILL
        elif byte == TelnetCommand.WONT:
            self._state = _State.WAIT_WONT
        elif byte == TelnetCommand.DO:
            self._state = _State.WAIT_DO
        elif byte == TelnetCommand.DONT:
            self._state = _State.WAIT_DONT

    def _rx_will(self, option):
        if option == TelnetCommand.SUPPRESS_GO_AHEAD:
            self._send_iac(TelnetCommand.WILL, TelnetCommand.SUPPRESS_GO_AHEAD)
        elif option == TelnetCommand.NEGOTIATE_ABOUT_WINDOW_SIZE:
            self._send_iac(TelnetCommand.DO, TelnetCommand.NEGOTIATE_ABOUT_WINDOW_SIZE)
        else:
            self._send_iac(TelnetCommand.DONT, option)

    def _rx_do(self, option):
        if option == TelnetCommand.ECHO:
            self._send_iac(TelnetCommand.DO, TelnetCommand.ECHO)
        elif option == TelnetCommand.SUPPRESS_GO_AHEAD:
            self._send_iac(TelnetCommand.WILL, TelnetCommand.SUPPRESS_GO_AHEAD)
        else:
            self._send_iac(TelnetCommand.WONT, option)

    def _send_iac(self, action, option):
        self.send(bytes((TelnetCommand.IAC, action, option)))


class TelnetServer(Server):
    """Server that serves every connection with a TelnetSession."""

    def create_session(self, reader, writer):
        return TelnetSession(reader, writer)


class _Step(Enum):
    START = auto()
    ESCAPE = auto()
    BRACKET = auto()
    TILDE = auto()
    WAIT_ZERO = auto()


_ARROWS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


class KeyDecoder(InputDevice):
    """Turns the data bytes of a terminal stream into key events.

    Events are posted through the scheduler to the registered handler.
    """

    def __init__(self, scheduler):
        super().__init__(scheduler)
        self._step = _Step.START

    def feed(self, byte):
        """Consume one byte of terminal input."""
        step = self._step
        if step is _Step.START:
            if byte in (0xFF, 4):  # EOF as a signed char, or EOT
                self.notify(KeyType.EOF)
            elif byte in (8, 127):
                self.notify(KeyType.BACKSPACE)
            elif byte == 27:
                self._step = _Step.ESCAPE
            elif byte == 13:
                self._step = _Step.WAIT_ZERO
            else:
                self.notify(KeyType.ASCII, chr(byte))
        elif step is _Step.ESCAPE:
            if byte == 91:
                self._step = _Step.BRACKET
            else:
                self._step = _Step.START
                self.notify(KeyType.IGNORED)
        elif step is _Step.BRACKET:
            key = _ARROWS.get(byte)
            if key is None:
                self._step = _Step.TILDE
            else:
                self._step = _Step.START
                self.notify(key)
        elif step is _Step.TILDE:
            self._step = _Step.START
            self.notify(KeyType.CANC if byte == 126 else KeyType.IGNORED)
        else:
            self._step = _Step.START
            self.notify(KeyType.RET if byte in (0, 10) else KeyType.IGNORED)