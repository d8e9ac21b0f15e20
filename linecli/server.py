"""Asynchronous TCP server with one session object per connection."""

import asyncio
import ipaddress
from abc import ABC, abstractmethod

__all__ = ["Session", "Server"]


class Session(ABC):
    """One client connection.

    Subclasses react to the connection events; ``send`` writes to the client
    after passing the data through ``encode``.
    """

    MAX_LENGTH = 1024

    def __init__(self, reader, writer):
        self._reader = reader
        self._writer = writer

    async def start(self):
        """Announce the connection and read from the client until it ends."""
        self.on_connect()
        try:
            await self._read_loop()
        finally:
            self._writer.close()

    async def _read_loop(self):
        while True:
            if self._writer.is_closing():
                self.on_disconnect()
                return
            try:
                data = await self._reader.read(self.MAX_LENGTH)
            except (ConnectionResetError, BrokenPipeError):
                self.on_disconnect()
                return
            except OSError:
                self.on_error()
                return
            if not data:
                self.on_disconnect()
                return
            self.on_data_received(data)

    def send(self, data):
        """Encode ``data`` (bytes, or text sent as UTF-8) and write it to the client."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        payload = self.encode(bytes(data))
        if self._writer.is_closing():
            self.on_disconnect()
            return
        try:
            self._writer.write(payload)
        except (ConnectionResetError, BrokenPipeError):
            self.on_disconnect()
        except OSError:
            self.on_error()

    def encode(self, data):
        """Transform outgoing bytes before they are written; unchanged by default."""
        return data

    def disconnect(self):
        """Close the connection."""
        self._writer.close()

    @abstractmethod
    def on_connect(self):
        """Called once when the session starts."""

    @abstractmethod
    def on_disconnect(self):
        """Called when the client goes away or the connection is closed."""

    @abstractmethod
    def on_error(self):
        """Called on a transport error other than a disconnection."""

    @abstractmethod
    def on_data_received(self, data):
        """Called with each chunk of bytes read from the client."""


class Server(ABC):
    """Listening socket that creates a session for each accepted connection.

    Without an address it listens on every IPv4 interface. Port 0 picks a
    free port; ``port`` holds the bound one after ``start``.
    """

    def __init__(self, port, address=None):
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port out of range: {port}")
        if address is None:
            self.address = "0.0.0.0"
        else:
            self.address = str(ipaddress.ip_address(address))
        self.port = port
        self._server = None
        self._sessions = set()

    @abstractmethod
    def create_session(self, reader, writer):
        """Return the Session that serves a new connection."""

    async def start(self):
        """Bind the socket and begin accepting connections."""
        if self._server is not None:
            raise RuntimeError("server already started")
        self._server = await asyncio.start_server(
            self._accept, self.address, self.port
        )
        self.port = self._server.sockets[0].getsockname()[1]

    async def _accept(self, reader, writer):
        session = self.create_session(reader, writer)
        self._sessions.add(session)
        try:
            await session.start()
        finally:
            self._sessions.discard(session)

    async def close(self):
        """Stop accepting, disconnect open sessions and wait until closed."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        for session in list(self._sessions):
            session.disconnect()
        await server.wait_closed()

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, *exc_info):
        await self.close()