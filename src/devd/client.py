"""
The client for the devd socket: reads lines from the connection and dispatches the parsed events
to the registered handlers.
"""
import logging
from enum import Enum

from devd.config.config import ClientSettings, load_client_settings
from devd.connector.base import Connector
from devd.connector.socketconn import UnixSocketConnector
from devd.protocol.parser import parse_line
from devd.protocol.reassembly import LineReassembler, LineOverflowError, DEFAULT_CAPACITY
from devd.registry import CallbackRegistry

logger = logging.getLogger(__name__)


class ReadResult(Enum):
    CONTINUE = 'continue'   # the connection is open, call again when readable
    CLOSED = 'closed'       # the connection has been closed


class DevdClient:
    """
    A connection to devd and the handlers that receive its events.

    The caller waits for fileno() to become readable and then calls read_and_dispatch(), or drain()
    to also process any complete lines already buffered. Handlers are called on the caller's thread.

    :param connector: provides the conduit to devd. By default the devd pipe.
    :param registry: the registered handlers.
    :param capacity: the longest line that can be received, including the newline.
    """

    def __init__(self, connector: Connector = None, registry: CallbackRegistry = None, capacity=DEFAULT_CAPACITY):
        self.connector = connector if connector is not None else UnixSocketConnector()
        self.registry = registry if registry is not None else CallbackRegistry()
        self.reassembler = LineReassembler(capacity)
        self._last_read = 0

    @classmethod
    def from_settings(cls, settings: ClientSettings, registry: CallbackRegistry = None):
        connector = UnixSocketConnector(settings.socket_path, settings.connect_timeout)
        return cls(connector, registry, settings.buffer_capacity)

    @classmethod
    def from_config(cls, directory=None, registry: CallbackRegistry = None):
        """ builds a client from the configuration files. See devd.config.config.load_client_settings """
        return cls.from_settings(load_client_settings(directory), registry)

    def open(self):
        """
        Connects to devd. Raises ConnectorError if the connection cannot be made.
        """
        if not self.connector.connected:
            self.reassembler.reset()
            self.connector.connect()
        return self

    def close(self):
        self.connector.disconnect()

    @property
    def connected(self) -> bool:
        return self.connector.connected

    def fileno(self):
        return self.connector.conduit.fileno()

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def register_notify(self, system_pattern, subsystem_pattern, type_pattern, callback):
        return self.registry.register_notify(system_pattern, subsystem_pattern, type_pattern, callback)

    def register_device(self, name_pattern, types, callback):
        return self.registry.register_device(name_pattern, types, callback)

    def unregister(self, handler):
        self.registry.unregister(handler)

    def read_and_dispatch(self) -> ReadResult:
        """
        Reads whatever is available without blocking, and dispatches at most one complete line.
        Nothing is read while a complete line is already buffered, so buffered lines are dispatched before
        the connection is found to be closed.
        When the peer has closed the connection or reading fails, the connection is closed.
        :return: ReadResult.CLOSED if the connection is closed, otherwise ReadResult.CONTINUE
        """
        if not self.connected or not self._receive():
            return ReadResult.CLOSED
        line = self.reassembler.next_line()
        if line is not None:
            self._process(line)
        return ReadResult.CONTINUE

    def drain(self) -> ReadResult:
        """
        Calls read_and_dispatch() until nothing more can be read without blocking and no complete line is buffered.
        """
        result = self.read_and_dispatch()
        while result is ReadResult.CONTINUE and (self._last_read or self.reassembler.has_line()):
            result = self.read_and_dispatch()
        return result

    def _receive(self):
        """
        Reads into the line buffer.
        :return: False if the connection was closed
        """
        reassembler = self.reassembler
        self._last_read = 0
        if reassembler.has_line() or not reassembler.free:
            return True     # dispatch what is buffered before reading more
        endpoint = self.connector.endpoint
        try:
            data = self.connector.conduit.recv(reassembler.free)
        except OSError as e:
            logger.warning("error reading from %s: %s" % (endpoint, e))
            self.close()
            return False
        if data is None:
            return True
        if not data:
            logger.info("connection closed by %s" % endpoint)
            self.close()
            return False
        self._last_read = len(data)
        try:
            reassembler.feed(data)
        except LineOverflowError as e:
            logger.warning("line from %s too long: %s" % (endpoint, e))
        return True

    def _process(self, line: bytes):
        event = parse_line(line.decode('ascii', 'surrogateescape'))
        if event is not None:
            self.registry.dispatch(event)
