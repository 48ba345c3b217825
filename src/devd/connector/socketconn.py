import logging
import os
import socket

from devd.conduit.base import Conduit
from devd.conduit.socket_conduit import SocketConduit
from devd.connector.base import AbstractConnector, ConnectorError

logger = logging.getLogger(__name__)

# where devd(8) listens for stream clients
DEVD_PIPE = '/var/run/devd.pipe'


class UnixSocketConnector(AbstractConnector):
    """
    A connector to a local stream socket, such as the devd pipe. Once connected, the socket is non-blocking.
    """
    def __init__(self, path=DEVD_PIPE, timeout=5):
        """
        :param path: the filesystem path of the socket
        :param timeout: how long to wait for the connection to be established, in seconds
        """
        super().__init__()
        self._path = path
        self._timeout = timeout

    @property
    def endpoint(self):
        return self._path

    def _connect(self) -> Conduit:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.settimeout(self._timeout)
            sock.connect(self._path)
            sock.setblocking(False)
        except OSError as e:
            sock.close()
            logger.warning("error opening socket to %s: %s" % (self._path, e))
            raise ConnectorError("unable to connect to %s" % self._path) from e
        logger.info("opened socket to %s" % self._path)
        return SocketConduit(sock)

    def _disconnect(self):
        logger.info("closing socket to %s" % self._path)

    def _try_available(self):
        return os.path.exists(self._path)
