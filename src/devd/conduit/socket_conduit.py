import socket

from devd.conduit import base


class SocketConduit(base.Conduit):
    """
    A conduit that reads from a non-blocking socket.
    :param sock The open, connected socket
    """
    def __init__(self, sock: socket.socket):
        """
        :param sock: the client socket that represents the connection
        :type sock: socket
        """
        self.sock = sock

    @property
    def open(self) -> bool:
        return self.sock.fileno() >= 0

    def fileno(self):
        return self.sock.fileno()

    def recv(self, size):
        try:
            return self.sock.recv(size)
        except BlockingIOError:
            return None

    def close(self):
        try:
            self.sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass    # the peer may have closed the socket
        finally:
            self.sock.close()
