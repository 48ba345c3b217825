from abc import abstractmethod


class Conduit:
    """
    A conduit is an open channel that delivers bytes without blocking.
    """

    @property
    @abstractmethod
    def open(self) -> bool:
        """ determines if this conduit is open. When open, recv() can be called. """
        raise NotImplementedError

    @abstractmethod
    def fileno(self) -> int:
        """ the descriptor to wait on for readability. """
        raise NotImplementedError

    @abstractmethod
    def recv(self, size):
        """
        Reads up to size bytes without blocking.
        :return: the bytes read, b'' when the peer has closed the channel, or None if no data is available yet.
        Other errors are raised as OSError.
        """
        raise NotImplementedError

    @abstractmethod
    def close(self):
        raise NotImplementedError
