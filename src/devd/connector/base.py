from abc import abstractmethod

from devd.conduit.base import Conduit
from devd.support.events import EventSource


class ConnectorError(Exception):
    """ Indicates an error condition with a connection. """


class ConnectionNotConnectedError(ConnectorError):
    """ Indicates a connection is in the disconnected state when a connection is required. """


class ConnectionNotAvailableError(ConnectorError):
    """ Indicates the connection is not available. """


class ConnectorEvent:
    """ base class for connector events. """
    def __init__(self, connector):
        self.connector = connector


class ConnectorConnectedEvent(ConnectorEvent):
    """ The connector was connected. """


class ConnectorDisconnectedEvent(ConnectorEvent):
    """ The connector was disconnected. """


class Connector:
    """ A connector describes an endpoint to which a conduit can be established. """

    def __init__(self):
        self.events = EventSource()

    @property
    @abstractmethod
    def endpoint(self):
        """ the endpoint that this connector reaches out to """
        raise NotImplementedError

    @property
    @abstractmethod
    def connected(self) -> bool:
        """
        :return: True if this connector is connected to its underlying resource. False otherwise.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def conduit(self) -> Conduit:
        """
        Retrieves the conduit for this connection.
        If the connection is not connected, raises ConnectionNotConnectedError
        """
        raise ConnectionNotConnectedError

    @property
    @abstractmethod
    def available(self) -> bool:
        """ Determines if the underlying resource for this connector is available.
        :return: True if the resource is available and can be connected to.
        """
        raise NotImplementedError

    @abstractmethod
    def connect(self):
        """
        Connects this connector to the underlying resource.
        If the connection is already connected, this method returns silently.
        Raises ConnectorError if the connection cannot be established.
        """
        raise NotImplementedError

    @abstractmethod
    def disconnect(self):
        raise NotImplementedError


class AbstractConnector(Connector):
    """ Manages the connection cycle to an endpoint."""

    def __init__(self):
        super().__init__()
        self._conduit = None

    @property
    def available(self):
        return False if self.connected else self._try_available()

    @property
    def connected(self):
        return self._conduit is not None and self._conduit.open

    def connect(self):
        if self.connected:
            return

        if not self.available:
            raise ConnectionNotAvailableError("%s is not available" % (self.endpoint,))

        self._conduit = self._connect()
        self.events.fire(ConnectorConnectedEvent(self))

    def disconnect(self):
        """ Closes the conduit. Does nothing if not connected. """
        if self._conduit is None:
            return
        self._disconnect()
        self._conduit.close()
        self._conduit = None
        self.events.fire(ConnectorDisconnectedEvent(self))

    @abstractmethod
    def _connect(self) -> Conduit:
        """ Template method for subclasses to perform the connection.
            If connection is not possible, ConnectorError should be raised
        """
        raise NotImplementedError

    @abstractmethod
    def _try_available(self):
        """ Determine if this connection is available. This method is only called when
            the connection is disconnected.
        :return: True if the connection is available or False otherwise.
        :rtype: bool
        """
        raise NotImplementedError

    @abstractmethod
    def _disconnect(self):
        """ perform any actions needed on disconnection.
        The base class takes care of closing the conduit, which happens
        after this method has been called.
        """
        raise NotImplementedError

    @property
    def conduit(self) -> Conduit:
        """
        Retrieves the conduit for this connection.
        raises ConnectionNotConnectedError if not connected
        """
        self.check_connected()
        return self._conduit

    def check_connected(self):
        if not self.connected:
            raise ConnectionNotConnectedError("%s is not connected" % (self.endpoint,))

