import unittest
from unittest.mock import Mock

from hamcrest import assert_that, is_, calling, raises, instance_of, none

from devd.connector.base import AbstractConnector, ConnectionNotAvailableError, ConnectionNotConnectedError, \
    ConnectorConnectedEvent, ConnectorDisconnectedEvent, ConnectorError


class FakeConnector(AbstractConnector):

    def __init__(self, available=True):
        super().__init__()
        self.is_available = available
        self.new_conduit = Mock()
        self.new_conduit.open = True
        self.disconnected = Mock()

    @property
    def endpoint(self):
        return 'fake'

    def _connect(self):
        return self.new_conduit

    def _disconnect(self):
        self.disconnected()

    def _try_available(self):
        return self.is_available


class AbstractConnectorTest(unittest.TestCase):

    def setUp(self):
        self.sut = FakeConnector()
        self.listener = Mock()
        self.sut.events.add(self.listener)

    def test_initially_disconnected(self):
        assert_that(self.sut.connected, is_(False))
        assert_that(calling(getattr).with_args(self.sut, 'conduit'), raises(ConnectionNotConnectedError))

    def test_connect(self):
        self.sut.connect()
        assert_that(self.sut.connected, is_(True))
        assert_that(self.sut.conduit, is_(self.sut.new_conduit))
        assert_that(self.sut.available, is_(False))
        event = self.listener.call_args[0][0]
        assert_that(event, is_(instance_of(ConnectorConnectedEvent)))
        assert_that(event.connector, is_(self.sut))

    def test_connect_twice_connects_once(self):
        self.sut.connect()
        self.sut.connect()
        assert_that(self.listener.call_count, is_(1))

    def test_not_available(self):
        self.sut.is_available = False
        assert_that(calling(self.sut.connect).with_args(), raises(ConnectionNotAvailableError, "fake"))
        assert_that(self.sut.connected, is_(False))

    def test_connect_error_propagates(self):
        self.sut._connect = Mock(side_effect=ConnectorError("nope"))
        assert_that(calling(self.sut.connect).with_args(), raises(ConnectorError, "nope"))
        assert_that(self.sut.connected, is_(False))
        self.listener.assert_not_called()

    def test_disconnect(self):
        self.sut.connect()
        self.listener.reset_mock()
        self.sut.disconnect()
        self.sut.new_conduit.close.assert_called_once()
        self.sut.disconnected.assert_called_once()
        assert_that(self.sut.connected, is_(False))
        assert_that(self.listener.call_args[0][0], is_(instance_of(ConnectorDisconnectedEvent)))

    def test_disconnect_when_not_connected(self):
        self.sut.disconnect()
        self.sut.disconnected.assert_not_called()
        self.listener.assert_not_called()

    def test_closed_conduit_is_not_connected(self):
        self.sut.connect()
        self.sut.new_conduit.open = False
        assert_that(self.sut.connected, is_(False))
        assert_that(self.sut._conduit, is_(self.sut.new_conduit))
        self.sut.disconnect()
        assert_that(self.sut._conduit, is_(none()))


if __name__ == '__main__':  # pragma: no cover
    unittest.main()
