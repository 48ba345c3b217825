"""
The handlers registered to receive events, and dispatching events to them.
"""
import logging

from devd.events import DeviceAction, DeviceEvent, NotifyEvent, DEVICE_ACTIONS
from devd.protocol.match import PatternMatcher
from devd.support.events import EventSource

logger = logging.getLogger(__name__)


class InvalidTypeMaskError(ValueError):
    """ A device handler was registered for something other than add, remove or unknown device events. """


class RegisteredHandler:
    """ A callback together with the criteria that select the events it receives. """

    def __init__(self, callback):
        self.callback = callback

    def accepts(self, event) -> bool:
        raise NotImplementedError

    def __call__(self, event):
        self.callback(event)


class NotifyHandler(RegisteredHandler):
    """ Receives notifications whose system, subsystem and type all match the given patterns. """

    def __init__(self, system_pattern, subsystem_pattern, type_pattern, callback):
        super().__init__(callback)
        self.system = PatternMatcher(system_pattern)
        self.subsystem = PatternMatcher(subsystem_pattern)
        self.type = PatternMatcher(type_pattern)

    def accepts(self, event):
        return isinstance(event, NotifyEvent) and self.system.matches(event.system) \
            and self.subsystem.matches(event.subsystem) and self.type.matches(event.type)

    def __repr__(self):
        return 'NotifyHandler(%r, %r, %r, %r)' % (self.system.pattern, self.subsystem.pattern,
                                                  self.type.pattern, self.callback)


class DeviceHandler(RegisteredHandler):
    """
    Receives device events whose action is one of types and whose name matches the pattern.
    :param types: a combination of DeviceAction.ADD, REMOVE and UNKNOWN.
    """

    def __init__(self, name_pattern, types, callback):
        super().__init__(callback)
        mask = int(types)
        if not mask or mask & ~int(DEVICE_ACTIONS):
            raise InvalidTypeMaskError("invalid device event types 0x%02x" % mask)
        self.name = PatternMatcher(name_pattern)
        self.types = DeviceAction(mask)

    def accepts(self, event):
        return isinstance(event, DeviceEvent) and bool(event.action & self.types) \
            and self.name.matches(event.name)

    def __repr__(self):
        return 'DeviceHandler(%r, 0x%02x, %r)' % (self.name.pattern, int(self.types), self.callback)


class CallbackRegistry(EventSource):
    """
    The registered handlers. Dispatching an event calls every handler that accepts it,
    most recently registered first.
    """

    def register_notify(self, system_pattern, subsystem_pattern, type_pattern, callback) -> NotifyHandler:
        handler = NotifyHandler(system_pattern, subsystem_pattern, type_pattern, callback)
        self.add(handler)
        return handler

    def register_device(self, name_pattern, types, callback) -> DeviceHandler:
        """
        Registers a callback for device events.
        Raises InvalidTypeMaskError if types is empty or includes anything other than add, remove and unknown,
        in which case nothing is registered.
        """
        handler = DeviceHandler(name_pattern, types, callback)
        self.add(handler)
        return handler

    def unregister(self, handler):
        self.remove(handler)

    def dispatch(self, event) -> int:
        """
        Calls each handler that accepts the event.
        :return: the number of handlers called
        """
        called = self.fire(event)
        if not called:
            logger.debug("no handlers for %r" % event)
        return called

    def _accepts(self, handler, event):
        return handler.accepts(event)
