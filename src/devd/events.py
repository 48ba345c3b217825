"""
The events read from the devd socket.

A DeviceEvent describes a device being attached ('+'), detached ('-') or an unknown device ('?').
A NotifyEvent is a generic kernel notification ('!') identified by its system, subsystem and type.

Both carry details, the key=value pairs from the message, kept in the order they were received.
Keys are not unique.
"""
from enum import IntFlag

from devd.support.mixins import CommonEqualityMixin, StringerMixin


class DeviceAction(IntFlag):
    NOTIFY = 0x01
    ADD = 0x02
    REMOVE = 0x04
    UNKNOWN = 0x08


# the actions a device handler may be registered for
DEVICE_ACTIONS = DeviceAction.ADD | DeviceAction.REMOVE | DeviceAction.UNKNOWN

ALL_ACTIONS = DEVICE_ACTIONS | DeviceAction.NOTIFY


class DevdEvent(CommonEqualityMixin, StringerMixin):
    """ base class for the events parsed from the devd socket. """

    def __init__(self, details=()):
        self.details = tuple(details)

    def detail(self, key, default=None):
        """
        Retrieves the value of the first detail with the given key.
        >>> NotifyEvent('ACPI', 'ACAD', 'power', [('notify', '0x00'), ('notify', '0x01')]).detail('notify')
        '0x00'
        """
        for k, v in self.details:
            if k == key:
                return v
        return default

    def details_dict(self) -> dict:
        """ the details as a dict. Where a key is repeated, the first value is kept. """
        result = {}
        for k, v in self.details:
            result.setdefault(k, v)
        return result


class NotifyEvent(DevdEvent):
    """ A kernel notification, such as `!system=IFNET subsystem=em0 type=LINK_UP` """

    action = DeviceAction.NOTIFY

    def __init__(self, system, subsystem, type, details=()):
        super().__init__(details)
        self.system = system
        self.subsystem = subsystem
        self.type = type


class DeviceEvent(DevdEvent):
    """ A device attach, detach or unknown device event, such as `+da0 at bus=0 target=0 on umass-sim0` """

    def __init__(self, action: DeviceAction, name, parent, details=()):
        super().__init__(details)
        self.action = action
        self.name = name
        self.parent = parent
