"""
Parses the lines read from the devd socket into events.

The first character of a line selects the grammar:

- '+', '-', '?': a device event, `<name> at <key=value>* on <parent>`
- '!': a notification, `system=<system> subsystem=<subsystem> type=<type> <key=value>*`

Lines that start with anything else, or that do not follow the grammar, are dropped.
"""
import logging

from devd.events import DeviceAction, DeviceEvent, NotifyEvent
from devd.protocol.details import parse_details

logger = logging.getLogger(__name__)

DEVICE_SIGNS = {
    '+': DeviceAction.ADD,
    '-': DeviceAction.REMOVE,
    '?': DeviceAction.UNKNOWN,
}

NOTIFY_SIGN = '!'

AT = ' at '
ON = ' on '

SYSTEM = 'system'
SUBSYSTEM = 'subsystem'
TYPE = 'type'


class MalformedLineError(ValueError):
    """ The line is missing a part its grammar requires. """


def decode_device_event(line) -> DeviceEvent:
    """
    Decodes a device event line, including its leading sign character.
    Raises MalformedLineError or MalformedDetailsError if the line cannot be decoded.

    >>> decode_device_event('-da0 at bus=0 on scbus0').name
    'da0'
    """
    action = DEVICE_SIGNS.get(line[:1])
    if action is None:
        raise MalformedLineError("'%s' is not a device event" % line[:1])
    line = line[1:]

    at = line.find(AT)
    if at < 0:
        raise MalformedLineError("no '%s' in device event" % AT.strip())
    remainder = line[at + len(AT):]
    on = remainder.find(ON)
    if on < 0:
        raise MalformedLineError("no '%s' in device event" % ON.strip())

    name = line[:at].split(' ', 1)[0]
    details = parse_details(remainder[:on].lstrip(' '))
    parent = remainder[on + len(ON):]
    return DeviceEvent(action, name, parent, details)


def _find_field(line, name):
    """
    Locates the value of a name=value field that starts the line or follows a space.
    :return: a tuple of the value and the index just past the space that ends it (or the end of the line)
    """
    prefix = name + '='
    start = line.find(prefix)
    while start > 0 and line[start - 1] != ' ':
        start = line.find(prefix, start + 1)
    if start < 0:
        raise MalformedLineError("no '%s' field in notification" % name)
    start += len(prefix)
    end = line.find(' ', start)
    if end < 0:
        return line[start:], len(line)
    return line[start:end], end + 1


def decode_notify_event(line) -> NotifyEvent:
    """
    Decodes a notification line, including its leading '!'.
    Details are read from the tokens following the type field.
    Raises MalformedLineError or MalformedDetailsError if the line cannot be decoded.

    >>> decode_notify_event('!system=IFNET subsystem=em0 type=LINK_UP').subsystem
    'em0'
    """
    if not line.startswith(NOTIFY_SIGN):
        raise MalformedLineError("'%s' is not a notification" % line[:1])
    line = line[1:]
    system, _ = _find_field(line, SYSTEM)
    subsystem, _ = _find_field(line, SUBSYSTEM)
    type, details_start = _find_field(line, TYPE)
    details = parse_details(line[details_start:])
    return NotifyEvent(system, subsystem, type, details)


def parse_device_event(line):
    """ Parses a device event line. Returns None if the line is malformed. """
    try:
        return decode_device_event(line)
    except ValueError as e:
        logger.debug("dropped device event '%s': %s" % (line, e))
        return None


def parse_notify_event(line):
    """ Parses a notification line. Returns None if the line is malformed. """
    try:
        return decode_notify_event(line)
    except ValueError as e:
        logger.debug("dropped notification '%s': %s" % (line, e))
        return None


def parse_line(line):
    """
    Parses a line, without its terminating newline, into a DeviceEvent or NotifyEvent.
    Returns None for lines that are not recognized or are malformed.
    """
    sign = line[:1]
    if sign in DEVICE_SIGNS:
        return parse_device_event(line)
    if sign == NOTIFY_SIGN:
        return parse_notify_event(line)
    logger.debug("ignored line '%s'" % line)
    return None
