#!/usr/bin/env python3
"""
devd-monitor - prints the events received from devd.

    devd-monitor                       all device events and notifications
    devd-monitor --device 'umass*'     only USB mass storage devices
    devd-monitor --notify DEVFS        only devfs notifications
"""
import argparse
import logging
import selectors
import sys

from devd.client import DevdClient, ReadResult
from devd.config.config import load_client_settings
from devd.connector.base import ConnectorError
from devd.events import DeviceAction, DEVICE_ACTIONS

logger = logging.getLogger(__name__)

ACTION_NAMES = {
    DeviceAction.ADD: 'Add',
    DeviceAction.REMOVE: 'Remove',
    DeviceAction.UNKNOWN: 'Unknown device',
}

# seconds between wakeups while waiting for events
SELECT_TIMEOUT = 10


def printable(text):
    """
    Shows bytes outside ASCII as \\xNN escapes, so the text can be written to any stream.
    """
    return text.encode('ascii', 'surrogateescape').decode('ascii', 'backslashreplace')


def print_details(event, out):
    for key, value in event.details:
        print('\t%s=%s' % (printable(key), printable(value)), file=out)


def notify_printer(out):
    def print_notify(event):
        print('Notify: %s %s %s' % tuple(printable(f) for f in (event.system, event.subsystem, event.type)), file=out)
        print_details(event, out)
    return print_notify


def device_printer(out):
    def print_device(event):
        print('%s %s on %s' % (ACTION_NAMES[event.action], printable(event.name), printable(event.parent)), file=out)
        print_details(event, out)
    return print_device


def build_parser():
    parser = argparse.ArgumentParser(prog='devd-monitor', description="print the events received from devd")
    parser.add_argument('--socket', help="the devd socket, overriding the configured path")
    parser.add_argument('--config', metavar='DIR', help="directory containing devd.cfg")
    parser.add_argument('--device', metavar='PATTERN', action='append',
                        help="print device events for names matching PATTERN (repeatable)")
    parser.add_argument('--notify', metavar='SYSTEM', action='append',
                        help="print notifications for systems matching SYSTEM (repeatable)")
    parser.add_argument('-v', '--verbose', action='store_true', help="log debug messages")
    return parser


def register_printers(client: DevdClient, devices, systems, out):
    """
    Registers handlers that print the events. With neither devices nor systems given, everything is printed.
    """
    if not devices and not systems:
        devices = systems = ['*']
    for pattern in devices or ():
        client.register_device(pattern, DEVICE_ACTIONS, device_printer(out))
    for system in systems or ():
        client.register_notify(system, '*', '*', notify_printer(out))


def run(client: DevdClient, selector=None, timeout=SELECT_TIMEOUT) -> ReadResult:
    """
    Dispatches events as they arrive, until the connection closes.
    """
    selector = selector or selectors.DefaultSelector()
    selector.register(client.fileno(), selectors.EVENT_READ)
    try:
        while True:
            if selector.select(timeout) and client.drain() is ReadResult.CLOSED:
                return ReadResult.CLOSED
    finally:
        selector.close()


def main(argv=None, out=None):
    if out is None:
        out = sys.stdout
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    settings = load_client_settings(args.config)
    if args.socket:
        settings.socket_path = args.socket
    client = DevdClient.from_settings(settings)
    register_printers(client, args.device, args.notify, out)

    try:
        client.open()
    except ConnectorError as e:
        logger.error("unable to connect to devd at %s: %s" % (settings.socket_path, e))
        return 1

    with client:
        try:
            run(client)
        except KeyboardInterrupt:
            pass
    logger.info("devd connection closed")
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
