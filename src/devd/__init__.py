"""

devd Connections

Reads device and kernel notifications from the FreeBSD devd(8) socket and dispatches them to
registered handlers.

- Conduit: an open, non-blocking socket that delivers raw bytes.
- Connector: knows how to open a conduit to an endpoint, here the devd unix socket
  (/var/run/devd.pipe by default.) Fires ConnectorConnectedEvent and ConnectorDisconnectedEvent.
- LineReassembler: collects the bytes read from the conduit into a fixed size buffer and hands out
  complete, newline terminated lines.
- parser: turns a line into an event
  - '+', '-' and '?' lines are device attach, detach and unknown device events (DeviceEvent)
  - '!' lines are generic kernel notifications keyed by system, subsystem and type (NotifyEvent)
  - anything else is ignored
- CallbackRegistry: the handlers registered by the application, each with the patterns
  that select the events it receives. Patterns support a single '*' wildcard.
- DevdClient: ties the above together. The application owns the wait loop, and calls
  read_and_dispatch() (or drain()) whenever the client's fileno() is readable.


## Threading

Everything runs on the caller's thread. The socket is non-blocking, so read_and_dispatch() never
waits for data; a read that would block is not an error. Handlers are called synchronously, one line
at a time. Nothing here is safe to share between threads without external locking.

"""
