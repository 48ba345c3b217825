"""
The conduit package provides an abstraction of an open channel that delivers bytes from an endpoint.
The concrete implementation wraps a non-blocking socket.
"""
