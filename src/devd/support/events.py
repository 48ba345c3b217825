class EventSource(object):
    """
    An ordered list of handlers that are called when an event is fired.

    Handlers are kept most recently added first. Subclasses can override _accepts() to
    choose which handlers receive a given event.
    """

    def __init__(self):
        self._handlers = []

    def __len__(self):
        return len(self._handlers)

    def add(self, handler):
        self._handlers.insert(0, handler)
        return self

    def remove(self, handler):
        if handler in self._handlers:
            self._handlers.remove(handler)
        return self

    def handlers(self):
        return tuple(self._handlers)

    def fire(self, *args, **kwargs):
        """
        Calls each accepting handler with the given arguments.
        :return: the number of handlers called
        """
        return self._fire(*args, **kwargs)

    def _accepts(self, handler, *args, **kwargs):
        return True

    def _fire(self, *args, **kwargs):
        # a handler may add or remove handlers while being called
        called = 0
        for handler in tuple(self._handlers):
            if self._accepts(handler, *args, **kwargs):
                handler(*args, **kwargs)
                called += 1
        return called
