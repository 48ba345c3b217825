"""
Collects the bytes read from the devd socket into complete lines.
"""

TERMINATOR = b'\n'

# the size of the line buffer used by devd clients
DEFAULT_CAPACITY = 1024


class LineOverflowError(IOError):
    """
    The buffer filled up before a line terminator arrived. The partial line has been discarded.
    """


class LineReassembler:
    """
    A fixed capacity buffer that accumulates partial reads and hands out complete lines.

    A line, including its terminator, must fit in the buffer. When the buffer fills without a terminator,
    the buffered bytes are thrown away, LineOverflowError is raised, and input is skipped up to and including
    the next terminator, so the tail of the long line is not mistaken for a line of its own.

    >>> r = LineReassembler()
    >>> r.feed(b'+da0 at')
    >>> r.next_line() is None
    True
    >>> r.feed(b' bus=0 on scbus0\\n')
    >>> r.next_line()
    b'+da0 at bus=0 on scbus0'
    """

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be positive, not %s" % capacity)
        self.capacity = capacity
        self._buffer = bytearray()
        self._discarding = False

    def __len__(self):
        return len(self._buffer)

    @property
    def free(self):
        """ the number of bytes that can be added before the buffer is full. """
        return max(self.capacity - len(self._buffer), 0)

    @property
    def discarding(self):
        """ True while the rest of an over long line is being skipped. """
        return self._discarding

    def feed(self, data):
        """
        Appends data read from the stream.
        Raises LineOverflowError if the buffer is now full and holds no complete line.
        """
        if self._discarding:
            end = data.find(TERMINATOR)
            if end < 0:
                return
            data = data[end + 1:]
            self._discarding = False
        self._buffer += data
        self._check_overflow()

    def has_line(self) -> bool:
        return TERMINATOR in self._buffer

    def next_line(self):
        """
        Removes the first complete line from the buffer, and moves the bytes following it to the start.
        :return: the line without its terminator, or None if no complete line has been received.
        """
        end = self._buffer.find(TERMINATOR)
        if end < 0:
            return None
        line = bytes(self._buffer[:end])
        del self._buffer[:end + 1]
        return line

    def reset(self):
        self._buffer.clear()
        self._discarding = False

    def _check_overflow(self):
        buffer = self._buffer
        if len(buffer) < self.capacity or TERMINATOR in buffer[:self.capacity]:
            return
        end = buffer.find(TERMINATOR, self.capacity)
        if end < 0:
            discarded = len(buffer)
            buffer.clear()
            self._discarding = True
        else:
            discarded = end + 1
            del buffer[:end + 1]
        raise LineOverflowError("no line terminator within %d bytes, discarded %d bytes" %
                                (self.capacity, discarded))
