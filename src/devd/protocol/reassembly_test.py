import unittest

from hamcrest import assert_that, is_, none, calling, raises

from devd.protocol.reassembly import LineReassembler, LineOverflowError, DEFAULT_CAPACITY


class LineReassemblerTest(unittest.TestCase):

    def setUp(self):
        self.sut = LineReassembler(16)

    def test_default_capacity(self):
        assert_that(LineReassembler().capacity, is_(DEFAULT_CAPACITY))
        assert_that(DEFAULT_CAPACITY, is_(1024))

    def test_invalid_capacity(self):
        assert_that(calling(LineReassembler).with_args(0), raises(ValueError))

    def test_empty(self):
        assert_that(self.sut.next_line(), is_(none()))
        assert_that(self.sut.has_line(), is_(False))
        assert_that(self.sut.free, is_(16))

    def test_partial_line(self):
        self.sut.feed(b'+da0 at')
        assert_that(self.sut.has_line(), is_(False))
        assert_that(self.sut.next_line(), is_(none()))
        assert_that(len(self.sut), is_(7))
        assert_that(self.sut.free, is_(9))

    def test_fragmented_line(self):
        self.sut.feed(b'+da0 ')
        self.sut.feed(b'at x')
        self.sut.feed(b'\n')
        assert_that(self.sut.next_line(), is_(b'+da0 at x'))
        assert_that(len(self.sut), is_(0))

    def test_one_line_at_a_time(self):
        self.sut.feed(b'one\ntwo\nthr')
        assert_that(self.sut.next_line(), is_(b'one'))
        assert_that(self.sut.has_line(), is_(True))
        assert_that(self.sut.next_line(), is_(b'two'))
        assert_that(self.sut.next_line(), is_(none()))
        self.sut.feed(b'ee\n')
        assert_that(self.sut.next_line(), is_(b'three'))

    def test_empty_line(self):
        self.sut.feed(b'\n')
        assert_that(self.sut.next_line(), is_(b''))

    def test_line_filling_buffer(self):
        line = b'x' * 15 + b'\n'
        self.sut.feed(line)
        assert_that(self.sut.free, is_(0))
        assert_that(self.sut.next_line(), is_(b'x' * 15))

    def test_overflow_discards_until_terminator(self):
        assert_that(calling(self.sut.feed).with_args(b'x' * 16), raises(LineOverflowError, "16 bytes"))
        assert_that(len(self.sut), is_(0))
        assert_that(self.sut.discarding, is_(True))

        self.sut.feed(b'yyy')
        assert_that(len(self.sut), is_(0))
        self.sut.feed(b'zz\nnext\n')
        assert_that(self.sut.discarding, is_(False))
        assert_that(self.sut.next_line(), is_(b'next'))
        assert_that(self.sut.next_line(), is_(none()))

    def test_overflow_with_terminator_past_capacity(self):
        assert_that(calling(self.sut.feed).with_args(b'x' * 20 + b'\nok\n'), raises(LineOverflowError))
        assert_that(self.sut.discarding, is_(False))
        assert_that(self.sut.next_line(), is_(b'ok'))

    def test_reset(self):
        self.sut.feed(b'abc')
        self.sut.reset()
        assert_that(len(self.sut), is_(0))
        assert_that(self.sut.discarding, is_(False))


if __name__ == '__main__':  # pragma: no cover
    unittest.main()
