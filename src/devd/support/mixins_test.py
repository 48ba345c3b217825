import unittest

from hamcrest import equal_to, is_, assert_that, is_not

from devd.support.mixins import CommonEqualityMixin, StringerMixin


class Sample(CommonEqualityMixin, StringerMixin):
    def __init__(self, a=None, b=None):
        self.a = a
        self.b = b


class Other(CommonEqualityMixin):
    def __init__(self, a=None, b=None):
        self.a = a
        self.b = b


class StringerMixinTest(unittest.TestCase):
    def test_stringer(self):
        sut = Sample("123")
        assert_that(repr(sut), is_("Sample(a='123', b=None)"))


class CommonEqualityMixinTest(unittest.TestCase):

    def test_value_equivalence(self):
        e1 = Sample("123", 123)
        e2 = Sample("12" + "3", 123)
        assert_that(e1, is_(equal_to(e2)))
        assert_that(e1 == e2, is_(True))
        assert_that(e1 != e2, is_(False))
        assert_that(hash(e1), is_(hash(e2)))

        e3 = Sample("123", 0)
        assert_that(e1, is_not(equal_to(e3)))
        assert_that(e1 != e3, is_(True))
        assert_that(e1 == e3, is_(False))

    def test_different_class_not_equal(self):
        assert_that(Sample(1, 2) == Other(1, 2), is_(False))

    def test_usable_in_sets(self):
        assert_that(len({Sample(1, (2, 3)), Sample(1, (2, 3))}), is_(1))


if __name__ == '__main__':  # pragma: no cover
    unittest.main()
