def quote(val):
    return "'" + str(val) + "'" if val is not None else "None"


class StringerMixin:

    def __repr__(self):
        """
        outputs the class name and the object dictionary in key sorted order
        >>> class Point(StringerMixin):
        ...     def __init__(self):
        ...         self.y = 2
        ...         self.x = 'a'
        >>> Point()
        Point(x='a', y='2')
        """
        return type(self).__name__ + '(' + self._sorted_items_string() + ')'

    def _sorted_items_string(self):
        return ", ".join([str(key) + "=" + quote(val) for key, val in sorted(self.__dict__.items())])


class CommonEqualityMixin(object):
    """ value equality for simple value objects. Instances are hashable, so should not be changed
        after construction. """

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.__dict__ == other.__dict__

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.__class__,) + tuple(sorted(self.__dict__.items())))
