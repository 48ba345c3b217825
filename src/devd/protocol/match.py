"""
Matches the patterns handlers are registered with against event fields.

Patterns are literal text with an optional '*' wildcard. This is not a glob: the wildcard stops
consuming as soon as the value character equals the pattern character that follows the '*', and
there is no backtracking. A single trailing or isolated '*' works as expected; patterns such as
'a*b*c' or '*ab' against values with repeated characters may not.
"""

WILDCARD = '*'

# matcher states
LITERAL = 'literal'
WILDCARD_PENDING = 'wildcard-pending'


class PatternMatcher:
    """
    Matches values against a single pattern.

    >>> PatternMatcher('umass*').matches('umass0')
    True
    >>> PatternMatcher('umass*').matches('disk0')
    False
    """

    def __init__(self, pattern):
        self.pattern = pattern

    def __call__(self, value):
        return self.matches(value)

    def matches(self, value) -> bool:
        pattern = self.pattern
        if not value:
            # an empty value is matched only by wildcards
            return all(c == WILDCARD for c in pattern)
        p = s = 0
        while p < len(pattern) and s < len(value):
            state = WILDCARD_PENDING if pattern[p] == WILDCARD else LITERAL
            if state == LITERAL:
                if pattern[p] != value[s]:
                    return False
                p += 1
            else:
                p += self._wildcard_advance(p, value, s)
            s += 1

        return p == len(pattern) and s == len(value)

    def _wildcard_advance(self, p, value, s):
        """
        How far the pattern moves past the wildcard at p, given the value character at s.
        """
        following = self.pattern[p + 1] if p + 1 < len(self.pattern) else None
        if following == value[s]:
            return 2            # skip the wildcard and the character it was waiting for
        if s == len(value) - 1:
            return 1            # last value character, the wildcard swallows it
        return 0

    def __repr__(self):
        return 'PatternMatcher(%r)' % self.pattern


def matches(pattern, value) -> bool:
    """
    >>> matches('*', '')
    True
    >>> matches('*', 'anything')
    True
    """
    return PatternMatcher(pattern).matches(value)
