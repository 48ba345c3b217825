"""
Parses the key=value details carried by devd messages.
"""

DETAIL_SEPARATOR = ' '
KEY_VALUE_SEPARATOR = '='


class MalformedDetailsError(ValueError):
    """ A detail token has no '=' separating the key and value. """


def parse_details(text):
    """
    Splits a run of space separated key=value tokens into (key, value) pairs, in the order given.
    Parsing stops at the first empty token, so trailing text after a double space is ignored.
    Raises MalformedDetailsError if any token before that has no '='.

    >>> parse_details('bus=0 channel=0')
    (('bus', '0'), ('channel', '0'))
    >>> parse_details('')
    ()
    """
    details = []
    for token in text.split(DETAIL_SEPARATOR):
        if not token:
            break
        key, sep, value = token.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            raise MalformedDetailsError("detail '%s' is not a key=value pair" % token)
        details.append((key, value))
    return tuple(details)
