"""
Folds decoded query string pairs into nested dicts and lists.

Keys may carry a bracket path:

    parse('foo=bar')                        #=> {'foo': 'bar'}
    parse('foo=bar&foo=baz')                #=> {'foo': 'baz'}
    parse('foo[bar]=baz')                   #=> {'foo': {'bar': 'baz'}}
    parse('foo[]=bar&foo[]=baz')            #=> {'foo': ['bar', 'baz']}
    parse('foo[][a]=1&foo[][a]=2')          #=> {'foo': [{'a': '1'}, {'a': '2'}]}

A key keeps the structural role (scalar, list or map) it is first given.
Using it in another role raises PathConflict.
"""
import copy
import logging
import re
from urllib.parse import parse_qsl

from querybox.errors import PathConflict, PathTooDeep

logger = logging.getLogger(__name__)

# An empty segment, as produced by `foo[]`, means "append to a list".
LIST_MARKER = ''

# Upper bound on segments per key. Recursion depth equals the segment count.
DEFAULT_MAX_DEPTH = 32

# A prefix without '[' followed by one bracket group running to the last ']'.
#
#     users[address][street] #=> 'users', 'address][street'
#
KEY_PATTERN = re.compile(r'^([^\[]+)\[(.*)\]$', re.DOTALL)
SEGMENT_GLUE = ']['


def _role(value):
    if isinstance(value, list):
        return 'list'
    if isinstance(value, dict):
        return 'map'
    return 'scalar'


def split_key(raw_key):
    """
    Splits a raw key into its path segments.

    Only the outer bracket group is recognised and its content is split on the
    literal '][' token, so 'a[b[c]]' gives ['a', 'b[c]']. Keys that do not
    match (no brackets, unbalanced brackets, trailing text) are returned
    whole as a single segment.

    :param raw_key: str
    :return: list of str
    """
    match = KEY_PATTERN.fullmatch(raw_key)

    if match is None:
        if '[' in raw_key or ']' in raw_key:
            logger.debug("Key %r is not a bracket path, using it literally", raw_key)
        return [raw_key]

    prefix, middle = match.groups()
    return [prefix] + middle.split(SEGMENT_GLUE)


def assign(segments, acc, value):
    """
    Merges `value` into `acc` at the path given by `segments`.

    `acc` is updated in place and returned. List elements are prepended, so
    pairs have to be merged in reverse document order for lists to come out
    in document order. For the same reason a scalar already stored at the
    final segment is kept: it came from a later pair in the document.

    :param segments: non-empty list of str
    :param acc: dict
    :param value: str
    :return: dict
    """
    key, rest = segments[0], segments[1:]

    # `age=17` lands here.
    if not rest:
        if key in acc and isinstance(acc[key], (list, dict)):
            logger.debug("Scalar pair for %r collides with a %s", key, _role(acc[key]))
            raise PathConflict(key, 'scalar', _role(acc[key]))

        acc.setdefault(key, value)
        return acc

    # `tags[]=a` or `items[][name]=a`: build the element, then prepend it.
    if rest[0] == LIST_MARKER:
        if key in acc and not isinstance(acc[key], list):
            logger.debug("List pair for %r collides with a %s", key, _role(acc[key]))
            raise PathConflict(key, 'list', _role(acc[key]))

        current = acc.setdefault(key, [])
        element = assign(rest[1:], {}, value) if rest[1:] else value
        current.insert(0, element)
        return acc

    # `user[name]=joe`: descend into the child map, creating it if needed.
    if key in acc and not isinstance(acc[key], dict):
        logger.debug("Map pair for %r collides with a %s", key, _role(acc[key]))
        raise PathConflict(key, 'map', _role(acc[key]))

    acc[key] = assign(rest, acc.get(key, {}), value)
    return acc


def merge_pair(pair, acc, max_depth=DEFAULT_MAX_DEPTH):
    """
    Splits the key of one decoded `(key, value)` pair and merges it into `acc`.

    Callers folding pairs themselves must feed them in reverse document order
    if list order matters.

    :param pair: tuple of (str, str)
    :param acc: dict
    :param max_depth: int or None to disable the depth check
    :return: dict
    """
    key, value = pair
    segments = split_key(key)

    if max_depth is not None and len(segments) > max_depth:
        raise PathTooDeep(key, len(segments), max_depth)

    return assign(segments, acc, value)


def parse_pairs(pairs, initial=None, max_depth=DEFAULT_MAX_DEPTH):
    """
    Folds an ordered sequence of decoded pairs into a nested dict.

    `initial` is copied before merging and is never modified.

    :param pairs: iterable of (str, str) in document order
    :param initial: dict or None
    :param max_depth: int or None
    :return: dict
    """
    acc = copy.deepcopy(initial) if initial is not None else {}

    for pair in reversed(list(pairs)):
        merge_pair(pair, acc, max_depth=max_depth)

    return acc


def parse(query, initial=None, max_depth=DEFAULT_MAX_DEPTH):
    """
    Decodes a raw query string and folds it into a nested dict.

    :param query: str, e.g. 'filters[name]=joe&tags[]=a&tags[]=b'
    :param initial: dict or None
    :param max_depth: int or None
    :return: dict
    """
    if not query:
        return initial if initial is not None else {}

    return parse_pairs(parse_qsl(query, keep_blank_values=True), initial, max_depth=max_depth)
