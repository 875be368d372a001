class QueryParseError(ValueError):
    """
    Base class for errors raised while folding query pairs into a nested dict.
    """

    def __init__(self, key, message):
        super().__init__(message)
        self.key = key


class PathConflict(QueryParseError):
    """
    A key was used in two different structural roles within one parse.

    Roles are one of 'scalar', 'list' or 'map'. The role a key gets first is
    binding; `expected` is the role the current pair needs and `found` is the
    role already stored at `key`.

    Roles are reported in fold order, which is reverse document order. For
    `foo[a]=1&foo=2` the scalar pair is folded first, so the error reads
    "expected map at 'foo', found scalar".
    """

    def __init__(self, key, expected, found):
        super().__init__(key, "expected %s at '%s', found %s" % (expected, key, found))
        self.expected = expected
        self.found = found


class PathTooDeep(QueryParseError):
    def __init__(self, key, depth, max_depth):
        super().__init__(key, "key '%s' has %d segments, at most %d allowed" % (key, depth, max_depth))
        self.depth = depth
        self.max_depth = max_depth
