from querybox.errors import PathConflict, PathTooDeep, QueryParseError
from querybox.parser import (
    DEFAULT_MAX_DEPTH,
    LIST_MARKER,
    assign,
    merge_pair,
    parse,
    parse_pairs,
    split_key,
)

__version__ = '0.1'
