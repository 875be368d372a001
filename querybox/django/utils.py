from django.conf import settings

from querybox.parser import DEFAULT_MAX_DEPTH, parse_pairs

# Default for `max_depth` meaning "read settings.QUERY_BOX_MAX_DEPTH".
# None keeps its parser meaning of "no depth check".
FROM_SETTINGS = object()


def get_max_depth():
    return getattr(settings, 'QUERY_BOX_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def parse_qsl_with_brackets(qs_lists, max_depth=FROM_SETTINGS):
    """
    Builds a nested dict from the output of `QueryDict.lists()`.

    Every value of a repeated key is merged as its own pair, so `tags[]` keeps
    all of its values in order while a plain repeated key keeps the last one.

        QueryDict('filters[name]=joe&tags[]=a&tags[]=b').lists()
        #=> {'filters': {'name': 'joe'}, 'tags': ['a', 'b']}

    `lists()` groups values by key, so the order of pairs across different
    keys is already lost. A list fed by several keys, as in
    `foo[][a]=1&foo[][b]=2&foo[][a]=3`, comes out grouped by key. Use
    `querybox.parser.parse` on the raw query string when that order matters.

    :param qs_lists: iterable of (str, list of str)
    :param max_depth: int, None to disable the check, defaults to settings.QUERY_BOX_MAX_DEPTH
    :return: dict
    """
    if max_depth is FROM_SETTINGS:
        max_depth = get_max_depth()

    pairs = [(param, value) for param, values in qs_lists for value in values]

    return parse_pairs(pairs, max_depth=max_depth)
