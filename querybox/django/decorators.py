import logging
from functools import wraps

from django.conf import settings
from django.http import HttpResponseBadRequest

from querybox.django.utils import get_max_depth
from querybox.errors import QueryParseError
from querybox.parser import parse

logger = logging.getLogger(__name__)


def nested_query_params(view_func):
    """
    Parses the bracketed query params of the inbound request and hands the
    nested dict to the view as a keyword argument.

    The raw QUERY_STRING is parsed rather than `request.GET`, which groups
    values by key and would reorder lists fed by several keys.

    The argument name comes from settings.QUERY_BOX_VIEW_KWARG ('query_params'
    by default). Query strings with conflicting keys are answered with a 400.

    :param view_func: A Django view
    :return:
    """

    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        try:
            query_params = parse(request.META.get('QUERY_STRING', ''), max_depth=get_max_depth())
        except QueryParseError as e:
            logger.warning("Rejected query string on %s: %s", request.path, e)
            return HttpResponseBadRequest(str(e))

        kwargs[getattr(settings, 'QUERY_BOX_VIEW_KWARG', 'query_params')] = query_params

        return view_func(request, *args, **kwargs)

    return _wrapped_view
