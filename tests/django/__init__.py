import django
from django.conf import settings

if not settings.configured:
    settings.configure(
        DEBUG=True,
        ALLOWED_HOSTS=['testserver'],
        DEFAULT_CHARSET='utf-8',
        QUERY_BOX_MAX_DEPTH=8,
    )
    django.setup()
