import logging
import math

from rest_framework.exceptions import Throttled
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

THROTTLED_MESSAGE = 'Too many requests. Please try again later.'


def throttled_message(view, retry_after):
    """Message of the first throttle on the view that defines one"""
    for throttle_class in getattr(view, 'throttle_classes', ()):
        template = getattr(throttle_class, 'throttled_message', None)
        if template:
            return template.format(minutes=math.ceil((retry_after or 0) / 60))
    return THROTTLED_MESSAGE


def donor_exception_handler(exc, context):
    """
    Wrap DRF errors in the {ok: false, message} envelope used by the API.
    Anything DRF does not handle is left to Django (500).
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, Throttled):
        retry_after = math.ceil(exc.wait) if exc.wait is not None else None
        request = context.get('request')
        logger.warning(
            "Throttled %s %s (retry after %ss)",
            getattr(request, 'method', '?'), getattr(request, 'path', '?'), retry_after,
        )
        response.data = {
            'ok': False,
            'message': throttled_message(context.get('view'), retry_after),
            'retryAfter': retry_after,
        }
        return response

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    response.data = {'ok': False, 'message': str(detail) if detail else 'Request failed.'}
    return response
