"""
Error handling middleware for the API
"""
import logging

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

from .utils import client_ip

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Turn unhandled exceptions on API paths into a generic JSON 500 without
    leaking internal details
    """

    def process_exception(self, request, exception):
        logger.error(
            f"Unhandled {type(exception).__name__} in {request.method} {request.path} "
            f"from {client_ip(request)}: {exception}",
            exc_info=True
        )

        if request.path.startswith('/api/'):
            return JsonResponse({
                'code': 500,
                'msg': 'Internal server error',
                'data': None
            }, status=500)

        return None  # Let Django handle non-API errors normally
