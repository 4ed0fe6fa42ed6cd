"""
==========================================================
REQUEST LOGGING MIDDLEWARE
==========================================================
Logs every HTTP request with timing, user info and status code.
Flags slow requests (>2s), client errors (4xx) and server errors (5xx).

Output → logs/requests.log + console
"""

import time
import logging

from config.constants import SLOW_REQUEST_MS

logger = logging.getLogger('middleware')

SKIP_PREFIXES = ('/static/', '/__reload__/')


def _username(request):
    user = getattr(request, 'user', None)
    return user.username if user and user.is_authenticated else 'anonymous'


class RequestLoggingMiddleware:
    """Log every request: method, path, user, status, duration."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith(SKIP_PREFIXES):
            return self.get_response(request)

        start_time = time.time()
        response = self.get_response(request)
        duration_ms = (time.time() - start_time) * 1000
        status = response.status_code

        htmx = ' | htmx' if request.headers.get('HX-Request') else ''
        msg = (
            f"{request.method} {request.get_full_path()} | user={_username(request)} "
            f"| status={status} | {duration_ms:.0f}ms{htmx}"
        )

        if status >= 500:
            logger.error(f"SERVER ERROR: {msg}")
        elif status >= 400:
            logger.warning(f"CLIENT ERROR: {msg}")
        elif duration_ms > SLOW_REQUEST_MS:
            logger.warning(f"SLOW REQUEST: {msg}")
        else:
            logger.info(msg)

        return response

    def process_exception(self, request, exception):
        """Log unhandled exceptions with full context."""
        logger.critical(
            f"UNHANDLED EXCEPTION: {request.method} {request.get_full_path()} "
            f"| user={_username(request)} | error={type(exception).__name__}: {exception}",
            exc_info=True
        )
        return None  # Let Django handle it
