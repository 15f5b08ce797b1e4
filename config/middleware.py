import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Log one line per API request: method, path, status and duration."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start = time.monotonic()
        response = self.get_response(request)

        if request.path.startswith('/api'):
            duration_ms = (time.monotonic() - start) * 1000
            logger.info(
                '%s %s %s in %.0fms',
                request.method, request.path, response.status_code, duration_ms
            )
        return response
