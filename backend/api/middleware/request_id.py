"""
Request ID middleware - Inject X-Request-ID for request correlation.

Provides:
- Request ID injection on every request
- Response header addition
- Correlation ID for validation logs and error envelopes

A client-supplied X-Request-ID is reused only when it looks like an id;
anything else (too long, odd characters) is replaced so it cannot be used
to inject text into log lines.
"""

import re
import uuid
from flask import Flask, request, g


REQUEST_ID_HEADER = 'X-Request-ID'

_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._-]{1,64}")


def setup_request_id_middleware(app: Flask) -> None:
    """
    Set up request ID middleware on Flask app.

    Injects X-Request-ID into:
    - Flask's g object (g.request_id)
    - Response headers (X-Request-ID)

    Args:
        app: Flask application instance
    """

    @app.before_request
    def inject_request_id():
        """Inject request ID before each request."""
        g.request_id = _accept_request_id(request.headers.get(REQUEST_ID_HEADER))

    @app.after_request
    def add_request_id_header(response):
        """Add request ID to response headers."""
        if hasattr(g, 'request_id'):
            response.headers[REQUEST_ID_HEADER] = g.request_id
        return response


def _accept_request_id(supplied) -> str:
    if supplied and _REQUEST_ID_RE.fullmatch(supplied):
        return supplied
    return str(uuid.uuid4())


def get_request_id() -> str:
    """
    Get current request ID from Flask context.

    Returns:
        Request ID string, or generated UUID if not in request context
    """
    if hasattr(g, 'request_id'):
        return g.request_id
    return str(uuid.uuid4())
