"""
Error envelope middleware - Standardize all error responses.

Provides consistent error response format:
{
    "error": {
        "code": "VALIDATION_FAILED",
        "message": "2 validation error(s)",
        "requestId": "uuid",
        "details": {"violations": [...]}
    }
}
"""

import logging
from flask import Flask, jsonify, g
from werkzeug.exceptions import HTTPException


logger = logging.getLogger('api.middleware.error')


# Error codes reference
ERROR_CODES = {
    # Client errors (4xx)
    "BAD_REQUEST": 400,
    "UNAUTHORIZED": 401,
    "FORBIDDEN": 403,
    "NOT_FOUND": 404,
    "METHOD_NOT_ALLOWED": 405,
    "CONFLICT": 409,
    "UNSUPPORTED_MEDIA_TYPE": 415,
    "TOO_MANY_REQUESTS": 429,

    # Contract errors
    "VALIDATION_FAILED": 400,
    "UNKNOWN_CONTRACT": 404,

    # Server errors (5xx)
    "INTERNAL_ERROR": 500,
}


def setup_error_handlers(app: Flask) -> None:
    """
    Set up standardized error handlers on Flask app.

    Handles:
    - ValidationFailed raised from handlers (enforce() called directly)
    - HTTP exceptions (400, 404, 405, etc.)
    - Unhandled Python exceptions

    Args:
        app: Flask application instance
    """
    # Imported here: api.contracts.wrapper imports this module at load time
    from api.contracts.validate import ValidationFailed

    @app.errorhandler(ValidationFailed)
    def handle_validation_failed(error):
        return make_error_response(
            code="VALIDATION_FAILED",
            message=error.message,
            details=error.details,
        )

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        """Handle Flask/Werkzeug HTTP exceptions."""
        # "Not Found" -> "NOT_FOUND"
        code = error.name.upper().replace(' ', '_')
        return make_error_response(
            code=code,
            message=error.description,
            status_code=error.code,
        )

    @app.errorhandler(Exception)
    def handle_generic_error(error):
        """Handle unhandled Python exceptions."""
        logger.exception(
            f"Unhandled error: {error}",
            extra={
                "event": "unhandled_error",
                "request_id": getattr(g, 'request_id', None),
                "error_type": type(error).__name__,
            }
        )
        return make_error_response(
            code="INTERNAL_ERROR",
            message="An unexpected error occurred",
        )


def make_error_response(
    code: str,
    message: str,
    status_code: int = None,
    field: str = None,
    details: dict = None,
    hint: str = None,
):
    """
    Create a standardized error response.

    Args:
        code: Error code (e.g., "VALIDATION_FAILED")
        message: Human-readable error message
        status_code: HTTP status code (defaults based on error code)
        field: Optional field name that caused the error
        details: Optional additional details dict
        hint: Optional hint for fixing the error

    Returns:
        Tuple of (response, status_code)
    """
    request_id = getattr(g, 'request_id', None)

    if status_code is None:
        status_code = ERROR_CODES.get(code, 500)

    error = {
        "error": {
            "code": code,
            "message": message,
            "requestId": request_id,
        }
    }

    if field:
        error["error"]["field"] = field
    if details:
        error["error"]["details"] = details
    if hint:
        error["error"]["hint"] = hint

    response = jsonify(error)
    if request_id:
        response.headers['X-Request-ID'] = request_id

    return response, status_code
