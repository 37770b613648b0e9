"""
Global Flask error handlers.

Provides consistent JSON error responses across all endpoints by
catching service-layer exceptions and HTTP errors.
"""

import logging
from flask import jsonify

from dataembed.services import (
    EmbedError,
    SourceMissingError,
    UnsupportedSourceError,
)

logger = logging.getLogger(__name__)


def json_error_response(message: str, status_code: int, category: str = "error"):
    """Create a standardized JSON error response."""
    return (
        jsonify({"success": False, "message": message, "category": category}),
        status_code,
    )


def register_error_handlers(app):
    """
    Register global error handlers with the Flask app.

    Args:
        app: The Flask application instance.
    """

    # =========================================================================
    # Bad Request Errors (400)
    # =========================================================================

    @app.errorhandler(SourceMissingError)
    def handle_source_missing(error: SourceMissingError):
        """Handle requests without a resolvable data source."""
        logger.warning(f"Missing data source: {error}")
        return json_error_response(str(error), 400)

    # =========================================================================
    # Not Found Errors (404)
    # =========================================================================

    @app.errorhandler(UnsupportedSourceError)
    def handle_unsupported_source(error: UnsupportedSourceError):
        """Handle data sources no matcher accepts."""
        logger.info(f"Unsupported data source: {error}")
        return json_error_response(str(error), 404)

    # =========================================================================
    # Server Errors (500)
    # =========================================================================

    @app.errorhandler(EmbedError)
    def handle_embed_error(error: EmbedError):
        """Handle general embed errors."""
        logger.error(f"Embed error: {error}")
        return json_error_response(str(error), 500)

    # =========================================================================
    # HTTP Error Codes
    # =========================================================================

    @app.errorhandler(404)
    def handle_not_found(error):
        """Handle 404 Not Found."""
        return json_error_response("Resource not found.", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        """Handle 405 Method Not Allowed."""
        return json_error_response("Method not allowed.", 405)

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Handle 500 Internal Server Error."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return json_error_response("An unexpected error occurred.", 500)

    logger.info("Global error handlers registered")
