"""Error taxonomy shared by services and routes.

Services raise these; ``register_error_handlers`` turns them into
``{"error": message}`` JSON responses with the matching status code.
"""
import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None, status_code=None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = 'Invalid request'


class NotFoundError(AppError):
    status_code = 404
    default_message = 'Query not found'


class UpstreamError(AppError):
    """A provider call failed.

    ``provider_status`` is set only when the provider answered with a non-2xx
    status and an error message of its own; network errors, timeouts and
    malformed payloads leave it as None.
    """
    status_code = 500
    default_message = 'Upstream request failed'

    def __init__(self, message=None, provider_status=None):
        super().__init__(message, status_code=provider_status)
        self.provider_status = provider_status


class PersistenceError(AppError):
    status_code = 500
    default_message = 'Database operation failed'


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(err):
        if err.status_code >= 500:
            logger.warning(f"{type(err).__name__}: {err.message}")
        return jsonify({'error': err.message}), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({'error': err.description or err.name}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err):
        logger.exception(f"Unhandled error: {err}")
        return jsonify({'error': 'Internal server error'}), 500
