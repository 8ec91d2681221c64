import logging

from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError

from api.responses import error_response
from utils.errors import ServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    # Domain failures raised by the service layer
    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        logger.debug("service error: %r", err)
        return error_response(err.message, err.status, err.detail)

    # Marshmallow validation errors map to 400 with per-field details
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return error_response("Invalid input", 400, err.messages)

    # Integrity errors (unique constraints, FK violations, check constraints)
    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        message = str(getattr(err, "orig", err))
        lower_msg = message.lower()
        logger.warning("integrity error: %s", message)
        if "unique constraint" in lower_msg or "unique violation" in lower_msg:
            return error_response("Unique constraint violated", 409, message)
        if "foreign key" in lower_msg:
            return error_response("Foreign key constraint failed", 400, message)
        return error_response("Integrity error", 400, message)

    # Werkzeug HTTPExceptions (abort(), unknown routes, wrong methods) map to their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return error_response(err.description or err.name, err.code or 500)

    # 500 Internal Error (catch-all). The exception message is returned as the
    # error detail, which exposes internals to clients.
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logger.exception("Unhandled exception", exc_info=err)
        return error_response("Internal Server Error", 500, str(err))
