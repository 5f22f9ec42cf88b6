from flask import current_app, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError
import logging

from models import storage
from services.uploads import too_large_message
from utils.exceptions import ServiceError
from utils.responses import failure

logger = logging.getLogger(__name__)


def flatten_messages(messages, prefix: str = "") -> list:
    """{'seo': {'metaTitle': ['Too long.']}} -> [{'field': 'seo.metaTitle', 'message': 'Too long.'}]"""
    out = []
    if isinstance(messages, dict):
        for key, value in messages.items():
            name = f"{prefix}.{key}" if prefix else str(key)
            out.extend(flatten_messages(value, name))
    elif isinstance(messages, list):
        for item in messages:
            if isinstance(item, (dict, list)):
                out.extend(flatten_messages(item, prefix))
            else:
                out.append({"field": prefix or "_schema", "message": str(item)})
    else:
        out.append({"field": prefix or "_schema", "message": str(messages)})
    return out


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        return failure(err.message, err.status_code, errors=err.errors)

    # Marshmallow validation errors map to 400
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return failure("Validation Error", 400, errors=flatten_messages(err.messages))

    # Integrity errors (unique slug/email/page, FK violations)
    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        storage.rollback()
        message = str(getattr(err, "orig", err)).lower()
        logger.info("Integrity error on %s %s: %s", request.method, request.path, message)
        if "unique" in message or "duplicate" in message:
            return failure("A record with this value already exists", 400)
        return failure("Integrity error", 400)

    # Bodies over MAX_CONTENT_LENGTH are cut off before the upload checks run
    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(err: RequestEntityTooLarge):
        return failure(too_large_message(current_app.config["MAX_FILE_SIZE"]), 400)

    # Werkzeug HTTPExceptions (abort(), 404s, 405s, 429 from the limiter) keep their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        if err.code == 404 and request.url_rule is None:
            return failure("Route not found", 404)
        if err.code == 429:
            message = getattr(getattr(err, "limit", None), "error_message", None)
            return failure(message or "Too many requests, please try again later.", 429)
        return failure(err.description or err.name, err.code or 400)

    # 500 Internal Error (catch-all)
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        storage.rollback()
        logger.exception("Unhandled exception on %s %s", request.method, request.path)
        if current_app.debug:
            return failure(str(err) or "Server Error", 500, error=err.__class__.__name__)
        return failure("Server Error", 500)
