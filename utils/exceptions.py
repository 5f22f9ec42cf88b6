"""
Typed failures raised by the service layer.

Blueprints let these propagate; api/errors.py turns them into the response
envelope with the matching status code.
"""
from __future__ import annotations


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class InvalidInput(ServiceError):
    status_code = 400


class Conflict(ServiceError):
    """Duplicate slug/email. Reported as a validation failure (400)."""
    status_code = 400


class Unauthenticated(ServiceError):
    status_code = 401


class Forbidden(ServiceError):
    status_code = 403


class NotFound(ServiceError):
    status_code = 404
