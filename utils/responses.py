"""The {success, data, message, pagination} envelope every endpoint returns."""
from flask import jsonify


def success(data=None, message: str = None, status: int = 200, pagination: dict = None):
    payload = {"success": True}
    if message is not None:
        payload["message"] = message
    if data is not None:
        payload["data"] = data
    if pagination is not None:
        payload["pagination"] = pagination
    return jsonify(payload), status


def failure(message: str, status: int, errors=None, **extra):
    payload = {"success": False, "message": message}
    if errors:
        payload["errors"] = errors
    payload.update(extra)
    return jsonify(payload), status
