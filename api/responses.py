"""
Response envelope.

Success: {"status": <code>, "message"?: str, "data"?: any, ...extra keys}
Failure: {"status": <code>, "message": str, "error"?: any}
"""
from typing import Any

from flask import jsonify


def success(status: int = 200, **body: Any):
    payload = {"status": status}
    payload.update({k: v for k, v in body.items() if v is not None})
    return jsonify(payload), status


def error_response(message: str, status: int = 500, error: Any = None):
    payload = {"status": status, "message": message}
    if error is not None:
        payload["error"] = error
    return jsonify(payload), status
