"""
Domain error taxonomy.

Every failure detected by the service layer is raised as a ServiceError
carrying one ErrorKind. The Flask error handlers (api/errors.py) translate
it into the JSON error envelope, so the kind decides the HTTP status.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL = "INTERNAL"

    @property
    def status(self) -> int:
        return _STATUS[self]


_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


class ServiceError(Exception):
    """A classified failure: kind, human readable message and optional detail.

    ``detail`` holds structured data (per-field validation messages, the
    reason a token was rejected) and is exposed as the envelope's ``error``.
    """

    def __init__(self, kind: ErrorKind, message: str, detail: Any = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.detail = detail

    @property
    def status(self) -> int:
        return self.kind.status

    def __repr__(self) -> str:
        return f"<ServiceError {self.kind.value} {self.status}: {self.message}>"
