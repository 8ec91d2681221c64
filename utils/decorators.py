from __future__ import annotations
from functools import wraps
from flask import request, g, current_app


def jwt_required():
    """
    Require a valid access token in the Authorization header.
    Missing/malformed header -> 400, invalid or expired token -> 401,
    raised by the auth service as ServiceError. Sets g.current_user.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            auth_service = current_app.extensions["auth_service"]
            g.current_user = auth_service.current_user(request.headers.get("Authorization"))
            return fn(*args, **kwargs)

        return wrapper

    return decorator
