"""
Service layer: credential/session stores and the auth flow controller.
Routes call into these; they raise utils.errors.ServiceError on failure.
"""
from services.auth_service import AuthService
from services.stores import SessionStore, UserStore

__all__ = ["AuthService", "SessionStore", "UserStore"]
