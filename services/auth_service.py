"""
Auth flow controller.

Orchestrates register / login / logout / refresh over the credential store,
the session store and the token service:

- register: validate, reject duplicates, hash (argon2), create the user
- login: validate, check the password, issue access + refresh tokens and
  overwrite the user's session with the new refresh token
- logout: verify the bearer token, drop the user's session (idempotent)
- refresh: the presented refresh token must still be the one stored for
  some session, then it must verify; a fresh access token is minted from
  its claims. The refresh token itself is not rotated.

Every failure is raised as a ServiceError; nothing is caught here except
to reclassify it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from marshmallow import ValidationError

from models.schemas.user import UserCreateSchema, UserLoginSchema, UserOutSchema, UserPublicSchema
from services.stores import SessionStore, UserStore
from utils.errors import ErrorKind, ServiceError
from utils.security import (
    InvalidToken,
    TokenService,
    hash_password,
    parse_bearer,
    verify_password,
)

logger = logging.getLogger(__name__)

user_create_schema = UserCreateSchema()
user_login_schema = UserLoginSchema()
user_out_schema = UserOutSchema()
user_public_schema = UserPublicSchema()


class AuthService:
    def __init__(self, users: UserStore, sessions: SessionStore, tokens: TokenService):
        self.users = users
        self.sessions = sessions
        self.tokens = tokens

    @staticmethod
    def _load(schema, payload: Any, message: str) -> Dict[str, Any]:
        if not isinstance(payload, dict):
            raise ServiceError(ErrorKind.VALIDATION, message, {"_schema": ["Expected a JSON object."]})
        try:
            return schema.load(payload)
        except ValidationError as err:
            raise ServiceError(ErrorKind.VALIDATION, message, err.messages)

    def _verify(self, token: str) -> Dict[str, Any]:
        try:
            return self.tokens.verify(token)
        except InvalidToken as exc:
            raise ServiceError(ErrorKind.UNAUTHORIZED, "Invalid or expired token", str(exc))

    def register(self, payload: Any) -> Dict[str, Any]:
        """Create a user. Returns the stored record without its password hash."""
        data = self._load(user_create_schema, payload, "Invalid or incomplete registration form")

        if self.users.find_by_email(data["email"]) is not None:
            raise ServiceError(ErrorKind.CONFLICT, "User already exists")

        user = self.users.create(
            name=data["name"],
            email=data["email"],
            password_hash=hash_password(data["password"]),
        )
        logger.info("registered user %s", user.id)
        return user_out_schema.dump(user)

    def login(self, payload: Any) -> Dict[str, Any]:
        data = self._load(user_login_schema, payload, "Invalid credentials")

        user = self.users.find_by_email(data["email"])
        if user is None:
            raise ServiceError(ErrorKind.NOT_FOUND, "User not found")
        if not verify_password(data["password"], user.password_hash):
            logger.warning("failed login for user %s", user.id)
            raise ServiceError(ErrorKind.UNAUTHORIZED, "Incorrect password")

        access_token = self.tokens.issue_access_token(user.id, user.email)
        refresh_token = self.tokens.issue_refresh_token(user.id, user.email)
        # replaces any previous session, which revokes its refresh token
        self.sessions.upsert(user.id, refresh_token)

        logger.info("user %s logged in", user.id)
        return {
            "access_token": access_token,
            "user": user_public_schema.dump(user),
        }

    def logout(self, authorization: Optional[str]) -> Dict[str, Any]:
        token = parse_bearer(authorization, "Token")
        claims = self._verify(token)

        if self.sessions.delete_for_user(claims["user_id"]):
            logger.info("user %s logged out", claims["user_id"])
        return {"message": "Logout successful"}

    def refresh(self, authorization: Optional[str]) -> Dict[str, Any]:
        token = parse_bearer(authorization, "Refresh token")

        # session lookup first: a token no longer stored is revoked even if its signature is fine
        if self.sessions.find_by_token(token) is None:
            raise ServiceError(ErrorKind.FORBIDDEN, "Invalid or expired session")

        claims = self._verify(token)
        access_token = self.tokens.issue_access_token(claims["user_id"], claims.get("email"))
        logger.info("issued new access token for user %s", claims["user_id"])
        return {"message": "New token generated", "token": access_token}

    def current_user(self, authorization: Optional[str]) -> Dict[str, Any]:
        token = parse_bearer(authorization, "Token")
        claims = self._verify(token)
        user = self.users.get(claims["user_id"])
        if user is None:
            raise ServiceError(ErrorKind.NOT_FOUND, "User not found")
        return user_out_schema.dump(user)
