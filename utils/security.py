"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT creation/verification via PyJWT (TokenService)
- JTI generation for token identifiers
- Bearer token extraction from the Authorization header
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, VerificationError, InvalidHashError

from utils.errors import ErrorKind, ServiceError

ph = PasswordHasher()

ACCESS = "access"
REFRESH = "refresh"


class InvalidToken(Exception):
    """Raised by TokenService.verify when a token can't be trusted."""


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2 (salted, one-way)
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """ Verify a plaintext password against an argon2 hash
    """
    try:
        return ph.verify(password_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def generate_jti() -> str:
    """Generate a unique JTI (JWT ID).
    """
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


def parse_bearer(header: Optional[str], what: str = "Token") -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header.

    Raises a BAD_REQUEST ServiceError when the header is missing or malformed.
    """
    if not header or not header.startswith("Bearer "):
        raise ServiceError(ErrorKind.BAD_REQUEST, f"{what} missing or malformed")
    token = header.split(" ", 1)[1].strip()
    if not token:
        raise ServiceError(ErrorKind.BAD_REQUEST, f"{what} missing or malformed")
    return token


class TokenService:
    """
    Issues and verifies signed, time-limited tokens.

    The signing secret is handed in at construction (see api.create_app) so
    nothing here reads global configuration. Both token kinds carry the same
    ``user_id``/``email`` claims; they differ only in lifetime and ``type``.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        access_expires: timedelta = timedelta(hours=1),
        refresh_expires: timedelta = timedelta(days=7),
        issuer: str = "mflix-api",
    ):
        if not secret:
            raise ValueError("TokenService requires a signing secret")
        self._secret = secret
        self.algorithm = algorithm
        self.access_expires = access_expires
        self.refresh_expires = refresh_expires
        self.issuer = issuer

    def _issue(self, user_id: str, email: str, token_type: str, lifetime: timedelta) -> str:
        now = _now()
        payload = {
            "iss": self.issuer,
            "user_id": str(user_id),
            "email": email,
            "type": token_type,
            "jti": generate_jti(),
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def issue_access_token(self, user_id: str, email: str) -> str:
        return self._issue(user_id, email, ACCESS, self.access_expires)

    def issue_refresh_token(self, user_id: str, email: str) -> str:
        return self._issue(user_id, email, REFRESH, self.refresh_expires)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a JWT. Raises InvalidToken on invalid signature,
        malformed token, missing claims or expiry.
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["exp", "iat", "user_id"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Token expired")
        except jwt.InvalidTokenError as exc:
            raise InvalidToken(f"Invalid token: {exc}")
