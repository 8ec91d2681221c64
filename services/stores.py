"""
Credential and session stores.

Thin wrappers over DBStorage's document operations, scoped to the `users`
and `sessions` collections. Each call is a single-record operation.
"""
from __future__ import annotations

from typing import Optional

from models.db_storage import DBStorage
from models.session import Session
from models.user import User


class UserStore:
    """Credential store: user identity records keyed by email."""

    def __init__(self, storage: DBStorage):
        self.storage = storage

    def find_by_email(self, email: str) -> Optional[User]:
        # exact match; emails are never normalized
        return self.storage.find_one(User, email=email)

    def get(self, user_id: str) -> Optional[User]:
        return self.storage.get(User, user_id)

    def create(self, name: str, email: str, password_hash: str) -> User:
        user = User(name=name, email=email, password_hash=password_hash)
        self.storage.new(user)
        self.storage.save()
        return user


class SessionStore:
    """
    Single-slot session store: at most one refresh token per user.
    Writing a new token for a user replaces the previous one.
    """

    def __init__(self, storage: DBStorage):
        self.storage = storage

    def upsert(self, user_id: str, refresh_token: str) -> Session:
        return self.storage.upsert(
            Session,
            {"user_id": str(user_id)},
            {"refresh_token": refresh_token},
        )

    def find_by_token(self, refresh_token: str) -> Optional[Session]:
        return self.storage.find_one(Session, refresh_token=refresh_token)

    def get_for_user(self, user_id: str) -> Optional[Session]:
        return self.storage.find_one(Session, user_id=str(user_id))

    def delete_for_user(self, user_id: str) -> bool:
        """Remove the user's session. Returns False when there was none."""
        return self.storage.delete_where(Session, user_id=str(user_id)) > 0
