"""
Session model: the single live refresh token of a user.
Fields:
- user_id (String(36)) - FK to users.id, unique: one session per user
- refresh_token - overwritten on every login, looked up on refresh
- created_at, updated_at
"""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Session(BaseModel, Base):
    __tablename__ = "sessions"

    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True
    )
    refresh_token = Column(String(1024), nullable=False, index=True)

    user = relationship("User", back_populates="session")

    def __repr__(self):
        return f"<Session user={self.user_id}>"
