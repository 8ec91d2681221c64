from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from models.base_model import BaseModel, Base


class Comment(BaseModel, Base):
    __tablename__ = "comments"

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    text = Column(Text, nullable=False)
    date = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False
    )
    movie_id = Column(
        String(36),
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    movie = relationship("Movie", back_populates="comments")
