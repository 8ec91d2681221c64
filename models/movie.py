from sqlalchemy import Column, String, Integer, Text, DateTime, JSON, Index
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Movie(BaseModel, Base):
    __tablename__ = "movies"

    title = Column(String(255), nullable=True)
    plot = Column(Text, nullable=True)
    fullplot = Column(Text, nullable=True)
    genres = Column(JSON, nullable=False, default=lambda: [])
    runtime = Column(Integer, nullable=True)
    cast = Column(JSON, nullable=False, default=lambda: [])
    poster = Column(String(1024), nullable=True)
    languages = Column(JSON, nullable=False, default=lambda: [])
    released = Column(DateTime(timezone=True), nullable=True)
    directors = Column(JSON, nullable=False, default=lambda: [])
    writers = Column(JSON, nullable=False, default=lambda: [])
    rated = Column(String(32), nullable=True)
    lastupdated = Column(String(64), nullable=True)
    year = Column(Integer, nullable=True)
    countries = Column(JSON, nullable=False, default=lambda: [])
    type = Column(String(32), nullable=True)
    num_mflix_comments = Column(Integer, nullable=True)

    # Embedded sub-documents
    awards = Column(JSON, nullable=True)  # {wins, nominations, text}
    imdb = Column(JSON, nullable=True)  # {rating, votes, id}
    tomatoes = Column(JSON, nullable=True)  # {viewer, fresh, critic, rotten, lastUpdated}

    comments = relationship(
        "Comment",
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    __table_args__ = (
        Index("ix_movies_title", "title"),
        Index("ix_movies_year", "year"),
    )
