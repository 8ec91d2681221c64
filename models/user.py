from models.base_model import Base, BaseModel
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship


class User(BaseModel, Base):
    __tablename__ = "users"

    name = Column(String(255), nullable=False)
    # stored exactly as submitted; lookups are exact-match
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    session = relationship(
        "Session",
        back_populates="user",
        uselist=False,
        passive_deletes=True
    )

    def __repr__(self):
        return f"<User {self.email}>"
