from sqlalchemy import Column, Integer, JSON

from models.base_model import BaseModel, Base


class Theater(BaseModel, Base):
    __tablename__ = "theaters"

    # public sequential number, assigned as max + 1 on creation
    theater_id = Column(Integer, nullable=False, unique=True, index=True)
    # {address: {street1, city, state, zipcode}, geo: {type: "Point", coordinates: [lng, lat]}}
    location = Column(JSON, nullable=False)
