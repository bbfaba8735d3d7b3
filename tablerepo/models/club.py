"""Club ORM model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from tablerepo.database import Base


class ClubModel(Base):
    __tablename__ = "club"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)
    city = Column(String)

    # Relationships
    athletes = relationship("AthleteModel", back_populates="club")

    def __repr__(self) -> str:
        return f"<Club {self.id} ({self.name})>"
