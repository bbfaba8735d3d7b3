"""Athlete ORM model."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from tablerepo.database import Base


class AthleteModel(Base):
    __tablename__ = "athlete"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, index=True)
    birth_date = Column(Date)
    club_id = Column(Integer, ForeignKey("club.id"))

    # Relationships
    club = relationship("ClubModel", back_populates="athletes")

    def __repr__(self) -> str:
        return f"<Athlete {self.id} ({self.name})>"
