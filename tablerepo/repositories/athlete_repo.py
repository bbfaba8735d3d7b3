"""Athlete repository."""

from typing import List

from sqlalchemy.orm import Session

from tablerepo.models.athlete import AthleteModel
from tablerepo.repositories.base import BaseRepository
from tablerepo.transaction import transactional


class AthleteRepository(BaseRepository[AthleteModel, int]):
    def __init__(self, db: Session):
        super().__init__(db, AthleteModel)

    def find_by_name(self, name: str) -> List[AthleteModel]:
        """Athletes with exactly this name, oldest id first."""
        return self.find_all(self.model.name == name, [self.model.id.asc()])

    @transactional()
    def transfer(self, athlete_id: int, club_id: int) -> int:
        """Move an athlete to another club. Returns affected rows."""
        athlete = self.find_by_id(athlete_id)
        if athlete is None:
            return 0
        athlete.club_id = club_id
        return self.save(athlete)
