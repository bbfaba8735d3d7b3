"""Club repository."""

from sqlalchemy.orm import Session

from tablerepo.models.club import ClubModel
from tablerepo.repositories.base import BaseRepository


class ClubRepository(BaseRepository[ClubModel, int]):
    def __init__(self, db: Session):
        super().__init__(db, ClubModel)
