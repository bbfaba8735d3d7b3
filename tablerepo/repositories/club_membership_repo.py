"""Club membership repository."""

from typing import List

from sqlalchemy.orm import Session

from tablerepo.models.club_membership import ClubMembershipModel, MembershipId
from tablerepo.repositories.base import BaseRepository


class ClubMembershipRepository(BaseRepository[ClubMembershipModel, MembershipId]):
    id_type = MembershipId

    def __init__(self, db: Session):
        super().__init__(db, ClubMembershipModel)

    def find_for_club(self, club_id: int) -> List[ClubMembershipModel]:
        return self.find_all(
            self.model.club_id == club_id, [self.model.athlete_id.asc()]
        )

    def count_for_athlete(self, athlete_id: int) -> int:
        return self.count(self.model.athlete_id == athlete_id)
