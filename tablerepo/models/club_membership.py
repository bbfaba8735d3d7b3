"""Club membership ORM model (composite primary key)."""

from dataclasses import dataclass

from sqlalchemy import Column, Date, ForeignKey, Integer, String

from tablerepo.database import Base


@dataclass(frozen=True)
class MembershipId:
    """Identifier of a club membership row."""

    club_id: int
    athlete_id: int


class ClubMembershipModel(Base):
    __tablename__ = "club_membership"

    # Key order: (club_id, athlete_id)
    club_id = Column(Integer, ForeignKey("club.id"), primary_key=True)
    athlete_id = Column(Integer, ForeignKey("athlete.id"), primary_key=True)
    role = Column(String, nullable=False, default="member")
    joined_on = Column(Date)

    @property
    def membership_id(self) -> MembershipId:
        return MembershipId(club_id=self.club_id, athlete_id=self.athlete_id)

    def __repr__(self) -> str:
        return f"<ClubMembership club={self.club_id} athlete={self.athlete_id} role={self.role}>"
