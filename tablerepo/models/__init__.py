"""SQLAlchemy ORM models, imported here so Base.metadata sees them."""

from tablerepo.models.athlete import AthleteModel
from tablerepo.models.club import ClubModel
from tablerepo.models.club_membership import ClubMembershipModel, MembershipId
from tablerepo.models.result_log import ResultLogModel

__all__ = [
    "ClubModel",
    "AthleteModel",
    "ClubMembershipModel",
    "MembershipId",
    "ResultLogModel",
]
