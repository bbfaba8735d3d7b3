"""Data access repositories."""

from tablerepo.repositories.athlete_repo import AthleteRepository
from tablerepo.repositories.base import BaseRepository
from tablerepo.repositories.club_membership_repo import ClubMembershipRepository
from tablerepo.repositories.club_repo import ClubRepository
from tablerepo.repositories.result_log_repo import ResultLogRepository

__all__ = [
    "BaseRepository",
    "ClubRepository",
    "AthleteRepository",
    "ClubMembershipRepository",
    "ResultLogRepository",
]
