"""Shared test fixtures.

Every test gets a fresh in-memory SQLite database so tests are fully isolated.
"""

from datetime import date, datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

import tablerepo.models  # noqa: F401
from tablerepo.database import Base, build_session_factory
from tablerepo.models.athlete import AthleteModel
from tablerepo.models.club import ClubModel
from tablerepo.models.club_membership import ClubMembershipModel
from tablerepo.models.result_log import ResultLogModel


@pytest.fixture()
def db_engine():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    session = build_session_factory(db_engine)()
    yield session
    session.close()


# ── Convenience fixtures ─────────────────────────────────────────────────

@pytest.fixture()
def sample_clubs(db: Session) -> tuple[ClubModel, ClubModel]:
    zurich = ClubModel(name="LC Zurich", city="Zurich")
    bern = ClubModel(name="ST Bern", city="Bern")
    db.add_all([zurich, bern])
    db.commit()
    return zurich, bern


@pytest.fixture()
def sample_athletes(db: Session, sample_clubs) -> list[AthleteModel]:
    zurich, bern = sample_clubs
    athletes = [
        AthleteModel(name="Ann", birth_date=date(1999, 4, 2), club_id=zurich.id),
        AthleteModel(name="Ben", birth_date=date(2001, 1, 15), club_id=zurich.id),
        AthleteModel(name="Cleo", birth_date=date(1997, 9, 30), club_id=bern.id),
        AthleteModel(name="Dario", birth_date=date(2003, 6, 8), club_id=bern.id),
        AthleteModel(name="Ann", birth_date=date(2004, 12, 1), club_id=None),
    ]
    db.add_all(athletes)
    db.commit()
    return athletes


@pytest.fixture()
def sample_memberships(db: Session, sample_clubs, sample_athletes) -> list[ClubMembershipModel]:
    """Memberships (club_id, athlete_id): (1, 1), (1, 2), (2, 2), (2, 3)."""
    memberships = [
        ClubMembershipModel(club_id=1, athlete_id=1, role="captain", joined_on=date(2020, 1, 1)),
        ClubMembershipModel(club_id=1, athlete_id=2, role="member", joined_on=date(2021, 3, 1)),
        ClubMembershipModel(club_id=2, athlete_id=2, role="coach", joined_on=date(2022, 5, 1)),
        ClubMembershipModel(club_id=2, athlete_id=3, role="member", joined_on=date(2019, 8, 1)),
    ]
    db.add_all(memberships)
    db.commit()
    return memberships


@pytest.fixture()
def sample_results(db: Session, sample_athletes) -> list[ResultLogModel]:
    results = [
        ResultLogModel(athlete_id=1, event="100m", recorded_at=datetime(2024, 5, 1, 10), value=11.9),
        ResultLogModel(athlete_id=2, event="100m", recorded_at=datetime(2024, 5, 1, 11), value=11.4),
        ResultLogModel(athlete_id=3, event="100m", recorded_at=datetime(2024, 5, 2, 10), value=12.3),
        ResultLogModel(athlete_id=1, event="long_jump", recorded_at=datetime(2024, 5, 3, 9), value=6.1),
    ]
    db.add_all(results)
    db.commit()
    return results
