"""Dependency Injection Container.

Centralized definition of the database stack and repositories using
dependency-injector.

Usage::

    from tablerepo.container import AppContainer

    container = AppContainer()
    container.init_resources()  # Create tables, open the session

    athletes = container.athlete_repo()
    athletes.save(AthleteModel(name="Ann"))

    container.shutdown_resources()  # Close the session
"""

from typing import Iterator

from dependency_injector import containers, providers
from sqlalchemy.orm import Session, sessionmaker

from tablerepo.config import Settings
from tablerepo.database import Base, build_engine, build_session_factory
from tablerepo.logging_config import setup_logging_from_settings
from tablerepo.repositories.athlete_repo import AthleteRepository
from tablerepo.repositories.club_membership_repo import ClubMembershipRepository
from tablerepo.repositories.club_repo import ClubRepository
from tablerepo.repositories.result_log_repo import ResultLogRepository


def _init_database(engine):
    """Initialize database schema."""
    import tablerepo.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    return engine


def _open_session(factory: sessionmaker) -> Iterator[Session]:
    """Session resource, closed on shutdown_resources()."""
    session = factory()
    try:
        yield session
    finally:
        session.close()


class AppContainer(containers.DeclarativeContainer):
    """Application Dependency Injection Container.

    Defines:
    - Configuration (Settings, logging)
    - Database (engine, schema, session)
    - Repositories (one per table)
    """

    # ══════════════════════════════════════════════════════════════════
    # CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    settings = providers.Singleton(Settings)

    logging_setup = providers.Resource(
        setup_logging_from_settings,
        settings=settings,
    )

    # ══════════════════════════════════════════════════════════════════
    # DATABASE
    # ══════════════════════════════════════════════════════════════════

    db_engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    db_initialized = providers.Resource(
        _init_database,
        engine=db_engine,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=db_engine,
    )

    # One session per container instance, closed on shutdown
    db_session = providers.Resource(
        _open_session,
        factory=session_factory,
    )

    # ══════════════════════════════════════════════════════════════════
    # REPOSITORIES (Data Access Layer)
    # ══════════════════════════════════════════════════════════════════

    club_repo = providers.Factory(
        ClubRepository,
        db=db_session,
    )

    athlete_repo = providers.Factory(
        AthleteRepository,
        db=db_session,
    )

    club_membership_repo = providers.Factory(
        ClubMembershipRepository,
        db=db_session,
    )

    result_log_repo = providers.Factory(
        ResultLogRepository,
        db=db_session,
    )
