"""Declarative base, engine and session factory builders.

Nothing is created at import time; the container builds the engine and
session factory from Settings.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""
    pass


def build_engine(database_url: str, echo: bool = False):
    """Create a SQLAlchemy engine.

    SQLite connections may be used from a thread other than the one that
    opened them (check_same_thread=False).
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def build_session_factory(engine) -> sessionmaker[Session]:
    """Session factory used by repositories.

    Records returned from a committed repository call keep their loaded
    values (expire_on_commit=False), so reading them does not autobegin a
    new transaction.
    """
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
