"""Generic table repositories over SQLAlchemy."""

from tablerepo.repositories.base import BaseRepository

__all__ = ["BaseRepository"]
