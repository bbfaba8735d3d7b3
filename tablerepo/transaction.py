"""Scoped transaction boundaries for repository calls.

Usage::

    with transaction(session):
        session.add(record)
        session.flush()

    class AthleteRepository(BaseRepository[AthleteModel, int]):
        @transactional(read_only=True)
        def find_by_name(self, name): ...

A boundary joins a transaction only when the caller opened it explicitly
(``Session.begin()`` or ``begin_nested()``); commit or rollback then stays
with the caller. Otherwise the boundary owns the transaction. A
transaction the session autobegan (a lazy load, a query outside any
repository call) is committed first; the boundary then begins its own,
commits it on success and rolls it back on any exception before re-raising.
"""

from contextlib import contextmanager
from functools import wraps
from typing import Callable, Iterator, TypeVar

from sqlalchemy.orm import Session, SessionTransactionOrigin

from tablerepo.logging_config import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable)


def caller_owns_transaction(session: Session) -> bool:
    """True if the session's open transaction was begun explicitly."""
    current = session.get_transaction()
    return current is not None and current.origin is not SessionTransactionOrigin.AUTOBEGIN


@contextmanager
def transaction(session: Session, read_only: bool = False) -> Iterator[Session]:
    """Run the enclosed block inside a transaction on ``session``.

    Args:
        session: Session the block operates on.
        read_only: Disable autoflush for the block. SQLAlchemy has no
            read-only session mode, so this does not forbid writes.
    """
    if caller_owns_transaction(session):
        if read_only:
            with session.no_autoflush:
                yield session
        else:
            yield session
        return

    if session.in_transaction():
        # Autobegun outside any boundary; end it so nested calls see an
        # explicit transaction and join it
        session.commit()
    try:
        with session.begin():
            if read_only:
                with session.no_autoflush:
                    yield session
            else:
                yield session
    except Exception as exc:
        logger.warning(
            "transaction_rolled_back",
            error=type(exc).__name__,
            read_only=read_only,
        )
        raise


def transactional(read_only: bool = False) -> Callable[[F], F]:
    """Wrap a repository method in :func:`transaction` on ``self.db``."""

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            with transaction(self.db, read_only=read_only):
                return func(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
