"""Generic base repository with reusable CRUD operations."""

from typing import Any, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import Table, func, inspect, select
from sqlalchemy import delete as delete_stmt
from sqlalchemy.orm import InstrumentedAttribute, Session
from sqlalchemy.sql.elements import ColumnElement

from tablerepo.database import Base
from tablerepo.keys import KeyBinding, equals_row, primary_key_attributes, primary_key_condition
from tablerepo.logging_config import get_logger
from tablerepo.transaction import transactional

logger = get_logger(__name__)

T = TypeVar("T", bound=Base)
ID = TypeVar("ID")


class BaseRepository(Generic[T, ID]):
    """CRUD over one mapped table.

    Every public method runs in its own transaction boundary: reads are
    read-only, writes read-write. If the caller began a transaction
    explicitly, the call joins it and the caller decides when to commit.

    Subclasses add domain-specific queries and may set ``id_type`` to the
    value object used as a composite identifier, which is then checked
    against the key columns at construction.
    """

    id_type: Optional[type] = None

    def __init__(self, db: Session, model: Type[T], id_type: Optional[type] = None):
        self.db = db
        self.model = model
        self._key: Tuple[InstrumentedAttribute, ...] = tuple(primary_key_attributes(model))
        self._binding: Optional[KeyBinding] = None
        if len(self._key) > 1:
            self._binding = KeyBinding(
                [attr.key for attr in self._key], id_type or self.id_type
            )

    @property
    def table(self) -> Table:
        return self.model.__table__

    @property
    def primary_key(self) -> Tuple[InstrumentedAttribute, ...]:
        """Primary-key attributes in key order; empty if the table has none."""
        return self._key

    def id_condition(self, id: ID) -> ColumnElement[bool]:
        """Condition matching the row whose primary key equals ``id``.

        Raises:
            ValueError: the table declares no primary key, or a composite
                identifier cannot be bound to the key columns.
        """
        self._require_primary_key()
        return primary_key_condition(self._key, id, self._binding)

    # ── reads ────────────────────────────────────────────────────────

    @transactional(read_only=True)
    def find_by_id(self, id: ID) -> Optional[T]:
        stmt = select(self.model).where(self.id_condition(id))
        return self.db.scalars(stmt).one_or_none()

    @transactional(read_only=True)
    def exists_by_id(self, id: ID) -> bool:
        stmt = select(func.count()).select_from(self.model).where(self.id_condition(id))
        return self.db.scalar(stmt) > 0

    @transactional(read_only=True)
    def find_all(
        self,
        condition: Optional[ColumnElement[bool]] = None,
        order_by: Sequence[Any] = (),
        *,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        """Records matching ``condition`` (all records if None).

        ``order_by`` expressions are applied in the given order; ``offset``
        and ``limit`` page through the ordered result.
        """
        stmt = select(self.model)
        if condition is not None:
            stmt = stmt.where(condition)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.scalars(stmt).all())

    @transactional(read_only=True)
    def count(self, condition: Optional[ColumnElement[bool]] = None) -> int:
        stmt = select(func.count()).select_from(self.model)
        if condition is not None:
            stmt = stmt.where(condition)
        return self.db.scalar(stmt)

    # ── writes ───────────────────────────────────────────────────────

    @transactional()
    def save(self, record: T) -> int:
        """INSERT a new record or UPDATE an existing one.

        New versus existing follows the record's session state: a record
        that was never persisted is inserted, a loaded or detached one is
        updated. Returns 0 when an existing record has no pending changes.
        """
        affected = self._stage(record)
        self.db.flush()
        logger.debug("record_saved", table=self.table.name, affected=affected)
        return affected

    @transactional()
    def save_all(self, records: Sequence[T]) -> List[int]:
        """Save several records with a single flush; one count per record."""
        counts = [self._stage(record) for record in records]
        self.db.flush()
        logger.debug("records_saved", table=self.table.name, records=len(counts))
        return counts

    @transactional()
    def merge(self, record: T) -> int:
        """Upsert ``record`` by primary key.

        The row is looked up by key: present rows are updated, absent rows
        inserted. Key values generated by the insert are copied back onto
        ``record``.
        """
        merged = self.db.merge(record)
        if inspect(merged).key is None:
            affected = 1
        else:
            affected = 1 if self.db.is_modified(merged) else 0
        self.db.flush()
        if merged is not record:
            self._copy_key(merged, record)
        logger.debug("record_merged", table=self.table.name, affected=affected)
        return affected

    @transactional()
    def delete(self, record: T) -> int:
        """Delete the row matching the record's current key values."""
        self._require_primary_key()
        values = [getattr(record, attr.key) for attr in self._key]
        return self._delete_rows(equals_row(self._key, values))

    @transactional()
    def delete_by_id(self, id: ID) -> int:
        return self._delete_rows(self.id_condition(id))

    @transactional()
    def delete_where(self, condition: ColumnElement[bool]) -> int:
        """Bulk delete every row matching ``condition``."""
        return self._delete_rows(condition)

    # ── helpers ──────────────────────────────────────────────────────

    def _require_primary_key(self) -> None:
        if not self._key:
            raise ValueError(
                f"Table {self.table.name!r} has no primary key; "
                "this operation needs one"
            )

    def _stage(self, record: T) -> int:
        """Add ``record`` to the session; return the rows its flush will touch.

        A detached record whose row is already loaded in the session is
        merged onto the loaded instance instead of attached.
        """
        state = inspect(record)
        if state.key is None:
            self.db.add(record)
            return 1
        if state.detached and state.key in self.db.identity_map:
            record = self.db.merge(record)
        else:
            self.db.add(record)
        return 1 if self.db.is_modified(record) else 0

    def _copy_key(self, source: T, target: T) -> None:
        mapper = inspect(self.model)
        for column in mapper.primary_key:
            name = mapper.get_property_by_column(column).key
            value = getattr(source, name)
            if getattr(target, name) != value:
                setattr(target, name, value)

    def _delete_rows(self, condition: ColumnElement[bool]) -> int:
        result = self.db.execute(delete_stmt(self.model).where(condition))
        logger.debug("rows_deleted", table=self.table.name, count=result.rowcount)
        return result.rowcount
