"""Primary-key equality conditions for single-column and composite keys.

A composite identifier is bound to the key columns through a
:class:`KeyBinding`, which pairs each key column with an identifier value:

* a plain tuple or list is read positionally, in key column order
  (the convention of ``Session.get``);
* a mapping is read by the column's mapped attribute name;
* any other object (dataclass, ``NamedTuple``, plain class) is read by
  attribute name.

Binding by name means a value object may declare its fields in any order.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import and_, inspect
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql.elements import ColumnElement


def primary_key_attributes(model) -> List[InstrumentedAttribute]:
    """Mapped attributes of the table-level primary key, in key order.

    Empty when the table declares no primary key, even if the mapper was
    given one of its own.
    """
    mapper = inspect(model)
    return [
        getattr(model, mapper.get_property_by_column(column).key)
        for column in mapper.local_table.primary_key.columns
    ]


def declared_fields(id_type: type) -> Optional[Tuple[str, ...]]:
    """Field names an identifier type declares, or None if it declares none."""
    if dataclasses.is_dataclass(id_type):
        return tuple(f.name for f in dataclasses.fields(id_type))
    fields = getattr(id_type, "_fields", None)
    if fields is not None:
        return tuple(fields)
    annotations = getattr(id_type, "__annotations__", None)
    if annotations:
        return tuple(annotations)
    return None


class KeyBinding:
    """Pairs the columns of a composite key with identifier values."""

    def __init__(self, key_names: Sequence[str], id_type: Optional[type] = None):
        self.key_names = tuple(key_names)
        self.id_type = id_type
        if id_type is not None:
            fields = declared_fields(id_type)
            if fields is not None:
                missing = [name for name in self.key_names if name not in fields]
                if missing:
                    raise ValueError(
                        f"{id_type.__name__} does not declare key field(s) "
                        f"{', '.join(missing)}"
                    )

    def values(self, identifier: Any) -> Tuple[Any, ...]:
        """Identifier values in key column order."""
        if isinstance(identifier, Mapping):
            missing = [name for name in self.key_names if name not in identifier]
            if missing:
                raise ValueError(f"Identifier is missing key field(s) {', '.join(missing)}")
            return tuple(identifier[name] for name in self.key_names)

        if isinstance(identifier, (tuple, list)) and not hasattr(identifier, "_fields"):
            if len(identifier) != len(self.key_names):
                raise ValueError(
                    f"Expected {len(self.key_names)} key values, got {len(identifier)}"
                )
            return tuple(identifier)

        missing = [name for name in self.key_names if not hasattr(identifier, name)]
        if missing:
            raise ValueError(
                f"{type(identifier).__name__} has no key field(s) {', '.join(missing)}"
            )
        return tuple(getattr(identifier, name) for name in self.key_names)


def equals_row(columns: Sequence[Any], values: Sequence[Any]) -> ColumnElement[bool]:
    """Row-wise equality ``(c1, ..., cn) == (v1, ..., vn)`` as a conjunction."""
    return and_(*(column == value for column, value in zip(columns, values)))


def primary_key_condition(
    key: Sequence[InstrumentedAttribute],
    identifier: Any,
    binding: Optional[KeyBinding] = None,
) -> ColumnElement[bool]:
    """Condition matching the row whose primary key equals ``identifier``.

    A single-column key compares the identifier directly. A composite key
    resolves one value per column through ``binding``.
    """
    if not key:
        raise ValueError("A primary key condition needs at least one key column")
    if len(key) == 1:
        return key[0] == identifier
    if binding is None:
        binding = KeyBinding([attr.key for attr in key])
    return equals_row(key, binding.values(identifier))
