"""Pydantic models for filter predicates.

A :class:`Field` describes one condition of a ``WHERE`` clause.  Callers
assemble an ordered :class:`Fields` collection (in code or from JSON) and
hand it to :func:`~fieldsql.compile.where.build_where`::

    from fieldsql import ChainingKey, Field, Fields, Operator

    fields = Fields(
        [
            Field(name="employer_id", value=1),
            Field(name="is_active", value=True, group_open=True, chaining_key=ChainingKey.OR),
            Field(name="is_staff", value=False, group_close=True),
        ]
    )

Models are frozen: the compilers derive render-ready copies and never touch
the caller's instances.
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel

from fieldsql.schema.enums import ChainingKey, Operator


class Field(BaseModel):
    """One filter condition.

    Attributes:
        name: Column name; lower-cased when rendered.
        operator: Comparison kind.  ``None`` renders as ``=``.
        value: Bound value, or the list rendered inline by ``IN``.
        from_value: Lower bound, used only by ``BETWEEN``.
        to_value: Upper bound, used only by ``BETWEEN``.
        chaining_key: Connector placed after this condition, joining it to
            the next one.  ``None`` renders as ``AND``.  Ignored on the last
            condition of a sequence.
        source: Table or alias prefixed to ``name`` (e.g. for joins).
        group_open: Open a parenthesized group starting at this condition.
        group_close: Close the innermost open group after this condition.
        is_value_from_table: Compare ``name`` against another column
            (``name_value_from_table``) instead of a bound value, e.g.
            ``un.ends_at >= pp.ends_at``.
        name_value_from_table: The column compared against.
        source_name_value_from_table: Table or alias of that column.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    operator: Operator | None = None
    value: Any = None

    from_value: Any = None
    to_value: Any = None

    chaining_key: ChainingKey | None = None

    source: str = ""

    group_open: bool = False
    group_close: bool = False

    is_value_from_table: bool = False
    name_value_from_table: str = ""
    source_name_value_from_table: str = ""


class Fields(RootModel[list[Field]]):
    """Ordered sequence of :class:`Field` conditions.

    Accepts a plain JSON array on validation::

        Fields.model_validate([{"name": "id", "value": [1, 2], "operator": "IN"}])
    """

    root: list[Field] = []

    def __iter__(self) -> Iterator[Field]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Field:
        return self.root[index]

    def is_empty(self) -> bool:
        """Return ``True`` when there are no conditions."""
        return len(self.root) == 0

    def push(self, *fields: Field) -> Fields:
        """Return a new collection with ``fields`` appended."""
        return Fields([*self.root, *fields])

    def find_field(self, name: str) -> Field | None:
        """Return the first condition on ``name`` (case-insensitive), if any."""
        wanted = name.casefold()
        for field in self.root:
            if field.name.casefold() == wanted:
                return field
        return None

    def describe(self) -> str:
        """Return a ``"name: value, ... not found"`` diagnostic string.

        Handy as a not-found message when a lookup by these conditions
        returns no rows.
        """
        message = "not found"
        for field in self.root:
            message = f"{field.name}: {field.value}, {message}"
        return message
