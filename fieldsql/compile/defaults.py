"""Render-time defaulting for fields and sort entries.

Both helpers return a new model (``model_copy``); the caller's instance is
never modified, so one ``Fields`` sequence can be compiled any number of times
and from several threads.
"""
from __future__ import annotations

from typing import Any

from fieldsql.schema.enums import ChainingKey, Operator, SortOrder
from fieldsql.schema.field import Field
from fieldsql.schema.sort import SortField


def qualify(name: str, source: str) -> str:
    """Return ``source.name``, or ``name`` when there is no source."""
    return f"{source}.{name}" if source else name


def apply_field_defaults(field: Field) -> Field:
    """Return the render-ready copy of ``field``.

    - ``chaining_key`` defaults to ``AND`` and ``operator`` to ``=``.
    - ``name`` and ``name_value_from_table`` are qualified with their sources.
    - A ``group_open`` field gets ``(`` prefixed to its name; that prefix is
      the only place an opening parenthesis is ever emitted.
    """
    name = qualify(field.name, field.source)
    if field.group_open:
        name = f"({name}"

    update: dict[str, Any] = {
        "name": name,
        "chaining_key": field.chaining_key or ChainingKey.AND,
        "operator": field.operator or Operator.EQUALS,
        "name_value_from_table": qualify(
            field.name_value_from_table, field.source_name_value_from_table
        ),
    }
    return field.model_copy(update=update)


def apply_sort_defaults(sort: SortField) -> SortField:
    """Return ``sort`` with ``ASC`` order by default and a qualified name."""
    return sort.model_copy(
        update={
            "name": qualify(sort.name, sort.source),
            "order": sort.order or SortOrder.ASC,
        }
    )
