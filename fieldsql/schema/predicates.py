"""Typed predicate tree.

An alternative to the flag-driven :class:`~fieldsql.schema.field.Field`
sequence.  Each node kind carries only the attributes it needs, and grouping
is expressed by nesting instead of ``group_open`` / ``group_close`` flags, so
parentheses are balanced by construction.

Nodes are parsed from JSON through a Pydantic v2 discriminated union on the
``kind`` key::

    from fieldsql.schema.predicates import PREDICATE_ADAPTER

    node = PREDICATE_ADAPTER.validate_python(
        {
            "kind": "all",
            "items": [
                {"kind": "comparison", "column": "employer_id", "value": 1},
                {
                    "kind": "group",
                    "item": {
                        "kind": "any",
                        "items": [
                            {"kind": "comparison", "column": "is_active", "value": True},
                            {"kind": "null_check", "column": "ends_at"},
                        ],
                    },
                },
            ],
        }
    )

or in code with the :func:`all_of`, :func:`any_of` and :func:`group` helpers.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, model_validator

from fieldsql.errors import FromValueMissingError, RangeTypeMismatchError, ToValueMissingError
from fieldsql.schema.enums import Operator

_FROZEN = ConfigDict(extra="forbid", frozen=True)

#: Operators allowed where a node compares a column against one other thing.
ComparisonOperator = Literal["=", "<>", "<", ">", "<=", ">=", "ILIKE"]


# ---------------------------------------------------------------------------
# Leaf predicates
# ---------------------------------------------------------------------------


class Comparison(BaseModel):
    """``<column> <op> $n`` against one bound value."""

    model_config = _FROZEN

    kind: Literal["comparison"] = "comparison"
    column: str
    source: str = ""
    op: ComparisonOperator = "="
    value: Any


class Membership(BaseModel):
    """``<column> IN (...)`` with inline literals.

    ``values`` must be all integers or all strings; any other shape is
    rejected at construction time.  An empty list still renders as the
    ``<column> = 0`` fail-safe.
    """

    model_config = _FROZEN

    kind: Literal["membership"] = "membership"
    column: str
    source: str = ""
    values: list[StrictInt] | list[StrictStr]


class NullCheck(BaseModel):
    """``<column> IS NULL`` or, when ``negated``, ``IS NOT NULL``."""

    model_config = _FROZEN

    kind: Literal["null_check"] = "null_check"
    column: str
    source: str = ""
    negated: bool = False

    @property
    def operator(self) -> Operator:
        return Operator.IS_NOT_NULL if self.negated else Operator.IS_NULL


class Range(BaseModel):
    """``<column> BETWEEN $n AND $n+1``; both bounds must share a type.

    Bad bounds raise the same typed errors as the flag-driven compiler
    rather than a :class:`pydantic.ValidationError`.
    """

    model_config = _FROZEN

    kind: Literal["range"] = "range"
    column: str
    source: str = ""
    low: Any
    high: Any

    @model_validator(mode="after")
    def _same_type(self) -> Range:
        if self.low is None:
            raise FromValueMissingError(self.column)
        if self.high is None:
            raise ToValueMissingError(self.column)
        if type(self.low) is not type(self.high):
            raise RangeTypeMismatchError(
                self.column, type(self.low).__name__, type(self.high).__name__
            )
        return self


class ColumnCompare(BaseModel):
    """``<column> <op> <other_column>``, comparing two column references."""

    model_config = _FROZEN

    kind: Literal["column_compare"] = "column_compare"
    column: str
    source: str = ""
    op: ComparisonOperator = "="
    other_column: str
    other_source: str = ""


# ---------------------------------------------------------------------------
# Composite predicates
# ---------------------------------------------------------------------------


class AllOf(BaseModel):
    """Children joined with ``AND``."""

    model_config = _FROZEN

    kind: Literal["all"] = "all"
    items: list[Predicate] = Field(min_length=1)


class AnyOf(BaseModel):
    """Children joined with ``OR``."""

    model_config = _FROZEN

    kind: Literal["any"] = "any"
    items: list[Predicate] = Field(min_length=1)


class Group(BaseModel):
    """Wraps its child in parentheses."""

    model_config = _FROZEN

    kind: Literal["group"] = "group"
    item: Predicate


Predicate = Annotated[
    Comparison | Membership | NullCheck | Range | ColumnCompare | AllOf | AnyOf | Group,
    Field(discriminator="kind"),
]

# Resolve forward references in recursive types.
AllOf.model_rebuild()
AnyOf.model_rebuild()
Group.model_rebuild()

#: Parse a raw dict into a typed predicate node.
PREDICATE_ADAPTER: TypeAdapter[Predicate] = TypeAdapter(Predicate)


# ---------------------------------------------------------------------------
# Builder helpers
# ---------------------------------------------------------------------------


def all_of(*items: Predicate) -> AllOf:
    """Join ``items`` with ``AND``."""
    return AllOf(items=list(items))


def any_of(*items: Predicate) -> AnyOf:
    """Join ``items`` with ``OR``."""
    return AnyOf(items=list(items))


def group(item: Predicate) -> Group:
    """Parenthesize ``item``."""
    return Group(item=item)
