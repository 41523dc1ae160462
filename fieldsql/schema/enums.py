"""Operator, chaining and ordering keywords.

Enum values are the exact SQL text emitted by the compilers, so a
``Field(operator="ILIKE")`` parsed from JSON and ``Operator.ILIKE`` render
identically.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Predicate operators
# ---------------------------------------------------------------------------


class Operator(str, Enum):
    """Comparison operators a :class:`~fieldsql.schema.field.Field` can use."""

    EQUALS = "="
    NOT_EQUAL = "<>"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_OR_EQUAL = "<="
    GREATER_OR_EQUAL = ">="
    ILIKE = "ILIKE"
    IN = "IN"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"
    BETWEEN = "BETWEEN"

    def __str__(self) -> str:
        return self.value


class ChainingKey(str, Enum):
    """Boolean connector joining a predicate to the one that follows it."""

    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value


class SortOrder(str, Enum):
    """ORDER BY direction."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Operator groups (keep frozenset for O(1) membership tests)
# ---------------------------------------------------------------------------

#: Operators rendered as ``<column> <op> $n`` against a single bound value.
SCALAR_OPS: frozenset[Operator] = frozenset(
    {
        Operator.EQUALS,
        Operator.NOT_EQUAL,
        Operator.LESS_THAN,
        Operator.GREATER_THAN,
        Operator.LESS_OR_EQUAL,
        Operator.GREATER_OR_EQUAL,
        Operator.ILIKE,
    }
)

#: Null-check operators: no value, no placeholder.
NULL_OPS: frozenset[Operator] = frozenset({Operator.IS_NULL, Operator.IS_NOT_NULL})

#: Operators that never bind an argument.
UNBOUND_OPS: frozenset[Operator] = NULL_OPS | {Operator.IN}
