"""Structure-driven compilation of the typed predicate tree.

Unlike :class:`~fieldsql.compile.where.WhereBuilder`, no depth counter is
needed: parentheses are emitted for :class:`~fieldsql.schema.predicates.Group`
nodes and around an ``AnyOf`` that is a direct child of an ``AllOf``, so the
output is balanced and keeps the tree's precedence.  Placeholders follow the
same discipline as the flag-driven compiler: numbered in rendering order,
``args[k]`` binds ``$k+1``, and only comparisons and ranges bind values.
"""
from __future__ import annotations

import logging

from fieldsql.compile.base import CompiledClause, ParamCounter
from fieldsql.compile.defaults import qualify
from fieldsql.compile.membership import render_in
from fieldsql.errors import FieldSQLError
from fieldsql.schema.enums import Operator
from fieldsql.schema.predicates import (
    AllOf,
    AnyOf,
    ColumnCompare,
    Comparison,
    Group,
    Membership,
    NullCheck,
    Predicate,
    Range,
)

logger = logging.getLogger(__name__)


class PredicateTreeBuilder:
    """Compiles a :data:`~fieldsql.schema.predicates.Predicate` tree to ``WHERE ...``."""

    def build(self, node: Predicate) -> CompiledClause:
        """Compile ``node`` to a ``WHERE`` fragment plus its arguments."""
        counter = ParamCounter()
        sql = f"WHERE {self._render(node, counter)}"
        logger.debug("Compiled predicate tree to %r with %d argument(s)", sql, len(counter.args))
        return CompiledClause(sql=sql, args=counter.args)

    def _render(self, node: Predicate, counter: ParamCounter) -> str:
        if isinstance(node, Comparison):
            column = qualify(node.column, node.source).lower()
            return f"{column} {node.op} {counter.bind(node.value)}"
        if isinstance(node, Membership):
            return render_in(qualify(node.column, node.source), node.values)
        if isinstance(node, NullCheck):
            return f"{qualify(node.column, node.source).lower()} {node.operator}"
        if isinstance(node, Range):
            column = qualify(node.column, node.source).lower()
            low = counter.bind(node.low)
            high = counter.bind(node.high)
            return f"{column} {Operator.BETWEEN} {low} AND {high}"
        if isinstance(node, ColumnCompare):
            column = qualify(node.column, node.source).lower()
            other = qualify(node.other_column, node.other_source).lower()
            return f"{column} {node.op} {other}"
        if isinstance(node, AllOf):
            return " AND ".join(self._render_conjunct(item, counter) for item in node.items)
        if isinstance(node, AnyOf):
            return " OR ".join(self._render(item, counter) for item in node.items)
        if isinstance(node, Group):
            return f"({self._render(node.item, counter)})"
        raise FieldSQLError(f"Unknown predicate node: {type(node).__name__}")

    def _render_conjunct(self, node: Predicate, counter: ParamCounter) -> str:
        # OR binds looser than AND.
        if isinstance(node, AnyOf):
            return f"({self._render(node, counter)})"
        return self._render(node, counter)


def build_where_tree(node: Predicate) -> CompiledClause:
    """Compile ``node`` with a default :class:`PredicateTreeBuilder`."""
    return PredicateTreeBuilder().build(node)
