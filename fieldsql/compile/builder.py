"""Full SELECT assembly from a :class:`~fieldsql.schema.specification.FieldsSpecification`.

``QueryBuilder`` wires the clause-level builders together in the order
PostgreSQL expects::

    SELECT <columns> FROM <table> [WHERE ...] [ORDER BY ...] [LIMIT n OFFSET m]

Only the WHERE clause binds arguments, so the resulting ``args`` are those of
:func:`~fieldsql.compile.where.build_where`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fieldsql.compile.base import CompiledClause
from fieldsql.compile.clause_builders import (
    build_order_by,
    build_pagination,
    build_select,
    build_select_fields,
)
from fieldsql.compile.where import WhereBuilder
from fieldsql.config import DEFAULT_CONFIG, BuilderConfig
from fieldsql.schema.specification import FieldsSpecification

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Compiles a specification into one parameterized SELECT statement.

    Args:
        config: Table conventions and pagination defaults.
        where_builder: WHERE compiler; defaults to :class:`WhereBuilder`.
    """

    def __init__(
        self,
        config: BuilderConfig = DEFAULT_CONFIG,
        where_builder: WhereBuilder | None = None,
    ) -> None:
        self._config = config
        self._where = where_builder or WhereBuilder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_select(
        self,
        table: str,
        columns: Sequence[str],
        spec: FieldsSpecification,
        *,
        with_audit_columns: bool = False,
    ) -> CompiledClause:
        """Compile a paged, filtered, ordered SELECT.

        Args:
            table: Table (optionally with alias, e.g. ``"contracts c"``).
            columns: Columns to select.
            spec: Filters, sorts and pagination.
            with_audit_columns: Frame ``columns`` with the id and audit
                columns (see :func:`~fieldsql.compile.clause_builders.build_select`).

        Returns:
            :class:`~fieldsql.compile.base.CompiledClause` for the statement.

        Raises:
            FieldsEmptyError: If ``columns`` is empty.
            RangeValidationError: (or subclass) from the WHERE compiler.
        """
        if with_audit_columns:
            parts = [build_select(table, columns, self._config)]
        else:
            parts = [build_select_fields(table, columns)]
        args: list = []

        if not spec.filters.is_empty():
            where = self._where.build(spec.filters)
            parts.append(where.sql)
            args = where.args

        order_by = build_order_by(spec.sorts)
        if order_by:
            parts.append(order_by)

        pagination = build_pagination(spec.pagination, self._config)
        if pagination:
            parts.append(pagination)

        sql = " ".join(parts)
        logger.debug("Compiled SELECT on %s: %r", table, sql)
        return CompiledClause(sql=sql, args=args)
