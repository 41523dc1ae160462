"""Statement and clause templates.

Plain string templates around the conventional table layout (``id``,
``created_at``, ``updated_at``; see :class:`~fieldsql.config.BuilderConfig`).

Functions
---------
build_insert                 — ``INSERT ... RETURNING id, created_at``
build_insert_with_id         — ``INSERT (id, ...) ... RETURNING created_at``
build_update_by_id           — ``UPDATE ... SET ..., updated_at = now() WHERE id = $n``
build_select                 — ``SELECT id, ..., created_at, updated_at FROM t``
build_select_fields          — ``SELECT ... FROM t``
build_order_by               — ``ORDER BY ...``
build_pagination             — ``LIMIT n OFFSET m``
columns_aliased              — ``a.id, a.col, a.created_at, a.updated_at``
columns_aliased_with_default — same, kept for callers of the older name
"""
from __future__ import annotations

from collections.abc import Sequence

from fieldsql.compile.base import placeholder
from fieldsql.compile.defaults import apply_sort_defaults
from fieldsql.config import DEFAULT_CONFIG, BuilderConfig
from fieldsql.errors import FieldsEmptyError
from fieldsql.schema.pagination import Pagination
from fieldsql.schema.sort import SortField, SortFields


def _placeholders(count: int, start: int = 1) -> str:
    return ", ".join(placeholder(n) for n in range(start, start + count))


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


def build_insert(
    table: str, columns: Sequence[str], config: BuilderConfig = DEFAULT_CONFIG
) -> str:
    """Build an INSERT whose primary key is generated by the database.

    Raises:
        FieldsEmptyError: If ``columns`` is empty.
    """
    if not columns:
        raise FieldsEmptyError("INSERT")
    return (
        f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({_placeholders(len(columns))}) "
        f"RETURNING {config.id_column}, {config.created_at_column}"
    )


def build_insert_with_id(
    table: str, columns: Sequence[str], config: BuilderConfig = DEFAULT_CONFIG
) -> str:
    """Build an INSERT where the caller supplies the primary key as ``$1``.

    Raises:
        FieldsEmptyError: If ``columns`` is empty.
    """
    if not columns:
        raise FieldsEmptyError("INSERT")
    all_columns = [config.id_column, *columns]
    return (
        f"INSERT INTO {table} ({', '.join(all_columns)}) "
        f"VALUES ({_placeholders(len(all_columns))}) "
        f"RETURNING {config.created_at_column}"
    )


def build_update_by_id(
    table: str, columns: Sequence[str], config: BuilderConfig = DEFAULT_CONFIG
) -> str:
    """Build an UPDATE of one row; the primary key binds the last placeholder.

    Raises:
        FieldsEmptyError: If ``columns`` is empty.
    """
    if not columns:
        raise FieldsEmptyError("UPDATE")
    assignments = "".join(
        f"{column} = {placeholder(n)}, " for n, column in enumerate(columns, start=1)
    )
    return (
        f"UPDATE {table} SET {assignments}"
        f"{config.updated_at_column} = {config.update_timestamp_sql} "
        f"WHERE {config.id_column} = {placeholder(len(columns) + 1)}"
    )


def build_select(
    table: str, columns: Sequence[str], config: BuilderConfig = DEFAULT_CONFIG
) -> str:
    """Build a SELECT of ``columns`` framed by the id and audit columns.

    Raises:
        FieldsEmptyError: If ``columns`` is empty.
    """
    if not columns:
        raise FieldsEmptyError("SELECT")
    selected = [
        config.id_column,
        *columns,
        config.created_at_column,
        config.updated_at_column,
    ]
    return f"SELECT {', '.join(selected)} FROM {table}"


def build_select_fields(table: str, columns: Sequence[str]) -> str:
    """Build a SELECT of exactly ``columns``.

    Raises:
        FieldsEmptyError: If ``columns`` is empty.
    """
    if not columns:
        raise FieldsEmptyError("SELECT")
    return f"SELECT {', '.join(columns)} FROM {table}"


# ---------------------------------------------------------------------------
# ORDER BY / LIMIT
# ---------------------------------------------------------------------------


def build_order_by(sorts: SortFields | Sequence[SortField]) -> str:
    """Build ``ORDER BY`` from ``sorts``, or ``""`` when there are none."""
    items = [apply_sort_defaults(s) for s in sorts]
    if not items:
        return ""
    return "ORDER BY " + ", ".join(f"{s.name.lower()} {s.order}" for s in items)


def build_pagination(pagination: Pagination, config: BuilderConfig = DEFAULT_CONFIG) -> str:
    """Build ``LIMIT n OFFSET m`` for ``pagination``.

    Returns ``""`` when neither page nor limit is set.  Otherwise a missing
    ``max_limit`` falls back to ``config.default_max_limit``, a missing or
    too-large ``limit`` is clamped to ``max_limit``, and a missing ``page``
    means the first page.
    """
    if pagination.page == 0 and pagination.limit == 0:
        return ""

    max_limit = pagination.max_limit or config.default_max_limit
    limit = pagination.limit
    if limit == 0 or limit > max_limit:
        limit = max_limit
    page = pagination.page or 1

    offset = (page - 1) * limit
    return f"LIMIT {limit} OFFSET {offset}"


# ---------------------------------------------------------------------------
# Column lists
# ---------------------------------------------------------------------------


def columns_aliased(
    columns: Sequence[str], alias: str, config: BuilderConfig = DEFAULT_CONFIG
) -> str:
    """Return ``columns`` qualified with ``alias``, framed by id and audit columns.

    Returns ``""`` when ``columns`` is empty.
    """
    if not columns:
        return ""
    selected = [
        config.id_column,
        *columns,
        config.created_at_column,
        config.updated_at_column,
    ]
    return ", ".join(f"{alias}.{column}" for column in selected)


def columns_aliased_with_default(
    columns: Sequence[str], alias: str, config: BuilderConfig = DEFAULT_CONFIG
) -> str:
    """Alias of :func:`columns_aliased`."""
    return columns_aliased(columns, alias, config)
