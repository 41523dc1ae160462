"""Builder configuration.

``BuilderConfig`` holds the table conventions the statement builders rely on
(audit columns, primary key, pagination ceiling).  The defaults match the
conventional ``id`` / ``created_at`` / ``updated_at`` table layout; pass a
custom instance to any builder to adapt it::

    config = BuilderConfig(default_max_limit=50, updated_at_column="modified_at")
    sql = build_update_by_id("contracts", ["status"], config=config)
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    """Conventions shared by every statement builder.

    Attributes:
        default_max_limit: Page-size ceiling used when a
            :class:`~fieldsql.schema.pagination.Pagination` leaves
            ``max_limit`` at ``0``.
        id_column: Primary-key column returned by INSERT and matched by
            UPDATE.
        created_at_column: Creation timestamp column.
        updated_at_column: Modification timestamp column, refreshed by
            UPDATE.
        update_timestamp_sql: SQL expression assigned to
            ``updated_at_column`` on UPDATE.
    """

    default_max_limit: int = 20
    id_column: str = "id"
    created_at_column: str = "created_at"
    updated_at_column: str = "updated_at"
    update_timestamp_sql: str = "now()"


#: Configuration used when a builder is called without one.
DEFAULT_CONFIG = BuilderConfig()
