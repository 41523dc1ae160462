"""Pagination model."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class Pagination(BaseModel):
    """Page-based pagination request.

    All values are non-negative; ``0`` means "not set" and is resolved by
    :func:`~fieldsql.compile.clause_builders.build_pagination`.

    Attributes:
        page: 1-based page number.
        limit: Rows per page.
        max_limit: Upper bound for ``limit``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    page: NonNegativeInt = 0
    limit: NonNegativeInt = 0
    max_limit: NonNegativeInt = 0
