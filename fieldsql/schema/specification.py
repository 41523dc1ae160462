"""The full filter / sort / page request handed to a repository."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fieldsql.schema.field import Fields
from fieldsql.schema.pagination import Pagination
from fieldsql.schema.sort import SortFields


class FieldsSpecification(BaseModel):
    """Everything a repository needs to build a paged, filtered SELECT.

    Attributes:
        filters: WHERE conditions (may be empty).
        sorts: ORDER BY entries (may be empty).
        pagination: LIMIT / OFFSET request.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    filters: Fields = Field(default_factory=Fields)
    sorts: SortFields = Field(default_factory=SortFields)
    pagination: Pagination = Field(default_factory=Pagination)
