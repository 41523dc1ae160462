"""Pydantic models for ORDER BY specifications."""
from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, RootModel

from fieldsql.schema.enums import SortOrder


class SortField(BaseModel):
    """A single ORDER BY entry.

    Attributes:
        name: Column name; lower-cased when rendered.
        order: Sort direction.  ``None`` renders as ``ASC``.
        source: Table or alias prefixed to ``name``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    order: SortOrder | None = None
    source: str = ""


class SortFields(RootModel[list[SortField]]):
    """Ordered sequence of :class:`SortField` entries."""

    root: list[SortField] = []

    def __iter__(self) -> Iterator[SortField]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def is_empty(self) -> bool:
        return len(self.root) == 0
