"""Specification validation.

``SpecificationValidator`` checks a caller-built
:class:`~fieldsql.schema.specification.FieldsSpecification` against
allow-lists before any SQL is built, typically with the column names of the
resource a repository exposes::

    validator = SpecificationValidator(
        allowed_fields=["employer_id", "is_active", "description"],
        allowed_sources=["c", "cs"],
        allowed_sort_fields=["id", "created_at"],
    )
    validator.validate(spec)

Raises the first violation found; callers are expected to reject the whole
specification rather than apply part of it.  Comparisons are
case-insensitive.

``validate_range`` is the BETWEEN bound check used by the WHERE compiler.
"""
from __future__ import annotations

from collections.abc import Iterable

from fieldsql.errors import (
    FieldNotAllowedError,
    FromValueMissingError,
    RangeTypeMismatchError,
    SourceNotAllowedError,
    ToValueMissingError,
)
from fieldsql.schema.field import Field, Fields
from fieldsql.schema.sort import SortFields
from fieldsql.schema.specification import FieldsSpecification


def _contains(allowed: list[str], name: str) -> bool:
    wanted = name.casefold()
    return any(a.casefold() == wanted for a in allowed)


def validate_range(field: Field) -> None:
    """Raise if ``field`` cannot be rendered as ``BETWEEN``.

    Raises:
        FromValueMissingError: ``from_value`` is ``None``.
        ToValueMissingError: ``to_value`` is ``None``.
        RangeTypeMismatchError: The bounds are of different types.
    """
    if field.from_value is None:
        raise FromValueMissingError(field.name)
    if field.to_value is None:
        raise ToValueMissingError(field.name)
    if type(field.from_value) is not type(field.to_value):
        raise RangeTypeMismatchError(
            field.name,
            type(field.from_value).__name__,
            type(field.to_value).__name__,
        )


class SpecificationValidator:
    """Validates field names and sources against allow-lists.

    Args:
        allowed_fields: Column names filters may use.  ``None`` skips the check.
        allowed_sources: Sources (tables / aliases) filters may use.
            ``None`` skips the check.
        allowed_sort_fields: Column names sorts may use.  ``None`` falls back
            to ``allowed_fields``.
    """

    def __init__(
        self,
        allowed_fields: Iterable[str] | None = None,
        allowed_sources: Iterable[str] | None = None,
        allowed_sort_fields: Iterable[str] | None = None,
    ) -> None:
        self._fields = list(allowed_fields) if allowed_fields is not None else None
        self._sources = list(allowed_sources) if allowed_sources is not None else None
        if allowed_sort_fields is not None:
            self._sort_fields: list[str] | None = list(allowed_sort_fields)
        else:
            self._sort_fields = self._fields

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, spec: FieldsSpecification) -> None:
        """Run every configured check on ``spec``."""
        if self._fields is not None:
            self.validate_names(spec.filters)
        if self._sources is not None:
            self.validate_sources(spec.filters)
        if self._sort_fields is not None:
            self.validate_sort_names(spec.sorts)

    def validate_names(self, fields: Fields) -> None:
        """Raise :class:`FieldNotAllowedError` for the first unknown field."""
        allowed = self._fields or []
        for field in fields:
            if not _contains(allowed, field.name):
                raise FieldNotAllowedError(field.name, allowed)

    def validate_sources(self, fields: Fields) -> None:
        """Raise :class:`SourceNotAllowedError` for the first unknown source.

        A field without a source is checked as the empty string, so include
        ``""`` in the allow-list to accept unqualified fields.
        """
        allowed = self._sources or []
        for field in fields:
            if not _contains(allowed, field.source):
                raise SourceNotAllowedError(field.source, allowed)

    def validate_sort_names(self, sorts: SortFields) -> None:
        """Raise :class:`FieldNotAllowedError` for the first unknown sort field."""
        allowed = self._sort_fields or []
        for sort in sorts:
            if not _contains(allowed, sort.name):
                raise FieldNotAllowedError(sort.name, allowed, purpose="ordering")
