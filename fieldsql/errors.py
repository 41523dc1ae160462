"""Custom exception hierarchy for fieldsql.

All public errors inherit from FieldSQLError so callers can catch the base
class for any fieldsql-specific failure.  Builder failures are always raised;
no builder returns an error message in place of SQL text.
"""
from __future__ import annotations

from typing import Any


class FieldSQLError(Exception):
    """Base exception for all fieldsql errors.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. FIELDS_EMPTY).
        details: Extra context about the offending input.
    """

    default_code = "FIELDSQL_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for API callers."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class FieldsEmptyError(FieldSQLError):
    """Raised when a builder that needs at least one field receives none."""

    default_code = "FIELDS_EMPTY"

    def __init__(self, clause: str) -> None:
        super().__init__(
            f"At least one field is required to build the {clause} clause.",
            details={"clause": clause},
        )
        self.clause = clause


# ---------------------------------------------------------------------------
# BETWEEN range validation
# ---------------------------------------------------------------------------


class RangeValidationError(FieldSQLError):
    """Raised when a BETWEEN predicate has unusable bounds."""

    default_code = "RANGE_INVALID"

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message, details={"field": field})
        self.field = field


class FromValueMissingError(RangeValidationError):
    """The lower bound of a BETWEEN predicate is missing."""

    default_code = "FROM_VALUE_MISSING"

    def __init__(self, field: str) -> None:
        super().__init__(f"`from` value is empty for field '{field}'.", field)


class ToValueMissingError(RangeValidationError):
    """The upper bound of a BETWEEN predicate is missing."""

    default_code = "TO_VALUE_MISSING"

    def __init__(self, field: str) -> None:
        super().__init__(f"`to` value is empty for field '{field}'.", field)


class RangeTypeMismatchError(RangeValidationError):
    """The BETWEEN bounds are of different types."""

    default_code = "RANGE_TYPE_MISMATCH"

    def __init__(self, field: str, from_type: str, to_type: str) -> None:
        super().__init__(
            f"`from` and `to` values mismatch for field '{field}': "
            f"{from_type} != {to_type}.",
            field,
        )
        self.details.update({"from_type": from_type, "to_type": to_type})


# ---------------------------------------------------------------------------
# Allow-list validation
# ---------------------------------------------------------------------------


class FieldNotAllowedError(FieldSQLError):
    """Raised when a field name is not in the caller's allow-list.

    Args:
        field: The offending field name.
        allowed_fields: The allow-list it was checked against.
        purpose: ``"query"`` for filters, ``"ordering"`` for sorts.
    """

    default_code = "FIELD_NOT_ALLOWED"

    def __init__(
        self,
        field: str,
        allowed_fields: list[str],
        purpose: str = "query",
    ) -> None:
        super().__init__(
            f"The field {field} is not allowed for {purpose}.",
            details={
                "field": field,
                "allowed_fields": allowed_fields,
                "purpose": purpose,
            },
        )
        self.field = field


class SourceNotAllowedError(FieldSQLError):
    """Raised when a field source is not in the caller's allow-list."""

    default_code = "SOURCE_NOT_ALLOWED"

    def __init__(self, source: str, allowed_sources: list[str]) -> None:
        super().__init__(
            f"The source {source} is not allowed for query.",
            details={"source": source, "allowed_sources": allowed_sources},
        )
        self.source = source


# ---------------------------------------------------------------------------
# Constraint violations reported by the database driver
# ---------------------------------------------------------------------------


class ConstraintViolationError(FieldSQLError):
    """Base class for integrity errors classified from driver errors.

    Args:
        message: Human-readable description.
        constraint: Name of the violated constraint, when the driver reports it.
    """

    default_code = "CONSTRAINT_VIOLATION"
    default_message = "Constraint violation"

    def __init__(self, message: str | None = None, constraint: str | None = None) -> None:
        super().__init__(
            message or self.default_message,
            details={"constraint": constraint} if constraint else None,
        )
        self.constraint = constraint


class UniqueViolationError(ConstraintViolationError):
    """A UNIQUE constraint was violated (SQLSTATE 23505)."""

    default_code = "UNIQUE_VIOLATION"
    default_message = "Unique violation"


class ForeignKeyViolationError(ConstraintViolationError):
    """A FOREIGN KEY constraint was violated (SQLSTATE 23503)."""

    default_code = "FOREIGN_KEY_VIOLATION"
    default_message = "Foreign key violation"


class NotNullViolationError(ConstraintViolationError):
    """A NOT NULL constraint was violated (SQLSTATE 23502)."""

    default_code = "NOT_NULL_VIOLATION"
    default_message = "Not null violation"
