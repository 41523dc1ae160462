"""Unit tests for the psycopg error classifier."""
from __future__ import annotations

from types import SimpleNamespace

import psycopg
import pytest
from psycopg import errors as pg_errors

from fieldsql.classify import check_constraint, check_error
from fieldsql.errors import (
    ForeignKeyViolationError,
    NotNullViolationError,
    UniqueViolationError,
)


class DuplicateCodeError(Exception):
    """Domain error a repository maps a constraint to."""


class _UniqueOnConstraint(pg_errors.UniqueViolation):
    """A UniqueViolation carrying a constraint name, as the server reports it."""

    def __init__(self, constraint: str) -> None:
        super().__init__(f"duplicate key value violates unique constraint {constraint!r}")
        self._constraint = constraint

    @property
    def diag(self):  # type: ignore[override]
        return SimpleNamespace(constraint_name=self._constraint)


CONSTRAINTS = {"contracts_code_uk": DuplicateCodeError("code already exists")}


def test_check_constraint_maps_known_constraint():
    err = _UniqueOnConstraint("contracts_code_uk")
    assert check_constraint(CONSTRAINTS, err) is CONSTRAINTS["contracts_code_uk"]


def test_check_constraint_returns_unknown_constraint_unchanged():
    err = _UniqueOnConstraint("other_uk")
    assert check_constraint(CONSTRAINTS, err) is err


def test_check_constraint_ignores_non_driver_errors():
    err = ValueError("boom")
    assert check_constraint(CONSTRAINTS, err) is err


def test_check_constraint_without_diagnostics():
    err = psycopg.Error("no server info")
    assert check_constraint(CONSTRAINTS, err) is err


@pytest.mark.parametrize(
    "driver_error, expected",
    [
        (pg_errors.UniqueViolation("dup"), UniqueViolationError),
        (pg_errors.ForeignKeyViolation("fk"), ForeignKeyViolationError),
        (pg_errors.NotNullViolation("nn"), NotNullViolationError),
    ],
)
def test_check_error_by_sqlstate(driver_error: psycopg.Error, expected: type):
    domain_err = check_error(driver_error)
    assert isinstance(domain_err, expected)
    assert domain_err.__cause__ is driver_error


def test_check_error_keeps_constraint_name():
    domain_err = check_error(_UniqueOnConstraint("contracts_code_uk"))
    assert isinstance(domain_err, UniqueViolationError)
    assert domain_err.constraint == "contracts_code_uk"
    assert domain_err.to_error_response() == {
        "error": "UNIQUE_VIOLATION",
        "message": "Unique violation",
        "details": {"constraint": "contracts_code_uk"},
    }


@pytest.mark.parametrize(
    "err",
    [pg_errors.CheckViolation("check"), psycopg.OperationalError("down"), RuntimeError("x")],
)
def test_check_error_returns_none_for_other_errors(err: Exception):
    assert check_error(err) is None
