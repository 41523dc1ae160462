"""Translate psycopg integrity errors into domain errors.

Two entry points:

``check_constraint``
    Maps the *name* of the violated constraint to an exception chosen by the
    caller, e.g. ``{"contracts_code_uk": DuplicateContractCode()}``.

``check_error``
    Maps the SQLSTATE of unique / foreign-key / not-null violations to
    :class:`~fieldsql.errors.UniqueViolationError`,
    :class:`~fieldsql.errors.ForeignKeyViolationError` and
    :class:`~fieldsql.errors.NotNullViolationError`.

Typical repository usage::

    try:
        cur.execute(build_insert("contracts", columns), args)
    except psycopg.Error as exc:
        raise check_constraint(CONSTRAINTS, exc) from exc
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

import psycopg

from fieldsql.errors import (
    ConstraintViolationError,
    ForeignKeyViolationError,
    NotNullViolationError,
    UniqueViolationError,
)

logger = logging.getLogger(__name__)

#: Constraint name -> exception raised in its place.
Constraints = Mapping[str, BaseException]

#: SQLSTATE -> domain error class.
SQLSTATE_ERRORS: dict[str, type[ConstraintViolationError]] = {
    "23505": UniqueViolationError,
    "23503": ForeignKeyViolationError,
    "23502": NotNullViolationError,
}


def _constraint_name(err: psycopg.Error) -> str | None:
    return err.diag.constraint_name


def check_constraint(constraints: Constraints, err: BaseException) -> BaseException:
    """Return the caller's error for the constraint ``err`` violated.

    Args:
        constraints: Mapping of constraint names to domain errors.
        err: The error raised by the driver.

    Returns:
        The mapped domain error, or ``err`` itself when it is not a psycopg
        error or its constraint is not in ``constraints``.
    """
    if not isinstance(err, psycopg.Error):
        return err

    name = _constraint_name(err)
    if name is None or name not in constraints:
        return err

    logger.debug("Constraint %s violated; mapping to %r", name, constraints[name])
    return constraints[name]


def check_error(err: BaseException) -> ConstraintViolationError | None:
    """Classify an integrity error by its SQLSTATE.

    Args:
        err: The error raised by the driver.

    Returns:
        A fresh :class:`~fieldsql.errors.ConstraintViolationError` subclass
        instance whose ``__cause__`` is ``err``, or ``None`` when ``err`` is
        not a unique, foreign-key or not-null violation.
    """
    if not isinstance(err, psycopg.Error):
        return None

    error_cls = SQLSTATE_ERRORS.get(err.sqlstate or "")
    if error_cls is None:
        return None

    domain_err = error_cls(constraint=_constraint_name(err))
    domain_err.__cause__ = err
    return domain_err
