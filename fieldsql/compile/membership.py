"""Inline ``IN (...)`` list rendering.

Membership values are written into the SQL text as literals rather than bound
as arguments.  They must come from a trusted, pre-validated source: strings are
quoted but not escaped.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fieldsql.schema.field import Field

logger = logging.getLogger(__name__)


def _is_int(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool)


def render_in(column: str, values: Any) -> str:
    """Render ``<column> IN (...)`` for ``values``.

    Non-empty sequences of integers render as ``IN (1,2,3)`` and non-empty
    sequences of strings as ``IN ('a','b')``.  Anything else, including an
    empty sequence, renders ``<column> = 0`` so that a broken membership
    filter selects nothing instead of everything.

    Args:
        column: The already-qualified column reference.
        values: The membership values.

    Returns:
        The SQL fragment.
    """
    column = column.lower()
    if isinstance(values, Sequence) and not isinstance(values, (str, bytes)) and values:
        if all(_is_int(v) for v in values):
            return f"{column} IN ({','.join(str(v) for v in values)})"
        if all(isinstance(v, str) for v in values):
            quoted = ",".join(f"'{v}'" for v in values)
            return f"{column} IN ({quoted})"

    logger.debug("IN on %s has no usable values (%r); rendering %s = 0", column, values, column)
    return f"{column} = 0"


def build_in(field: Field) -> str:
    """Render the membership condition for ``field`` (name and value only)."""
    return render_in(field.name, field.value)
