"""WHERE clause compilation for flag-driven :class:`~fieldsql.schema.field.Field` sequences.

``WhereBuilder`` makes a single left-to-right pass over the fields and keeps
three pieces of state in step:

- the SQL text, starting with ``WHERE``;
- the placeholder number of the next bound value (``$1``, ``$2``, ...);
- the number of groups opened by ``group_open`` and not yet closed.

Per field, in order:

1. Defaults are applied to a private copy (``AND``, ``=``, source
   qualification, ``(`` prefix for ``group_open``).
2. The condition body is rendered according to the operator.  ``IN``,
   ``IS NULL``, ``IS NOT NULL`` and column-to-column comparisons never bind a
   value; ``BETWEEN`` binds its two bounds and ignores ``value``.
3. A ``group_close`` closes one open group.  On the last field every group
   still open is closed, so the output is always balanced.
4. The field's own ``chaining_key`` is appended unless it is the last field:
   the key joins a field to its *successor*.

``args[k]`` always binds ``$k+1``.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from fieldsql.compile.base import CompiledClause, placeholder
from fieldsql.compile.defaults import apply_field_defaults
from fieldsql.compile.membership import build_in
from fieldsql.errors import FieldsEmptyError
from fieldsql.schema.enums import NULL_OPS, Operator
from fieldsql.schema.field import Field, Fields
from fieldsql.validate.validator import validate_range

logger = logging.getLogger(__name__)


class WhereBuilder:
    """Compiles a field sequence to a parameterized ``WHERE`` fragment."""

    def build(self, fields: Fields | Sequence[Field]) -> CompiledClause:
        """Compile ``fields`` to ``WHERE ...`` plus its positional arguments.

        Args:
            fields: Conditions in output order.

        Returns:
            :class:`~fieldsql.compile.base.CompiledClause` with the fragment
            and its arguments.

        Raises:
            FieldsEmptyError: If ``fields`` is empty.
            RangeValidationError: (or subclass) if a ``BETWEEN`` field has a
                missing bound or mismatched bound types.  Nothing is returned
                for the rest of the sequence.
        """
        items = list(fields)
        if not items:
            raise FieldsEmptyError("WHERE")

        parts: list[str] = ["WHERE "]
        args: list = []
        param = 1
        open_groups = 0
        last = len(items) - 1

        for index, raw in enumerate(items):
            field = apply_field_defaults(raw)
            name = field.name.lower()
            op = field.operator

            if field.group_open:
                open_groups += 1

            if op is Operator.IN:
                parts.append(build_in(field))
            elif op in NULL_OPS:
                parts.append(f"{name} {op}")
            elif op is Operator.BETWEEN:
                validate_range(field)
                parts.append(f"{name} {op} {placeholder(param)} AND {placeholder(param + 1)}")
                # BETWEEN binds two values; the second advance happens below.
                param += 1
            elif field.is_value_from_table:
                parts.append(f"{name} {op} {field.name_value_from_table.lower()}")
            else:
                parts.append(f"{name} {op} {placeholder(param)}")

            if open_groups > 0 and field.group_close:
                open_groups -= 1
                parts.append(")")

            if open_groups > 0 and index == last:
                parts.append(")" * open_groups)

            if index != last:
                parts.append(f" {field.chaining_key} ")

            if op is Operator.IN or op in NULL_OPS or field.is_value_from_table:
                continue

            if op is Operator.BETWEEN:
                args.extend((field.from_value, field.to_value))
            elif field.value is not None:
                args.append(field.value)

            param += 1

        sql = "".join(parts)
        logger.debug("Compiled %d field(s) to %r with %d argument(s)", len(items), sql, len(args))
        return CompiledClause(sql=sql, args=args)


def build_where(fields: Fields | Sequence[Field]) -> CompiledClause:
    """Compile ``fields`` with a default :class:`WhereBuilder`."""
    return WhereBuilder().build(fields)
