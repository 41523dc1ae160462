"""fieldsql – declarative filters, sorts and pages to parameterized PostgreSQL.

Describe the query as data, get SQL text plus positional arguments.

Public API
----------
``build_where``
    Compile an ordered ``Fields`` sequence (flag-driven grouping) to a
    ``WHERE`` fragment and its ``$n`` arguments.

``build_where_tree``
    Compile a typed predicate tree (``all_of`` / ``any_of`` / ``group``)
    to a ``WHERE`` fragment and its arguments.

``QueryBuilder``
    Compose a full paged SELECT from a ``FieldsSpecification``.

Statement templates (``build_insert``, ``build_update_by_id``, ...), the
specification validator, the psycopg error classifier and all error classes
are re-exported here.

Example::

    from fieldsql import ChainingKey, Field, build_where

    sql, args = build_where(
        [
            Field(name="employer_id", value=1),
            Field(name="is_active", value=True, group_open=True, chaining_key=ChainingKey.OR),
            Field(name="is_staff", value=False, group_close=True),
        ]
    )
    # sql  == "WHERE employer_id = $1 AND (is_active = $2 OR is_staff = $3)"
    # args == [1, True, False]
"""

from __future__ import annotations

from fieldsql.classify import check_constraint, check_error
from fieldsql.compile.base import CompiledClause
from fieldsql.compile.builder import QueryBuilder
from fieldsql.compile.clause_builders import (
    build_insert,
    build_insert_with_id,
    build_order_by,
    build_pagination,
    build_select,
    build_select_fields,
    build_update_by_id,
    columns_aliased,
    columns_aliased_with_default,
)
from fieldsql.compile.membership import build_in
from fieldsql.compile.tree import PredicateTreeBuilder, build_where_tree
from fieldsql.compile.where import WhereBuilder, build_where
from fieldsql.config import DEFAULT_CONFIG, BuilderConfig
from fieldsql.errors import (
    ConstraintViolationError,
    FieldNotAllowedError,
    FieldsEmptyError,
    FieldSQLError,
    ForeignKeyViolationError,
    FromValueMissingError,
    NotNullViolationError,
    RangeTypeMismatchError,
    RangeValidationError,
    SourceNotAllowedError,
    ToValueMissingError,
    UniqueViolationError,
)
from fieldsql.schema.enums import ChainingKey, Operator, SortOrder
from fieldsql.schema.field import Field, Fields
from fieldsql.schema.pagination import Pagination
from fieldsql.schema.predicates import (
    AllOf,
    AnyOf,
    ColumnCompare,
    Comparison,
    Group,
    Membership,
    NullCheck,
    Predicate,
    Range,
    all_of,
    any_of,
    group,
)
from fieldsql.schema.sort import SortField, SortFields
from fieldsql.schema.specification import FieldsSpecification
from fieldsql.validate.validator import SpecificationValidator

__all__ = [
    # Core pipeline
    "build_where",
    "build_where_tree",
    "build_in",
    "WhereBuilder",
    "PredicateTreeBuilder",
    "QueryBuilder",
    "CompiledClause",
    # Statement templates
    "build_insert",
    "build_insert_with_id",
    "build_update_by_id",
    "build_select",
    "build_select_fields",
    "build_order_by",
    "build_pagination",
    "columns_aliased",
    "columns_aliased_with_default",
    # Schema types
    "Field",
    "Fields",
    "Operator",
    "ChainingKey",
    "SortOrder",
    "SortField",
    "SortFields",
    "Pagination",
    "FieldsSpecification",
    # Predicate tree
    "Predicate",
    "Comparison",
    "Membership",
    "NullCheck",
    "Range",
    "ColumnCompare",
    "AllOf",
    "AnyOf",
    "Group",
    "all_of",
    "any_of",
    "group",
    # Configuration
    "BuilderConfig",
    "DEFAULT_CONFIG",
    # Validation
    "SpecificationValidator",
    # Driver errors
    "check_constraint",
    "check_error",
    # Errors
    "FieldSQLError",
    "FieldsEmptyError",
    "RangeValidationError",
    "FromValueMissingError",
    "ToValueMissingError",
    "RangeTypeMismatchError",
    "FieldNotAllowedError",
    "SourceNotAllowedError",
    "ConstraintViolationError",
    "UniqueViolationError",
    "ForeignKeyViolationError",
    "NotNullViolationError",
]
