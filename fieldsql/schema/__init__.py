"""fieldsql schema models."""
from fieldsql.schema.enums import ChainingKey, Operator, SortOrder
from fieldsql.schema.field import Field, Fields
from fieldsql.schema.pagination import Pagination
from fieldsql.schema.sort import SortField, SortFields
from fieldsql.schema.specification import FieldsSpecification

__all__ = [
    "ChainingKey",
    "Operator",
    "SortOrder",
    "Field",
    "Fields",
    "Pagination",
    "SortField",
    "SortFields",
    "FieldsSpecification",
]
