"""Shared pytest fixtures for fieldsql unit tests."""
from __future__ import annotations

from datetime import date

import pytest

from fieldsql.schema.enums import ChainingKey, Operator
from fieldsql.schema.field import Field, Fields
from fieldsql.schema.specification import FieldsSpecification

HIRE_DATE = "2021-04-28"


@pytest.fixture()
def contract_filters() -> Fields:
    """Aliased filters with a column compare, a null check and nested groups."""
    return Fields(
        [
            Field(source="c", name="employer_id", value=1),
            Field(
                source="c",
                name="ends_at",
                is_value_from_table=True,
                source_name_value_from_table="pp",
                name_value_from_table="ends_at",
            ),
            Field(source="c", name="termination_date", operator=Operator.IS_NOT_NULL),
            Field(source="c", name="pay_frequency_id", value=2),
            Field(
                group_open=True,
                source="cs",
                name="description",
                operator=Operator.ILIKE,
                value="ACTIVE",
                chaining_key=ChainingKey.OR,
            ),
            Field(
                source="c",
                name="frequency",
                operator=Operator.GREATER_OR_EQUAL,
                is_value_from_table=True,
                source_name_value_from_table="s",
                name_value_from_table="months",
            ),
            Field(
                source="c",
                name="begins_at",
                operator=Operator.BETWEEN,
                from_value=date(2020, 1, 1),
                to_value=date(2021, 12, 31),
            ),
            Field(group_open=True, source="cs", name="description", operator=Operator.ILIKE, value="CREATED"),
            Field(
                group_close=True,
                source="c",
                name="hire_date",
                operator=Operator.LESS_OR_EQUAL,
                value=HIRE_DATE,
            ),
        ]
    )


@pytest.fixture()
def course_spec() -> FieldsSpecification:
    """A JSON-shaped specification, as an API handler would receive it."""
    return FieldsSpecification.model_validate(
        {
            "filters": [
                {"name": "name", "value": "Alejandro"},
                {"name": "age", "value": 30, "chaining_key": "OR"},
                {"name": "course", "value": "Go"},
            ],
            "sorts": [{"name": "created_at", "order": "DESC"}, {"name": "id"}],
            "pagination": {"page": 2, "limit": 10, "max_limit": 10},
        }
    )
