"""Unit tests for SpecificationValidator and validate_range."""
from __future__ import annotations

from datetime import date, datetime

import pytest

from fieldsql.errors import (
    FieldNotAllowedError,
    FromValueMissingError,
    RangeTypeMismatchError,
    SourceNotAllowedError,
    ToValueMissingError,
)
from fieldsql.schema.enums import Operator
from fieldsql.schema.field import Field, Fields
from fieldsql.schema.sort import SortField, SortFields
from fieldsql.schema.specification import FieldsSpecification
from fieldsql.validate.validator import SpecificationValidator, validate_range


def _v() -> SpecificationValidator:
    return SpecificationValidator(
        allowed_fields=["name", "age", "course"],
        allowed_sources=["", "c"],
        allowed_sort_fields=["id", "created_at"],
    )


def test_valid_specification(course_spec: FieldsSpecification):
    _v().validate(course_spec)


def test_names_are_case_insensitive():
    _v().validate_names(Fields([Field(name="NAME", value="x"), Field(name="Age", value=1)]))


def test_unknown_field_rejected():
    fields = Fields([Field(name="name", value="x"), Field(name="salary", value=1)])
    with pytest.raises(FieldNotAllowedError) as exc_info:
        _v().validate_names(fields)
    err = exc_info.value
    assert err.field == "salary"
    assert str(err) == "The field salary is not allowed for query."
    assert err.to_error_response()["error"] == "FIELD_NOT_ALLOWED"


def test_unknown_source_rejected():
    fields = Fields([Field(name="name", value="x", source="C"), Field(name="age", value=1, source="x")])
    with pytest.raises(SourceNotAllowedError) as exc_info:
        _v().validate_sources(fields)
    assert exc_info.value.source == "x"
    assert str(exc_info.value) == "The source x is not allowed for query."


def test_unknown_sort_field_rejected():
    with pytest.raises(FieldNotAllowedError) as exc_info:
        _v().validate_sort_names(SortFields([SortField(name="id"), SortField(name="age")]))
    assert exc_info.value.details["purpose"] == "ordering"


def test_validate_runs_all_checks():
    spec = FieldsSpecification(
        filters=[Field(name="name", value="x")],
        sorts=[SortField(name="salary")],
    )
    with pytest.raises(FieldNotAllowedError):
        _v().validate(spec)


def test_sort_allow_list_defaults_to_field_allow_list():
    validator = SpecificationValidator(allowed_fields=["name"])
    validator.validate(FieldsSpecification(sorts=[SortField(name="name")]))
    with pytest.raises(FieldNotAllowedError):
        validator.validate(FieldsSpecification(sorts=[SortField(name="id")]))


def test_missing_allow_lists_skip_checks():
    spec = FieldsSpecification(
        filters=[Field(name="anything", value=1, source="anywhere")],
        sorts=[SortField(name="whatever")],
    )
    SpecificationValidator().validate(spec)


def test_validate_range_accepts_same_types():
    validate_range(Field(name="d", operator=Operator.BETWEEN, from_value=date(2020, 1, 1), to_value=date(2021, 1, 1)))
    validate_range(Field(name="n", operator=Operator.BETWEEN, from_value=1, to_value=9))


@pytest.mark.parametrize(
    "field, error_cls, code",
    [
        (Field(name="d", to_value=1), FromValueMissingError, "FROM_VALUE_MISSING"),
        (Field(name="d", from_value=1), ToValueMissingError, "TO_VALUE_MISSING"),
        (
            Field(name="d", from_value=date(2020, 1, 1), to_value=datetime(2021, 1, 1)),
            RangeTypeMismatchError,
            "RANGE_TYPE_MISMATCH",
        ),
    ],
)
def test_validate_range_failures(field: Field, error_cls: type, code: str):
    with pytest.raises(error_cls) as exc_info:
        validate_range(field)
    assert exc_info.value.code == code
