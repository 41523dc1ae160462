"""fieldsql validation layer."""
from fieldsql.validate.validator import SpecificationValidator, validate_range

__all__ = ["SpecificationValidator", "validate_range"]
