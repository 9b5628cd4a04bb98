"""Record validators — deterministic rule engine for attribute/value records.

Usage:
    from recordguard.validators import ValidationEngine, presence, length_minimum

    engine = ValidationEngine()
    engine.register("name", presence())
    is_valid, errors = engine.validate({"name": ""})
    # errors["name"] == ["can't be blank"]
"""

from recordguard.validators.base import BaseValidator, Rule, is_blank
from recordguard.validators.engine import ValidationEngine
from recordguard.validators.models import (
    ErrorCode,
    ErrorCollector,
    ValidationError,
    ValidationResult,
)
from recordguard.validators.rules import (
    absence,
    custom,
    exclusion,
    format_of,
    inclusion,
    length,
    length_exact,
    length_maximum,
    length_minimum,
    length_range,
    numericality,
    presence,
    uniqueness,
)

__all__ = [
    "ValidationEngine",
    "BaseValidator",
    "Rule",
    "is_blank",
    "ErrorCode",
    "ErrorCollector",
    "ValidationError",
    "ValidationResult",
    "absence",
    "custom",
    "exclusion",
    "format_of",
    "inclusion",
    "length",
    "length_exact",
    "length_maximum",
    "length_minimum",
    "length_range",
    "numericality",
    "presence",
    "uniqueness",
]
