"""recordguard — declarative validation of records before they are persisted."""

from recordguard.exceptions import RecordInvalid
from recordguard.validators import (
    ErrorCode,
    ErrorCollector,
    ValidationEngine,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "RecordInvalid",
    "ValidationEngine",
    "ErrorCode",
    "ErrorCollector",
    "ValidationError",
    "ValidationResult",
]
