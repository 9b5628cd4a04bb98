"""Uniqueness Validator — asks a caller-supplied collaborator whether the value is taken.

Stored data is out of reach here, so the lookup is delegated:
``exists_elsewhere(attribute, value) -> bool``.
"""

from typing import Any, Callable

from recordguard.validators.base import BaseValidator, Record
from recordguard.validators.models import ValidationError, ErrorCode

ExistsElsewhere = Callable[[str, Any], bool]


class UniquenessValidator(BaseValidator):
    """Fails when the collaborator reports a conflicting existing value."""

    def __init__(self, exists_elsewhere: ExistsElsewhere, case_sensitive: bool = True, **kwargs: Any):
        super().__init__(**kwargs)
        if not callable(exists_elsewhere):
            raise TypeError("exists_elsewhere must be callable")
        self.exists_elsewhere = exists_elsewhere
        self.case_sensitive = case_sensitive

    @property
    def name(self) -> str:
        return "UniquenessValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        lookup = value
        if not self.case_sensitive and isinstance(value, str):
            lookup = value.lower()

        if self.exists_elsewhere(attribute, lookup):
            return [self._error(attribute, ErrorCode.TAKEN, value)]
        return []
