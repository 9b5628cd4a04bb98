"""Presence Validator — required and must-be-blank attributes."""

from typing import Any

from recordguard.validators.base import BaseValidator, Record, is_blank
from recordguard.validators.models import ValidationError, ErrorCode


class PresenceValidator(BaseValidator):
    """Fails when the value is absent or blank."""

    @property
    def name(self) -> str:
        return "PresenceValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        if is_blank(value):
            return [self._error(attribute, ErrorCode.BLANK, value)]
        return []


class AbsenceValidator(BaseValidator):
    """Fails when the value is present (not blank)."""

    @property
    def name(self) -> str:
        return "AbsenceValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        if not is_blank(value):
            return [self._error(attribute, ErrorCode.PRESENT, value)]
        return []
