"""Inclusion / Exclusion Validators — membership in a fixed collection."""

from collections.abc import Container
from typing import Any

from recordguard.validators.base import BaseValidator, Record
from recordguard.validators.models import ValidationError, ErrorCode


def _check_collection(collection: Any) -> None:
    if isinstance(collection, str) or not isinstance(collection, Container):
        raise ValueError("'in_' must be a collection such as a list, set, tuple or range")


def _contains(collection: Container, value: Any) -> bool:
    try:
        return value in collection
    except TypeError:  # unhashable value against a set
        return False


class InclusionValidator(BaseValidator):
    """Fails when the value is not in the allowed collection."""

    def __init__(self, in_: Container, **kwargs: Any):
        super().__init__(**kwargs)
        _check_collection(in_)
        self.in_ = in_

    @property
    def name(self) -> str:
        return "InclusionValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        if _contains(self.in_, value):
            return []
        return [self._error(attribute, ErrorCode.INCLUSION, value)]


class ExclusionValidator(BaseValidator):
    """Fails when the value is in the reserved collection."""

    def __init__(self, in_: Container, **kwargs: Any):
        super().__init__(**kwargs)
        _check_collection(in_)
        self.in_ = in_

    @property
    def name(self) -> str:
        return "ExclusionValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        if _contains(self.in_, value):
            return [self._error(attribute, ErrorCode.EXCLUSION, value)]
        return []
