"""Length Validator — minimum, maximum, exact, and range bounds on a value's length.

Bounds are inclusive. Sized values use len(); anything else is measured via
str(). A missing value has length 0.
"""

from collections.abc import Sized
from typing import Any, Optional

from recordguard.validators.base import BaseValidator, Record
from recordguard.validators.models import ValidationError, ErrorCode


def value_length(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, Sized):
        return len(value)
    return len(str(value))


def _check_bound(label: str, bound: Optional[int]) -> None:
    if bound is None:
        return
    if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
        raise ValueError(f"Length '{label}' must be a non-negative integer, got {bound!r}")


class LengthValidator(BaseValidator):
    """Validates a value's length against configured bounds."""

    def __init__(
        self,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
        is_: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        for label, bound in (("minimum", minimum), ("maximum", maximum), ("is", is_)):
            _check_bound(label, bound)

        if minimum is None and maximum is None and is_ is None:
            raise ValueError("Length validator needs at least one of minimum, maximum or is")
        if is_ is not None and (minimum is not None or maximum is not None):
            raise ValueError("Length 'is' cannot be combined with minimum or maximum")
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"Length minimum {minimum} is greater than maximum {maximum}")

        self.minimum = minimum
        self.maximum = maximum
        self.is_ = is_

    @property
    def name(self) -> str:
        return "LengthValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        length = value_length(value)

        if self.is_ is not None and length != self.is_:
            return [self._error(attribute, ErrorCode.WRONG_LENGTH, value, count=self.is_)]
        if self.minimum is not None and length < self.minimum:
            return [self._error(attribute, ErrorCode.TOO_SHORT, value, count=self.minimum)]
        if self.maximum is not None and length > self.maximum:
            return [self._error(attribute, ErrorCode.TOO_LONG, value, count=self.maximum)]
        return []
