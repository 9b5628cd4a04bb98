"""Numericality Validator — numeric parsing plus comparison constraints.

Accepts ints, finite floats, Decimals and numeric strings. Booleans are not
numbers. Comparison bounds may be numbers or callables of the record.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional, Union

from recordguard.validators.base import BaseValidator, Record
from recordguard.validators.models import ValidationError, ErrorCode

NUMBER_PATTERN = re.compile(r"\A[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\Z")
INTEGER_PATTERN = re.compile(r"\A[+-]?\d+\Z")

Bound = Union[int, float, Decimal, Callable[[Record], Any]]

# option name → (error code, comparison that must hold)
COMPARISONS: dict[str, tuple[ErrorCode, Callable[[Decimal, Decimal], bool]]] = {
    "greater_than": (ErrorCode.GREATER_THAN, lambda v, b: v > b),
    "greater_than_or_equal_to": (ErrorCode.GREATER_THAN_OR_EQUAL_TO, lambda v, b: v >= b),
    "equal_to": (ErrorCode.EQUAL_TO, lambda v, b: v == b),
    "less_than": (ErrorCode.LESS_THAN, lambda v, b: v < b),
    "less_than_or_equal_to": (ErrorCode.LESS_THAN_OR_EQUAL_TO, lambda v, b: v <= b),
    "other_than": (ErrorCode.OTHER_THAN, lambda v, b: v != b),
}


def parse_number(value: Any) -> Optional[Decimal]:
    """Return the value as a Decimal, or None when it is not a number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, Decimal):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not NUMBER_PATTERN.match(text):
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(INTEGER_PATTERN.match(value.strip()))


class NumericalityValidator(BaseValidator):
    """Validates that a value is numeric and satisfies the configured comparisons."""

    def __init__(
        self,
        only_integer: bool = False,
        odd: bool = False,
        even: bool = False,
        message: Optional[str] = None,
        allow_nil: bool = False,
        allow_blank: bool = False,
        **comparisons: Bound,
    ):
        super().__init__(message=message, allow_nil=allow_nil, allow_blank=allow_blank)
        unknown = set(comparisons) - set(COMPARISONS)
        if unknown:
            raise ValueError(f"Unknown numericality option(s): {', '.join(sorted(unknown))}")
        for option, bound in comparisons.items():
            if not callable(bound) and parse_number(bound) is None:
                raise ValueError(f"Numericality '{option}' must be a number or a callable, got {bound!r}")
        if odd and even:
            raise ValueError("Numericality cannot require both odd and even")

        self.only_integer = only_integer
        self.odd = odd
        self.even = even
        self.comparisons = comparisons

    @property
    def name(self) -> str:
        return "NumericalityValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        number = parse_number(value)
        if number is None:
            return [self._error(attribute, ErrorCode.NOT_A_NUMBER, value)]
        if self.only_integer and not _is_integer(value):
            return [self._error(attribute, ErrorCode.NOT_AN_INTEGER, value)]

        errors = []
        for option, (code, holds) in COMPARISONS.items():
            if option not in self.comparisons:
                continue
            bound = self.comparisons[option]
            if callable(bound):
                bound = bound(record)
            limit = parse_number(bound)
            if limit is None:
                raise ValueError(f"Numericality '{option}' resolved to a non-number: {bound!r}")
            if not holds(number, limit):
                errors.append(self._error(attribute, code, value, count=bound))

        if self.odd or self.even:
            if number != number.to_integral_value():
                errors.append(self._error(attribute, ErrorCode.NOT_AN_INTEGER, value))
            elif self.odd and number % 2 == 0:
                errors.append(self._error(attribute, ErrorCode.ODD, value))
            elif self.even and number % 2 != 0:
                errors.append(self._error(attribute, ErrorCode.EVEN, value))

        return errors
