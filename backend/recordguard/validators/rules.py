"""Built-in rule kinds — stateless factories that build configured validators.

Usage:
    engine.register("name", presence())
    engine.register("name", length_range(2, 50))
    engine.register("email", uniqueness(users.email_taken))
"""

from typing import Any, Callable, Container, Optional, Pattern, Union

from recordguard.validators.base import Record
from recordguard.validators.custom_validator import CustomValidator
from recordguard.validators.format_validator import FormatValidator
from recordguard.validators.inclusion_validator import ExclusionValidator, InclusionValidator
from recordguard.validators.length_validator import LengthValidator
from recordguard.validators.models import ErrorCode
from recordguard.validators.numericality_validator import NumericalityValidator
from recordguard.validators.presence_validator import AbsenceValidator, PresenceValidator
from recordguard.validators.uniqueness_validator import ExistsElsewhere, UniquenessValidator


def presence(**options: Any) -> PresenceValidator:
    """Fail when the value is None, False, whitespace-only or an empty collection."""
    return PresenceValidator(**options)


def absence(**options: Any) -> AbsenceValidator:
    """Fail when the value is present (not blank)."""
    return AbsenceValidator(**options)


def length_minimum(n: int, **options: Any) -> LengthValidator:
    """Fail when the value is shorter than n (n itself passes)."""
    return LengthValidator(minimum=n, **options)


def length_maximum(n: int, **options: Any) -> LengthValidator:
    """Fail when the value is longer than n (n itself passes)."""
    return LengthValidator(maximum=n, **options)


def length_exact(n: int, **options: Any) -> LengthValidator:
    """Fail unless the value is exactly n long."""
    return LengthValidator(is_=n, **options)


def length_range(minimum: int, maximum: int, **options: Any) -> LengthValidator:
    """Fail when the length falls outside minimum..maximum (both bounds pass)."""
    return LengthValidator(minimum=minimum, maximum=maximum, **options)


def uniqueness(exists_elsewhere: ExistsElsewhere, **options: Any) -> UniquenessValidator:
    """Fail when exists_elsewhere(attribute, value) reports an existing value."""
    return UniquenessValidator(exists_elsewhere, **options)


def custom(
    predicate: Callable[[Record], Any],
    message: str,
    code: Union[ErrorCode, str] = ErrorCode.INVALID,
    **options: Any,
) -> CustomValidator:
    """Fail with the caller's message when predicate(record) is falsy."""
    return CustomValidator(predicate, message, code=code, **options)


def format_of(
    with_: Optional[Union[str, Pattern[str]]] = None,
    without: Optional[Union[str, Pattern[str]]] = None,
    **options: Any,
) -> FormatValidator:
    """Fail unless str(value) matches with_, or when it matches without."""
    return FormatValidator(with_=with_, without=without, **options)


def inclusion(in_: Container, **options: Any) -> InclusionValidator:
    """Fail when the value is not in the collection."""
    return InclusionValidator(in_, **options)


def exclusion(in_: Container, **options: Any) -> ExclusionValidator:
    """Fail when the value is in the reserved collection."""
    return ExclusionValidator(in_, **options)


def numericality(**options: Any) -> NumericalityValidator:
    """Fail when the value is not a number or breaks a comparison option."""
    return NumericalityValidator(**options)


def length(
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    is_: Optional[int] = None,
    **options: Any,
) -> LengthValidator:
    """General form used by the declarative `validates` helper."""
    return LengthValidator(minimum=minimum, maximum=maximum, is_=is_, **options)
