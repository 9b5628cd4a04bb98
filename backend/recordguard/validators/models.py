"""Validation models — error codes, default messages, findings, and the error collector.

All validation is deterministic: same rules + same record → same collector contents.
"""

import re
from enum import Enum
from typing import Any, Iterator, NamedTuple, Optional, Union

from pydantic import BaseModel, Field

# Errors on this attribute describe the record as a whole
BASE_ATTRIBUTE = "base"


class ErrorCode(str, Enum):
    """Stable error codes for every built-in rule kind."""

    # Presence
    BLANK = "blank"
    PRESENT = "present"

    # Length
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    WRONG_LENGTH = "wrong_length"

    # Uniqueness
    TAKEN = "taken"

    # Format / membership / custom
    INVALID = "invalid"
    INCLUSION = "inclusion"
    EXCLUSION = "exclusion"

    # Numericality
    NOT_A_NUMBER = "not_a_number"
    NOT_AN_INTEGER = "not_an_integer"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    EQUAL_TO = "equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"
    OTHER_THAN = "other_than"
    ODD = "odd"
    EVEN = "even"


DEFAULT_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.BLANK: "can't be blank",
    ErrorCode.PRESENT: "must be blank",
    ErrorCode.TOO_SHORT: "is too short (minimum is {count} characters)",
    ErrorCode.TOO_LONG: "is too long (maximum is {count} characters)",
    ErrorCode.WRONG_LENGTH: "is the wrong length (should be {count} characters)",
    ErrorCode.TAKEN: "has already been taken",
    ErrorCode.INVALID: "is invalid",
    ErrorCode.INCLUSION: "is not included in the list",
    ErrorCode.EXCLUSION: "is reserved",
    ErrorCode.NOT_A_NUMBER: "is not a number",
    ErrorCode.NOT_AN_INTEGER: "must be an integer",
    ErrorCode.GREATER_THAN: "must be greater than {count}",
    ErrorCode.GREATER_THAN_OR_EQUAL_TO: "must be greater than or equal to {count}",
    ErrorCode.EQUAL_TO: "must be equal to {count}",
    ErrorCode.LESS_THAN: "must be less than {count}",
    ErrorCode.LESS_THAN_OR_EQUAL_TO: "must be less than or equal to {count}",
    ErrorCode.OTHER_THAN: "must be other than {count}",
    ErrorCode.ODD: "must be odd",
    ErrorCode.EVEN: "must be even",
}


# Only plain {name} placeholders; no attribute/index access, no positional fields
PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def interpolate(template: str, options: dict[str, Any]) -> str:
    """Fill {name} placeholders from the finding's options in a single pass.

    Unknown placeholders and stray braces are left as written, and substituted
    values are never re-scanned.
    """
    def replace(match: re.Match) -> str:
        key = match.group(1)
        return str(options[key]) if key in options else match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def humanize(attribute: str) -> str:
    """'first_name' → 'First name', 'author_id' → 'Author'."""
    text = attribute
    if text.endswith("_id") and len(text) > 3:
        text = text[:-3]
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


class ValidationError(BaseModel):
    """A single validation finding on one attribute."""

    attribute: str
    code: Union[ErrorCode, str]
    message: str
    options: dict[str, Any] = Field(default_factory=dict)  # Interpolation values, e.g. count

    model_config = {"use_enum_values": True, "frozen": True}

    @classmethod
    def build(
        cls,
        attribute: str,
        code: Union[ErrorCode, str] = ErrorCode.INVALID,
        message: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
        **options: Any,
    ) -> "ValidationError":
        """Build a finding, resolving the default message for known codes.

        A string that is not a known code is treated as a literal message.
        `context` adds placeholders (such as value) that are not kept in options.
        """
        if not isinstance(code, ErrorCode):
            try:
                code = ErrorCode(code)
            except ValueError:
                if message is None:
                    message, code = code, ErrorCode.INVALID

        if message is None:
            message = DEFAULT_MESSAGES.get(code, DEFAULT_MESSAGES[ErrorCode.INVALID])

        placeholders = {"attribute": attribute, **(context or {}), **options}
        return cls(
            attribute=attribute,
            code=code,
            message=interpolate(message, placeholders),
            options=options,
        )


class ErrorCollector:
    """Per-run accumulation of findings, keyed by attribute.

    Findings keep global insertion order; the mapping view groups them by
    attribute in order of first failure. Duplicates are kept.
    """

    def __init__(
        self,
        full_message_format: str = "{attribute} {message}",
        humanize_attributes: bool = True,
    ):
        self.full_message_format = full_message_format
        self.humanize_attributes = humanize_attributes
        self._errors: list[ValidationError] = []

    # ── Mutation ──

    def add(
        self,
        attribute: str,
        code: Union[ErrorCode, str] = ErrorCode.INVALID,
        message: Optional[str] = None,
        **options: Any,
    ) -> ValidationError:
        """Record a failure on an attribute and return the finding."""
        error = ValidationError.build(attribute, code, message, **options)
        self._errors.append(error)
        return error

    def append(self, error: ValidationError) -> None:
        self._errors.append(error)

    def clear(self) -> None:
        self._errors.clear()

    # ── Queries ──

    def is_empty(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> list[ValidationError]:
        return list(self._errors)

    @property
    def attributes(self) -> list[str]:
        """Attributes with at least one failure, in order of first failure."""
        return list(dict.fromkeys(e.attribute for e in self._errors))

    def messages_for(self, attribute: str) -> list[str]:
        return [e.message for e in self._errors if e.attribute == attribute]

    @property
    def messages(self) -> dict[str, list[str]]:
        return {attr: self.messages_for(attr) for attr in self.attributes}

    @property
    def details(self) -> dict[str, list[dict[str, Any]]]:
        """Machine-readable view: {attribute: [{"error": code, **options}]}."""
        result: dict[str, list[dict[str, Any]]] = {}
        for e in self._errors:
            result.setdefault(e.attribute, []).append({"error": e.code, **e.options})
        return result

    def where(self, attribute: str, code: Optional[Union[ErrorCode, str]] = None) -> list[ValidationError]:
        return [
            e for e in self._errors
            if e.attribute == attribute and (code is None or e.code == code)
        ]

    def is_added(self, attribute: str, code: Union[ErrorCode, str] = ErrorCode.INVALID) -> bool:
        return bool(self.where(attribute, code))

    # ── Formatting ──

    def full_message(self, attribute: str, message: str) -> str:
        if attribute == BASE_ATTRIBUTE:
            return message
        name = humanize(attribute) if self.humanize_attributes else attribute
        return interpolate(self.full_message_format, {"attribute": name, "message": message})

    def full_messages(self) -> list[str]:
        return [self.full_message(e.attribute, e.message) for e in self._errors]

    def full_messages_for(self, attribute: str) -> list[str]:
        return [self.full_message(e.attribute, e.message) for e in self._errors if e.attribute == attribute]

    def to_dict(self, full_messages: bool = False) -> dict[str, list[str]]:
        if not full_messages:
            return self.messages
        return {attr: self.full_messages_for(attr) for attr in self.attributes}

    # ── Container protocol ──

    def __getitem__(self, attribute: str) -> list[str]:
        return self.messages_for(attribute)

    def __contains__(self, attribute: object) -> bool:
        return any(e.attribute == attribute for e in self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(list(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCollector):
            return NotImplemented
        return self._errors == other._errors

    def __repr__(self) -> str:
        return f"ErrorCollector({self.messages!r})"


class ValidationResult(NamedTuple):
    """Outcome of one validation run; unpacks as (is_valid, errors)."""

    is_valid: bool
    errors: ErrorCollector
