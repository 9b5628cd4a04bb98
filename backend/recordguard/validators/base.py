"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit bound to one
attribute through a Rule. New rule kinds are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sized
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel

from recordguard.validators.models import ValidationError, ErrorCode

Record = Mapping[str, Any]
Condition = Callable[[Record], Any]


def is_blank(value: Any) -> bool:
    """None, False, whitespace-only strings and empty collections are blank."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def as_record(record: Union[Record, BaseModel]) -> Record:
    """Read-only mapping view of a record; pydantic models are dumped."""
    if isinstance(record, BaseModel):
        return record.model_dump()
    if isinstance(record, Mapping):
        return record
    raise TypeError(f"Record must be a mapping or a pydantic model, got {type(record).__name__}")


class BaseValidator(ABC):
    """Abstract base for all attribute validators.

    Contract:
        - validate() is deterministic: same record → same findings
        - validate() never mutates the record
        - validate() returns a list of ValidationError (empty = no issues)
        - No I/O besides caller-supplied collaborators
    """

    def __init__(
        self,
        message: Optional[str] = None,
        allow_nil: bool = False,
        allow_blank: bool = False,
    ):
        self.message = message
        self.allow_nil = allow_nil
        self.allow_blank = allow_blank

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    def validate(self, record: Record, attribute: str) -> list[ValidationError]:
        """Run the check for one attribute of the record.

        Args:
            record: Attribute → value mapping
            attribute: Attribute this rule is bound to

        Returns:
            List of ValidationError findings (empty if no issues)
        """
        value = record.get(attribute)
        if self.allow_nil and value is None:
            return []
        if self.allow_blank and is_blank(value):
            return []
        return self.validate_each(record, attribute, value)

    @abstractmethod
    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        """Check a single attribute value."""
        ...

    # ── Helper Methods ──

    def _error(
        self,
        attribute: str,
        code: Union[ErrorCode, str],
        value: Any = None,
        **options: Any,
    ) -> ValidationError:
        """Convenience method to create a ValidationError honouring the message override."""
        return ValidationError.build(
            attribute,
            code,
            self.message,
            context={"value": value},
            **options,
        )

    def __repr__(self) -> str:
        return f"<{self.name}>"


@dataclass(frozen=True)
class Rule:
    """A validator bound to one attribute, plus the conditions under which it runs."""

    attribute: str
    validator: BaseValidator
    on: Optional[str] = None
    if_: Optional[Condition] = None
    unless: Optional[Condition] = None

    def __post_init__(self):
        if not isinstance(self.attribute, str) or not self.attribute.strip():
            raise ValueError("Rule attribute must be a non-empty string")

    @property
    def name(self) -> str:
        return f"{self.validator.name}({self.attribute})"

    def applies(self, record: Record, context: Optional[str] = None) -> bool:
        """Whether this rule runs for the given record and validation context."""
        if self.on is not None and self.on != context:
            return False
        if self.if_ is not None and not self.if_(record):
            return False
        if self.unless is not None and self.unless(record):
            return False
        return True

    def check(self, record: Record) -> list[ValidationError]:
        return self.validator.validate(record, self.attribute)
