"""Custom Validators — caller-supplied predicates and plain rule functions."""

from typing import Any, Callable, Optional, Union

from recordguard.validators.base import BaseValidator, Record
from recordguard.validators.models import ValidationError, ErrorCode


class CustomValidator(BaseValidator):
    """Fails with a caller-defined message when predicate(record) is falsy."""

    def __init__(
        self,
        predicate: Callable[[Record], Any],
        message: str,
        code: Union[ErrorCode, str] = ErrorCode.INVALID,
        **kwargs: Any,
    ):
        super().__init__(message=message, **kwargs)
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        if not message:
            raise ValueError("Custom rules need a failure message")
        self.predicate = predicate
        self.code = code

    @property
    def name(self) -> str:
        return f"CustomValidator[{getattr(self.predicate, '__name__', 'predicate')}]"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        if self.predicate(record):
            return []
        return [self._error(attribute, self.code, value)]


class FunctionValidator(BaseValidator):
    """Wraps a plain rule function: record → failure message, or a falsy value when ok.

    The returned message is recorded verbatim, without placeholder substitution.
    """

    def __init__(self, func: Callable[[Record], Optional[str]]):
        super().__init__()
        if isinstance(func, type):
            raise TypeError(
                f"Rule must be a validator instance or a function, got the class {func.__name__}; "
                "pass an instance such as presence() instead"
            )
        if not callable(func):
            raise TypeError("Rule must be a validator or a callable")
        self.func = func

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", "FunctionValidator")

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        message = self.func(record)
        if not message:
            return []
        return [ValidationError(attribute=attribute, code=ErrorCode.INVALID, message=str(message))]
