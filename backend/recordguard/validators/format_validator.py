"""Format Validator — regular-expression checks on the value's string form."""

import re
from typing import Any, Optional, Pattern, Union

from recordguard.validators.base import BaseValidator, Record
from recordguard.validators.models import ValidationError, ErrorCode


class FormatValidator(BaseValidator):
    """Value must match `with_`, or must not match `without`."""

    def __init__(
        self,
        with_: Optional[Union[str, Pattern[str]]] = None,
        without: Optional[Union[str, Pattern[str]]] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        if (with_ is None) == (without is None):
            raise ValueError("Format validator needs exactly one of 'with_' or 'without'")
        self.with_ = re.compile(with_) if with_ is not None else None
        self.without = re.compile(without) if without is not None else None

    @property
    def name(self) -> str:
        return "FormatValidator"

    def validate_each(self, record: Record, attribute: str, value: Any) -> list[ValidationError]:
        text = "" if value is None else str(value)

        if self.with_ is not None and not self.with_.search(text):
            return [self._error(attribute, ErrorCode.INVALID, value)]
        if self.without is not None and self.without.search(text):
            return [self._error(attribute, ErrorCode.INVALID, value)]
        return []
