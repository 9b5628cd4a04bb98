"""Exceptions raised by recordguard.

Only one fault is reportable: RecordInvalid, raised by the strict entry
point when a record fails validation. Configuration mistakes surface as
ValueError / TypeError at rule-construction time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recordguard.validators.models import ErrorCollector


class RecordInvalid(Exception):
    """Raised by ValidationEngine.validate_strict when validation fails.

    Carries the same ErrorCollector the non-strict validate() would return.
    """

    def __init__(self, errors: ErrorCollector):
        self.errors = errors
        super().__init__(f"Validation failed: {', '.join(errors.full_messages())}")
