"""Validation Engine — runs registered rules against a record and collects findings.

This is the main entry point for record validation. Rules are registered once
at configuration time; every validate() call builds a fresh ErrorCollector.

Usage:
    engine = ValidationEngine()
    engine.register("name", presence())
    engine.validates("email", presence=True, length={"maximum": 255})

    is_valid, errors = engine.validate({"name": "", "email": "a@b.c"})
    if not is_valid:
        print(engine.full_messages(errors))

    engine.validate_strict(record)  # raises RecordInvalid instead
"""

import time
from typing import Any, Callable, Optional, Union

import structlog
from pydantic import BaseModel

from recordguard.config import Settings, get_settings
from recordguard.exceptions import RecordInvalid
from recordguard.validators import rules as factories
from recordguard.validators.base import BaseValidator, Condition, Record, Rule, as_record
from recordguard.validators.custom_validator import FunctionValidator
from recordguard.validators.models import ErrorCollector, ValidationResult

logger = structlog.get_logger()

# validates() keyword → (factory, positional option for non-dict shorthand)
DECLARATIVE_KINDS: dict[str, tuple[Callable[..., BaseValidator], Optional[str]]] = {
    "presence": (factories.presence, None),
    "absence": (factories.absence, None),
    "length": (factories.length, None),
    "uniqueness": (factories.uniqueness, "exists_elsewhere"),
    "format": (factories.format_of, "with_"),
    "inclusion": (factories.inclusion, "in_"),
    "exclusion": (factories.exclusion, "in_"),
    "numericality": (factories.numericality, None),
}

# Option spellings that collide with Python keywords
OPTION_ALIASES = {"is": "is_", "in": "in_", "with": "with_"}


def _normalize_options(options: dict[str, Any]) -> dict[str, Any]:
    return {OPTION_ALIASES.get(key, key): value for key, value in options.items()}


class ValidationEngine:
    """Holds an ordered rule sequence and validates records against it.

    Design principles:
        - Deterministic: same rules + same record → same findings
        - Pure: records are never mutated, no I/O beyond caller collaborators
        - Extensible: new rule kinds are BaseValidator subclasses
        - Observable: logs every validation run with timing
    """

    def __init__(self, rules: Optional[list[Rule]] = None, settings: Optional[Settings] = None):
        """Initialize with an optional pre-built rule list.

        Args:
            rules: Rules to start from, in execution order
            settings: Message/logging settings. If None, uses get_settings().
        """
        self._rules: tuple[Rule, ...] = tuple(rules or ())
        self.settings = settings or get_settings()

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    # ── Configuration ──

    def register(
        self,
        attribute: str,
        rule: Union[BaseValidator, Callable[[Record], Optional[str]]],
        *,
        on: Optional[str] = None,
        if_: Optional[Condition] = None,
        unless: Optional[Condition] = None,
    ) -> Rule:
        """Bind a rule to an attribute and append it to the rule sequence.

        Args:
            attribute: Non-empty attribute name
            rule: A validator instance, or a plain function returning a failure message (falsy = ok)
            on: Only run when validate() is called with this context
            if_: Only run when this predicate of the record is truthy
            unless: Skip when this predicate of the record is truthy

        Returns:
            The registered Rule
        """
        if not isinstance(attribute, str) or not attribute.strip():
            raise ValueError("Attribute name must be a non-empty string")
        validator = rule if isinstance(rule, BaseValidator) else FunctionValidator(rule)

        bound = Rule(attribute=attribute, validator=validator, on=on, if_=if_, unless=unless)
        self._rules = self._rules + (bound,)
        return bound

    def validates(
        self,
        *attributes: str,
        on: Optional[str] = None,
        if_: Optional[Condition] = None,
        unless: Optional[Condition] = None,
        **kinds: Any,
    ) -> list[Rule]:
        """Declarative form: one rule per (attribute, kind), in that order.

        Each kind takes True (defaults), a dict of options, or a shorthand value
        (the collaborator for uniqueness, the pattern for format, the collection
        for inclusion/exclusion).
        """
        if not attributes:
            raise ValueError("validates() needs at least one attribute")
        if not kinds:
            raise ValueError("validates() needs at least one rule kind")
        unknown = set(kinds) - set(DECLARATIVE_KINDS)
        if unknown:
            raise ValueError(f"Unknown rule kind(s): {', '.join(sorted(unknown))}")

        registered = []
        for attribute in attributes:
            for kind, spec in kinds.items():
                if spec is False or spec is None:
                    continue
                validator = self._build_declared(kind, spec)
                registered.append(self.register(attribute, validator, on=on, if_=if_, unless=unless))
        return registered

    @staticmethod
    def _build_declared(kind: str, spec: Any) -> BaseValidator:
        factory, shorthand = DECLARATIVE_KINDS[kind]
        if spec is True:
            return factory()
        if isinstance(spec, dict):
            return factory(**_normalize_options(spec))
        if shorthand is None:
            raise ValueError(f"'{kind}' takes True or a dict of options, got {spec!r}")
        return factory(**{shorthand: spec})

    # ── Validation ──

    def validate(self, record: Union[Record, BaseModel], context: Optional[str] = None) -> ValidationResult:
        """Run every applicable rule in registration order.

        Args:
            record: Attribute → value mapping (or a pydantic model)
            context: Optional label such as "create" selecting rules registered with on=

        Returns:
            ValidationResult(is_valid, errors); never raises for an invalid record
        """
        start_time = time.perf_counter()
        data = as_record(record)
        errors = self._new_collector()

        rule_timings: dict[str, float] = {}
        skipped = 0

        for index, rule in enumerate(self._rules):
            if not rule.applies(data, context):
                skipped += 1
                continue

            r_start = time.perf_counter()
            try:
                for error in rule.check(data):
                    errors.append(error)
            except Exception as e:
                logger.error(
                    "rule_failed",
                    rule=rule.name,
                    attribute=rule.attribute,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            finally:
                r_duration = (time.perf_counter() - r_start) * 1000
                rule_timings[f"{index}:{rule.name}"] = round(r_duration, 3)

        result = ValidationResult(is_valid=errors.is_empty(), errors=errors)

        if self.settings.LOG_VALIDATION_RUNS:
            total_duration = (time.perf_counter() - start_time) * 1000
            logger.info(
                "validation_complete",
                valid=result.is_valid,
                context=context,
                total_errors=len(errors),
                invalid_attributes=errors.attributes,
                rules_run=len(self._rules) - skipped,
                rules_skipped=skipped,
                duration_ms=round(total_duration, 2),
                rule_timings=rule_timings,
            )

        return result

    def validate_strict(self, record: Union[Record, BaseModel], context: Optional[str] = None) -> ValidationResult:
        """Validate and raise RecordInvalid when the record fails.

        Raises:
            RecordInvalid: carrying the same errors validate() would return
        """
        result = self.validate(record, context)
        if not result.is_valid:
            logger.warning(
                "record_invalid",
                context=context,
                errors=result.errors.messages,
            )
            raise RecordInvalid(result.errors)
        return result

    def is_valid(self, record: Union[Record, BaseModel], context: Optional[str] = None) -> bool:
        return self.validate(record, context).is_valid

    def is_invalid(self, record: Union[Record, BaseModel], context: Optional[str] = None) -> bool:
        return not self.is_valid(record, context)

    # ── Reporting ──

    def full_messages(self, errors: ErrorCollector) -> list[str]:
        """'<Attribute> <message>' strings in insertion order."""
        return errors.full_messages()

    def _new_collector(self) -> ErrorCollector:
        return ErrorCollector(
            full_message_format=self.settings.FULL_MESSAGE_FORMAT,
            humanize_attributes=self.settings.HUMANIZE_ATTRIBUTES,
        )
