"""
Rule engine for applying field rules to records.

The rule engine resolves each rule's field in the record, runs the rule's
validators in order and collects every failure. It never stops early:
all rules and all validators of a rule are evaluated, so a caller can
report every problem at once.
"""

import logging
from typing import Any, Iterable

from fieldrules.core.models import FieldRule, ValidationErrorItem
from fieldrules.core.schema import FieldNotFoundError, missing_fields, resolve
from fieldrules.observability.logger import log_operation

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Applies an ordered set of field rules to records.

    The engine holds only its rule list; every validate() call is an
    independent evaluation.
    """

    def __init__(self, rules: Iterable[FieldRule]):
        """
        Initialize the rule engine with field rules.

        Args:
            rules: Field rules, evaluated in the given order
        """
        self.rules: list[FieldRule] = list(rules)

    def validate(self, record: Any) -> list[ValidationErrorItem]:
        """
        Validate a record against all rules.

        Args:
            record: A pydantic model, dataclass or mapping keyed by external name

        Returns:
            Error items in rule order, then validator order; empty if the
            record satisfies every rule
        """
        errors: list[ValidationErrorItem] = []

        for rule in self.rules:
            try:
                value = resolve(record, rule.field)
            except FieldNotFoundError as e:
                logger.warning(
                    "Rule references an undeclared field",
                    extra={"field": rule.field, "record_type": type(record).__name__},
                )
                errors.append(ValidationErrorItem(field=rule.field, message=e.message))
                continue

            for validator in rule.validators:
                message = validator(value)
                if message:
                    errors.append(ValidationErrorItem(field=rule.field, message=message))

        logger.debug(
            "Validated record",
            extra={
                "record_type": type(record).__name__,
                "rules": len(self.rules),
                "errors": len(errors),
            },
        )
        return errors

    def validate_batch(self, records: list[Any]) -> list[list[ValidationErrorItem]]:
        """
        Validate a batch of records.

        Args:
            records: Records to validate

        Returns:
            One error list per record, in input order
        """
        with log_operation("Validating batch", logger=logger, batch_size=len(records)):
            return [self.validate(record) for record in records]

    def check_rules(self, record_type: type) -> list[str]:
        """
        List the rule fields a record type does not declare.

        Useful when building a rule set for a known type: any name returned
        here would produce a "field not found" error at validation time.

        Args:
            record_type: A pydantic model or dataclass type

        Returns:
            Undeclared external names, in rule order
        """
        return missing_fields(record_type, [rule.field for rule in self.rules])

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule, validator and per-type counts
        """
        return {
            "total_rules": len(self.rules),
            "total_validators": sum(len(rule.validators) for rule in self.rules),
            "validators_by_type": self._count_by_type(),
        }

    def _count_by_type(self) -> dict[str, int]:
        """Count validators by rule type (plain functions count under their name)."""
        counts: dict[str, int] = {}
        for rule in self.rules:
            for validator in rule.validators:
                rule_type = getattr(validator, "rule_type", None) or getattr(
                    validator, "__name__", type(validator).__name__
                )
                counts[rule_type] = counts.get(rule_type, 0) + 1
        return counts


def validate(record: Any, rules: Iterable[FieldRule]) -> list[ValidationErrorItem]:
    """
    Validate a record against an ordered set of field rules.

    Args:
        record: A pydantic model, dataclass or mapping keyed by external name
        rules: Field rules, evaluated in order

    Returns:
        Error items; an empty list means the record is valid
    """
    return RuleEngine(rules).validate(record)
