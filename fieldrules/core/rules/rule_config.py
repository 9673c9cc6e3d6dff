"""
Rule set construction.

Builds ordered lists of FieldRule in code.
"""

from fieldrules.core.models import FieldRule, Validator


class RuleSetBuilder:
    """
    Programmatically build rule sets.

    Example:
        rules = RuleSetBuilder() \\
            .add_rule("first_name", required, min_length(3), max_length(50), description="Name") \\
            .add_rule("password", required, min_length(6)) \\
            .build()
    """

    def __init__(self):
        """Initialize empty rule set."""
        self.rules: list[FieldRule] = []

    def add_rule(self, field: str, *validators: Validator, description: str = "") -> "RuleSetBuilder":
        """Add a rule running `validators` in order against `field`."""
        self.rules.append(FieldRule(field=field, description=description, validators=list(validators)))
        return self

    def build(self) -> list[FieldRule]:
        """Build and return the rule set."""
        return list(self.rules)
