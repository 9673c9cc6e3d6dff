"""
Rule engine and rule set construction.
"""

from .rule_config import RuleSetBuilder
from .rule_engine import RuleEngine, validate

__all__ = [
    "RuleEngine",
    "RuleSetBuilder",
    "validate",
]
