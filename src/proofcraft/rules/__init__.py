"""Natural deduction inference rules."""

from .base import Rule
from .premises import AssumeRule, AssertRule, ContradictionRule
from .conjunction import ConjunctionIntroRule, ConjunctionElimRule
from .implication import ImplicationIntroRule, ImplicationElimRule
from .restatement import RestateRule
from .registry import RuleRegistry, get_rule, list_rules

__all__ = [
    'Rule',
    'AssumeRule', 'AssertRule', 'ContradictionRule',
    'ConjunctionIntroRule', 'ConjunctionElimRule',
    'ImplicationIntroRule', 'ImplicationElimRule',
    'RestateRule',
    'RuleRegistry', 'get_rule', 'list_rules'
]
