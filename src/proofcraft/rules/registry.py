"""Registry for inference rules."""

from typing import Any, Dict, List, Type

from .base import Rule
from .conjunction import ConjunctionElimRule, ConjunctionIntroRule
from .implication import ImplicationElimRule, ImplicationIntroRule
from .premises import AssertRule, AssumeRule, ContradictionRule
from .restatement import RestateRule


class RuleRegistry:
    """Registry for managing inference rules by name."""

    def __init__(self):
        self._rules: Dict[str, Type[Rule]] = {}
        self._register_default_rules()

    def _register_default_rules(self):
        """Register the built-in natural deduction rules."""
        self.register('assume', AssumeRule)
        self.register('assert', AssertRule)
        self.register('and_intro', ConjunctionIntroRule)
        self.register('and_elim', ConjunctionElimRule)
        self.register('imp_intro', ImplicationIntroRule)
        self.register('imp_elim', ImplicationElimRule)
        self.register('false', ContradictionRule)
        self.register('restate', RestateRule)

    def register(self, name: str, rule_class: Type[Rule]):
        """Register a new rule type."""
        self._rules[name.lower()] = rule_class

    def create_rule(self, name: str, **kwargs: Any) -> Rule:
        """Create a rule instance."""
        name = name.lower()
        if name not in self._rules:
            raise ValueError(f"Unknown rule: {name}")

        return self._rules[name](**kwargs)

    def list_rules(self) -> List[str]:
        """List available rule names."""
        return list(self._rules.keys())


_registry = RuleRegistry()


def get_rule(name: str, **kwargs: Any) -> Rule:
    """Get a rule instance."""
    return _registry.create_rule(name, **kwargs)


def list_rules() -> List[str]:
    return _registry.list_rules()
