"""Base interface for inference rules."""

from abc import ABC, abstractmethod
from typing import Optional

from proofcraft.proofs.result import RuleResult, Status
from proofcraft.proofs.state import Line, ProofState, RuleKind


class Rule(ABC):
    """Abstract base class for inference rules.

    A rule validates the proof state (selection, scopes, formula shape) and
    either appends new lines or reports why it cannot be applied. Expected
    rejections are returned as failed results, never raised.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the inference rule."""
        pass

    @abstractmethod
    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        """
        Apply the rule to the state.

        Args:
            state: Current proof state; its selection holds the operands
            text: Raw formula text for rules that take typed input

        Returns:
            RuleResult describing the appended lines or the failure
        """
        pass

    def fail(self, status: Status, message: str) -> RuleResult:
        return RuleResult.failure(self.name, status, message)

    def commit(self, state: ProofState, text: str, kind: RuleKind, indent: Optional[int] = None) -> Line:
        return state.add_line(text, kind, indent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
