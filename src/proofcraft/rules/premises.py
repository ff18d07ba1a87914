"""Rules that introduce lines without premises: assumptions, assertions and ⊥."""

from typing import Optional, Sequence

from .base import Rule
from proofcraft.core.formula import (
    FALSUM, sanitize, translate_shorthand, strip_outer_parens_repeated
)
from proofcraft.proofs.result import RuleResult, Status
from proofcraft.proofs.state import ProofState, RuleKind


DEFAULT_MAX_DEPTH = 3
DEFAULT_ATOMS = ("P", "Q", "R", "S")


class AssumeRule(Rule):
    """Open a new assumption scope one level deeper."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    @property
    def name(self) -> str:
        return "assume"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        if state.current_depth >= self.max_depth:
            return self.fail(
                Status.SCOPE_LIMIT_EXCEEDED,
                f"At most {self.max_depth} assumptions can be open at once."
            )

        formula = sanitize(translate_shorthand(sanitize(text)))
        stripped = strip_outer_parens_repeated(formula)
        if not stripped:
            return self.fail(Status.EMPTY_INPUT, "Type something to assume.")

        state.current_depth += 1
        line = self.commit(state, stripped, RuleKind.ASSUMPTION)
        state.open_frame(formula, line)
        return RuleResult.success(self.name, f"Assumed: {formula}", line)

    def __repr__(self) -> str:
        return f"AssumeRule(max_depth={self.max_depth})"


class AssertRule(Rule):
    """State one of the allowed atoms at the current depth."""

    def __init__(self, atoms: Sequence[str] = DEFAULT_ATOMS):
        self.atoms = tuple(atoms)

    @property
    def name(self) -> str:
        return "assert"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        atom = sanitize(text)
        if not atom:
            return self.fail(Status.EMPTY_INPUT, "Type something to assert.")
        if atom not in self.atoms:
            return self.fail(
                Status.INVALID_ATOM,
                f"Only {', '.join(self.atoms)} can be asserted."
            )
        line = self.commit(state, atom, RuleKind.ASSERTION)
        return RuleResult.success(self.name, f"Asserted: {atom}", line)

    def __repr__(self) -> str:
        return f"AssertRule(atoms={self.atoms!r})"


class ContradictionRule(Rule):

    @property
    def name(self) -> str:
        return "false"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        line = self.commit(state, FALSUM, RuleKind.CONTRADICTION)
        return RuleResult.success(self.name, "Contradiction added.", line)
