"""Conjunction introduction and elimination."""

from typing import Optional

from .base import Rule
from proofcraft.core.formula import (
    CONJUNCTION, parenthesize, split_top_level_conjunction,
    strip_outer_parens_repeated
)
from proofcraft.proofs.result import RuleResult, Status
from proofcraft.proofs.state import ProofState, RuleKind


class ConjunctionIntroRule(Rule):
    """X, Y ⊢ X ∧ Y for two selected lines sharing an open scope."""

    @property
    def name(self) -> str:
        return "and_intro"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        if len(state.selection) != 2:
            return self.fail(Status.WRONG_SELECTION_COUNT, "Select exactly two lines to conjoin.")

        # Operands follow proof order, not the order they were selected in
        left, right = state.selected_lines()
        if not state.shares_open_scope([left, right]):
            return self.fail(Status.SCOPE_MISMATCH, "Both lines must be in the same open subproof.")

        joined = f" {CONJUNCTION} ".join(parenthesize(line.text) for line in (left, right))
        line = self.commit(state, joined, RuleKind.CONJUNCTION_INTRO)
        return RuleResult.success(self.name, f"Conjoined: {line.text}", line)


class ConjunctionElimRule(Rule):
    """X ∧ Y ⊢ X and X ∧ Y ⊢ Y, emitted as two lines."""

    @property
    def name(self) -> str:
        return "and_elim"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        if len(state.selection) != 1:
            return self.fail(
                Status.WRONG_SELECTION_COUNT,
                "Select exactly one line of the form X ∧ Y to split."
            )

        (selected,) = state.selected_lines()
        if not state.is_visible(selected):
            return self.fail(Status.NOT_VISIBLE, "Selected line must be in an open subproof.")

        candidate = selected.text.replace("&&", CONJUNCTION).replace("&", CONJUNCTION)
        parts = split_top_level_conjunction(strip_outer_parens_repeated(candidate))
        if parts is None:
            return self.fail(Status.NOT_A_CONJUNCTION, "Selected line must be a conjunction X ∧ Y.")

        left = self.commit(state, strip_outer_parens_repeated(parts.left), RuleKind.CONJUNCTION_ELIM_LEFT)
        right = self.commit(state, strip_outer_parens_repeated(parts.right), RuleKind.CONJUNCTION_ELIM_RIGHT)
        return RuleResult.success(
            self.name,
            f"Split: {parenthesize(left.text)} , {parenthesize(right.text)}",
            left, right
        )
