"""Implication introduction (discharge) and elimination (Modus Ponens)."""

from typing import Optional

from .base import Rule
from proofcraft.core.formula import (
    IMPLICATION, canonical, parenthesize, split_top_level_implication,
    strip_outer_parens_repeated
)
from proofcraft.proofs.result import RuleResult, Status
from proofcraft.proofs.state import ProofState, RuleKind


class ImplicationIntroRule(Rule):
    """Close the innermost open assumption X, concluding X → Y.

    Y is the last line still inside the closed scope (at its depth or
    deeper). With no such line the assumption itself is the conclusion,
    giving X → X.
    """

    @property
    def name(self) -> str:
        return "imp_intro"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        if not state.frames:
            return self.fail(Status.NO_OPEN_SCOPE, "There is no open assumption to discharge.")

        frame = state.frames.pop()
        consequent = state.lines[frame.open_index].text
        for i in range(len(state.lines) - 1, frame.open_index, -1):
            line = state.lines[i]
            if line.text and line.indent >= frame.depth:
                consequent = line.text
                break

        antecedent = parenthesize(strip_outer_parens_repeated(frame.text))
        state.current_depth = max(0, frame.depth - 1)
        line = self.commit(
            state, f"{antecedent} {IMPLICATION} {parenthesize(consequent)}", RuleKind.IMPLICATION_INTRO
        )
        return RuleResult.success(self.name, f"Closed assumption: {line.text}", line)


class ImplicationElimRule(Rule):
    """X, X → Y ⊢ Y for two selected lines sharing an open scope.

    Each selected line is tried as the implication in proof order; the first
    whose antecedent matches the other line is used.
    """

    @property
    def name(self) -> str:
        return "imp_elim"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        if len(state.selection) != 2:
            return self.fail(Status.WRONG_SELECTION_COUNT, "Select exactly two lines for Modus Ponens.")

        first, second = state.selected_lines()
        if not state.shares_open_scope([first, second]):
            return self.fail(Status.SCOPE_MISMATCH, "Both lines must be in the same open subproof.")

        found_implication = False
        for implication, other in ((first, second), (second, first)):
            parts = split_top_level_implication(strip_outer_parens_repeated(implication.text))
            if parts is None:
                continue
            found_implication = True
            if canonical(parts.left) == canonical(other.text):
                derived = strip_outer_parens_repeated(parts.right)
                line = self.commit(state, derived, RuleKind.IMPLICATION_ELIM)
                return RuleResult.success(self.name, f"Inferred: {line.text}", line)

        if found_implication:
            return self.fail(
                Status.ANTECEDENT_MISMATCH,
                "Modus Ponens requires X and (X → Y) with matching X."
            )
        return self.fail(
            Status.NO_IMPLICATION_FOUND,
            "One of the selected lines must be a top-level implication (X → Y)."
        )
