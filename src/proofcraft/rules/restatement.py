"""Restatement (reiteration) of visible lines."""

from typing import Optional

from .base import Rule
from proofcraft.core.formula import strip_outer_parens_repeated
from proofcraft.proofs.result import RuleResult, Status
from proofcraft.proofs.state import ProofState, RuleKind


class RestateRule(Rule):
    """Copy each selected line to the current depth, in proof order."""

    @property
    def name(self) -> str:
        return "restate"

    def apply(self, state: ProofState, text: Optional[str] = None) -> RuleResult:
        if not state.selection:
            return self.fail(Status.EMPTY_SELECTION, "Select a line to restate.")

        selected = state.selected_lines()
        if not all(state.is_visible(line) for line in selected):
            return self.fail(Status.NOT_VISIBLE, "Can only restate lines from an open subproof.")

        # add_line clears the selection, so work from the captured list
        depth = state.current_depth
        lines = [
            self.commit(state, strip_outer_parens_repeated(line.text), RuleKind.RESTATEMENT, depth)
            for line in selected
        ]
        return RuleResult.success(
            self.name,
            f"Restated: {', '.join(line.text for line in selected)}",
            *lines
        )
